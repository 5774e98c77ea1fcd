"""The Command Line Interface for the utility, including Interactive elements.

What I would call a hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that automagically
generates the INTERACTIVE part on-the-fly based on the missing components of the CLI interaction, including the
option that none are included. Keys are never written anywhere, they only travel as plain integers on the command line
and stdout.

Typical usage example:

    rsakit
    OR
    python -m rsakit demo --keysize 512 --message "Hello, world!"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys
import typing

import rsakit


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Kit.",
            choices=["keygen", "encrypt", "decrypt", "prime", "estimate", "caesar", "demo"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Message encryption utility."),
    "decrypt":
        HelpData("Message decryption utility."),
    "prime":
        HelpData("Probable prime generation utility."),
    "estimate":
        HelpData("Brute-force time estimation utility."),
    "caesar":
        HelpData("Caesar cipher utility."),
    "demo":
        HelpData("Generate a key and round-trip a message through it."),
    "keysize":
        HelpData(
            description="Key size (in bits).",
            format=int,
            default=2048,
        ),
    "modulus":
        HelpData(
            description="The key modulus n.",
            format=int,
        ),
    "exponent":
        HelpData(
            description="The key exponent, e for encryption or d for decryption.",
            format=int,
        ),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "ciphertext":
        HelpData(
            description="Space separated ciphertext integers.",
            format=str,
        ),
    "bits":
        HelpData(
            description="Prime size (in bits).",
            format=int,
            default=1024,
        ),
    "rounds":
        HelpData(
            description="Miller-Rabin rounds per candidate.",
            format=int,
            advanced=True,
            default=20,
        ),
    "shift":
        HelpData(
            description="Caesar shift value.",
            format=int,
            default=3,
        ),
}

needs = {
    "keygen": ("keysize",),
    "encrypt": ("modulus", "exponent", "message"),
    "decrypt": ("modulus", "exponent", "ciphertext"),
    "prime": ("bits", "rounds"),
    "estimate": ("modulus",),
    "caesar": ("message", "shift"),
    "demo": ("keysize", "message"),
}

keyparts = argparse.ArgumentParser(add_help=False)
keyparts.add_argument("--modulus", "-m", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
keyparts.add_argument("--exponent", "-x", type=help_dict["exponent"].format, help=help_dict["exponent"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)
keysize = argparse.ArgumentParser(add_help=False)
keysize.add_argument("--keysize", "-k", type=help_dict["keysize"].format, help=help_dict["keysize"].description)
corep = argparse.ArgumentParser(prog="rsakit")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsakit.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

commands.add_parser("keygen", parents=[keysize], help=help_dict["keygen"].description)
commands.add_parser("encrypt", parents=[keyparts, payloads], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[keyparts], help=help_dict["decrypt"].description)
decrypt.add_argument("--ciphertext",
                     "-c",
                     type=help_dict["ciphertext"].format,
                     help=help_dict["ciphertext"].description)
prime = commands.add_parser("prime", help=help_dict["prime"].description)
prime.add_argument("--bits", "-b", type=help_dict["bits"].format, help=help_dict["bits"].description)
prime.add_argument("--rounds", "-r", type=help_dict["rounds"].format, help=help_dict["rounds"].description)
estimate = commands.add_parser("estimate", help=help_dict["estimate"].description)
estimate.add_argument("--modulus", "-m", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
caesar = commands.add_parser("caesar", parents=[payloads], help=help_dict["caesar"].description)
caesar.add_argument("--shift", "-s", type=help_dict["shift"].format, help=help_dict["shift"].description)
commands.add_parser("demo", parents=[keysize, payloads], help=help_dict["demo"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def check_message(mess: str, enc: str = "utf-8") -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding=enc) as f:
            mess = f.read()
    return mess


def parse_ciphertext(raw: str) -> list[int]:
    """Parse space (or comma) separated ciphertext integers."""
    return [int(part) for part in raw.replace(",", " ").split()]


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Kit!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "keygen":
                pub, priv = rsakit.generate_keys(args.keysize)
                pspr("Key pair generated!")
                print(f"n: {pub.mod}")
                print(f"e: {pub.expo}")
                print(f"d: {priv.expo}")
            case "encrypt":
                args.message = check_message(args.message)
                ciph = rsakit.encrypt_message(args.message, (args.modulus, args.exponent))
                pspr("Ciphertext:")
                print(" ".join(str(c) for c in ciph))
            case "decrypt":
                ciph = parse_ciphertext(check_message(args.ciphertext, "ascii"))
                clear = rsakit.decrypt_message(ciph, (args.modulus, args.exponent))
                pspr("Cleartext:")
                print(clear)
            case "prime":
                pspr("Probable prime:")
                print(rsakit.generate_prime(args.bits, args.rounds))
            case "estimate":
                pspr("Estimated time to brute force:")
                print(rsakit.format_duration(rsakit.estimate_brute_force_time(args.modulus)))
            case "caesar":
                args.message = check_message(args.message)
                pspr("Shifted:")
                print(rsakit.caesar_shift(args.message.upper(), args.shift))
            case "demo":
                args.message = check_message(args.message)
                pub, priv = rsakit.generate_keys(args.keysize)
                ciph = pub.encrypt_message(args.message)
                print(f"Encrypted: {ciph}")
                estimation = rsakit.estimate_brute_force_time(pub.mod)
                print(f"Estimated time to brute force: {rsakit.format_duration(estimation)}")
                print(f"Decrypted: {priv.decrypt_message(ciph)}")
    except rsakit.DuplicatePrimesError as exc:
        print(f"Key generation failed: {exc} Please try again.")
        sys.exit(1)
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        sys.exit(1)
    pspr("Thank you for using RSA Kit!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()

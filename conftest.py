"""Configures pytest further, and provides the shared key material fixtures."""
import random

from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

REFERENCE_SIZES = [1024, 2048]
_reference_keys = {}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def rng() -> random.Random:
    """A seeded generator handle, so every run draws the same numbers."""
    return random.Random(17092025)


@pytest.fixture(scope="session", params=REFERENCE_SIZES)
def reference_key(request) -> rsa.RSAPrivateNumbers:
    """Externally generated RSA numbers, cached across the session."""
    if request.param not in _reference_keys:
        pk = rsa.generate_private_key(public_exponent=65537, key_size=request.param)
        _reference_keys[request.param] = pk.private_numbers()
    return _reference_keys[request.param]

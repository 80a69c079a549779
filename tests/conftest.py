"""
Shared fixtures for the ecverify test-suite.
"""

import random

import pytest

from ecverify import BRAINPOOLP256R1, SECP256K1, SECP256R1

ALL_CURVES = [SECP256K1, SECP256R1, BRAINPOOLP256R1]
CURVE_IDS = [c.name for c in ALL_CURVES]


@pytest.fixture(params=ALL_CURVES, ids=CURVE_IDS)
def curve(request):
    """Every preset curve in turn."""
    return request.param


@pytest.fixture
def rng():
    """Deterministic randomness so failures are reproducible."""
    return random.Random(0xEC)


@pytest.fixture
def private_key():
    """Fixed private scalar valid on every preset (below all three n)."""
    return 0x1D2C3B4A59687766554433221100FFEEDDCCBBAA99887766554433221100ABCD


@pytest.fixture
def digest():
    """A 32-byte message digest."""
    return bytes(range(32))

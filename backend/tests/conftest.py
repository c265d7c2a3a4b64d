"""Root conftest — shared test configuration and key fixtures."""

import os

import pytest
from solders.keypair import Keypair

# Tests run against the documented defaults, whatever the developer's env says
os.environ["LOG_FORMAT"] = "text"
os.environ["REJECT_ZERO_AMOUNTS"] = "false"
os.environ["TOKEN_ACCOUNT_MODE"] = "literal"


@pytest.fixture
def keypair() -> Keypair:
    """Deterministic keypair so failures are reproducible."""
    return Keypair.from_seed(bytes(range(32)))


@pytest.fixture
def other_keypair() -> Keypair:
    return Keypair.from_seed(bytes(range(32, 64)))

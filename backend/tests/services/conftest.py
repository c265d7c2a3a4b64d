"""Service test fixtures — handler settings and throwaway addresses."""

import pytest
from solders.keypair import Keypair

from solscribe.config import Settings


@pytest.fixture
def addresses():
    return [str(Keypair().pubkey()) for _ in range(3)]


@pytest.fixture
def default_settings():
    return Settings(reject_zero_amounts=False, token_account_mode="literal")


@pytest.fixture
def strict_settings():
    return Settings(reject_zero_amounts=True, token_account_mode="literal")

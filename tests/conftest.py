"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pokemarket import Ledger, Marketplace, MarketplaceSettings

DEPLOYER = "0xdeadbeef"
ALICE = "0xa11ce"
BOB = "0xb0b"
CAROL = "0xca201"


def make_settings(**overrides) -> MarketplaceSettings:
    """Settings isolated from the environment and any .env file."""
    return MarketplaceSettings(_env_file=None, **overrides)


@pytest.fixture
def ledger():
    """Fresh Ledger instance."""
    return Ledger()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def market(ledger, settings):
    """Marketplace deployed on a fresh ledger with default settings."""
    return Marketplace.initialize(DEPLOYER, ledger, settings)


@pytest.fixture
def tokens(market):
    return market.tokens


@pytest.fixture
def bulbasaur(tokens):
    """Token #3 minted by ALICE at price 100."""
    return tokens.create(ALICE, 3, "Bulbasaur", "Seed Pokemon", 100)

"""Tests for the catalog store."""

import pytest

from pokemarket.errors import OutOfRange
from pokemarket.marketplace import CatalogStore


def test_initialize_builds_exactly_capacity_slots():
    catalog = CatalogStore.initialize("https://art.example/pokemon/", 16)

    assert len(catalog) == 16
    assert catalog.capacity == 16
    assert catalog.uri_slots[0] == "https://art.example/pokemon/1.png"
    assert catalog.uri_slots[-1] == "https://art.example/pokemon/16.png"


def test_initialize_is_deterministic():
    assert CatalogStore.initialize("ipfs://base", 8) == CatalogStore.initialize("ipfs://base", 8)


def test_resolve_binds_slot_to_id():
    catalog = CatalogStore.initialize("ipfs://base", 16)

    assert catalog.resolve(1) == "ipfs://base/1.png"
    assert catalog.resolve(16) == "ipfs://base/16.png"


@pytest.mark.parametrize("pokemon_id", [0, -1, 17, 1000])
def test_resolve_out_of_range(pokemon_id):
    catalog = CatalogStore.initialize("ipfs://base", 16)
    with pytest.raises(OutOfRange):
        catalog.resolve(pokemon_id)


def test_catalog_is_immutable():
    catalog = CatalogStore.initialize("ipfs://base", 2)
    with pytest.raises(AttributeError):
        catalog.uri_slots = ()  # type: ignore[misc]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CatalogStore.initialize("ipfs://base", 0)

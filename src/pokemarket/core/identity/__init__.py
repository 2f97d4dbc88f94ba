"""Object identity functionality: addresses and deterministic derivation."""

from pokemarket.core.identity.models import (
    ObjectId,
    derive_guid_address,
    derive_seed_address,
    normalize_address,
)

__all__ = [
    "ObjectId",
    "derive_guid_address",
    "derive_seed_address",
    "normalize_address",
]

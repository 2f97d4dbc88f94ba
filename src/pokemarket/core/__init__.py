"""Core functionalities: stateless primitives shared by every layer.

Architecture Note:
    core/ contains pure, stateless building blocks (identity, resource types,
    capabilities). For stateful services, see storage/, payment/, events/
    and ledger/.
"""

from pokemarket.core.capability import BurnRef, ConstructorRef, ExtendRef, MutatorRef
from pokemarket.core.identity import (
    ObjectId,
    derive_guid_address,
    derive_seed_address,
    normalize_address,
)
from pokemarket.core.resource import ResourceRegistry, get_registry, resource
from pokemarket.core.types import Address, Copy

__all__ = [
    # Types
    "Address",
    "Copy",
    # Identity
    "ObjectId",
    "derive_guid_address",
    "derive_seed_address",
    "normalize_address",
    # Resource
    "resource",
    "get_registry",
    "ResourceRegistry",
    # Capability
    "BurnRef",
    "ConstructorRef",
    "ExtendRef",
    "MutatorRef",
]

"""Core type definitions for pokemarket."""

from typing import TypeVar

from typing_extensions import TypeAliasType

T = TypeVar("T")

Address = TypeAliasType("Address", str)
"""Account address as a 0x-prefixed lowercase hex string.

Accounts are owned by the identity collaborator; pokemarket never creates them,
it only normalizes and compares them (see `normalize_address`).
"""

Copy = TypeAliasType("Copy", T, type_params=(T,))
"""Type alias indicating a value is a copy that won't auto-persist.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect ledger state. To persist changes,
explicitly write back via `store.set_resource(obj, resource)`.
"""

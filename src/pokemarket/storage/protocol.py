"""Object store protocol for swappable backends.

The object store is the ownership/identity primitive: it allocates stable
object addresses, holds the typed resources stored on each object, and tracks
exactly one owner per object. Ownership lives here and nowhere else.

Usage:
    store = LocalObjectStore()
    ledger = Ledger(objects=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from pokemarket.core.capability import ConstructorRef
from pokemarket.core.identity import ObjectId
from pokemarket.core.types import Address

T = TypeVar("T")


class ObjectStore(Protocol):
    """Abstract object store interface. Implementations handle actual data."""

    def create_object(self, owner: Address) -> ConstructorRef:
        """Allocate a new object owned by `owner`."""
        ...

    def create_named_object(self, owner: Address, seed: bytes) -> ConstructorRef:
        """Allocate the seed-derived object for `owner`."""
        ...

    def object_exists(self, obj: ObjectId) -> bool:
        """Check if object is alive."""
        ...

    def all_objects(self) -> Iterator[ObjectId]:
        """Iterate all living objects."""
        ...

    def is_owner(self, obj: ObjectId, address: Address) -> bool:
        """Check whether `address` currently owns `obj`."""
        ...

    def owner_of(self, obj: ObjectId) -> Address:
        """Current owner of `obj`."""
        ...

    def transfer(self, obj: ObjectId, new_owner: Address) -> None:
        """Move ownership of `obj` to `new_owner`."""
        ...

    def objects_owned_by(self, owner: Address) -> Iterator[ObjectId]:
        """Iterate objects currently owned by `owner`."""
        ...

    def get_resource(
        self, obj: ObjectId, resource_type: type[T], copy: bool = True
    ) -> T | None:
        """Get resource from object."""
        ...

    def set_resource(self, obj: ObjectId, resource: Any) -> None:
        """Set/update resource on object."""
        ...

    def has_resource(self, obj: ObjectId, resource_type: type) -> bool:
        """Check if object has resource."""
        ...

    def query(
        self, *resource_types: type, copy: bool = True
    ) -> Iterator[tuple[ObjectId, tuple[Any, ...]]]:
        """Find objects holding all specified resources."""
        ...

    def snapshot(self) -> bytes:
        """Serialize entire store state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...

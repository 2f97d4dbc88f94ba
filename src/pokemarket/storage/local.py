"""Local in-memory object store.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    store = LocalObjectStore()
    ctor = store.create_object("0xa11ce")
    store.set_resource(ctor.target, PokemonToken(...))
"""

from __future__ import annotations

import copy as cp
import pickle  # nosec B403 - snapshots never leave the process
from collections.abc import Iterator
from typing import Any, TypeVar, cast

from pokemarket.core.capability import ConstructorRef
from pokemarket.core.identity import ObjectId, normalize_address
from pokemarket.core.resource import get_registry
from pokemarket.core.types import Address, Copy
from pokemarket.errors import NotFound
from pokemarket.storage.allocator import ObjectAllocator

T = TypeVar("T")


class LocalObjectStore:
    """In-memory object store using nested dicts.

    Structure:
        _resources[obj][resource_type] = resource_instance
        _owners[obj] = owner address
    """

    def __init__(self) -> None:
        self._allocator = ObjectAllocator()
        self._resources: dict[ObjectId, dict[type, Any]] = {}
        self._owners: dict[ObjectId, Address] = {}

    def _require(self, obj: ObjectId) -> None:
        if not self.object_exists(obj):
            raise NotFound(f"Object {obj} does not exist")

    def _register(self, obj: ObjectId, owner: Address) -> ConstructorRef:
        self._resources[obj] = {}
        self._owners[obj] = owner
        return ConstructorRef(target=obj)

    def create_object(self, owner: Address) -> ConstructorRef:
        """Create a new object owned by `owner`.

        The address is derived from the owner's creation counter.

        Args:
            owner: Initial owner, also the creating account.

        Returns:
            ConstructorRef for generating capabilities over the new object.
        """
        owner = normalize_address(owner)
        obj = self._allocator.allocate(owner)
        return self._register(obj, owner)

    def create_named_object(self, owner: Address, seed: bytes) -> ConstructorRef:
        """Create the seed-derived object for `owner`.

        Raises:
            ValueError: If the named object already exists.
        """
        owner = normalize_address(owner)
        obj = self._allocator.allocate_named(owner, seed)
        return self._register(obj, owner)

    def object_exists(self, obj: ObjectId) -> bool:
        return obj in self._resources and self._allocator.is_alive(obj)

    def all_objects(self) -> Iterator[ObjectId]:
        for obj in self._resources:
            if self._allocator.is_alive(obj):
                yield obj

    def is_owner(self, obj: ObjectId, address: Address) -> bool:
        """Check whether `address` currently owns `obj`.

        Returns False for unknown objects instead of raising.
        """
        if not self.object_exists(obj):
            return False
        return self._owners[obj] == normalize_address(address)

    def owner_of(self, obj: ObjectId) -> Address:
        """Current owner of `obj`.

        Raises:
            NotFound: If the object does not exist.
        """
        self._require(obj)
        return self._owners[obj]

    def transfer(self, obj: ObjectId, new_owner: Address) -> None:
        """Move ownership of `obj`. The previous owner loses it in the same step.

        Raises:
            NotFound: If the object does not exist.
        """
        self._require(obj)
        self._owners[obj] = normalize_address(new_owner)

    def objects_owned_by(self, owner: Address) -> Iterator[ObjectId]:
        owner = normalize_address(owner)
        for obj in self.all_objects():
            if self._owners[obj] == owner:
                yield obj

    def get_resource(
        self, obj: ObjectId, resource_type: type[T], copy: bool = True
    ) -> Copy[T] | T | None:
        """Get a resource from an object.

        Args:
            obj: Object to read.
            resource_type: Type of resource to retrieve.
            copy: Whether to return a deep copy (default True).

        Returns:
            Resource instance or None if object or resource is missing.
        """
        if not self.object_exists(obj):
            return None
        value = self._resources[obj].get(resource_type)
        if value is None:
            return None
        return cast(T, cp.deepcopy(value) if copy else value)

    def set_resource(self, obj: ObjectId, resource: Any) -> None:
        """Set or replace a resource on an object.

        Raises:
            NotFound: If the object does not exist.
            TypeError: If the value's type is not a registered resource.
        """
        self._require(obj)
        if not get_registry().is_registered(type(resource)):
            raise TypeError(
                f"{type(resource).__name__} is not a registered resource. "
                f"Did you forget the @resource decorator?"
            )
        self._resources[obj][type(resource)] = resource

    def has_resource(self, obj: ObjectId, resource_type: type) -> bool:
        if not self.object_exists(obj):
            return False
        return resource_type in self._resources[obj]

    def query(
        self, *resource_types: type, copy: bool = True
    ) -> Iterator[tuple[ObjectId, tuple[Any, ...]]]:
        """Find objects holding all specified resources.

        O(n) scan over every live object.

        Yields:
            Tuples of (object, (resource1, resource2, ...)) for each match.
        """
        type_set = set(resource_types)
        for obj in self.all_objects():
            resources = self._resources[obj]
            if not type_set.issubset(resources.keys()):
                continue
            values = tuple(resources[t] for t in resource_types)
            yield obj, cp.deepcopy(values) if copy else values

    def snapshot(self) -> bytes:
        """Pickle entire state for rollback.

        Returns:
            Pickled bytes of store state.
        """
        return pickle.dumps(
            {
                "resources": self._resources,
                "owners": self._owners,
                "allocator": self._allocator.state(),
            }
        )

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - produced by snapshot() in this process
        self._resources = state["resources"]
        self._owners = state["owners"]
        self._allocator.load_state(state["allocator"])

"""Object storage backends."""

from pokemarket.storage.allocator import ObjectAllocator
from pokemarket.storage.local import LocalObjectStore
from pokemarket.storage.protocol import ObjectStore

__all__ = [
    "ObjectAllocator",
    "ObjectStore",
    "LocalObjectStore",
]

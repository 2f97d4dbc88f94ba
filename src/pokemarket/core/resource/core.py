"""Resource registry and decorator.

A resource is a typed record stored on an object. An object holds at most one
resource of each type, and the object store only accepts registered types.

Usage:
    @resource
    @dataclass(slots=True)
    class PokemonToken:
        pokemon_id: int
        price: int
"""

from __future__ import annotations

from dataclasses import is_dataclass


class ResourceRegistry:
    """Process-local set of types allowed to be stored on objects."""

    def __init__(self) -> None:
        self._types: set[type] = set()

    def register(self, cls: type) -> None:
        self._types.add(cls)

    def is_registered(self, cls: type) -> bool:
        return cls in self._types


# Module-level registry instance
_registry = ResourceRegistry()


def get_registry() -> ResourceRegistry:
    """Access the global resource registry."""
    return _registry


def resource(cls: type) -> type:
    """Register a dataclass as a resource type.

    Raises:
        TypeError: If class is not a dataclass.

    Note:
        Apply @resource AFTER @dataclass.
    """
    if not is_dataclass(cls):
        raise TypeError(
            f"Resource {cls.__name__} must be a dataclass. Did you forget @dataclass decorator?"
        )
    _registry.register(cls)
    return cls

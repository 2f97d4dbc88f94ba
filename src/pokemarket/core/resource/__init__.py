"""Resource functionality: registry and decorator."""

from pokemarket.core.resource.core import ResourceRegistry, get_registry, resource

__all__ = [
    "ResourceRegistry",
    "get_registry",
    "resource",
]

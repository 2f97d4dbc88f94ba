"""Capability tokens: mutator, burn and extend refs."""

from pokemarket.core.capability.models import BurnRef, ConstructorRef, ExtendRef, MutatorRef

__all__ = [
    "BurnRef",
    "ConstructorRef",
    "ExtendRef",
    "MutatorRef",
]

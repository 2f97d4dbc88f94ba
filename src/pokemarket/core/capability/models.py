"""Capability tokens granting narrow rights over a single object.

Capabilities can only be minted from the ConstructorRef returned when the
object is created, so holding one proves the holder was present at creation
(or was handed the capability afterwards).

Usage:
    ctor = store.create_object(owner)
    extend = ctor.generate_extend_ref()
    signer = extend.generate_signer()  # the object's own address
"""

from __future__ import annotations

from dataclasses import dataclass

from pokemarket.core.identity import ObjectId
from pokemarket.core.resource import resource
from pokemarket.core.types import Address


@resource
@dataclass(frozen=True, slots=True)
class MutatorRef:
    """Permits metadata edits on `target`."""

    target: ObjectId


@resource
@dataclass(frozen=True, slots=True)
class BurnRef:
    """Permits destruction of `target`."""

    target: ObjectId


@resource
@dataclass(frozen=True, slots=True)
class ExtendRef:
    """Lets `target` act as its own authority in later operations."""

    target: ObjectId

    def generate_signer(self) -> Address:
        """Return the object's address for use as an acting account."""
        return self.target.address


@dataclass(frozen=True, slots=True)
class ConstructorRef:
    """Transient handle returned by object creation.

    Never stored. Only exists for the duration of the creating operation.
    """

    target: ObjectId

    def generate_mutator_ref(self) -> MutatorRef:
        return MutatorRef(target=self.target)

    def generate_burn_ref(self) -> BurnRef:
        return BurnRef(target=self.target)

    def generate_extend_ref(self) -> ExtendRef:
        return ExtendRef(target=self.target)

"""Ledger state and the atomic transaction envelope.

Architecture Note:
    ledger/ is a stateful service layer that owns the host collaborators.
    Unlike core/ (stateless primitives), it maintains runtime state and
    guarantees all-or-nothing execution of marketplace operations.
"""

from pokemarket.ledger.ledger import Ledger, LedgerSnapshot

__all__ = [
    "Ledger",
    "LedgerSnapshot",
]

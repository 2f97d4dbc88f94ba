"""Error taxonomy shared by every layer.

Each error carries a stable `code` so callers and indexers can tell failure
kinds apart without matching on messages. Any MarketplaceError raised inside
a transaction aborts the whole operation.
"""

from __future__ import annotations


class MarketplaceError(Exception):
    """Base class for all marketplace failures."""

    code = "marketplace_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class InvalidId(MarketplaceError):
    """pokemon_id is outside the catalog bound."""

    code = "invalid_id"


class InvalidPrice(MarketplaceError):
    """Price is not strictly positive."""

    code = "invalid_price"


class NotAuthorized(MarketplaceError):
    """Caller does not hold the ownership the operation requires."""

    code = "not_authorized"


class NotFound(MarketplaceError):
    """Object or handle does not resolve."""

    code = "not_found"


class InsufficientFunds(MarketplaceError):
    """Balance is below the amount to move."""

    code = "insufficient_funds"


class AlreadyListed(MarketplaceError):
    """Token already carries a non-zero price."""

    code = "already_listed"


class NotListed(MarketplaceError):
    """Token price is zero, so it cannot be bought or delisted."""

    code = "not_listed"


class OutOfRange(MarketplaceError):
    """Catalog slot lookup outside 1..capacity."""

    code = "out_of_range"


class AlreadyMinted(MarketplaceError):
    """pokemon_id already bound to a live token while unique mints are enforced."""

    code = "already_minted"


class AlreadyInitialized(MarketplaceError):
    """Marketplace registry already exists on this ledger."""

    code = "already_initialized"

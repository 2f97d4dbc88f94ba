"""Configuration module using Pydantic Settings.

Usage:
    from pokemarket.config import MarketplaceSettings

    settings = MarketplaceSettings(reset_price_on_sale=False)
"""

from pokemarket.config.settings import DEFAULT_URI_BASE, MarketplaceSettings

__all__ = [
    "DEFAULT_URI_BASE",
    "MarketplaceSettings",
]

"""Configuration settings using Pydantic Settings.

Usage:
    from pokemarket.config import MarketplaceSettings

    # Load from environment variables (MARKETPLACE_*)
    settings = MarketplaceSettings()

    # Or override with explicit values
    settings = MarketplaceSettings(unique_mints=True)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URI_BASE = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"


class MarketplaceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a marketplace deployment.

    Attributes:
        max_capacity: Number of catalog slots, and the upper bound on pokemon_id.
        uri_base: Base path every catalog URI is derived from.
        registry_seed: Fixed seed the registry address is derived from.
        buy_ownership_check: Which party `buy` verifies ownership for.
            "seller" checks that the buyer is not already the owner and pays
            the current owner. "buyer" keeps the legacy rule that the buyer
            must already own the token.
        reset_price_on_sale: Return price to 0 when a token is bought, so the
            new owner can list it again.
        unique_mints: Reject create for a pokemon_id that is already minted.

    Environment Variables:
        MARKETPLACE_MAX_CAPACITY
        MARKETPLACE_URI_BASE
        MARKETPLACE_REGISTRY_SEED
        MARKETPLACE_BUY_OWNERSHIP_CHECK
        MARKETPLACE_RESET_PRICE_ON_SALE
        MARKETPLACE_UNIQUE_MINTS
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKETPLACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_capacity: int = Field(default=16, ge=1)
    uri_base: str = DEFAULT_URI_BASE
    registry_seed: str = Field(default="pokemon_marketplace", min_length=1)
    buy_ownership_check: Literal["seller", "buyer"] = "seller"
    reset_price_on_sale: bool = True
    unique_mints: bool = False

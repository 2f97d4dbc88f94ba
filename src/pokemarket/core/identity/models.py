"""Object identity models and deterministic address derivation.

Usage:
    obj = derive_guid_address("0xa11ce", creation_num=0)
    registry = derive_seed_address("0xdeployer", b"pokemon_marketplace")
"""

import hashlib
from dataclasses import dataclass

from pokemarket.core.types import Address

# Domain separators, appended after the payload before hashing
OBJECT_FROM_GUID_SCHEME = b"\xfd"
OBJECT_FROM_SEED_SCHEME = b"\xfe"


@dataclass(frozen=True, slots=True)
class ObjectId:
    """Stable address of an object created on the ledger.

    Objects are never addressed by user-chosen values: the address is always
    a hash of the creating account plus either a creation counter or a fixed seed.
    """

    address: str

    def __str__(self) -> str:
        return self.address

    def short(self) -> str:
        """Abbreviated form for log lines."""
        return f"{self.address[:10]}..{self.address[-4:]}"


def normalize_address(address: Address) -> Address:
    """Lowercase and validate an account address.

    Args:
        address: 0x-prefixed hex string.

    Returns:
        Normalized address.

    Raises:
        ValueError: If the address is not 0x-prefixed hex.
    """
    if not isinstance(address, str):
        raise ValueError(f"Address must be a string, got {type(address).__name__}")
    normalized = address.strip().lower()
    digits = normalized[2:]
    if not normalized.startswith("0x") or not digits:
        raise ValueError(f"Invalid address {address!r}: expected 0x-prefixed hex")
    try:
        int(digits, 16)
    except ValueError as e:
        raise ValueError(f"Invalid address {address!r}: expected 0x-prefixed hex") from e
    return normalized


def _address_bytes(address: Address) -> bytes:
    digits = normalize_address(address)[2:]
    return bytes.fromhex(digits.rjust(64, "0"))


def derive_guid_address(source: Address, creation_num: int) -> ObjectId:
    """Derive the address of the `creation_num`-th object created by `source`.

    Args:
        source: Creating account.
        creation_num: Per-account creation counter.

    Returns:
        Deterministic ObjectId.
    """
    payload = _address_bytes(source) + creation_num.to_bytes(8, "little")
    digest = hashlib.sha3_256(payload + OBJECT_FROM_GUID_SCHEME).hexdigest()
    return ObjectId(address=f"0x{digest}")


def derive_seed_address(source: Address, seed: bytes) -> ObjectId:
    """Derive a named object address from a creator and a fixed seed.

    The same (source, seed) pair always yields the same address, which is what
    makes singleton objects locatable without storing their address anywhere.
    """
    digest = hashlib.sha3_256(_address_bytes(source) + seed + OBJECT_FROM_SEED_SCHEME).hexdigest()
    return ObjectId(address=f"0x{digest}")

"""Shared type definitions for gateway models.

Addresses travel through the gateway as strings. Identity checks and cache
keys always use the lowercase form; checksummed rendering only happens when
a derived address leaves the gateway.
"""

import re
from typing import Annotated

from pydantic import Field

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
HEX_QUANTITY_PATTERN = r"^0x[a-fA-F0-9]+$"

_ADDRESS = re.compile(ADDRESS_PATTERN)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

# Unsigned integer as 0x-prefixed hex string
HexQuantity = Annotated[
    str,
    Field(pattern=HEX_QUANTITY_PATTERN, description="Unsigned integer as 0x-prefixed hex"),
]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address (any letter case)."""
    if not isinstance(address, str):
        return False
    return _ADDRESS.fullmatch(address) is not None


def same_address(a: str, b: str) -> bool:
    """Case-insensitive address equality."""
    return normalize_address(a) == normalize_address(b)


def sort_addresses(token_a: str, token_b: str) -> tuple[str, str]:
    """Order two addresses the way Uniswap V2 orders token0/token1.

    Comparison is on the lowercase hex form, which for equal-length
    addresses matches the numeric ordering used on-chain.
    """
    if normalize_address(token_a) < normalize_address(token_b):
        return token_a, token_b
    return token_b, token_a


def to_hex_quantity(value: int) -> str:
    """Render an unsigned integer as 0x-prefixed lowercase hex.

    Zero renders as "0x0"; there are never leading zeros.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"Hex quantity cannot be negative: {value}")
    return hex(value)


def parse_hex_quantity(value: str) -> int:
    """Parse a 0x-prefixed hex string into an unbounded int.

    Raises:
        ValueError: If the prefix is missing or the digits are not hex
    """
    if not isinstance(value, str) or not value[:2].lower() == "0x":
        raise ValueError(f"Hex quantity must start with 0x: {value!r}")
    digits = value[2:]
    if not digits:
        raise ValueError(f"Hex quantity has no digits: {value!r}")
    # int() alone would also accept signs, underscores and whitespace
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise ValueError(f"Hex quantity is not hexadecimal: {value!r}")
    return int(digits, 16)

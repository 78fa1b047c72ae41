"""Pydantic models and shared value types for the gateway."""

from gateway.models.responses import AmountOutResponse, GasPriceResponse, HealthResponse
from gateway.models.types import (
    HexQuantity,
    is_valid_address,
    normalize_address,
    parse_hex_quantity,
    same_address,
    sort_addresses,
    to_hex_quantity,
)

__all__ = [
    # Types
    "HexQuantity",
    "normalize_address",
    "is_valid_address",
    "same_address",
    "sort_addresses",
    "to_hex_quantity",
    "parse_hex_quantity",
    # Responses
    "GasPriceResponse",
    "AmountOutResponse",
    "HealthResponse",
]

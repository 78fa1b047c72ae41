"""Uniswap V2 Gateway - gas price and swap quotes over Ethereum JSON-RPC."""

__version__ = "0.1.0"

from gateway.gateway import Gateway  # noqa: E402

__all__ = ["Gateway", "__version__"]

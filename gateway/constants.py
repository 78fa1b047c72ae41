"""Protocol constants for the Uniswap V2 gateway.

Centralizes well-known addresses, hashes and cache key names.
"""

from gateway.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return a well-known address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# UniswapV2Factory on mainnet
UNISWAP_V2_FACTORY = _validate_address(
    "UNISWAP_V2_FACTORY", "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"
)

# keccak256 of the UniswapV2Pair creation code, fixed for every V2 deployment
# that shares the canonical pair bytecode
INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

# CREATE2 address prefix byte
CREATE2_PREFIX = b"\xff"

# 0.3% swap fee expressed as retained/total (997/1000)
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# Cache namespaces
PAIR_CACHE_PREFIX = "pair:"
GAS_PRICE_CACHE_KEY = "gas-price:current"

# Configuration defaults (milliseconds where applicable)
DEFAULT_GAS_MONITORING_INTERVAL_MS = 1_000
DEFAULT_PAIR_CACHE_TTL_MS = 3_600_000
DEFAULT_RPC_TIMEOUT_MS = 10_000
DEFAULT_CACHE_MAX_ITEMS = 100
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 9090
DEFAULT_LOG_LEVEL = "info"

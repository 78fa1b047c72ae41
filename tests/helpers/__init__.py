"""Test helpers module for shared test utilities.

- constants: Token, factory and pair addresses
- mock_rpc: In-memory RpcClient and a manual clock
"""

from tests.helpers.constants import (
    DAI,
    DAI_WETH_PAIR,
    FACTORY,
    NON_EXISTENT,
    PAIR_BYTECODE,
    UNI,
    UNI_WETH_PAIR,
    USDC,
    USDC_CHECKSUM,
    USDC_WETH_PAIR,
    WETH,
    WETH_CHECKSUM,
)
from tests.helpers.mock_rpc import FakeClock, MockPair, MockRpcClient

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "UNI",
    "WETH_CHECKSUM",
    "USDC_CHECKSUM",
    "FACTORY",
    "UNI_WETH_PAIR",
    "USDC_WETH_PAIR",
    "DAI_WETH_PAIR",
    "NON_EXISTENT",
    "PAIR_BYTECODE",
    # Mocks
    "MockRpcClient",
    "MockPair",
    "FakeClock",
]

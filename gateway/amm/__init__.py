"""UniswapV2 pair derivation, pair contract access and swap math."""

from gateway.amm.pair_contract import PAIR_ABI, PairContract, Reserves
from gateway.amm.uniswap_v2 import (
    SwapResult,
    UniswapV2,
    UniswapV2Pool,
    compute_pair_address,
    uniswap_v2,
)

__all__ = [
    "compute_pair_address",
    "PAIR_ABI",
    "PairContract",
    "Reserves",
    "SwapResult",
    "UniswapV2",
    "UniswapV2Pool",
    "uniswap_v2",
]

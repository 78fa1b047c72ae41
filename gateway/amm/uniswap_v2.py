"""UniswapV2 pair derivation and swap math.

UniswapV2 uses the constant product formula: x * y = k
With a 0.3% fee on input amounts.

Pair addresses are CREATE2 addresses and can be computed offline from the
factory address and the sorted token pair.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from eth_abi.packed import encode_packed
from eth_utils import keccak, to_checksum_address

from gateway.constants import CREATE2_PREFIX, FEE_DENOMINATOR, FEE_NUMERATOR, INIT_CODE_HASH
from gateway.errors import DegeneratePoolError, InvalidRequestError
from gateway.models.types import is_valid_address, normalize_address, same_address, sort_addresses
from gateway.safe_int import S, DivisionByZero

logger = structlog.get_logger()


def compute_pair_address(
    factory: str,
    token_a: str,
    token_b: str,
    init_code_hash: str = INIT_CODE_HASH,
) -> str:
    """Compute the CREATE2 address of the pair for two tokens.

    address = keccak256(0xff ++ factory ++ keccak256(token0 ++ token1) ++ init_code_hash)[12:]

    Args:
        factory: UniswapV2Factory address
        token_a: One token of the pair (any letter case, any order)
        token_b: The other token of the pair
        init_code_hash: keccak256 of the pair creation code

    Returns:
        Checksummed pair address

    Raises:
        InvalidRequestError: If an address is malformed or the tokens are identical
    """
    for name, addr in (("factory", factory), ("token_a", token_a), ("token_b", token_b)):
        if not is_valid_address(addr):
            raise InvalidRequestError(f"Invalid {name} address: {addr}")
    if same_address(token_a, token_b):
        raise InvalidRequestError(f"Identical token addresses: {token_a}")

    token0, token1 = sort_addresses(token_a, token_b)
    salt = keccak(
        encode_packed(
            ["address", "address"],
            [normalize_address(token0), normalize_address(token1)],
        )
    )
    packed = encode_packed(
        ["bytes1", "address", "bytes32", "bytes32"],
        [CREATE2_PREFIX, normalize_address(factory), salt, bytes.fromhex(init_code_hash[2:])],
    )
    # Take the last 20 bytes
    return to_checksum_address(keccak(packed)[12:])


@dataclass
class UniswapV2Pool:
    """Snapshot of a UniswapV2 pair at one point in time."""

    address: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int
    block_timestamp_last: int = 0

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if same_address(token_in, self.token0):
            return self.reserve0, self.reserve1
        elif same_address(token_in, self.token1):
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pool")

    def get_token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        if same_address(token_in, self.token0):
            return self.token1
        elif same_address(token_in, self.token1):
            return self.token0
        else:
            raise ValueError(f"Token {token_in} not in pool")


@dataclass
class SwapResult:
    """Result of simulating a swap through a pair."""

    amount_in: int
    amount_out: int
    pool_address: str
    token_in: str
    token_out: str


class UniswapV2:
    """UniswapV2 AMM math.

    Formula: amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

    The 997/1000 factor accounts for the 0.3% fee. All arithmetic is on
    unbounded ints, so uint112 reserves and uint256 inputs never overflow.
    """

    def get_amount_out(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate output amount using constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount (floor)

        Raises:
            DegeneratePoolError: If the denominator is zero, which happens
                only for an empty input reserve with a zero input amount
            ValueError: If any argument is negative
        """
        if amount_in < 0 or reserve_in < 0 or reserve_out < 0:
            raise ValueError(
                f"Negative swap operand: amount_in={amount_in}, "
                f"reserve_in={reserve_in}, reserve_out={reserve_out}"
            )

        amount_in_with_fee = S(amount_in) * S(FEE_NUMERATOR)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(FEE_DENOMINATOR) + amount_in_with_fee

        try:
            return (numerator // denominator).value
        except DivisionByZero as e:
            raise DegeneratePoolError(
                f"Cannot quote against empty reserves (reserve_in={reserve_in}, "
                f"reserve_out={reserve_out}, amount_in={amount_in})"
            ) from e

    def simulate_swap(self, pool: UniswapV2Pool, token_in: str, amount_in: int) -> SwapResult:
        """Simulate an exact-input swap through a pool.

        Args:
            pool: The pair snapshot
            token_in: Input token address
            amount_in: Amount to swap

        Returns:
            SwapResult with amounts and pool info
        """
        reserve_in, reserve_out = pool.get_reserves(token_in)
        token_out = pool.get_token_out(token_in)
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)

        logger.debug(
            "v2_swap_simulated",
            pool=pool.address,
            token_in=token_in,
            amount_in=amount_in,
            amount_out=amount_out,
        )

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_address=pool.address,
            token_in=token_in,
            token_out=token_out,
        )


# Singleton instance
uniswap_v2 = UniswapV2()


__all__ = [
    "compute_pair_address",
    "UniswapV2Pool",
    "SwapResult",
    "UniswapV2",
    "uniswap_v2",
]

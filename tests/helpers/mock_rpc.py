"""In-memory RpcClient for tests.

Usage:
    rpc = MockRpcClient(gas_price=25)
    pair = rpc.add_pair(WETH, USDC, reserve_a=10**18, reserve_b=2500 * 10**6)

    # Simulate a node that errors
    rpc.error = UpstreamError("boom")
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from gateway.amm.uniswap_v2 import compute_pair_address
from gateway.models.types import normalize_address, sort_addresses
from gateway.rpc.client import FeeData
from tests.helpers.constants import FACTORY, PAIR_BYTECODE


@dataclass
class MockPair:
    """On-chain state of one mock pair contract."""

    token0: str
    token1: str
    reserve0: int
    reserve1: int
    block_timestamp_last: int = 1_700_000_000


class MockRpcClient:
    """Mock RPC client that records every call.

    Attributes:
        gas_price: Value returned by get_fee_data (None simulates bad data)
        error: If set, raised by every call
        latency: Seconds each call sleeps before answering
        calls: (method, *args) tuples in call order
    """

    def __init__(self, gas_price: int | None = 25, latency: float = 0.0) -> None:
        self.gas_price = gas_price
        self.latency = latency
        self.error: Exception | None = None
        self.pairs: dict[str, MockPair] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.closed = False

    def add_pair(
        self,
        token_a: str,
        token_b: str,
        reserve_a: int,
        reserve_b: int,
        factory: str = FACTORY,
    ) -> str:
        """Deploy a mock pair at its CREATE2 address and return that address.

        Reserves are given in (token_a, token_b) order and stored in
        (token0, token1) order like the real contract.
        """
        address = compute_pair_address(factory, token_a, token_b)
        token0, token1 = sort_addresses(token_a, token_b)
        if normalize_address(token0) == normalize_address(token_a):
            reserve0, reserve1 = reserve_a, reserve_b
        else:
            reserve0, reserve1 = reserve_b, reserve_a
        self.pairs[normalize_address(address)] = MockPair(
            token0=token0,
            token1=token1,
            reserve0=reserve0,
            reserve1=reserve1,
        )
        return address

    def count(self, method: str) -> int:
        """Number of recorded calls to a method."""
        return sum(1 for call in self.calls if call[0] == method)

    async def _answer(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)
        else:
            # Yield so concurrent callers interleave like real I/O
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error

    async def get_code(self, address: str) -> bytes:
        self.calls.append(("get_code", address))
        await self._answer()
        if normalize_address(address) in self.pairs:
            return PAIR_BYTECODE
        return b""

    async def get_fee_data(self) -> FeeData:
        self.calls.append(("get_fee_data",))
        await self._answer()
        return FeeData(gas_price=self.gas_price)

    async def call(
        self,
        address: str,
        abi: Sequence[dict[str, Any]],
        function_name: str,
        *args: Any,
    ) -> Any:
        self.calls.append(("call", address, function_name, *args))
        await self._answer()
        pair = self.pairs[normalize_address(address)]
        if function_name == "getReserves":
            return [pair.reserve0, pair.reserve1, pair.block_timestamp_last]
        if function_name == "token0":
            return pair.token0
        if function_name == "token1":
            return pair.token1
        raise ValueError(f"Unknown function {function_name}")

    async def close(self) -> None:
        self.calls.append(("close",))
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock for CacheStore tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

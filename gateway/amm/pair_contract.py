"""Read-only wrapper around a deployed UniswapV2Pair contract."""

from __future__ import annotations

from dataclasses import dataclass

from gateway.rpc.client import RpcClient

# UniswapV2Pair ABI - minimal, just the view functions we need
PAIR_ABI = [
    {
        "name": "getReserves",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {"name": "reserve0", "type": "uint112"},
            {"name": "reserve1", "type": "uint112"},
            {"name": "blockTimestampLast", "type": "uint32"},
        ],
    },
    {
        "name": "token0",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "token1",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
]


@dataclass(frozen=True)
class Reserves:
    """Pair reserves as returned by getReserves()."""

    reserve0: int
    reserve1: int
    block_timestamp_last: int


class PairContract:
    """Typed view over a pair contract through an RpcClient."""

    def __init__(self, address: str, rpc: RpcClient) -> None:
        self.address = address
        self._rpc = rpc

    async def get_reserves(self) -> Reserves:
        reserve0, reserve1, block_timestamp_last = await self._rpc.call(
            self.address, PAIR_ABI, "getReserves"
        )
        return Reserves(
            reserve0=int(reserve0),
            reserve1=int(reserve1),
            block_timestamp_last=int(block_timestamp_last),
        )

    async def token0(self) -> str:
        return str(await self._rpc.call(self.address, PAIR_ABI, "token0"))

    async def token1(self) -> str:
        return str(await self._rpc.call(self.address, PAIR_ABI, "token1"))


__all__ = ["PAIR_ABI", "PairContract", "Reserves"]

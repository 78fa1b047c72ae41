"""Ethereum JSON-RPC client adapter.

The services only depend on the RpcClient protocol, so tests (and any
alternative transport) can stand in for the web3-backed implementation.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

import structlog
from web3 import AsyncHTTPProvider, AsyncWeb3

from gateway.errors import UpstreamError

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True)
class FeeData:
    """Fee data reported by the node.

    gas_price is None when the node returned nothing usable.
    """

    gas_price: int | None


class RpcClient(Protocol):
    """Protocol for the read-only RPC calls the gateway needs."""

    async def get_code(self, address: str) -> bytes:
        """Return deployed bytecode at address (empty if none)."""
        ...

    async def get_fee_data(self) -> FeeData:
        """Return current fee data."""
        ...

    async def call(
        self,
        address: str,
        abi: Sequence[dict[str, Any]],
        function_name: str,
        *args: Any,
    ) -> Any:
        """Perform a read-only contract call and return the decoded result."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...


class Web3RpcClient:
    """RpcClient backed by an AsyncWeb3 HTTP session.

    One instance is shared by every request and the background gas refresh.
    Each call is bounded by `timeout` seconds; transport errors and timeouts
    are logged and re-raised as UpstreamError.
    """

    def __init__(self, rpc_url: str, timeout: float) -> None:
        """Initialize client with an RPC endpoint.

        Args:
            rpc_url: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
            timeout: Per-call deadline in seconds
        """
        self.w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self.timeout = timeout

    async def _bounded(self, method: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except TimeoutError as e:
            logger.warning("rpc_timeout", method=method, timeout_seconds=self.timeout)
            raise UpstreamError(f"RPC call {method} timed out after {self.timeout}s") from e
        except Exception as e:
            logger.warning("rpc_call_failed", method=method, error=str(e))
            raise UpstreamError(f"RPC call {method} failed: {e}") from e

    async def get_code(self, address: str) -> bytes:
        checksummed = AsyncWeb3.to_checksum_address(address)
        code = await self._bounded("eth_getCode", self.w3.eth.get_code(checksummed))
        return bytes(code)

    async def get_fee_data(self) -> FeeData:
        gas_price = await self._bounded("eth_gasPrice", self.w3.eth.gas_price)
        return FeeData(gas_price=int(gas_price) if gas_price is not None else None)

    async def call(
        self,
        address: str,
        abi: Sequence[dict[str, Any]],
        function_name: str,
        *args: Any,
    ) -> Any:
        contract = self.w3.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=abi)
        function = contract.functions[function_name](*args)
        return await self._bounded(function_name, function.call())

    async def close(self) -> None:
        await self.w3.provider.disconnect()


__all__ = ["FeeData", "RpcClient", "Web3RpcClient"]

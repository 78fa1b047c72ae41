"""Cached network gas price with periodic background refresh."""

from __future__ import annotations

import asyncio
import contextlib

import structlog

from gateway.cache import CacheStore
from gateway.constants import GAS_PRICE_CACHE_KEY
from gateway.errors import BadGatewayError
from gateway.models.types import to_hex_quantity
from gateway.rpc.client import RpcClient

logger = structlog.get_logger()


class GasPriceService:
    """Keeps the current gas price cached and refreshed.

    The cached value lives for one monitoring interval, and a background task
    re-fetches it every interval, so request traffic normally hits the cache.
    Concurrent misses each fetch independently; the last write wins.
    """

    def __init__(self, rpc: RpcClient, cache: CacheStore, interval_ms: int) -> None:
        self._rpc = rpc
        self._cache = cache
        self._interval_ms = interval_ms
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        """True while the background refresh task is alive."""
        return self._task is not None and not self._task.done()

    async def get_gas_price(self, force_refresh: bool = False) -> str:
        """Return the gas price in wei as 0x-prefixed hex.

        Args:
            force_refresh: Skip the cache and query the node

        Raises:
            BadGatewayError: If the node returned no gas price
            UpstreamError: If the RPC call fails
        """
        if not force_refresh:
            cached = self._cache.get(GAS_PRICE_CACHE_KEY)
            if cached is not None:
                return cached

        fee_data = await self._rpc.get_fee_data()
        if fee_data.gas_price is None:
            logger.warning("gas_price_missing", message="RPC node returned no gas price")
            raise BadGatewayError("RPC node returned invalid gas price data")

        gas_price_hex = to_hex_quantity(fee_data.gas_price)
        self._cache.set(GAS_PRICE_CACHE_KEY, gas_price_hex, self._interval_ms)

        return gas_price_hex

    async def refresh(self) -> None:
        """Run one background refresh; failures are logged, never raised."""
        try:
            gas_price = await self.get_gas_price(force_refresh=True)
        except Exception:
            logger.exception("gas_price_update_failed")
            return
        logger.debug("gas_price_updated", gas_price=gas_price)

    async def _run(self) -> None:
        interval = self._interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            await self.refresh()

    async def start(self) -> None:
        """Fetch once, then refresh every interval in the background.

        A failed initial fetch is logged and does not prevent startup.
        """
        if self.running:
            return
        try:
            gas_price = await self.get_gas_price()
            logger.info("initial_gas_price", gas_price=gas_price)
        except Exception:
            logger.exception("initial_gas_price_failed")

        self._task = asyncio.create_task(self._run(), name="gas-price-refresh")
        logger.info("gas_price_monitor_started", interval_ms=self._interval_ms)

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("gas_price_monitor_stopped")


__all__ = ["GasPriceService"]

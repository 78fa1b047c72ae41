"""Composition root for the gateway.

Gateway wires the RPC client, cache and services together by explicit
construction. Nothing looks its collaborators up at runtime, so tests can
build a Gateway around a mock RPC client.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from gateway.cache import CacheStore
from gateway.config import GatewayConfig
from gateway.rpc.client import RpcClient, Web3RpcClient
from gateway.services.gas_price import GasPriceService
from gateway.services.pair_resolver import PairResolver
from gateway.services.swap_quote import SwapQuoteService

logger = structlog.get_logger()


@dataclass
class Gateway:
    """All long-lived components of one gateway process."""

    config: GatewayConfig
    rpc: RpcClient
    cache: CacheStore
    pair_resolver: PairResolver
    gas_price: GasPriceService
    swap_quote: SwapQuoteService

    @classmethod
    def build(cls, config: GatewayConfig, rpc: RpcClient | None = None) -> Gateway:
        """Construct the component graph.

        Args:
            config: Gateway configuration
            rpc: RPC client to use. If None, a Web3RpcClient for config.rpc_url.
        """
        if rpc is None:
            rpc = Web3RpcClient(config.rpc_url, timeout=config.rpc_timeout)

        cache = CacheStore(max_items=config.cache_max_items)
        pair_resolver = PairResolver(rpc, cache, pair_cache_ttl_ms=config.pair_cache_ttl_ms)

        return cls(
            config=config,
            rpc=rpc,
            cache=cache,
            pair_resolver=pair_resolver,
            gas_price=GasPriceService(rpc, cache, interval_ms=config.gas_monitoring_interval_ms),
            swap_quote=SwapQuoteService(rpc, pair_resolver, factory_address=config.factory_address),
        )

    async def start(self) -> None:
        """Start background work (initial gas fetch and refresh loop)."""
        logger.info(
            "gateway_starting",
            factory=self.config.factory_address,
            gas_interval_ms=self.config.gas_monitoring_interval_ms,
            pair_cache_ttl_ms=self.config.pair_cache_ttl_ms,
        )
        await self.gas_price.start()

    async def stop(self) -> None:
        """Stop background work, then release the RPC connection."""
        try:
            await self.gas_price.stop()
        finally:
            await self.rpc.close()
        logger.info("gateway_stopped")


__all__ = ["Gateway"]

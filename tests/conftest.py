"""Pytest configuration and fixtures."""

import pytest

from gateway.cache import CacheStore
from gateway.config import GatewayConfig
from gateway.services.gas_price import GasPriceService
from gateway.services.pair_resolver import PairResolver
from gateway.services.swap_quote import SwapQuoteService
from tests.helpers import FACTORY, FakeClock, MockRpcClient

PAIR_TTL_MS = 3_600_000
GAS_INTERVAL_MS = 1_000


@pytest.fixture
def clock() -> FakeClock:
    """A manually advanced clock."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> CacheStore:
    """A cache driven by the fake clock."""
    return CacheStore(max_items=100, timer=clock)


@pytest.fixture
def rpc() -> MockRpcClient:
    """A mock RPC client reporting a gas price of 25 wei."""
    return MockRpcClient(gas_price=25)


@pytest.fixture
def pair_resolver(rpc: MockRpcClient, cache: CacheStore) -> PairResolver:
    return PairResolver(rpc, cache, pair_cache_ttl_ms=PAIR_TTL_MS)


@pytest.fixture
def swap_quote(rpc: MockRpcClient, pair_resolver: PairResolver) -> SwapQuoteService:
    return SwapQuoteService(rpc, pair_resolver, factory_address=FACTORY)


@pytest.fixture
def gas_price_service(rpc: MockRpcClient, cache: CacheStore) -> GasPriceService:
    return GasPriceService(rpc, cache, interval_ms=GAS_INTERVAL_MS)


@pytest.fixture
def config() -> GatewayConfig:
    """Config pointing at a placeholder node (never contacted in tests)."""
    return GatewayConfig(rpc_url="http://localhost:8545")

"""Tests for PairResolver."""

import pytest

from gateway.errors import InvalidRequestError, PairNotFoundError, UpstreamError
from gateway.services.pair_resolver import pair_cache_key
from tests.helpers import FACTORY, NON_EXISTENT, USDC, USDC_CHECKSUM, WETH, WETH_CHECKSUM


class TestPairCacheKey:
    def test_format(self):
        """Key is the prefix plus both lowercase addresses, lower one first."""
        assert pair_cache_key(WETH, USDC) == f"pair:{USDC}_{WETH}"

    def test_order_and_case_independent(self):
        assert pair_cache_key(WETH_CHECKSUM, USDC) == pair_cache_key(USDC_CHECKSUM, WETH)


class TestResolvePair:
    @pytest.mark.asyncio
    async def test_resolves_deployed_pair(self, pair_resolver, rpc):
        expected = rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)

        assert await pair_resolver.resolve_pair(FACTORY, USDC, WETH) == expected
        assert rpc.count("get_code") == 1

    @pytest.mark.asyncio
    async def test_argument_order_irrelevant(self, pair_resolver, rpc):
        rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)

        forward = await pair_resolver.resolve_pair(FACTORY, USDC, WETH)
        backward = await pair_resolver.resolve_pair(FACTORY, WETH_CHECKSUM, USDC_CHECKSUM)

        assert forward == backward

    @pytest.mark.asyncio
    async def test_cache_hit_skips_rpc(self, pair_resolver, rpc, cache):
        """A cached pair is returned without touching the node."""
        address = rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)
        await pair_resolver.resolve_pair(FACTORY, USDC, WETH)
        rpc.calls.clear()

        assert await pair_resolver.resolve_pair(FACTORY, WETH, USDC) == address
        assert rpc.calls == []
        assert cache.get(pair_cache_key(USDC, WETH)) == address

    @pytest.mark.asyncio
    async def test_force_refresh_rechecks(self, pair_resolver, rpc):
        rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)
        await pair_resolver.resolve_pair(FACTORY, USDC, WETH)

        await pair_resolver.resolve_pair(FACTORY, USDC, WETH, force_refresh=True)

        assert rpc.count("get_code") == 2

    @pytest.mark.asyncio
    async def test_cache_entry_expires(self, pair_resolver, rpc, clock):
        """After the pair TTL the deployment is confirmed again."""
        rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)
        await pair_resolver.resolve_pair(FACTORY, USDC, WETH)

        clock.advance(3600)
        await pair_resolver.resolve_pair(FACTORY, USDC, WETH)

        assert rpc.count("get_code") == 2

    @pytest.mark.asyncio
    async def test_missing_pair_not_cached(self, pair_resolver, rpc, cache):
        """Absence is never cached, so a later deployment is picked up."""
        with pytest.raises(PairNotFoundError):
            await pair_resolver.resolve_pair(FACTORY, NON_EXISTENT, WETH)
        assert cache.get(pair_cache_key(NON_EXISTENT, WETH)) is None

        with pytest.raises(PairNotFoundError):
            await pair_resolver.resolve_pair(FACTORY, NON_EXISTENT, WETH)
        assert rpc.count("get_code") == 2

    @pytest.mark.asyncio
    async def test_identical_tokens_rejected_without_rpc(self, pair_resolver, rpc):
        with pytest.raises(InvalidRequestError):
            await pair_resolver.resolve_pair(FACTORY, WETH, WETH_CHECKSUM)
        assert rpc.calls == []

    @pytest.mark.asyncio
    async def test_rpc_failure_propagates_and_is_not_cached(self, pair_resolver, rpc, cache):
        rpc.add_pair(USDC, WETH, reserve_a=1, reserve_b=1)
        rpc.error = UpstreamError("connection refused")

        with pytest.raises(UpstreamError):
            await pair_resolver.resolve_pair(FACTORY, USDC, WETH)
        assert cache.get(pair_cache_key(USDC, WETH)) is None

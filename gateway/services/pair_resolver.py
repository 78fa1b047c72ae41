"""Resolve two token addresses to their deployed UniswapV2 pair."""

from __future__ import annotations

import structlog

from gateway.amm.uniswap_v2 import compute_pair_address
from gateway.cache import CacheStore
from gateway.constants import PAIR_CACHE_PREFIX
from gateway.errors import PairNotFoundError
from gateway.models.types import normalize_address
from gateway.rpc.client import RpcClient

logger = structlog.get_logger()


def pair_cache_key(token_a: str, token_b: str) -> str:
    """Cache key for an unordered token pair.

    Both argument orders and any letter case map to the same key.
    """
    low, high = sorted((normalize_address(token_a), normalize_address(token_b)))
    return f"{PAIR_CACHE_PREFIX}{low}_{high}"


class PairResolver:
    """Derives pair addresses and confirms they are deployed.

    The derivation is pure; the only network round-trip is the bytecode
    check, which is skipped while the pair address is cached. Only pairs
    that exist on-chain are cached.
    """

    def __init__(self, rpc: RpcClient, cache: CacheStore, pair_cache_ttl_ms: int) -> None:
        self._rpc = rpc
        self._cache = cache
        self._ttl_ms = pair_cache_ttl_ms

    async def resolve_pair(
        self,
        factory: str,
        token_a: str,
        token_b: str,
        force_refresh: bool = False,
    ) -> str:
        """Return the checksummed address of the deployed pair.

        Args:
            factory: UniswapV2Factory address
            token_a: One token of the pair
            token_b: The other token of the pair
            force_refresh: Skip the cache and re-check the chain

        Raises:
            PairNotFoundError: If no contract is deployed at the derived address
            InvalidRequestError: If an address is malformed or the tokens are identical
            UpstreamError: If the bytecode lookup fails
        """
        cache_key = pair_cache_key(token_a, token_b)

        if not force_refresh:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("pair_cache_hit", pair=cached, cache_key=cache_key)
                return cached

        pair_address = compute_pair_address(factory, token_a, token_b)
        code = await self._rpc.get_code(pair_address)

        if not code:
            logger.info(
                "pair_not_found",
                token_a=token_a,
                token_b=token_b,
                pair=pair_address,
            )
            raise PairNotFoundError(f"Pair contract not found for {token_a} / {token_b}")

        self._cache.set(cache_key, pair_address, self._ttl_ms)
        logger.debug("pair_cached", pair=pair_address, cache_key=cache_key, ttl_ms=self._ttl_ms)

        return pair_address


__all__ = ["PairResolver", "pair_cache_key"]

"""Single-hop UniswapV2 swap quotes against live pair reserves."""

from __future__ import annotations

import asyncio

import structlog

from gateway.amm.pair_contract import PairContract
from gateway.amm.uniswap_v2 import UniswapV2, UniswapV2Pool, uniswap_v2
from gateway.errors import InvalidRequestError
from gateway.models.types import parse_hex_quantity, same_address, to_hex_quantity
from gateway.rpc.client import RpcClient
from gateway.services.pair_resolver import PairResolver

logger = structlog.get_logger()


class SwapQuoteService:
    """Quotes exact-input swaps through exactly one pair."""

    def __init__(
        self,
        rpc: RpcClient,
        pair_resolver: PairResolver,
        factory_address: str,
        amm: UniswapV2 = uniswap_v2,
    ) -> None:
        self._rpc = rpc
        self._pair_resolver = pair_resolver
        self._factory = factory_address
        self._amm = amm

    async def load_pool(self, from_token: str, to_token: str) -> UniswapV2Pool:
        """Resolve the pair for two tokens and snapshot its reserves.

        Reserves and token0 are read concurrently; both must arrive before
        the snapshot is built.
        """
        pair_address = await self._pair_resolver.resolve_pair(self._factory, from_token, to_token)
        pair = PairContract(pair_address, self._rpc)

        reserves, token0 = await asyncio.gather(pair.get_reserves(), pair.token0())

        # token1 is whichever requested token the pair did not report as token0
        token1 = to_token if same_address(from_token, token0) else from_token

        return UniswapV2Pool(
            address=pair_address,
            token0=token0,
            token1=token1,
            reserve0=reserves.reserve0,
            reserve1=reserves.reserve1,
            block_timestamp_last=reserves.block_timestamp_last,
        )

    async def quote(self, from_token: str, to_token: str, amount_in: str) -> str:
        """Quote the output of swapping amount_in of from_token for to_token.

        Args:
            from_token: Address of the token being sold
            to_token: Address of the token being bought
            amount_in: Input amount as 0x-prefixed hex (any size)

        Returns:
            Output amount as 0x-prefixed lowercase hex

        Raises:
            InvalidRequestError: If amount_in is not a hex quantity
            PairNotFoundError: If the pair is not deployed
            DegeneratePoolError: If the reserves cannot produce a quote
            UpstreamError: If an RPC call fails
        """
        try:
            amount_in_int = parse_hex_quantity(amount_in)
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        pool = await self.load_pool(from_token, to_token)
        result = self._amm.simulate_swap(pool, from_token, amount_in_int)

        logger.info(
            "amount_out_quoted",
            pair=pool.address,
            token_in=from_token,
            token_out=to_token,
            amount_in=amount_in_int,
            amount_out=result.amount_out,
            block_timestamp_last=pool.block_timestamp_last,
        )

        return to_hex_quantity(result.amount_out)


__all__ = ["SwapQuoteService"]

"""API endpoints for the gateway."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Path, Request

from gateway.models.responses import AmountOutResponse, GasPriceResponse
from gateway.models.types import ADDRESS_PATTERN, HEX_QUANTITY_PATTERN
from gateway.services.gas_price import GasPriceService
from gateway.services.swap_quote import SwapQuoteService

logger = structlog.get_logger()

router = APIRouter()


def get_gas_price_service(request: Request) -> GasPriceService:
    """Dependency provider for the gas price service.

    Override this in tests to inject a service with a mock RPC client:
        app.dependency_overrides[get_gas_price_service] = lambda: service
    """
    return request.app.state.gas_price_service


def get_swap_quote_service(request: Request) -> SwapQuoteService:
    """Dependency provider for the swap quote service."""
    return request.app.state.swap_quote_service


@router.get(
    "/gasPrice",
    summary="Get the current gas price in wei",
    responses={
        502: {"description": "RPC node request failed"},
        503: {"description": "RPC node is currently unavailable"},
    },
)
async def gas_price(
    service: GasPriceService = Depends(get_gas_price_service),
) -> GasPriceResponse:
    """Return the cached gas price, fetching it on a cold cache."""
    return GasPriceResponse(gas_price=await service.get_gas_price())


@router.get(
    "/return/{from_token}/{to_token}/{amount_in}",
    summary="Get amount out for a swap",
    responses={
        400: {"description": "Invalid token addresses or amount in"},
        404: {"description": "Pair contract not found"},
        422: {"description": "Pair has no liquidity to quote against"},
        502: {"description": "RPC node request failed"},
    },
)
async def amount_out(
    from_token: Annotated[str, Path(pattern=ADDRESS_PATTERN, description="Token sold")],
    to_token: Annotated[str, Path(pattern=ADDRESS_PATTERN, description="Token bought")],
    amount_in: Annotated[
        str, Path(pattern=HEX_QUANTITY_PATTERN, description="Amount in wei, 0x-prefixed hex")
    ],
    service: SwapQuoteService = Depends(get_swap_quote_service),
) -> AmountOutResponse:
    """Quote a single-hop UniswapV2 swap.

    Args:
        from_token: Address of the token being swapped from
        to_token: Address of the token being swapped to
        amount_in: Input amount in wei as 0x-prefixed hex
    """
    logger.debug(
        "amount_out_requested", from_token=from_token, to_token=to_token, amount_in=amount_in
    )
    return AmountOutResponse(
        amount_out=await service.quote(from_token, to_token, amount_in)
    )

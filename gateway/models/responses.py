"""Pydantic response models for the gateway HTTP API."""

from pydantic import BaseModel, Field

from gateway.models.types import HexQuantity


class GasPriceResponse(BaseModel):
    """Current network gas price."""

    gas_price: HexQuantity = Field(
        alias="gasPrice",
        description="The gas price in wei",
        examples=["0x3b9aca00"],
    )

    model_config = {"populate_by_name": True}


class AmountOutResponse(BaseModel):
    """Output amount of a simulated single-hop swap."""

    amount_out: HexQuantity = Field(
        alias="amountOut",
        description="The amount of tokens out in wei",
        examples=["0x1"],
    )

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str = "ok"

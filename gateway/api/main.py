"""FastAPI application for the Uniswap V2 gateway.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gateway import __version__
from gateway.api.endpoints import router
from gateway.config import GatewayConfig
from gateway.errors import GatewayError
from gateway.gateway import Gateway
from gateway.log_config import configure_logging
from gateway.models.responses import HealthResponse

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the gateway on startup and tear it down on shutdown.

    A Gateway already placed on app.state (e.g. by tests) is used as-is.
    """
    gateway: Gateway | None = getattr(app.state, "gateway", None)
    if gateway is None:
        config = GatewayConfig.from_env()
        configure_logging(config.log_level)
        gateway = Gateway.build(config)
        app.state.gateway = gateway

    app.state.gas_price_service = gateway.gas_price
    app.state.swap_quote_service = gateway.swap_quote

    await gateway.start()
    try:
        yield
    finally:
        await gateway.stop()


app = FastAPI(
    title="Uniswap V2 Gateway",
    description="Gas price and Uniswap V2 swap quotes from an Ethereum JSON-RPC node",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Translate domain errors to their HTTP status."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log("request_failed", path=request.url.path, error=str(exc), status=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path parameters are a client error (400), not 422."""
    logger.info("request_invalid", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid token addresses or amount in", "errors": _jsonable(exc)},
    )


def _jsonable(exc: RequestValidationError) -> list[dict[str, object]]:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]


app.include_router(router)


@app.get("/health")
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


def run() -> None:
    """Run the gateway API server.

    Host, port and log level come from SERVER_HOST, SERVER_PORT and LOG_LEVEL.
    """
    config = GatewayConfig.from_env()
    configure_logging(config.log_level)
    uvicorn.run(
        "gateway.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    run()

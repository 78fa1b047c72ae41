"""Gateway configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlparse

from gateway.constants import (
    DEFAULT_CACHE_MAX_ITEMS,
    DEFAULT_GAS_MONITORING_INTERVAL_MS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PAIR_CACHE_TTL_MS,
    DEFAULT_RPC_TIMEOUT_MS,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    UNISWAP_V2_FACTORY,
)
from gateway.errors import ConfigError
from gateway.models.types import is_valid_address

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True)
class GatewayConfig:
    """Centralized configuration for the gateway.

    Attributes:
        rpc_url: HTTP(S) JSON-RPC endpoint of the Ethereum node
        factory_address: UniswapV2Factory used for pair derivation
        gas_monitoring_interval_ms: Gas refresh period, also the gas cache TTL
        pair_cache_ttl_ms: How long a resolved pair address stays cached
        rpc_timeout_ms: Upper bound on a single RPC call
        cache_max_items: Capacity of the in-process cache
        server_host: Bind host for the HTTP server
        server_port: Bind port for the HTTP server
        log_level: structlog filtering level name
    """

    rpc_url: str
    factory_address: str = UNISWAP_V2_FACTORY
    gas_monitoring_interval_ms: int = DEFAULT_GAS_MONITORING_INTERVAL_MS
    pair_cache_ttl_ms: int = DEFAULT_PAIR_CACHE_TTL_MS
    rpc_timeout_ms: int = DEFAULT_RPC_TIMEOUT_MS
    cache_max_items: int = DEFAULT_CACHE_MAX_ITEMS
    server_host: str = DEFAULT_SERVER_HOST
    server_port: int = DEFAULT_SERVER_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        parsed = urlparse(self.rpc_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"RPC_URL must be an http(s) URL: {self.rpc_url!r}")
        if not is_valid_address(self.factory_address):
            raise ConfigError(
                f"UNISWAP_FACTORY_ADDRESS is not an address: {self.factory_address!r}"
            )
        if self.gas_monitoring_interval_ms <= 0:
            raise ConfigError("GAS_MONITORING_INTERVAL must be positive")
        if self.rpc_timeout_ms <= 0:
            raise ConfigError("RPC_TIMEOUT must be positive")
        if self.cache_max_items <= 0:
            raise ConfigError("CACHE_MAX_ITEMS must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

    @property
    def gas_monitoring_interval(self) -> float:
        """Gas refresh period in seconds."""
        return self.gas_monitoring_interval_ms / 1000

    @property
    def rpc_timeout(self) -> float:
        """RPC deadline in seconds."""
        return self.rpc_timeout_ms / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GatewayConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ConfigError: If RPC_URL is missing or any value is malformed
        """
        env = os.environ if environ is None else environ

        rpc_url = env.get("RPC_URL")
        if not rpc_url:
            raise ConfigError("RPC_URL is required")

        return cls(
            rpc_url=rpc_url,
            factory_address=env.get("UNISWAP_FACTORY_ADDRESS", UNISWAP_V2_FACTORY),
            gas_monitoring_interval_ms=_int_setting(
                env, "GAS_MONITORING_INTERVAL", DEFAULT_GAS_MONITORING_INTERVAL_MS
            ),
            pair_cache_ttl_ms=_int_setting(env, "PAIR_CACHE_TTL", DEFAULT_PAIR_CACHE_TTL_MS),
            rpc_timeout_ms=_int_setting(env, "RPC_TIMEOUT", DEFAULT_RPC_TIMEOUT_MS),
            cache_max_items=_int_setting(env, "CACHE_MAX_ITEMS", DEFAULT_CACHE_MAX_ITEMS),
            server_host=env.get("SERVER_HOST", DEFAULT_SERVER_HOST),
            server_port=_int_setting(env, "SERVER_PORT", DEFAULT_SERVER_PORT),
            log_level=env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    if not raw.isdigit():
        raise ConfigError(f"{name} must be a non-negative integer, got {raw!r}")
    return int(raw)

"""Gateway error classes.

Each error maps to exactly one HTTP status at the API boundary; see
gateway.api.main for the translation.
"""


class GatewayError(Exception):
    """Base error for gateway operations."""

    status_code = 500


class InvalidRequestError(GatewayError):
    """Malformed token address, amount, or an identical token pair."""

    status_code = 400


class PairNotFoundError(GatewayError):
    """No pair contract is deployed at the derived address."""

    status_code = 404


class DegeneratePoolError(GatewayError):
    """Quote denominator is zero (empty input reserve and zero input)."""

    status_code = 422


class UpstreamError(GatewayError):
    """RPC transport failure or timeout."""

    status_code = 502


class BadGatewayError(GatewayError):
    """RPC node answered but returned no usable gas price."""

    status_code = 503


class ConfigError(ValueError):
    """Invalid configuration value."""

    pass

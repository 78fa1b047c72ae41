"""Gateway services: pair resolution, swap quotes and gas price."""

from gateway.services.gas_price import GasPriceService
from gateway.services.pair_resolver import PairResolver, pair_cache_key
from gateway.services.swap_quote import SwapQuoteService

__all__ = [
    "GasPriceService",
    "PairResolver",
    "SwapQuoteService",
    "pair_cache_key",
]

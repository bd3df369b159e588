# bscalc — Black-Scholes option calculator
# Public API

from .core import OptionSpec, MarketQuote, CALL, PUT
from .black_scholes import normal_cdf, call_price, put_price, price
from .validation import (
    PriceQuote, NumericDomainAnomaly, price_checked, validate_put_call_parity,
)
from .exceptions import PricingError, InputArityError, InputParseError

__all__ = [
    "OptionSpec", "MarketQuote", "CALL", "PUT",
    "normal_cdf", "call_price", "put_price", "price",
    "PriceQuote", "NumericDomainAnomaly", "price_checked",
    "validate_put_call_parity",
    "PricingError", "InputArityError", "InputParseError",
]

__version__ = "0.1.0"

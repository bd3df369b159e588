from __future__ import annotations
from dataclasses import dataclass

from .config import DAYS_PER_YEAR, PERCENT


# ---------------------------------------------------------------------------
# Model inputs — the units the pricing formulas work in
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionSpec:
    """European option plus the market state needed to price it.

    Fields are not validated: zero or negative ``T`` / ``sigma`` and
    non-positive prices are allowed through and show up as NaN / inf in
    the priced result.  Use :mod:`bscalc.validation` for a checked path.
    """
    S0: float
    K: float
    T: float          # years
    r: float          # continuous risk-free, decimal
    sigma: float      # decimal


# ---------------------------------------------------------------------------
# Quote inputs — the units a user types on the command line
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MarketQuote:
    """Raw calculator inputs before unit conversion.

    Parameters
    ----------
    stock_price : float
        Underlying price, currency units.
    strike_price : float
        Strike, currency units.
    days_to_expiration : float
        Calendar days until expiry.
    volatility_pct : float
        Annualised volatility in percent (``20`` means 20%).
    risk_free_rate_pct : float
        Continuously-compounded risk-free rate in percent.
    """
    stock_price: float
    strike_price: float
    days_to_expiration: float
    volatility_pct: float
    risk_free_rate_pct: float

    def to_spec(self) -> OptionSpec:
        """Convert days to years and percentages to decimals."""
        return OptionSpec(
            S0=self.stock_price,
            K=self.strike_price,
            T=self.days_to_expiration / DAYS_PER_YEAR,
            r=self.risk_free_rate_pct / PERCENT,
            sigma=self.volatility_pct / PERCENT,
        )


CALL = "call"
PUT  = "put"

"""Console report for one priced call/put pair."""

from __future__ import annotations

from .config import PRICE_DECIMALS
from .core import MarketQuote


def _num(x: float) -> str:
    # six significant digits, trailing zeros dropped: 100 -> "100", 0.0001 -> "0.0001"
    return f"{x:g}"


def _money(x: float) -> str:
    return f"{x:.{PRICE_DECIMALS}f}"


def format_inputs(quote: MarketQuote) -> list[str]:
    """Echo lines for the raw (pre-conversion) inputs."""
    return [
        f"Stock Price: ${_num(quote.stock_price)}",
        f"Strike Price: ${_num(quote.strike_price)}",
        f"Days to Expiration: {_num(quote.days_to_expiration)} days",
        f"Volatility: {_num(quote.volatility_pct)}%",
        f"Risk-Free Rate of Interest: {_num(quote.risk_free_rate_pct)}%",
    ]


def format_prices(call: float, put: float) -> list[str]:
    return [
        f"Call Option Value: ${_money(call)}",
        f"Put Option Value: ${_money(put)}",
    ]


def format_report(quote: MarketQuote, call: float, put: float) -> str:
    """Full report body: inputs, blank line, prices (banner excluded)."""
    lines = ["", *format_inputs(quote), "", *format_prices(call, put)]
    return "\n".join(lines)

"""Checked pricing layer.

The plain pricers in :mod:`bscalc.black_scholes` never raise on degenerate
inputs; zero volatility, zero time or non-positive prices simply come back
as NaN / inf.  Callers that would rather branch on that explicitly use
:func:`price_checked`, which returns either a :class:`PriceQuote` or a
:class:`NumericDomainAnomaly` carrying the same numbers plus the list of
violated preconditions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

import numpy as np

from .black_scholes import call_price, put_price
from .config import PARITY_TOLERANCE
from .core import OptionSpec

__all__ = [
    "PriceQuote",
    "NumericDomainAnomaly",
    "domain_issues",
    "price_checked",
    "validate_put_call_parity",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PriceQuote:
    """Call and put values for one option, both finite."""
    call: float
    put: float


@dataclass(frozen=True)
class NumericDomainAnomaly:
    """Prices computed outside the model's domain.

    ``call`` / ``put`` hold whatever the arithmetic produced (often NaN or
    inf); ``issues`` lists the human-readable reasons.
    """
    call: float
    put: float
    issues: tuple[str, ...]


PricingResult = Union[PriceQuote, NumericDomainAnomaly]


# ---------------------------------------------------------------------------
# Domain checks
# ---------------------------------------------------------------------------

def domain_issues(opt: OptionSpec) -> list[str]:
    """Return the preconditions of the closed form that ``opt`` violates.

    An empty list means the inputs are inside the model's domain.
    """
    issues = []
    for name in ("S0", "K", "T", "sigma", "r"):
        value = getattr(opt, name)
        if not math.isfinite(value):
            issues.append(f"{name} is not finite ({value})")
        elif name != "r" and value <= 0:
            issues.append(f"{name} must be positive, got {value}")
    return issues


def price_checked(opt: OptionSpec) -> PricingResult:
    """Price call and put, tagging the result when the inputs are degenerate."""
    call = call_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r)
    put = put_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r)

    issues = domain_issues(opt)
    if not math.isfinite(call):
        issues.append(f"call price is not finite ({call})")
    if not math.isfinite(put):
        issues.append(f"put price is not finite ({put})")

    if issues:
        logger.debug("domain anomaly for %s: %s", opt, issues)
        return NumericDomainAnomaly(call=call, put=put, issues=tuple(issues))
    return PriceQuote(call=call, put=put)


# ---------------------------------------------------------------------------
# Parity
# ---------------------------------------------------------------------------

def validate_put_call_parity(
    call: float,
    put: float,
    opt: OptionSpec,
    *,
    rel_tol: float = PARITY_TOLERANCE,
) -> tuple[bool, float]:
    """Check ``P - C == K e^{-rT} - S``.

    The tolerance is relative to the largest of ``|S0|``, ``|K|`` and 1.0,
    so an at-the-money forward (right-hand side near zero) is not
    over-penalised and tiny prices still get an absolute floor.

    Returns
    -------
    tuple
        ``(is_valid, absolute_error)``.
    """
    expected = opt.K * np.exp(-opt.r * opt.T) - opt.S0
    error = float(abs((put - call) - expected))
    scale = max(abs(opt.S0), abs(opt.K), 1.0)
    return error <= rel_tol * scale, error

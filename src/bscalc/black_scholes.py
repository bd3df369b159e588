import logging
from typing import Literal

import numpy as np
from scipy.special import erf

from .core import OptionSpec, CALL, PUT

logger = logging.getLogger(__name__)

_SQRT1_2 = np.sqrt(0.5)

# Non-finite results (sigma or T of zero, S/K <= 0) propagate as NaN / inf.
_quiet = dict(divide="ignore", invalid="ignore", over="ignore")


def normal_cdf(x: float) -> float:
    """Standard normal CDF via the error function: 0.5 * (1 + erf(x / sqrt(2)))."""
    return float(0.5 * (1.0 + erf(np.float64(x) * _SQRT1_2)))


def d1_d2(S0, K, T, sigma, r):
    S0, K, T, sigma, r = (np.float64(x) for x in (S0, K, T, sigma, r))
    with np.errstate(**_quiet):
        rt = sigma * np.sqrt(T)
        d1 = (np.log(S0 / K) + (r + 0.5 * sigma * sigma) * T) / rt
        d2 = d1 - rt
    logger.debug("d1=%r d2=%r (S0=%r K=%r T=%r sigma=%r r=%r)",
                 float(d1), float(d2), float(S0), float(K), float(T),
                 float(sigma), float(r))
    return float(d1), float(d2)


def _discount(r, T) -> float:
    with np.errstate(**_quiet):
        return float(np.exp(-np.float64(r) * np.float64(T)))


def call_price(S0: float, K: float, T: float, sigma: float, r: float) -> float:
    """Black-Scholes European call.

    Caller must pass ``S0, K, T, sigma > 0``; nothing is checked here and
    degenerate inputs come back as NaN or inf instead of raising.
    """
    d1, d2 = d1_d2(S0, K, T, sigma, r)
    with np.errstate(**_quiet):
        value = (np.float64(normal_cdf(d1)) * S0
                 - np.float64(normal_cdf(d2)) * K * _discount(r, T))
    return float(value)


def put_price(S0: float, K: float, T: float, sigma: float, r: float) -> float:
    """European put from put-call parity: C + K e^{-rT} - S."""
    call = call_price(S0, K, T, sigma, r)
    with np.errstate(**_quiet):
        value = np.float64(call) + K * _discount(r, T) - S0
    return float(value)


def price(opt: OptionSpec, kind: Literal["call", "put"] = CALL) -> float:
    if kind == CALL:
        return call_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r)
    elif kind == PUT:
        return put_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r)
    else:
        raise ValueError("kind must be 'call' or 'put'")

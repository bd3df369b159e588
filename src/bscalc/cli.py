import argparse
import itertools
import logging
import re
import sys

from .black_scholes import call_price, put_price
from .config import BANNER, EXPECTED_ARGS, LOG_LEVEL, USAGE
from .core import MarketQuote
from .exceptions import InputArityError, InputParseError
from .logging_config import setup_logging
from .report import format_report
from .validation import NumericDomainAnomaly, price_checked

logger = logging.getLogger(__name__)

FIELDS = (
    "stock_price",
    "strike_price",
    "days_to_expiration",
    "volatility_pct",
    "risk_free_rate_pct",
)

# Longest leading float, the way C strtod reads it.
_FLOAT_PREFIX = re.compile(
    r"""\s*[+-]?(?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        |inf(?:inity)?
        |nan
    )""",
    re.VERBOSE | re.IGNORECASE,
)


def parse_number(text: str) -> float:
    """Lenient parse: leading numeric prefix, or 0.0 if there is none."""
    m = _FLOAT_PREFIX.match(text)
    if m is None:
        logger.debug("no number in %r, using 0.0", text)
        return 0.0
    return float(m.group(0))


def parse_strict(field: str, text: str) -> float:
    """Whole token must be a number in the same grammar ``parse_number`` reads."""
    if _FLOAT_PREFIX.fullmatch(text) is None:
        raise InputParseError(field, text)
    return float(text)


def parse_quote(values, *, strict: bool = False) -> MarketQuote:
    """Turn the five command-line tokens into a :class:`MarketQuote`."""
    if len(values) != EXPECTED_ARGS:
        raise InputArityError(len(values), EXPECTED_ARGS)
    if strict:
        nums = [parse_strict(f, v) for f, v in zip(FIELDS, values)]
    else:
        nums = [parse_number(v) for v in values]
    return MarketQuote(*nums)


def _price(quote: MarketQuote, check: bool):
    opt = quote.to_spec()
    logger.debug("converted inputs: %s", opt)
    if not check:
        return (call_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r),
                put_price(opt.S0, opt.K, opt.T, opt.sigma, opt.r))
    result = price_checked(opt)
    if isinstance(result, NumericDomainAnomaly):
        logger.warning("inputs outside the Black-Scholes domain: %s",
                       "; ".join(result.issues))
    return result.call, result.put


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bscalc", description=BANNER)
    p.add_argument(
        "values", nargs="*", metavar="VALUE",
        help="stock_price strike_price days_to_expiration "
             "volatility_pct risk_free_rate_pct",
    )
    p.add_argument("--strict", action="store_true",
                   help="reject non-numeric values instead of reading them as 0")
    p.add_argument("--check", action="store_true",
                   help="warn when inputs fall outside the model's domain")
    p.add_argument("--log-level", dest="log_level", default=LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


_FLAGS = {"--strict", "--check", "-h", "--help"}


def split_argv(argv):
    """Separate our own flags from the value tokens, keeping value order.

    Values are never handed to argparse, so ``-1e-3``, ``-inf`` or ``-abc``
    reach the parsers instead of being mistaken for options.  Everything
    after ``--`` is a value.
    """
    flags, values = [], []
    tokens = iter(argv)
    for tok in tokens:
        if tok == "--":
            values.extend(tokens)
            break
        if tok in _FLAGS or tok.startswith("--log-level="):
            flags.append(tok)
        elif tok == "--log-level":
            flags.append(tok)
            flags.extend(itertools.islice(tokens, 1))
        else:
            values.append(tok)
    return flags, values


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    flags, values = split_argv(argv)
    args = build_parser().parse_args(flags)
    args.values = values
    setup_logging(args.log_level)

    print(BANNER)
    try:
        quote = parse_quote(args.values, strict=args.strict)
    except InputArityError as e:
        logger.debug("%s", e)
        print(USAGE, file=sys.stderr)
        return 1
    except InputParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logger.info("pricing %s", quote)

    call, put = _price(quote, args.check)
    print(format_report(quote, call, put))
    return 0


if __name__ == "__main__":
    sys.exit(main())

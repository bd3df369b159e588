# bscalc/config.py

# Unit conversion
DAYS_PER_YEAR = 365.0
PERCENT = 100.0

# Command line
EXPECTED_ARGS = 5
PRICE_DECIMALS = 2

BANNER = "Options pricing calculator based on the Black-Scholes Model."
USAGE = (
    "Error: Input [Stock Price ($)] [Strike Price ($)] "
    "[Days to Expiration (days)] [Volatility (%)] "
    "[Risk-Free Rate of Interest (%)]"
)

# Logging config
LOG_LEVEL = "WARNING"

# Relative tolerance for the put-call parity check
PARITY_TOLERANCE = 1e-9

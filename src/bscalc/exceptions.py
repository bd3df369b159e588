# bscalc/exceptions.py

from .config import EXPECTED_ARGS


class PricingError(Exception):
    """Base class for calculator errors."""

    pass


class InputArityError(PricingError):
    """Raised when the driver does not receive exactly five input values."""

    def __init__(self, received: int, expected: int = EXPECTED_ARGS):
        self.received = received
        self.expected = expected
        super().__init__(f"Expected {expected} input values, got {received}.")


class InputParseError(PricingError):
    """Raised in strict mode when an input value is not a number."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Could not parse {field} from {text!r}.")

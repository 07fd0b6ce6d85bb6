"""Roman numeral parsing, rendering and addition."""

from .converter import (
    NumeralConverter,
    format_subtractive,
    parse,
    render,
    sum_numerals,
    validate_composition,
)
from .utils import (
    ConfigurationError,
    InvalidComposition,
    InvalidNumeral,
    InvalidSymbol,
    OutOfRange,
    RomanCalcError,
)
from .verify import verify_round_trip

__version__ = "0.1.0"

__all__ = [
    "NumeralConverter",
    "parse",
    "render",
    "sum_numerals",
    "validate_composition",
    "format_subtractive",
    "verify_round_trip",
    "RomanCalcError",
    "InvalidNumeral",
    "InvalidSymbol",
    "InvalidComposition",
    "OutOfRange",
    "ConfigurationError",
]

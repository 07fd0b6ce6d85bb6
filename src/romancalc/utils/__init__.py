"""
Utility modules for the Roman numeral calculator.

This package contains:
- exceptions: Custom exception classes
- constants: Symbol tables and range limits
- config: Configuration management
"""

# Exceptions
from .exceptions import (
    ConfigurationError,
    InvalidComposition,
    InvalidNumeral,
    InvalidSymbol,
    OutOfRange,
    RomanCalcError,
)

# Constants
from .constants import (
    ADDITIVE_RUNS,
    MAX_ROMAN_NUMERAL,
    MIN_ROMAN_NUMERAL,
    ROMAN_NUMERAL_MAP,
    SYMBOL_TABLE,
)

# Configuration
from .config import Config, load_config

__all__ = [
    # Exceptions
    "RomanCalcError",
    "InvalidNumeral",
    "InvalidSymbol",
    "InvalidComposition",
    "OutOfRange",
    "ConfigurationError",
    # Constants
    "MIN_ROMAN_NUMERAL",
    "MAX_ROMAN_NUMERAL",
    "SYMBOL_TABLE",
    "ROMAN_NUMERAL_MAP",
    "ADDITIVE_RUNS",
    # Configuration
    "Config",
    "load_config",
]

"""Constants used throughout the Roman numeral calculator."""

from types import MappingProxyType

# Roman numeral conversion limits
MIN_ROMAN_NUMERAL = 1
MAX_ROMAN_NUMERAL = 3999

# Symbol table, read-only
SYMBOL_TABLE = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

# Roman numeral mapping (from largest to smallest for greedy algorithm)
ROMAN_NUMERAL_MAP = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Plain symbols only, largest first
ADDITIVE_NUMERAL_MAP = tuple(
    sorted(((value, symbol) for symbol, value in SYMBOL_TABLE.items()), reverse=True)
)

# Additive runs and their subtractive forms, in the order they must be applied
ADDITIVE_RUNS = (
    ("DCCCC", "CM"),
    ("CCCC", "CD"),
    ("LXXXX", "XC"),
    ("XXXX", "XL"),
    ("VIIII", "IX"),
    ("IIII", "IV"),
)

# Symbols that may appear at most three times in a row, and those that may not repeat
REPEATABLE_SYMBOLS = ("I", "X", "C")
SINGLE_SYMBOLS = ("V", "L", "D")

# Lesser-before-greater pairs that are not legal subtractions
ILLEGAL_SUBTRACTIVE_PAIRS = (
    "IL", "IC", "ID", "IM",
    "VX", "VL", "VC", "VD", "VM",
    "XD", "XM",
    "LC", "LD", "LM",
    "DM",
)

FORBIDDEN_PATTERN = "|".join(
    [f"{symbol}{{4,}}" for symbol in REPEATABLE_SYMBOLS]
    + [f"{symbol}{{2,}}" for symbol in SINGLE_SYMBOLS]
    + list(ILLEGAL_SUBTRACTIVE_PAIRS)
)

# Log levels accepted in the configuration file
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Settings used when no config.json is available
DEFAULT_CONFIG = MappingProxyType(
    {
        "log_level": "INFO",
        "max_workers": 4,
        "case_insensitive": False,
    }
)

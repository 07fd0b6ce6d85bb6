"""Custom exceptions for the Roman numeral calculator."""

from typing import Any


class RomanCalcError(Exception):
    """Base exception for all romancalc errors."""

    pass


class InvalidNumeral(RomanCalcError, ValueError):
    """Raised when a value cannot be converted to or from a Roman numeral."""

    pass


class InvalidSymbol(InvalidNumeral):
    """Raised when a numeral contains a character outside the symbol table."""

    def __init__(self, symbol: str, numeral: str):
        self.symbol = symbol
        self.numeral = numeral
        super().__init__(f"'{symbol}' is not a Roman numeral symbol (in '{numeral}')")


class InvalidComposition(InvalidNumeral):
    """Raised when a numeral breaks the repetition or subtractive-pair rules."""

    def __init__(self, numeral: str):
        self.numeral = numeral
        super().__init__(f"'{numeral}' is not a valid Roman numeral composition")


class OutOfRange(InvalidNumeral):
    """Raised when a value falls outside the representable range."""

    def __init__(self, value: Any, minimum: int, maximum: int):
        self.value = value
        super().__init__(f"{value} is outside the supported range {minimum}-{maximum}")


class ConfigurationError(RomanCalcError):
    """Raised when configuration is invalid or cannot be loaded."""

    pass

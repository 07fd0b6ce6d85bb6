"""Conversion between Roman numerals and integers."""

import logging
import re

from .utils import (
    ADDITIVE_RUNS,
    MAX_ROMAN_NUMERAL,
    MIN_ROMAN_NUMERAL,
    ROMAN_NUMERAL_MAP,
    SYMBOL_TABLE,
    InvalidComposition,
    InvalidNumeral,
    InvalidSymbol,
    OutOfRange,
)
from .utils.constants import ADDITIVE_NUMERAL_MAP, FORBIDDEN_PATTERN

logger = logging.getLogger(__name__)

_FORBIDDEN_RE = re.compile(FORBIDDEN_PATTERN)


class NumeralConverter:
    """
    Converts between Roman numerals and integers.

    Instances hold no mutable state, so a single converter can be shared
    between threads.

    Features:
    - Strict parsing with typed errors for unknown symbols and bad compositions
    - Table driven rendering in subtractive notation
    - Addition of two numerals
    """

    def __init__(self, case_insensitive: bool = False):
        """
        Initializes the converter.

        Args:
            case_insensitive: Accept lower-case ASCII numerals such as 'xiv'
        """
        self.case_insensitive = case_insensitive

    def parse(self, numeral: str) -> int:
        """
        Converts a Roman numeral to an integer.

        Args:
            numeral: The Roman numeral to convert (e.g., "XIV")

        Returns:
            The integer value of the numeral

        Raises:
            TypeError: If numeral is not a string
            InvalidSymbol: If numeral contains a character outside I, V, X, L, C, D, M
            InvalidComposition: If numeral breaks the repetition or subtractive rules
            OutOfRange: If the value exceeds the supported maximum

        Examples:
            >>> NumeralConverter().parse("IV")
            4
        """
        if not isinstance(numeral, str):
            raise TypeError(f"expected str, got {type(numeral).__name__}")
        if not numeral:
            raise InvalidNumeral("An empty string is not a Roman numeral")

        original = numeral
        if self.case_insensitive and numeral.isascii():
            numeral = numeral.upper()

        for position, char in enumerate(numeral):
            if char not in SYMBOL_TABLE:
                raise InvalidSymbol(original[position], original)

        if len(numeral) == 1:
            return SYMBOL_TABLE[numeral]

        if not self.validate_composition(numeral):
            raise InvalidComposition(original)

        total = 0
        previous_value = 0
        for char in numeral:
            current_value = SYMBOL_TABLE[char]
            if previous_value == 0 or previous_value >= current_value:
                total += current_value
            else:
                # The previous symbol was already added, so take it back twice
                total += current_value - 2 * previous_value
            previous_value = current_value

        if total > MAX_ROMAN_NUMERAL:
            raise OutOfRange(total, MIN_ROMAN_NUMERAL, MAX_ROMAN_NUMERAL)

        logger.debug(f"Parsed '{numeral}' as {total}")
        return total

    def validate_composition(self, numeral: str) -> bool:
        """
        Checks a numeral against the repetition and subtractive-pair rules.

        Rejects four or more I, X or C in a row, two or more V, L or D in a
        row, and any lesser-before-greater pair other than IV, IX, XL, XC,
        CD and CM.

        Args:
            numeral: The numeral to check

        Returns:
            True if no forbidden pattern occurs anywhere in the numeral
        """
        return _FORBIDDEN_RE.search(numeral) is None

    def render(self, value: int) -> str:
        """
        Converts an integer to a Roman numeral using the subtractive notation.

        Args:
            value: An integer between 1 and 3999 (inclusive)

        Returns:
            The Roman numeral representation as a string

        Raises:
            TypeError: If value is not an integer
            OutOfRange: If value is outside the valid range

        Examples:
            >>> NumeralConverter().render(1994)
            'MCMXCIV'
        """
        remaining = _check_value(value)

        roman_numeral = []
        for token_value, token in ROMAN_NUMERAL_MAP:
            count, remaining = divmod(remaining, token_value)
            roman_numeral.append(token * count)

        result = "".join(roman_numeral)
        logger.debug(f"Rendered {value} as '{result}'")
        return result

    def render_additive(self, value: int) -> str:
        """Converts an integer to a purely additive numeral (4 -> 'IIII')."""
        remaining = _check_value(value)

        roman_numeral = []
        for symbol_value, symbol in ADDITIVE_NUMERAL_MAP:
            count, remaining = divmod(remaining, symbol_value)
            roman_numeral.append(symbol * count)

        return "".join(roman_numeral)

    def format_subtractive(self, raw: str) -> str:
        """
        Rewrites an additive numeral into subtractive notation.

        The longest runs are replaced first, so 'DCCCC' becomes 'CM' rather
        than 'DCD'.

        Args:
            raw: A numeral such as the output of render_additive

        Returns:
            The subtractive form (e.g., 'VIIII' -> 'IX')
        """
        formatted = raw
        for run, replacement in ADDITIVE_RUNS:
            formatted = formatted.replace(run, replacement)
        return formatted

    def sum(self, first: str, second: str) -> str:
        """
        Adds two Roman numerals.

        Args:
            first: The first numeral
            second: The second numeral

        Returns:
            The sum as a Roman numeral

        Raises:
            InvalidNumeral: If either operand is malformed (the first one is
                checked first) or the sum exceeds the supported maximum

        Examples:
            >>> NumeralConverter().sum("XIV", "LX")
            'LXXIV'
        """
        total = self.parse(first) + self.parse(second)
        return self.render(total)


def _check_value(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not MIN_ROMAN_NUMERAL <= value <= MAX_ROMAN_NUMERAL:
        raise OutOfRange(value, MIN_ROMAN_NUMERAL, MAX_ROMAN_NUMERAL)
    return value


_default_converter = NumeralConverter()


def parse(numeral: str) -> int:
    """Converts a Roman numeral to an integer with the default converter."""
    return _default_converter.parse(numeral)


def validate_composition(numeral: str) -> bool:
    """Checks a numeral against the composition rules with the default converter."""
    return _default_converter.validate_composition(numeral)


def render(value: int) -> str:
    """Converts an integer to a Roman numeral with the default converter."""
    return _default_converter.render(value)


def format_subtractive(raw: str) -> str:
    """Rewrites an additive numeral into subtractive notation with the default converter."""
    return _default_converter.format_subtractive(raw)


def sum_numerals(first: str, second: str) -> str:
    """Adds two Roman numerals with the default converter."""
    return _default_converter.sum(first, second)

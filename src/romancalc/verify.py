"""Round-trip self check for the numeral converter."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from logging import getLogger
from typing import List, Optional

from tqdm import tqdm

from .converter import NumeralConverter
from .utils import MAX_ROMAN_NUMERAL, MIN_ROMAN_NUMERAL, InvalidNumeral, OutOfRange

logger = getLogger(__name__)


def check_value(converter: NumeralConverter, value: int) -> Optional[str]:
    """
    Renders a value, parses it back and validates the rendered numeral.

    Args:
        converter: The converter under test
        value: The integer to check

    Returns:
        None if the value survives the round trip, otherwise a description of the failure
    """
    numeral = converter.render(value)
    if not converter.validate_composition(numeral):
        return f"{value}: rendered '{numeral}' fails composition rules"

    parsed = converter.parse(numeral)
    if parsed != value:
        return f"{value}: rendered '{numeral}' parses back as {parsed}"

    return None


def verify_round_trip(
    converter: NumeralConverter,
    start: int = MIN_ROMAN_NUMERAL,
    stop: int = MAX_ROMAN_NUMERAL,
    max_workers: int = 4,
    progress: bool = True,
) -> List[str]:
    """
    Checks every value in [start, stop] concurrently.

    Args:
        converter: The converter under test, shared by all workers
        start: First value to check (inclusive)
        stop: Last value to check (inclusive)
        max_workers: Number of worker threads
        progress: Show a tqdm progress bar

    Returns:
        A list of failure descriptions sorted by value; empty when all values pass

    Raises:
        OutOfRange: If a bound falls outside the supported range
        InvalidNumeral: If start is greater than stop
    """
    for bound in (start, stop):
        if not MIN_ROMAN_NUMERAL <= bound <= MAX_ROMAN_NUMERAL:
            raise OutOfRange(bound, MIN_ROMAN_NUMERAL, MAX_ROMAN_NUMERAL)
    if start > stop:
        raise InvalidNumeral(f"Bounds are reversed: start {start} is greater than stop {stop}")

    values = range(start, stop + 1)
    logger.info(f"Checking {len(values)} value(s) from {start} to {stop}...")
    failures = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_map = {
            executor.submit(check_value, converter, value): value for value in values
        }

        for future in tqdm(
            as_completed(future_map),
            total=len(values),
            desc="Verifying",
            disable=not progress,
        ):
            value = future_map[future]
            try:
                result = future.result()
            except Exception as e:
                result = f"{value}: {type(e).__name__}: {e}"
            if result is not None:
                failures[value] = result

    if failures:
        logger.warning(f"{len(failures)} value(s) failed the round trip:")
        for value in sorted(failures):
            logger.error(f"  - {failures[value]}")
    else:
        logger.info("All values passed the round trip")

    return [failures[value] for value in sorted(failures)]

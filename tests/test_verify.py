import pytest

from romancalc import InvalidNumeral, NumeralConverter, OutOfRange, verify_round_trip
from romancalc.verify import check_value


def test_full_range_passes(converter):
    assert verify_round_trip(converter, max_workers=4, progress=False) == []


def test_check_value(converter):
    assert check_value(converter, 1994) is None


class BrokenConverter(NumeralConverter):
    def render(self, value):
        if value == 4:
            return "IIII"
        if value == 6:
            return "IV"
        return super().render(value)


def test_failures_are_reported_in_order():
    failures = verify_round_trip(BrokenConverter(), 1, 10, max_workers=2, progress=False)
    assert failures == [
        "4: rendered 'IIII' fails composition rules",
        "6: rendered 'IV' parses back as 4",
    ]


@pytest.mark.parametrize("start, stop", [(0, 10), (1, 4000)])
def test_bounds_outside_range(converter, start, stop):
    with pytest.raises(OutOfRange):
        verify_round_trip(converter, start, stop, progress=False)


def test_reversed_bounds(converter):
    with pytest.raises(InvalidNumeral, match="reversed") as excinfo:
        verify_round_trip(converter, 10, 5, progress=False)
    assert not isinstance(excinfo.value, OutOfRange)

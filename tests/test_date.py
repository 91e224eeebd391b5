"""Tests for LocalDate and the CalendarDate protocol."""

from __future__ import annotations

import copy
import datetime
import pickle

import pytest

from dateform import CalendarDate, LocalDate, Month, Weekday
from dateform.errors import ValidationError


class TestLocalDateConstruction:
    """Tests for creating LocalDate values."""

    def test_components(self) -> None:
        """Components round-trip through the day count."""
        d = LocalDate(2024, 3, 15)
        assert d.year == 2024
        assert d.month is Month.MARCH
        assert d.day == 15

    def test_leap_day(self) -> None:
        """29 February exists in leap years."""
        assert LocalDate(2000, 2, 29).day == 29

    def test_non_leap_day_rejected(self) -> None:
        """29 February is invalid in common years."""
        with pytest.raises(ValidationError):
            LocalDate(1900, 2, 29)

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [(10000, 1, 1), (-10000, 1, 1), (2024, 0, 1), (2024, 13, 1), (2024, 4, 31), (2024, 1, 0)],
    )
    def test_out_of_range_rejected(self, year: int, month: int, day: int) -> None:
        """Out-of-range components raise ValidationError."""
        with pytest.raises(ValidationError):
            LocalDate(year, month, day)

    def test_from_days_since_epoch(self) -> None:
        """Day 0 is the Unix epoch."""
        assert LocalDate.from_days_since_epoch(0) == LocalDate(1970, 1, 1)
        assert LocalDate.from_days_since_epoch(-1) == LocalDate(1969, 12, 31)

    def test_days_since_epoch(self) -> None:
        """days_since_epoch matches the standard library."""
        d = LocalDate(2024, 3, 15)
        expected = (datetime.date(2024, 3, 15) - datetime.date(1970, 1, 1)).days
        assert d.days_since_epoch == expected

    def test_from_date(self) -> None:
        """Standard library dates and datetimes convert."""
        assert LocalDate.from_date(datetime.date(2024, 3, 15)) == LocalDate(2024, 3, 15)
        assert LocalDate.from_date(datetime.datetime(2024, 3, 15, 23, 59)) == LocalDate(
            2024, 3, 15
        )

    def test_today(self) -> None:
        """today() agrees with the standard library."""
        before = datetime.date.today()
        today = LocalDate.today()
        after = datetime.date.today()
        assert today in (LocalDate.from_date(before), LocalDate.from_date(after))


class TestLocalDateProperties:
    """Tests for derived properties."""

    def test_year_of_century(self) -> None:
        """year_of_century is year modulo 100."""
        assert LocalDate(2024, 1, 1).year_of_century == 24
        assert LocalDate(1900, 1, 1).year_of_century == 0
        assert LocalDate(-44, 3, 15).year_of_century == 56

    def test_weekday(self) -> None:
        """Weekday of well-known dates."""
        assert LocalDate(1970, 1, 1).weekday is Weekday.THURSDAY
        assert LocalDate(2024, 1, 15).weekday is Weekday.MONDAY
        assert LocalDate(2024, 1, 21).weekday is Weekday.SUNDAY

    def test_weekday_matches_stdlib(self) -> None:
        """Weekday agrees with datetime.date.weekday over a span of days."""
        start = datetime.date(1999, 12, 1)
        for offset in range(0, 800, 7 * 3 + 1):
            py = start + datetime.timedelta(days=offset)
            assert LocalDate.from_date(py).weekday.value == py.weekday()

    def test_bce_date(self) -> None:
        """Negative years are supported."""
        d = LocalDate(-44, 3, 15)
        assert d.year == -44
        assert d.month is Month.MARCH
        assert d.day == 15

    def test_satisfies_protocol(self) -> None:
        """LocalDate is a CalendarDate."""
        assert isinstance(LocalDate(2024, 1, 1), CalendarDate)


class TestLocalDateArithmetic:
    """Tests for day arithmetic and comparison."""

    def test_add_days_across_leap_day(self) -> None:
        """Adding days steps through 29 February."""
        assert LocalDate(2024, 2, 28).add_days(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2024, 2, 28).add_days(2) == LocalDate(2024, 3, 1)

    def test_add_negative_days(self) -> None:
        """Negative offsets move backwards across a year."""
        assert LocalDate(2024, 1, 1).add_days(-1) == LocalDate(2023, 12, 31)

    def test_ordering(self) -> None:
        """Dates order chronologically."""
        assert LocalDate(2024, 1, 1) < LocalDate(2024, 1, 2)
        assert LocalDate(-1, 12, 31) < LocalDate(0, 1, 1)
        assert LocalDate(2024, 1, 2) >= LocalDate(2024, 1, 2)

    def test_hash_and_equality(self) -> None:
        """Equal dates hash equally."""
        assert {LocalDate(2024, 1, 1), LocalDate(2024, 1, 1)} == {LocalDate(2024, 1, 1)}

    def test_immutable(self) -> None:
        """LocalDate rejects attribute assignment."""
        d = LocalDate(2024, 1, 1)
        with pytest.raises(AttributeError):
            d._days = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        """repr shows the constructor call."""
        assert repr(LocalDate(2024, 3, 15)) == "LocalDate(2024, 3, 15)"


class TestLocalDateCopying:
    """Tests for subclassing, copying and pickling LocalDate."""

    def test_add_days_keeps_subclass(self) -> None:
        """add_days returns an instance of the caller's class."""

        class OfficeDate(LocalDate):
            __slots__ = ()

        moved = OfficeDate(2024, 3, 15).add_days(3)
        assert type(moved) is OfficeDate
        assert moved == LocalDate(2024, 3, 18)

    def test_deepcopy(self) -> None:
        """A deep copy is equal."""
        d = LocalDate(-44, 3, 15)
        assert copy.deepcopy(d) == d

    def test_pickle_round_trip(self) -> None:
        """A date survives pickling."""
        d = LocalDate(2024, 2, 29)
        restored = pickle.loads(pickle.dumps(d))
        assert restored == d
        assert restored.weekday is Weekday.THURSDAY

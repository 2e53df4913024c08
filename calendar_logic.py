"""Pure calendar calculations — no UI dependencies.

Grids are Sunday-first: every row runs Sunday..Saturday, and the first and
last rows are completed with days borrowed from the neighbouring months.
"""

from __future__ import annotations

import calendar
from datetime import date
from enum import IntEnum
from typing import NamedTuple

WEEKDAY_NAMES = [
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class InvalidDate(ValueError):
    """Raised when (year, month[, day]) is not a real calendar date."""


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        return WEEKDAY_NAMES[self]


class GridCell(NamedTuple):
    """One visible slot in the 7-column month grid."""

    day: int
    in_current_month: bool


class MonthKey(NamedTuple):
    """A (year, month) pair identifying one displayed month."""

    year: int
    month: int

    @classmethod
    def of(cls, year: int, month: int) -> "MonthKey":
        """Validated constructor: raises InvalidDate instead of wrapping."""
        _check_year(year)
        _check_month(month)
        return cls(year, month)

    @classmethod
    def today(cls) -> "MonthKey":
        today = date.today()
        return cls(today.year, today.month)

    def shift(self, delta: int) -> "MonthKey":
        """Return the key *delta* months away, carrying the year across Dec/Jan."""
        year, month = normalize_month(self.year, self.month + delta)
        return MonthKey.of(year, month)

    def next(self) -> "MonthKey":
        return self.shift(1)

    def prev(self) -> "MonthKey":
        return self.shift(-1)


class MonthView(NamedTuple):
    """Everything the display layer needs to render one month."""

    key: MonthKey
    month_name: str
    year_text: str
    cells: list[GridCell]

    def weeks(self) -> list[list[GridCell]]:
        """Split the cells into Sunday..Saturday rows."""
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]


def _check_year(year: int) -> None:
    if year < 1:
        raise InvalidDate(f"year must be >= 1, got {year}")


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDate(f"month must be in 1..12, got {month}")


# ------------------------------------------------------------------
# Calendar arithmetic
# ------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the Gregorian day count of the given month (28–31)."""
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def weekday_of(year: int, month: int, day: int) -> Weekday:
    """Return the proleptic Gregorian weekday of a date.

    ``calendar`` folds years past ``datetime.MAXYEAR`` into the 400-year cycle.
    """
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidDate(f"{year:04d}-{month:02d} has no day {day}")
    # calendar counts Monday=0
    return Weekday((calendar.weekday(year, month, day) + 1) % 7)


def leading_padding(first_weekday: Weekday) -> int:
    """Days borrowed from the previous month: Sun→0, Mon→1, …, Sat→6."""
    return (first_weekday - Weekday.SUNDAY) % 7


def trailing_padding(last_weekday: Weekday) -> int:
    """Days borrowed from the next month: Sun→6, Mon→5, …, Sat→0."""
    return (Weekday.SATURDAY - last_weekday) % 7


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Fold an out-of-range month into 1..12, adjusting the year.

    ``(2024, 13)`` → ``(2025, 1)``; ``(2024, 0)`` → ``(2023, 12)``.
    """
    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


# ------------------------------------------------------------------
# Grid builder
# ------------------------------------------------------------------

def build_month_grid(year: int, month: int) -> list[GridCell]:
    """Return the ordered cells of a Sunday-first month grid.

    Order is previous-month padding, then days 1..N of the month, then
    next-month padding.  The length is a multiple of 7 between 28 and 42.
    The month is *not* normalized: pass 1..12 or get InvalidDate.
    """
    _check_year(year)
    _check_month(month)

    n_days = days_in_month(year, month)
    lead = leading_padding(weekday_of(year, month, 1))
    trail = trailing_padding(weekday_of(year, month, n_days))

    prev_days = days_in_month(*prev_month(year, month))
    leading = [GridCell(d, False) for d in range(prev_days - lead + 1, prev_days + 1)]
    current = [GridCell(d, True) for d in range(1, n_days + 1)]
    trailing = [GridCell(d, False) for d in range(1, trail + 1)]
    return leading + current + trailing


def month_name(month: int) -> str:
    _check_month(month)
    return MONTH_NAMES[month - 1]


def month_view(key: MonthKey) -> MonthView:
    """Build the grid and the header strings for *key* in one pass."""
    return MonthView(
        key=key,
        month_name=month_name(key.month),
        year_text=str(key.year),
        cells=build_month_grid(key.year, key.month),
    )


def today_message(today: date | None = None) -> str:
    """Return e.g. ``"Today is Thursday"``."""
    today = today or date.today()
    return f"Today is {weekday_of(today.year, today.month, today.day).label}"

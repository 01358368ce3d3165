"""
Calendar date (Date)
====================

A tiny immutable calendar date. Only `today()` looks at the system clock;
everything else (validation, leap years, day arithmetic) is done here with
plain integers, using day ordinals where 0001-01-01 is day 1.

The date is rendered as `YYYY-MM-DD` and `Date.parse` reads that format back,
as well as the `DD/MM/YYYY` style people usually type on the command line.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List
import datetime

from .errors import InvalidDateError

MIN_YEAR = 1
MAX_YEAR = 9999

# Separators accepted by `Date.parse`, tried in this order.
SEPARATORS = (".", "/", "-", " ")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

# days in each month of a common year
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# days before the first of each month in a common year
_DAYS_BEFORE_MONTH: List[int] = [0]
for _n in _DAYS_IN_MONTH[:-1]:
    _DAYS_BEFORE_MONTH.append(_DAYS_BEFORE_MONTH[-1] + _n)
del _n


def is_leap(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    return _DAYS_BEFORE_MONTH[month - 1] + (1 if month > 2 and is_leap(year) else 0)


@dataclass(frozen=True, order=True)
class Date:
    """Immutable calendar date, always valid.

    Field order is (year, month, day) so the generated comparisons sort
    chronologically.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidDateError(f"Invalid year: {self.year} (expected {MIN_YEAR}-{MAX_YEAR})", kind="year")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Invalid month: {self.month} (expected 1-12)", kind="month")
        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidDateError(
                f"Invalid day: {self.day} (month {self.month} of {self.year} has {max_day} days)", kind="day")

    # ---------------- Constructors ----------------
    @classmethod
    def today(cls) -> Date:
        """Current local date from the system clock."""
        d = datetime.date.today()
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_components(cls, year: int, month: int, day: int) -> Date:
        """Build a Date, raising InvalidDateError for impossible dates."""
        return cls(int(year), int(month), int(day))

    @classmethod
    def fromordinal(cls, n: int) -> Date:
        """Inverse of `toordinal`."""
        if not MIN_ORDINAL <= n <= MAX_ORDINAL:
            raise InvalidDateError(f"Date out of range (day ordinal {n})", kind="year")
        # 400 years hold exactly 146097 days, so this lands within one year
        year = n * 400 // 146097 + 1
        while _days_before_year(year) >= n:
            year -= 1
        while _days_before_year(year + 1) < n:
            year += 1
        n -= _days_before_year(year)
        month = 1
        while month < 12 and _days_before_month(year, month + 1) < n:
            month += 1
        return cls(year, month, n - _days_before_month(year, month))

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse user input such as `23/10/2015`, `23.10.2015` or `2015-10-23`.

        The first separator found (see SEPARATORS) splits the text into
        exactly three numbers. A four digit first part means year-month-day,
        anything else is read as day-month-year.
        """
        s = text.strip()
        sep = next((c for c in SEPARATORS if c in s), None)
        if sep is None:
            raise InvalidDateError(f"No date separator found in {text!r}", kind="separator")

        parts = s.split(sep)
        numbers: List[int] = []
        for part in parts:
            if not (part.isascii() and part.isdigit()):
                raise InvalidDateError(f"Not a number: {part!r} in {text!r}", kind="number")
            numbers.append(int(part))
        if len(numbers) != 3:
            raise InvalidDateError(f"Expected 3 date parts, got {len(numbers)} in {text!r}", kind="parts")

        if len(parts[0]) == 4:
            year, month, day = numbers
        else:
            day, month, year = numbers
        return cls.from_components(year, month, day)

    # ---------------- Queries ----------------
    def is_leap_year(self) -> bool:
        return is_leap(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def toordinal(self) -> int:
        return _days_before_year(self.year) + _days_before_month(self.year, self.month) + self.day

    def years_from(self, other: Date) -> int:
        """Number of full years between two dates (order does not matter)."""
        left, right = min(self, other), max(self, other)
        diff = right.year - left.year
        if (right.month, right.day) < (left.month, left.day):
            diff -= 1
        return diff

    # ---------------- Arithmetic ----------------
    def add_days(self, n: int) -> Date:
        """Return a new Date `n` days later (earlier if negative)."""
        return Date.fromordinal(self.toordinal() + int(n))

    # ---------------- Rendering ----------------
    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def long_format(self) -> str:
        """Human friendly form, e.g. `1 February 2012`."""
        return f"{self.day} {self.month_name()} {self.year}"

    def __str__(self) -> str:
        return self.isoformat()


MIN_ORDINAL = 1
MAX_ORDINAL = _days_before_year(MAX_YEAR) + _days_before_month(MAX_YEAR, 12) + 31

MIN = Date(MIN_YEAR, 1, 1)
MAX = Date(MAX_YEAR, 12, 31)

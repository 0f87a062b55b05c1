"""
Birth date reconstruction from the date digits of a personnummer.

Coordination numbers (samordningsnummer) add 60 to the day.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

COORDINATION_OFFSET = 60


@dataclass(frozen=True)
class ParsedDate:
    """Outcome of a date reconstruction."""

    valid: bool
    date: Optional[datetime] = None  # midnight UTC


def calendar_day(day: int) -> int:
    """Map a coordination day (61-91) to the calendar day."""
    if day > COORDINATION_OFFSET:
        return day - COORDINATION_OFFSET
    return day


def infer_century(year: int, month: int, day: int, today: Optional[date] = None) -> int:
    """
    Pick the most recent century for a two digit year.

    The resulting birth date is never after `today`. The separator plays no
    part here.
    """
    today = today or datetime.now(timezone.utc).date()
    full_year = today.year - ((today.year - year) % 100)
    if full_year == today.year and (month, calendar_day(day)) > (today.month, today.day):
        full_year -= 100
    return full_year // 100


def parse_date(
    year: int,
    month: int,
    day: int,
    separator: Optional[str] = None,
    century: Optional[int] = None,
    today: Optional[date] = None,
) -> ParsedDate:
    """
    Build the birth date for the given digits.

    Args:
        year: Two digit year
        month: Month, 1-12
        day: Day of month, or day + 60 for coordination numbers
        separator: Raw separator from the input. Not used: century
            inference is the same for '-' and '+', and the caller applies
            the century shift for '+'
        century: Two digit century, inferred when missing
        today: Reference date for century inference

    Returns:
        ParsedDate, invalid when the digits are not a real calendar date
    """
    if century is None:
        century = infer_century(year, month, day, today)

    try:
        birth = datetime(
            century * 100 + year, month, calendar_day(day), tzinfo=timezone.utc
        )
    except ValueError:
        return ParsedDate(valid=False)

    return ParsedDate(valid=True, date=birth)

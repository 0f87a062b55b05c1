"""
Swedish personnummer (personal identity number) validation and parsing.

Format: [CC]YYMMDD[-+]NNNC
- Optional 2 digit century, then year, month and day
- Optional separator: '-' under 100 years old, '+' at 100 or older
- 2 digit serial (birthplace county before 1990)
- 1 gender digit (odd for male, even for female)
- 1 Luhn checksum digit over YYMMDD + serial + gender

Coordination numbers (samordningsnummer) add 60 to the day.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from pnrparse.birthplace import BIRTHPLACE_CUTOFF_YEAR, get_birthplace
from pnrparse.dates import COORDINATION_OFFSET, infer_century, parse_date
from pnrparse.errors import InvalidPersonnummerError
from pnrparse.luhn import luhn_checksum, verify_checksum
from pnrparse.schemas import (
    ErrorKind,
    Gender,
    NumberType,
    ParseOptions,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from pnrparse.separator import CENTENARIAN, resolve_separator

logger = logging.getLogger(__name__)

PERSONNUMMER_PATTERN = re.compile(
    r"(?P<century>[0-9]{2})?"
    r"(?P<year>[0-9]{2})"
    r"(?P<month>[0-9]{2})"
    r"(?P<day>[0-9]{2})"
    r"(?P<separator>[-+])?"
    r"(?P<serial>[0-9]{2})"
    r"(?P<gender>[0-9])"
    r"(?P<checksum>[0-9])"
)

# 365.25 days, the mean length of a year
MEAN_YEAR = timedelta(milliseconds=31_557_600_000)

BIRTHPLACE_CUTOFF = datetime(BIRTHPLACE_CUTOFF_YEAR, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class PersonnummerParts:
    """Raw digit groups of a personnummer."""

    century: Optional[str]
    year: str
    month: str
    day: str
    separator: Optional[str]
    serial: str
    gender: str
    checksum: str

    @property
    def check_digits(self) -> str:
        """The 9 digits covered by the Luhn checksum."""
        return self.year + self.month + self.day + self.serial + self.gender

    @property
    def tail(self) -> str:
        """Serial, gender and checksum digits."""
        return self.serial + self.gender + self.checksum


def match_format(value: str) -> Optional[PersonnummerParts]:
    """Split a personnummer into its digit groups, None if it does not match."""
    match = PERSONNUMMER_PATTERN.fullmatch(value)
    if not match:
        return None
    return PersonnummerParts(**match.groupdict())


def coerce_input(value: Any) -> Optional[str]:
    """
    Turn a string or number into the string that gets parsed.

    Returns None for other types. Raises ValueError for integers too large
    to convert to a string.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return None


def compute_age(birth: datetime, now: datetime) -> int:
    """
    Age in mean years of 365.25 days, truncated toward zero.

    This is not a calendar age: around birthdays it can differ by one.
    """
    return int((now - birth) / MEAN_YEAR)


def normalise(
    parts: PersonnummerParts, birth: datetime, separator: str, template: str
) -> str:
    """Render a personnummer into a YYYY/YY/MM/DD/-/+/NNNN template."""
    year = f"{birth.year:04d}"
    normalised = template.replace("YYYY", year, 1)
    normalised = normalised.replace("YY", year[2:], 1)
    normalised = normalised.replace("MM", parts.month, 1)
    normalised = normalised.replace("DD", parts.day, 1)
    normalised = normalised.replace("-", separator, 1)
    normalised = normalised.replace("+", separator, 1)
    normalised = normalised.replace("NNNN", parts.tail, 1)
    return normalised


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _fail(reason: ErrorKind, value: Any) -> ValidationFailure:
    # Never log the number itself
    logger.debug("Rejected personnummer: %s", reason.value)
    return ValidationFailure(reason=reason, input=value)


def parse(
    value: Any,
    options: Optional[ParseOptions] = None,
    *,
    now: Optional[datetime] = None,
) -> ValidationResult:
    """
    Validate and parse a Swedish personnummer or coordination number.

    Accepts formats:
    - YYMMDDNNNN
    - YYMMDD-NNNN / YYMMDD+NNNN
    - YYYYMMDDNNNN
    - YYYYMMDD-NNNN / YYYYMMDD+NNNN

    Without a century, the most recent century that does not put the birth
    date in the future is used, one century earlier with a '+' separator.

    Args:
        value: String or integer to parse
        options: Separator handling and normalisation template
        now: Reference time for age and century, defaults to current UTC time

    Returns:
        ValidationSuccess with derived metadata, or ValidationFailure with
        the reason. Never raises for bad input.
    """
    options = options or ParseOptions()
    now = _utc_now(now)

    try:
        text = coerce_input(value)
    except ValueError:
        # Exceeds the int string conversion limit, far past 12 digits
        return _fail(ErrorKind.FORMAT, value)
    if text is None:
        return _fail(ErrorKind.INPUT_TYPE, value)

    parts = match_format(text)
    if parts is None:
        return _fail(ErrorKind.FORMAT, text)

    year, month, day = int(parts.year), int(parts.month), int(parts.day)
    century = int(parts.century) if parts.century else None
    if century is None and parts.separator == CENTENARIAN:
        century = infer_century(year, month, day, now.date()) - 1

    parsed = parse_date(year, month, day, parts.separator, century, now.date())
    if not parsed.valid:
        return _fail(ErrorKind.INCORRECT_DATE, text)
    birth = parsed.date

    if not verify_checksum(parts.check_digits, int(parts.checksum)):
        return _fail(ErrorKind.CHECKSUM, text)

    age = compute_age(birth, now)

    decision = resolve_separator(
        age,
        parts.separator,
        century_explicit=parts.century is not None,
        forgiving=options.forgiving,
        strict=options.strict,
    )
    if decision.error:
        return _fail(decision.error, text)

    if options.strict and birth > now:
        return _fail(ErrorKind.BACK_TO_THE_FUTURE, text)

    gender = Gender.FEMALE if int(parts.gender) % 2 == 0 else Gender.MALE

    birthplace = None
    if birth < BIRTHPLACE_CUTOFF:
        birthplace = get_birthplace(int(parts.serial))

    number_type = NumberType.PERSONAL_NUMBER
    if day > COORDINATION_OFFSET:
        number_type = NumberType.COORDINATION_NUMBER

    return ValidationSuccess(
        type=number_type,
        input=text,
        normalised=normalise(parts, birth, decision.separator, options.normalise_format),
        date=birth.date(),
        age=age,
        gender=gender,
        birthplace=birthplace,
    )


def is_valid(
    value: Any, options: Optional[ParseOptions] = None, *, now: Optional[datetime] = None
) -> bool:
    """Check if a value is a valid personnummer or coordination number."""
    return parse(value, options, now=now).valid


def require_personnummer(
    value: Any, options: Optional[ParseOptions] = None, *, now: Optional[datetime] = None
) -> ValidationSuccess:
    """
    Parse a personnummer, raising instead of returning a failure.

    Raises:
        InvalidPersonnummerError: If the value is rejected
    """
    result = parse(value, options, now=now)
    if not result.valid:
        raise InvalidPersonnummerError(result.reason, result.input)
    return result


def format_personnummer(
    value: Any,
    template: str = "YYYYMMDD-NNNN",
    options: Optional[ParseOptions] = None,
    *,
    now: Optional[datetime] = None,
) -> Optional[str]:
    """
    Format personnummer with a normalisation template.

    Args:
        value: The personnummer to format
        template: Template using YYYY, YY, MM, DD, -/+ and NNNN
        options: Other parse options, the template replaces normalise_format

    Returns:
        Formatted personnummer or None if invalid
    """
    options = (options or ParseOptions()).model_copy(
        update={"normalise_format": template}
    )
    result = parse(value, options, now=now)
    if not result.valid:
        return None
    return result.normalised


def generate_personnummer(
    birth_date: date,
    gender: str = "M",
    birth_number: int = 1,
    coordination: bool = False,
    separator: str = "",
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        gender: 'M' for male, 'F' for female
        birth_number: Serial and gender digit (1-999)
        coordination: Add 60 to the day
        separator: Placed between date and birth number

    Returns:
        A valid personnummer in YYYYMMDD[sep]NNNN format
    """
    day = birth_date.day + (COORDINATION_OFFSET if coordination else 0)
    date_part = f"{birth_date.year:04d}{birth_date.month:02d}{day:02d}"

    # Adjust birth number for gender (odd for male, even for female)
    if gender == "M" and birth_number % 2 == 0:
        birth_number += 1
    elif gender == "F" and birth_number % 2 == 1:
        birth_number = birth_number + 1 if birth_number < 999 else birth_number - 1

    birth_str = f"{birth_number:03d}"
    checksum = luhn_checksum(date_part[2:] + birth_str)

    return f"{date_part}{separator}{birth_str}{checksum}"

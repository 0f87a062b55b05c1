"""
pnrparse - Swedish personnummer and coordination number validation.

Parses a personnummer from a string or integer, verifies its date and Luhn
checksum, resolves the century from the '-'/'+' separator convention and
derives birth date, age, gender, birthplace county and number type.
"""

__version__ = "0.1.0"

from pnrparse.birthplace import BIRTHPLACE_RANGES, get_birthplace
from pnrparse.errors import InvalidPersonnummerError
from pnrparse.luhn import luhn_checksum, verify_checksum
from pnrparse.personnummer import (
    PersonnummerParts,
    format_personnummer,
    generate_personnummer,
    is_valid,
    match_format,
    parse,
    require_personnummer,
)
from pnrparse.schemas import (
    ErrorKind,
    Gender,
    NumberType,
    ParseOptions,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from pnrparse.separator import SeparatorDecision, resolve_separator

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "is_valid",
    "require_personnummer",
    "format_personnummer",
    "generate_personnummer",
    "match_format",
    "PersonnummerParts",
    # Results
    "ErrorKind",
    "Gender",
    "NumberType",
    "ParseOptions",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "InvalidPersonnummerError",
    # Building blocks
    "luhn_checksum",
    "verify_checksum",
    "get_birthplace",
    "BIRTHPLACE_RANGES",
    "resolve_separator",
    "SeparatorDecision",
]

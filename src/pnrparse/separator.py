"""
Century separator policy.

A '-' marks a person younger than 100, a '+' a person aged 100 or more.
"""

from dataclasses import dataclass
from typing import Optional

from pnrparse.schemas import ErrorKind

CENTENARIAN_AGE = 100

UNDER_100 = "-"
CENTENARIAN = "+"


@dataclass(frozen=True)
class SeparatorDecision:
    """Final separator and, in strict mode, a contradiction error."""

    separator: str
    error: Optional[ErrorKind] = None


def separator_for_age(age: int) -> str:
    """Separator matching the age bracket."""
    return CENTENARIAN if age >= CENTENARIAN_AGE else UNDER_100


def contradicts_age(age: int, separator: str) -> bool:
    """Check if the separator disagrees with the age bracket."""
    return separator != separator_for_age(age)


def resolve_separator(
    age: int,
    separator: Optional[str],
    century_explicit: bool,
    forgiving: bool,
    strict: bool,
) -> SeparatorDecision:
    """
    Decide the separator used for normalisation.

    | separator | forgiving | strict | century | result                       |
    |-----------|-----------|--------|---------|------------------------------|
    | missing   | any       | any    | any     | separator for the age        |
    | mismatch  | yes       | any    | any     | corrected to the age         |
    | mismatch  | no        | no     | any     | kept as given                |
    | mismatch  | no        | yes    | any     | AgeSeparatorContradiction    |

    Forgiving corrections happen first. The strict check is skipped when the
    century was given and forgiving mode is on.
    """
    if not separator:
        separator = separator_for_age(age)

    if forgiving and contradicts_age(age, separator):
        separator = separator_for_age(age)

    if strict and not (century_explicit and forgiving) and contradicts_age(age, separator):
        return SeparatorDecision(separator, ErrorKind.AGE_SEPARATOR_CONTRADICTION)

    return SeparatorDecision(separator)

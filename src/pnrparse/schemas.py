"""
Result and option schemas for personnummer parsing.

Results are immutable value objects built fresh for every call.
"""

from datetime import date
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorKind(str, Enum):
    """Reasons a personnummer is rejected."""

    INPUT_TYPE = "InputType"
    FORMAT = "FormatError"
    INCORRECT_DATE = "IncorrectDate"
    CHECKSUM = "ChecksumError"
    AGE_SEPARATOR_CONTRADICTION = "AgeSeparatorContradiction"
    BACK_TO_THE_FUTURE = "BackToTheFuture"


class Gender(str, Enum):
    """Gender encoded by the second to last digit."""

    MALE = "Male"
    FEMALE = "Female"


class NumberType(str, Enum):
    """Kind of identity number."""

    PERSONAL_NUMBER = "PersonalNumber"
    COORDINATION_NUMBER = "CoordinationNumber"  # samordningsnummer, day + 60


DEFAULT_NORMALISE_FORMAT = "YYYYMMDDNNNN"


class ParseOptions(BaseModel):
    """Options controlling separator handling and normalisation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    forgiving: bool = Field(
        default=False,
        description="Correct a separator that contradicts the age instead of trusting it",
    )
    strict: bool = Field(
        default=False,
        description="Reject age/separator contradictions and future birth dates",
    )
    normalise_format: str = Field(
        default=DEFAULT_NORMALISE_FORMAT,
        alias="normaliseFormat",
        description="Template using YYYY, YY, MM, DD, -/+ and NNNN placeholders",
    )

    @field_validator("normalise_format")
    @classmethod
    def validate_normalise_format(cls, v: str) -> str:
        if not v:
            raise ValueError("normalise_format must not be empty")
        return v


class ValidationFailure(BaseModel):
    """A rejected input and the stage that rejected it."""

    model_config = ConfigDict(frozen=True)

    valid: Literal[False] = False
    reason: ErrorKind
    input: Any


class ValidationSuccess(BaseModel):
    """A valid personnummer with its derived metadata."""

    model_config = ConfigDict(frozen=True)

    valid: Literal[True] = True
    type: NumberType
    input: str
    normalised: str
    date: date
    age: int  # mean-year age, see personnummer.compute_age
    gender: Gender
    birthplace: Optional[str] = None


ValidationResult = Union[ValidationSuccess, ValidationFailure]

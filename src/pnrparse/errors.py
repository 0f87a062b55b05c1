"""Exceptions for callers that prefer raising over result objects."""

from typing import Any

from pnrparse.schemas import ErrorKind


class InvalidPersonnummerError(ValueError):
    """Raised by require_personnummer when an input is rejected."""

    def __init__(self, reason: ErrorKind, value: Any):
        self.reason = reason
        self.input = value
        super().__init__(f"Invalid personnummer: {reason.value}")

from __future__ import annotations

"""Structured exception hierarchy for the OAI-PMH domain model.

Every value object in this package fails in exactly one way: it refuses to be
constructed and raises :class:`InvalidArgumentError`. The error carries a
machine-readable ``rule`` (also exposed as ``code``) naming which check failed,
and a human-readable ``message`` for logging. Collaborators such as the HTTP
layer catch this error and translate it into an OAI-PMH ``badArgument``
response; nothing in the domain layer recovers from it.

``InvalidArgumentError`` also subclasses :class:`ValueError`, so callers that
only care about "bad input" can keep using the builtin.
"""

from enum import Enum
from typing import Final

__all__: Final = [
    "OaiPmhError",
    "ValidationError",
    "ValidationRule",
    "InvalidArgumentError",
]


class OaiPmhError(Exception):
    """Base exception class for all custom errors in this package.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validation errors (typically map to the badArgument protocol error)
# ---------------------------------------------------------------------------


class ValidationError(OaiPmhError):
    """Raised for general data validation failures."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class ValidationRule(str, Enum):
    """The rule a rejected value violated."""

    EMPTY_VALUE = "empty_value"
    INVALID_FORMAT = "invalid_format"
    INVALID_DATE = "invalid_date"
    DISALLOWED_VALUE = "disallowed_value"
    INVALID_SCHEME = "invalid_scheme"
    DUPLICATE_VALUE = "duplicate_value"
    MISSING_VALUE = "missing_value"
    CROSS_FIELD_MISMATCH = "cross_field_mismatch"


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a value object rejects its constructor arguments.

    This is the single failure signal of the domain model. The ``rule``
    attribute tells the caller which check failed, so it can be inspected
    without parsing the message.

    Attributes:
        message (str): A descriptive error message.
        rule (ValidationRule): The violated rule.
        code (str): ``rule.value``.
    """

    def __init__(self, message: str, rule: ValidationRule = ValidationRule.INVALID_FORMAT):
        self.rule = rule
        super().__init__(message, rule.value)

"""Datestamp granularity of an OAI-PMH repository.

A repository declares the finest harvesting granularity it supports, and every
datestamp it exposes is written at that granularity. OAI-PMH 2.0 allows
exactly two values:

- ``YYYY-MM-DD``: day precision
- ``YYYY-MM-DDThh:mm:ssZ``: second precision, UTC

Each member also knows how a literal at its precision looks (``pattern``) and
how to parse and render it (``strptime_format``); :class:`UTCdatetime` relies
on these instead of hard-coding the formats.
"""

import re
from enum import Enum

from src.core.exceptions import InvalidArgumentError, ValidationRule


class Granularity(str, Enum):
    """Supported datestamp granularities."""

    DATE = "YYYY-MM-DD"
    DATE_TIME_SECOND = "YYYY-MM-DDThh:mm:ssZ"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid granularity literals."""
        return [granularity.value for granularity in cls]

    @classmethod
    def from_string(cls, raw: str) -> "Granularity":
        """Parse a granularity literal.

        Raises:
            InvalidArgumentError: If *raw* is not one of the two literals.
        """
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid granularity: {raw}. Allowed values are: {', '.join(cls.values())}",
                ValidationRule.DISALLOWED_VALUE,
            ) from None

    @property
    def pattern(self) -> re.Pattern:
        """Regex a datestamp literal must fully match at this granularity."""
        return _PATTERNS[self]

    @property
    def strptime_format(self) -> str:
        """``datetime.strptime``/``strftime`` format for this granularity."""
        return _FORMATS[self]

    def __str__(self) -> str:
        return f"Granularity(granularity: {self.value})"


_PATTERNS = {
    Granularity.DATE: re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"),
    Granularity.DATE_TIME_SECOND: re.compile(
        r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z"
    ),
}

_FORMATS = {
    Granularity.DATE: "%Y-%m-%d",
    Granularity.DATE_TIME_SECOND: "%Y-%m-%dT%H:%M:%SZ",
}

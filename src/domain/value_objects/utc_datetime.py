"""UTC datestamp value object bound to a granularity.

OAI-PMH datestamps are ISO 8601 UTC values written at the repository's
declared granularity. A :class:`UTCdatetime` is the pair (literal, granularity):
the literal is only valid relative to the granularity it was declared with,
so the same characters may be valid for one granularity and invalid for the
other.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.granularity import Granularity


@dataclass(frozen=True)
class UTCdatetime:
    """An immutable datestamp at a declared granularity.

    Validation order:
        1. the literal fully matches the granularity's pattern
        2. the literal is a real calendar date/time (no month 13, no Feb 30)

    Two datestamps are equal only when both the granularity and the literal
    match; ``2024-06-10`` at day granularity never equals
    ``2024-06-10T00:00:00Z`` at second granularity.

    Attributes:
        date_time: The datestamp literal, e.g. ``2024-06-10`` or
            ``2024-06-10T12:00:00Z``.
        granularity: The granularity the literal is written at.
        moment: The parsed, timezone-aware UTC ``datetime`` (midnight for
            day granularity).
    """

    date_time: str
    granularity: Granularity
    moment: datetime = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.date_time, str):
            raise TypeError("UTCdatetime value must be a string.")
        if not isinstance(self.granularity, Granularity):
            raise TypeError("UTCdatetime granularity must be a Granularity.")

        if self.granularity.pattern.fullmatch(self.date_time) is None:
            raise InvalidArgumentError(
                f'DateTime "{self.date_time}" does not match granularity "{self.granularity.value}".',
                ValidationRule.INVALID_FORMAT,
            )

        try:
            parsed = datetime.strptime(self.date_time, self.granularity.strptime_format)
        except ValueError:
            raise InvalidArgumentError(
                f'DateTime "{self.date_time}" is not a valid calendar date/time.',
                ValidationRule.INVALID_DATE,
            ) from None

        object.__setattr__(self, "moment", parsed.replace(tzinfo=timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime, granularity: Granularity) -> "UTCdatetime":
        """Render an aware ``datetime`` at *granularity*, truncating finer parts.

        Raises:
            InvalidArgumentError: If *value* is naive.
        """
        if value.tzinfo is None:
            raise InvalidArgumentError(
                "Datestamp source must be timezone-aware.", ValidationRule.INVALID_DATE
            )
        utc = value.astimezone(timezone.utc)
        if granularity is Granularity.DATE:
            literal = utc.date().isoformat()
        else:
            literal = utc.replace(microsecond=0, tzinfo=None).isoformat() + "Z"
        return cls(literal, granularity)

    def __str__(self) -> str:
        return f"UTCdatetime(dateTime: {self.date_time}, granularity: {str(self.granularity)})"

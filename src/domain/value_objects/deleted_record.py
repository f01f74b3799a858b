"""Deleted-record policy declared in the Identify response."""

from enum import Enum

from src.core.exceptions import InvalidArgumentError, ValidationRule


class DeletedRecord(str, Enum):
    """How a repository keeps track of deleted records.

    - ``no``: deletions are not tracked
    - ``transient``: deletions are tracked without a persistence guarantee
    - ``persistent``: deletions are tracked with no time limit
    """

    NO = "no"
    TRANSIENT = "transient"
    PERSISTENT = "persistent"

    @classmethod
    def values(cls) -> list[str]:
        return [policy.value for policy in cls]

    @classmethod
    def from_string(cls, raw: str) -> "DeletedRecord":
        """Parse a deletedRecord literal.

        Raises:
            InvalidArgumentError: If *raw* is not a known policy.
        """
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid deletedRecord value: {raw}. Allowed values are: {', '.join(cls.values())}",
                ValidationRule.DISALLOWED_VALUE,
            ) from None

    @property
    def tracks_deletions(self) -> bool:
        return self is not DeletedRecord.NO

    def __str__(self) -> str:
        return f"DeletedRecord(value: {self.value})"

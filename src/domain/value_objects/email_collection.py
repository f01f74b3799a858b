"""Administrator email collection for the Identify response.

OAI-PMH requires at least one adminEmail. The collection keeps the addresses
in the order given (that is the order they are serialized in) but compares
as a set: two collections holding the same addresses are equal whatever
their order.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.email import Email


@dataclass(frozen=True, init=False, eq=False)
class EmailCollection:
    """A non-empty, duplicate-free, immutable collection of :class:`Email`.

    Usage:
        EmailCollection(Email("admin@example.org"), Email("help@example.org"))
    """

    emails: Tuple[Email, ...]

    def __init__(self, *emails: Email):
        if not emails:
            raise InvalidArgumentError("EmailCollection cannot be empty.", ValidationRule.EMPTY_VALUE)

        accepted: List[Email] = []
        for email in emails:
            if not isinstance(email, Email):
                raise TypeError("EmailCollection accepts only Email instances.")
            if email in accepted:
                raise InvalidArgumentError(
                    f"EmailCollection cannot contain duplicate emails: {email.value}",
                    ValidationRule.DUPLICATE_VALUE,
                )
            accepted.append(email)

        object.__setattr__(self, "emails", tuple(accepted))

    def _sorted_values(self) -> Tuple[str, ...]:
        return tuple(sorted(email.value for email in self.emails))

    def __iter__(self) -> Iterator[Email]:
        return iter(self.emails)

    def __len__(self) -> int:
        return len(self.emails)

    def __contains__(self, email: object) -> bool:
        return email in self.emails

    def to_list(self) -> List[Email]:
        return list(self.emails)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailCollection):
            return NotImplemented
        return self._sorted_values() == other._sorted_values()

    def __hash__(self) -> int:
        return hash(self._sorted_values())

    def __str__(self) -> str:
        return f"EmailCollection(emails: {', '.join(str(email) for email in self.emails)})"

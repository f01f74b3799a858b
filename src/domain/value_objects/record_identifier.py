"""Record identifier value object.

A unique identifier (a URI, typically of the ``oai:`` scheme) for an item in
the repository. Only blankness is rejected here; identifier schemes are a
repository policy.
"""

from dataclasses import dataclass

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class RecordIdentifier:
    """An immutable, non-blank item identifier.

    Attributes:
        value: The identifier exactly as supplied.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("RecordIdentifier value must be a string.")
        if not self.value.strip():
            raise InvalidArgumentError(
                "RecordIdentifier cannot be empty.", ValidationRule.EMPTY_VALUE
            )

    def __str__(self) -> str:
        return f"RecordIdentifier(identifier: {self.value})"

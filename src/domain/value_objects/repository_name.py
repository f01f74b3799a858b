"""Repository name value object.

The repositoryName element of an Identify response: a human-readable label
for the repository.
"""

from dataclasses import dataclass

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class RepositoryName:
    """An immutable, non-blank repository name.

    Attributes:
        value: The repository name exactly as supplied.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the repository name."""
        if not isinstance(self.value, str):
            raise TypeError("RepositoryName value must be a string.")
        if not self.value.strip():
            raise InvalidArgumentError(
                "RepositoryName cannot be empty or contain only whitespace.",
                ValidationRule.EMPTY_VALUE,
            )

    def __str__(self) -> str:
        return f"RepositoryName(name: {self.value})"

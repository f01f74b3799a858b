"""XML namespace prefix value object."""

import re
from dataclasses import dataclass
from typing import ClassVar

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class NamespacePrefix:
    """An immutable XML namespace prefix (an ASCII NCName such as ``oai_dc``).

    Attributes:
        value: The prefix string.
    """

    value: str

    PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("NamespacePrefix value must be a string.")
        if not self.value:
            raise InvalidArgumentError("NamespacePrefix cannot be empty.", ValidationRule.EMPTY_VALUE)
        if self.PATTERN.fullmatch(self.value) is None:
            raise InvalidArgumentError(
                f"Invalid namespace prefix format: '{self.value}'.", ValidationRule.INVALID_FORMAT
            )

    def __str__(self) -> str:
        return f"NamespacePrefix(prefix: {self.value})"

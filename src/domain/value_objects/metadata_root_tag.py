"""Root element name of a container format (e.g. ``oai_dc:dc``)."""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class MetadataRootTag:
    """An immutable XML element name, optionally namespace-qualified.

    Attributes:
        value: The tag, either ``local`` or ``prefix:local``.
    """

    value: str

    PATTERN: ClassVar[re.Pattern] = re.compile(
        r"[A-Za-z_][A-Za-z0-9_.\-]*(?::[A-Za-z_][A-Za-z0-9_.\-]*)?"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("MetadataRootTag value must be a string.")
        if not self.value.strip():
            raise InvalidArgumentError("MetadataRootTag cannot be empty.", ValidationRule.EMPTY_VALUE)
        if self.PATTERN.fullmatch(self.value) is None:
            raise InvalidArgumentError(
                f"Invalid metadata root tag: '{self.value}'.", ValidationRule.INVALID_FORMAT
            )

    @property
    def prefix(self) -> Optional[str]:
        """Returns the namespace prefix part, if the tag is qualified."""
        head, sep, _ = self.value.partition(":")
        return head if sep else None

    @property
    def local_name(self) -> str:
        return self.value.rpartition(":")[2]

    def __str__(self) -> str:
        return f"MetadataRootTag(rootTag: {self.value})"

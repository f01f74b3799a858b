"""Metadata prefix value object.

The metadataPrefix argument selects the format a harvester wants records in
(``oai_dc``, ``marc21``, ...). The allowed characters are the URI "unreserved"
marks from the OAI-PMH schema.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class MetadataPrefix:
    """An immutable metadata format selector.

    Attributes:
        value: The prefix string.
    """

    value: str

    PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9\-_.!~*'()]+")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("MetadataPrefix value must be a string.")
        if not self.value:
            raise InvalidArgumentError("MetadataPrefix cannot be empty.", ValidationRule.EMPTY_VALUE)
        if self.PATTERN.fullmatch(self.value) is None:
            raise InvalidArgumentError(
                f"Invalid metadata prefix: '{self.value}'.", ValidationRule.INVALID_FORMAT
            )

    def __str__(self) -> str:
        return f"MetadataPrefix(prefix: {self.value})"

"""Set specification (setSpec) value object.

A setSpec is a colon-separated hierarchical path naming a set an item belongs
to, e.g. ``math`` or ``science:physics:quantum``. Each segment may contain only
alphanumerics, hyphen, underscore and period. Harvesting ``science`` also
harvests every descendant such as ``science:physics``.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from src.core.exceptions import InvalidArgumentError, ValidationRule


@dataclass(frozen=True)
class SetSpec:
    """An immutable, validated setSpec.

    The grammar is enforced by one pattern matched against the whole string.
    Leading, trailing and doubled colons all fail it because every colon must
    be followed by a non-empty segment.

    Attributes:
        value: The setSpec string.
    """

    value: str

    SEPARATOR: ClassVar[str] = ":"
    PATTERN: ClassVar[re.Pattern] = re.compile(
        r"[A-Za-z0-9\-_.]+(?::[A-Za-z0-9\-_.]+)*"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("SetSpec value must be a string.")
        if not self.value.strip():
            raise InvalidArgumentError("SetSpec cannot be empty.", ValidationRule.EMPTY_VALUE)
        if self.PATTERN.fullmatch(self.value) is None:
            raise InvalidArgumentError(
                "SetSpec contains invalid characters. Only alphanumeric, hyphen, underscore, "
                f"period, and colon are allowed: {self.value}",
                ValidationRule.INVALID_FORMAT,
            )

    @property
    def segments(self) -> Tuple[str, ...]:
        """Returns the hierarchy levels from the top down."""
        return tuple(self.value.split(self.SEPARATOR))

    @property
    def parent(self) -> Optional["SetSpec"]:
        """Returns the enclosing set, or None for a top-level set."""
        segments = self.segments
        if len(segments) == 1:
            return None
        return SetSpec(self.SEPARATOR.join(segments[:-1]))

    def is_descendant_of(self, other: "SetSpec") -> bool:
        """Check whether this set lies strictly below *other* in the hierarchy."""
        ancestor = other.segments
        return len(self.segments) > len(ancestor) and self.segments[: len(ancestor)] == ancestor

    def __str__(self) -> str:
        return f"SetSpec(setSpec: {self.value})"

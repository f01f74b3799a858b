"""Protocol version declared by the repository."""

from enum import Enum

from src.core.exceptions import InvalidArgumentError, ValidationRule


class ProtocolVersion(str, Enum):
    """OAI-PMH protocol versions this model supports (only 2.0)."""

    V2_0 = "2.0"

    @classmethod
    def from_string(cls, raw: str) -> "ProtocolVersion":
        """Parse a protocolVersion literal.

        Raises:
            InvalidArgumentError: If *raw* is anything other than ``2.0``.
        """
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(
                f'Invalid protocol version: {raw}. Only "{cls.V2_0.value}" is allowed.',
                ValidationRule.DISALLOWED_VALUE,
            ) from None

    def __str__(self) -> str:
        return f"ProtocolVersion(version: {self.value})"

"""OAI-PMH request verbs."""

from enum import Enum

from src.core.exceptions import InvalidArgumentError, ValidationRule


class OaiVerb(str, Enum):
    """The six verbs defined by OAI-PMH 2.0. Verbs are case-sensitive."""

    IDENTIFY = "Identify"
    LIST_METADATA_FORMATS = "ListMetadataFormats"
    LIST_SETS = "ListSets"
    GET_RECORD = "GetRecord"
    LIST_IDENTIFIERS = "ListIdentifiers"
    LIST_RECORDS = "ListRecords"

    @classmethod
    def values(cls) -> list[str]:
        return [verb.value for verb in cls]

    @classmethod
    def from_string(cls, raw: str) -> "OaiVerb":
        """Parse a verb argument.

        Raises:
            InvalidArgumentError: If *raw* is blank or not a defined verb.
        """
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidArgumentError("OaiVerb cannot be empty.", ValidationRule.EMPTY_VALUE)
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid OAI-PMH verb: {raw}. Valid verbs are: {', '.join(cls.values())}",
                ValidationRule.DISALLOWED_VALUE,
            ) from None

    @property
    def supports_resumption(self) -> bool:
        """True for the verbs whose responses may be split by resumption tokens."""
        return self in (
            OaiVerb.LIST_SETS,
            OaiVerb.LIST_IDENTIFIERS,
            OaiVerb.LIST_RECORDS,
        )

    def __str__(self) -> str:
        return f"OaiVerb(verb: {self.value})"

"""Record entity: a header plus, unless deleted, the item's metadata."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.entities.record_header import RecordHeader
from src.domain.value_objects.payload import freeze_payload


@dataclass(frozen=True, eq=False)
class Record:
    """An item's metadata expressed in a single format.

    A record whose header is marked deleted must not carry metadata; the
    protocol omits the metadata element for deleted records.

    Attributes:
        header: The record header.
        metadata: Format-specific payload, or None (always None when deleted).
    """

    header: RecordHeader
    metadata: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.header, RecordHeader):
            raise TypeError("Record header must be a RecordHeader.")
        if self.header.is_deleted and self.metadata is not None:
            raise InvalidArgumentError(
                "Deleted records cannot have metadata.", ValidationRule.CROSS_FIELD_MISMATCH
            )
        if self.metadata is not None:
            if not isinstance(self.metadata, Mapping):
                raise TypeError("Record metadata must be a mapping.")
            object.__setattr__(self, "metadata", freeze_payload(self.metadata))

    @property
    def is_deleted(self) -> bool:
        return self.header.is_deleted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.header.identifier == other.header.identifier

    def __hash__(self) -> int:
        return hash(self.header.identifier)

    def __str__(self) -> str:
        return (
            f"Record(identifier: {self.header.identifier.value}, "
            f"deleted: {'true' if self.is_deleted else 'false'}, "
            f"hasMetadata: {'true' if self.metadata is not None else 'false'})"
        )

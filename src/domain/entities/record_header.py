"""Record header entity.

The header of a record carries its identity (the unique identifier), the
datestamp of its last change, its deletion status and the sets it belongs to.
It appears on its own in ListIdentifiers responses and inside every record.
"""

from dataclasses import dataclass
from typing import Tuple

from src.domain.value_objects.record_identifier import RecordIdentifier
from src.domain.value_objects.set_spec import SetSpec
from src.domain.value_objects.utc_datetime import UTCdatetime


@dataclass(frozen=True, eq=False)
class RecordHeader:
    """The header of an item's record.

    As an entity, a header is identified by its record identifier: two headers
    with the same identifier are the same item, whatever their datestamps.

    Attributes:
        identifier: Unique identifier of the item.
        datestamp: Date of creation, modification or deletion.
        is_deleted: Whether the record is marked deleted.
        set_specs: Sets the item belongs to.
    """

    identifier: RecordIdentifier
    datestamp: UTCdatetime
    is_deleted: bool = False
    set_specs: Tuple[SetSpec, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, RecordIdentifier):
            raise TypeError("RecordHeader identifier must be a RecordIdentifier.")
        if not isinstance(self.datestamp, UTCdatetime):
            raise TypeError("RecordHeader datestamp must be a UTCdatetime.")

        specs = tuple(self.set_specs)
        for spec in specs:
            if not isinstance(spec, SetSpec):
                raise TypeError("RecordHeader set_specs must contain only SetSpec instances.")
        object.__setattr__(self, "set_specs", specs)
        object.__setattr__(self, "is_deleted", bool(self.is_deleted))

    def belongs_to_set(self, set_spec: SetSpec, include_descendants: bool = False) -> bool:
        """Check membership of *set_spec*.

        With ``include_descendants`` the header also matches when one of its
        sets lies below *set_spec*, which is how selective harvesting of a
        hierarchical set behaves.
        """
        for own in self.set_specs:
            if own == set_spec:
                return True
            if include_descendants and own.is_descendant_of(set_spec):
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordHeader):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __str__(self) -> str:
        return (
            f"RecordHeader(identifier: {self.identifier.value}, "
            f"datestamp: {self.datestamp.date_time}, "
            f"deleted: {'true' if self.is_deleted else 'false'}, "
            f"sets: {len(self.set_specs)})"
        )

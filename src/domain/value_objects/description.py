"""Repository descriptions for the Identify response.

An Identify response may carry any number of ``description`` blocks, each an
XML document in a community-defined format (oai-identifier, eprints,
branding, rights, ...). The domain keeps the format (structure) apart from the
payload (content); turning the payload into XML is the serializer's job.
"""

import json
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Tuple

from src.domain.value_objects.container_format import DescriptionFormat
from src.domain.value_objects.payload import freeze_payload, ordered_items, thaw_payload


@dataclass(frozen=True)
class Description:
    """One repository description: a format plus an opaque key-value payload.

    The payload is frozen on construction: nested mappings are read-only
    views and lists become tuples, so neither the caller's dict nor anything
    reachable from ``data`` can change the description afterwards.

    Equality is strict: keys must appear in the same order and values must
    have the same types (``1`` and ``True`` differ).

    Attributes:
        description_format: The format defining the XML structure.
        data: The content, structured according to that format.
    """

    description_format: DescriptionFormat
    data: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.description_format, DescriptionFormat):
            raise TypeError("Description format must be a DescriptionFormat.")
        if not isinstance(self.data, Mapping):
            raise TypeError("Description data must be a mapping.")
        object.__setattr__(self, "data", freeze_payload(self.data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return (
            self.description_format == other.description_format
            and ordered_items(self.data) == ordered_items(other.data)
        )

    # The payload may hold unhashable values; equal descriptions share a format.
    def __hash__(self) -> int:
        return hash(self.description_format)

    def __str__(self) -> str:
        return (
            f"Description(descriptionFormat: {self.description_format}, "
            f"data: {json.dumps(thaw_payload(self.data), default=str)})"
        )


@dataclass(frozen=True, init=False, eq=False)
class DescriptionCollection:
    """Zero or more descriptions, in serialization order.

    Equality is order-sensitive: ``[a, b]`` and ``[b, a]`` differ.
    """

    descriptions: Tuple[Description, ...]

    def __init__(self, *descriptions: Description):
        for description in descriptions:
            if not isinstance(description, Description):
                raise TypeError("DescriptionCollection accepts only Description instances.")
        object.__setattr__(self, "descriptions", tuple(descriptions))

    def __iter__(self) -> Iterator[Description]:
        return iter(self.descriptions)

    def __len__(self) -> int:
        return len(self.descriptions)

    def to_list(self) -> List[Description]:
        return list(self.descriptions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DescriptionCollection):
            return NotImplemented
        return len(self) == len(other) and all(
            mine == theirs for mine, theirs in zip(self.descriptions, other.descriptions)
        )

    def __hash__(self) -> int:
        return hash(self.descriptions)

    def __str__(self) -> str:
        return f"DescriptionCollection({', '.join(str(description) for description in self.descriptions)})"

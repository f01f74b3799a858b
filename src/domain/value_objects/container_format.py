"""Container formats: the shared shape of OAI-PMH XML payload containers.

OAI-PMH wraps community-defined XML in four containers: ``metadata`` and
``about`` at record level, ``description`` at repository level and
``setDescription`` at set level. Each container format is described by the
same four parts:

- a metadata prefix (only for independently harvested formats),
- the namespace bindings its XML uses,
- the location of its XML Schema,
- the root element name.

:class:`MetadataFormat` always has a prefix, typed as a required
``MetadataPrefix`` so callers never need a None check.
:class:`DescriptionFormat` never has one; its ``prefix`` is a class-level
``None`` and cannot be passed in.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.any_uri import AnyUri
from src.domain.value_objects.metadata_namespace import MetadataNamespaceCollection
from src.domain.value_objects.metadata_prefix import MetadataPrefix
from src.domain.value_objects.metadata_root_tag import MetadataRootTag


class ContainerFormat(ABC):
    """Abstract base for container formats.

    Equality compares prefix (two absent prefixes are equal), namespaces,
    schema URL and root tag; all four must match.
    """

    prefix: Optional[MetadataPrefix]
    namespaces: MetadataNamespaceCollection
    schema_url: AnyUri
    root_tag: MetadataRootTag

    @property
    @abstractmethod
    def element(self) -> str:
        """Name of the protocol element this format fills."""

    def _validate_shape(self) -> None:
        for name, expected in (
            ("namespaces", MetadataNamespaceCollection),
            ("schema_url", AnyUri),
            ("root_tag", MetadataRootTag),
        ):
            value = getattr(self, name)
            if value is None:
                raise InvalidArgumentError(
                    f"{type(self).__name__} requires {name}.", ValidationRule.MISSING_VALUE
                )
            if not isinstance(value, expected):
                raise TypeError(f"{type(self).__name__} {name} must be a {expected.__name__}.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContainerFormat):
            return NotImplemented
        return (
            self.prefix == other.prefix
            and self.namespaces == other.namespaces
            and self.schema_url == other.schema_url
            and self.root_tag == other.root_tag
        )

    def __hash__(self) -> int:
        return hash((self.prefix, self.namespaces, self.schema_url, self.root_tag))

    def __str__(self) -> str:
        prefix = str(self.prefix) if self.prefix is not None else "null"
        return (
            f"{type(self).__name__}(prefix: {prefix}, namespaces: {self.namespaces}, "
            f"schemaUrl: {self.schema_url}, rootTag: {self.root_tag})"
        )


@dataclass(frozen=True, eq=False)
class MetadataFormat(ContainerFormat):
    """A harvestable metadata format such as ``oai_dc``.

    Attributes:
        prefix: The metadataPrefix harvesters request this format by.
        namespaces: Namespace bindings used by the format's XML.
        schema_url: Location of the format's XML Schema.
        root_tag: Root element of a record in this format.
    """

    prefix: MetadataPrefix
    namespaces: MetadataNamespaceCollection
    schema_url: AnyUri
    root_tag: MetadataRootTag

    element: ClassVar[str] = "metadata"

    def __post_init__(self) -> None:
        if self.prefix is None:
            raise InvalidArgumentError(
                "MetadataFormat requires a metadata prefix.", ValidationRule.MISSING_VALUE
            )
        if not isinstance(self.prefix, MetadataPrefix):
            raise TypeError("MetadataFormat prefix must be a MetadataPrefix.")
        self._validate_shape()


@dataclass(frozen=True, eq=False)
class DescriptionFormat(ContainerFormat):
    """The format of an Identify ``description`` block (oai-identifier, branding, ...).

    Descriptions are embedded in the Identify response rather than harvested
    on their own, so a description format has no prefix.
    """

    namespaces: MetadataNamespaceCollection
    schema_url: AnyUri
    root_tag: MetadataRootTag

    prefix: ClassVar[None] = None
    element: ClassVar[str] = "description"

    def __post_init__(self) -> None:
        self._validate_shape()

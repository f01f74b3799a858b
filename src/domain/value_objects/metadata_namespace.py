"""XML namespace bindings used by container formats.

A :class:`MetadataNamespace` binds a prefix to a namespace URI
(``oai_dc`` -> ``http://www.openarchives.org/OAI/2.0/oai_dc/``). A container
format declares its bindings as an ordered :class:`MetadataNamespaceCollection`.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.any_uri import AnyUri
from src.domain.value_objects.namespace_prefix import NamespacePrefix


@dataclass(frozen=True)
class MetadataNamespace:
    """An immutable prefix-to-URI binding.

    Attributes:
        prefix: The namespace prefix.
        uri: The namespace name.
    """

    prefix: NamespacePrefix
    uri: AnyUri

    def __post_init__(self) -> None:
        if self.prefix is None:
            raise InvalidArgumentError(
                "MetadataNamespace requires a namespace prefix.", ValidationRule.MISSING_VALUE
            )
        if self.uri is None:
            raise InvalidArgumentError(
                "MetadataNamespace requires a namespace URI.", ValidationRule.MISSING_VALUE
            )
        if not isinstance(self.prefix, NamespacePrefix):
            raise TypeError("MetadataNamespace prefix must be a NamespacePrefix.")
        if not isinstance(self.uri, AnyUri):
            raise TypeError("MetadataNamespace uri must be an AnyUri.")

    def __str__(self) -> str:
        return f"MetadataNamespace(prefix: {self.prefix}, uri: {self.uri})"


@dataclass(frozen=True, init=False, eq=False)
class MetadataNamespaceCollection:
    """An ordered, immutable collection of namespace bindings.

    At least one binding is required, and neither a prefix nor a URI may be
    bound twice. Equality is order-sensitive.
    """

    namespaces: Tuple[MetadataNamespace, ...]

    def __init__(self, *namespaces: MetadataNamespace):
        if not namespaces:
            raise InvalidArgumentError(
                "At least one MetadataNamespace must be provided.", ValidationRule.EMPTY_VALUE
            )

        seen_prefixes: List[NamespacePrefix] = []
        seen_uris: List[AnyUri] = []
        for namespace in namespaces:
            if not isinstance(namespace, MetadataNamespace):
                raise TypeError("MetadataNamespaceCollection accepts only MetadataNamespace instances.")
            if namespace.prefix in seen_prefixes:
                raise InvalidArgumentError(
                    f"Duplicate namespace prefix found: {namespace.prefix.value}",
                    ValidationRule.DUPLICATE_VALUE,
                )
            if namespace.uri in seen_uris:
                raise InvalidArgumentError(
                    f"Duplicate namespace URI found: {namespace.uri.value}",
                    ValidationRule.DUPLICATE_VALUE,
                )
            seen_prefixes.append(namespace.prefix)
            seen_uris.append(namespace.uri)

        object.__setattr__(self, "namespaces", tuple(namespaces))

    def get_uri(self, prefix: NamespacePrefix) -> Optional[AnyUri]:
        """Returns the URI bound to *prefix*, or None."""
        for namespace in self.namespaces:
            if namespace.prefix == prefix:
                return namespace.uri
        return None

    def __iter__(self) -> Iterator[MetadataNamespace]:
        return iter(self.namespaces)

    def __len__(self) -> int:
        return len(self.namespaces)

    def to_list(self) -> List[MetadataNamespace]:
        return list(self.namespaces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataNamespaceCollection):
            return NotImplemented
        return self.namespaces == other.namespaces

    def __hash__(self) -> int:
        return hash(self.namespaces)

    def __str__(self) -> str:
        return (
            "MetadataNamespaceCollection(namespaces: "
            f"{', '.join(str(namespace) for namespace in self.namespaces)})"
        )

"""Domain Value Objects for the OAI-PMH protocol.

Value objects are immutable objects that describe domain concepts by their attributes
rather than their identity. Each one validates itself on construction and raises
``InvalidArgumentError`` when given invalid input.
"""

from .any_uri import AnyUri
from .base_url import BaseURL
from .container_format import ContainerFormat, DescriptionFormat, MetadataFormat
from .deleted_record import DeletedRecord
from .description import Description, DescriptionCollection
from .email import Email
from .email_collection import EmailCollection
from .granularity import Granularity
from .metadata_namespace import MetadataNamespace, MetadataNamespaceCollection
from .metadata_prefix import MetadataPrefix
from .metadata_root_tag import MetadataRootTag
from .namespace_prefix import NamespacePrefix
from .oai_verb import OaiVerb
from .protocol_version import ProtocolVersion
from .record_identifier import RecordIdentifier
from .repository_identity import RepositoryIdentity
from .repository_name import RepositoryName
from .set_spec import SetSpec
from .utc_datetime import UTCdatetime

__all__ = [
    "AnyUri",
    "BaseURL",
    "ContainerFormat",
    "DeletedRecord",
    "Description",
    "DescriptionCollection",
    "DescriptionFormat",
    "Email",
    "EmailCollection",
    "Granularity",
    "MetadataFormat",
    "MetadataNamespace",
    "MetadataNamespaceCollection",
    "MetadataPrefix",
    "MetadataRootTag",
    "NamespacePrefix",
    "OaiVerb",
    "ProtocolVersion",
    "RecordIdentifier",
    "RepositoryIdentity",
    "RepositoryName",
    "SetSpec",
    "UTCdatetime",
]

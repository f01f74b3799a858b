"""Repository identity: the aggregate behind an Identify response.

Required Identify elements:
- repositoryName: a human-readable name
- baseURL: the HTTP(S) endpoint
- protocolVersion: ``2.0``
- adminEmail: one or more administrator addresses
- earliestDatestamp: the guaranteed lower limit of all datestamps
- deletedRecord: the deletion-tracking policy
- granularity: the finest harvesting granularity supported

Optional Identify elements:
- description: zero or more community-specific containers
"""

from dataclasses import dataclass, field, fields
from typing import Iterable, Optional

from structlog import get_logger

from src.domain.value_objects.base_url import BaseURL
from src.domain.value_objects.deleted_record import DeletedRecord
from src.domain.value_objects.description import DescriptionCollection
from src.domain.value_objects.email import Email
from src.domain.value_objects.email_collection import EmailCollection
from src.domain.value_objects.granularity import Granularity
from src.domain.value_objects.protocol_version import ProtocolVersion
from src.domain.value_objects.repository_name import RepositoryName
from src.domain.value_objects.utc_datetime import UTCdatetime

logger = get_logger(__name__)


@dataclass(frozen=True)
class RepositoryIdentity:
    """Immutable aggregate of every Identify field.

    The aggregate adds no rules of its own: it is valid exactly when each
    constituent is, and constituents validate themselves when built. Passing
    ``descriptions=None`` (or omitting it) yields an empty
    :class:`DescriptionCollection`.

    Equality is field-by-field across all eight constituents.
    """

    repository_name: RepositoryName
    base_url: BaseURL
    protocol_version: ProtocolVersion
    admin_emails: EmailCollection
    earliest_datestamp: UTCdatetime
    deleted_record: DeletedRecord
    granularity: Granularity
    descriptions: Optional[DescriptionCollection] = field(default_factory=DescriptionCollection)

    def __post_init__(self) -> None:
        if self.descriptions is None:
            object.__setattr__(self, "descriptions", DescriptionCollection())

        for constituent in fields(self):
            value = getattr(self, constituent.name)
            if not isinstance(value, _EXPECTED_TYPES[constituent.name]):
                raise TypeError(
                    f"RepositoryIdentity {constituent.name} must be a "
                    f"{_EXPECTED_TYPES[constituent.name].__name__}, got {type(value).__name__}."
                )

        logger.debug(
            "Repository identity assembled",
            base_url=self.base_url.value,
            admin_email_count=len(self.admin_emails),
            description_count=len(self.descriptions),
        )

    @classmethod
    def from_primitives(
        cls,
        repository_name: str,
        base_url: str,
        protocol_version: str,
        admin_emails: Iterable[str],
        earliest_datestamp: str,
        deleted_record: str,
        granularity: str,
        descriptions: Optional[DescriptionCollection] = None,
    ) -> "RepositoryIdentity":
        """Build every constituent from raw strings.

        The first constituent that rejects its input raises, so no aggregate
        exists unless all of them are valid. The granularity is parsed before
        the earliest datestamp, which is validated at that granularity.

        Raises:
            InvalidArgumentError: From the first constituent that rejects its input.
        """
        name = RepositoryName(repository_name)
        url = BaseURL(base_url)
        version = ProtocolVersion.from_string(protocol_version)
        emails = EmailCollection(*(Email(address) for address in admin_emails))
        declared_granularity = Granularity.from_string(granularity)
        earliest = UTCdatetime(earliest_datestamp, declared_granularity)
        policy = DeletedRecord.from_string(deleted_record)

        return cls(
            repository_name=name,
            base_url=url,
            protocol_version=version,
            admin_emails=emails,
            earliest_datestamp=earliest,
            deleted_record=policy,
            granularity=declared_granularity,
            descriptions=descriptions,
        )

    def __str__(self) -> str:
        return (
            f"RepositoryIdentity(repositoryName: {self.repository_name}, "
            f"baseURL: {self.base_url}, "
            f"protocolVersion: {str(self.protocol_version)}, "
            f"adminEmails: {self.admin_emails}, "
            f"earliestDatestamp: {self.earliest_datestamp}, "
            f"deletedRecord: {str(self.deleted_record)}, "
            f"granularity: {str(self.granularity)}, "
            f"descriptions: {self.descriptions})"
        )


_EXPECTED_TYPES = {
    "repository_name": RepositoryName,
    "base_url": BaseURL,
    "protocol_version": ProtocolVersion,
    "admin_emails": EmailCollection,
    "earliest_datestamp": UTCdatetime,
    "deleted_record": DeletedRecord,
    "granularity": Granularity,
    "descriptions": DescriptionCollection,
}

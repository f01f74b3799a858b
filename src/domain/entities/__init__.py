"""Export OAI-PMH domain entities for use across the package.

Unlike value objects, entities are identified by a key (record identifier,
setSpec) rather than by all of their attributes.
"""

from .record import Record
from .record_header import RecordHeader
from .set import Set

__all__ = ["Record", "RecordHeader", "Set"]

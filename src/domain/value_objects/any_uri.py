"""AnyUri value object.

Represents a URI conforming to the XML Schema ``anyURI`` type, as used for
schema locations and namespace names in OAI-PMH responses.

Rather than approximating ``anyURI`` with a regular expression, the candidate
is placed in a tiny generated document::

    <root><uri>candidate</uri></root>

and that document is validated against ``anyURI.xsd``. The candidate is only
ever assigned as element *text*, which lxml escapes, so input such as
``</uri><root>`` cannot alter the structure of the document being validated.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from lxml import etree
from structlog import get_logger

from src.core.config.settings import settings
from src.core.exceptions import InvalidArgumentError, ValidationRule

logger = get_logger(__name__)


_local = threading.local()


def load_anyuri_schema(path: Path) -> etree.XMLSchema:
    """Parse and compile the anyURI schema once per location and thread.

    lxml validators keep a per-instance error log, so compiled schemas are
    not shared between threads.
    """
    schemas: Dict[Path, etree.XMLSchema] = _local.__dict__.setdefault("schemas", {})
    if path not in schemas:
        schemas[path] = etree.XMLSchema(etree.parse(str(path)))
    return schemas[path]


def build_validation_document(uri: str) -> etree._Element:
    """Wrap *uri* as text content of ``<root><uri/></root>``."""
    root = etree.Element("root")
    uri_element = etree.SubElement(root, "uri")
    uri_element.text = uri
    return root


@dataclass(frozen=True)
class AnyUri:
    """An immutable, schema-validated ``anyURI``.

    Equality and hashing use the literal string: no URI normalization is
    applied, so a trailing slash or a different percent-encoding makes a
    different value.

    Attributes:
        value: The URI string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("AnyUri value must be a string.")

        schema = load_anyuri_schema(settings.anyuri_schema_path)
        try:
            is_valid = schema.validate(build_validation_document(self.value))
        except Exception as exc:
            # lxml refuses control characters and NUL bytes while building
            logger.warning(
                "AnyUri validation document could not be built",
                error_type=type(exc).__name__,
            )
            raise InvalidArgumentError(
                f"Invalid URI: {self.value!r}", ValidationRule.INVALID_FORMAT
            ) from exc

        if not is_valid:
            logger.warning(
                "AnyUri rejected by anyURI schema",
                reason=str(schema.error_log.last_error),
            )
            raise InvalidArgumentError(
                f"Invalid URI: {self.value!r}", ValidationRule.INVALID_FORMAT
            )

    def __str__(self) -> str:
        return f"AnyUri(uri: {self.value})"

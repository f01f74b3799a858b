"""Base URL value object.

The baseURL of an OAI-PMH repository is the HTTP(S) endpoint harvesters
submit requests to. It is validated independently of :class:`AnyUri`: a
schema location may use any scheme the XML Schema type allows, while the
protocol endpoint must be reachable over HTTP or HTTPS.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, FrozenSet
from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.exceptions import InvalidArgumentError, ValidationRule

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class BaseURL:
    """An immutable HTTP or HTTPS endpoint URL.

    Validation order:
        1. not empty
        2. only RFC 3986 characters (no whitespace, backslashes or quotes)
        3. well-formed absolute URL
        4. scheme is http or https
        5. ``scheme://`` followed by a valid host name

    pydantic's parser repairs input the WHATWG way (``http:example.org``
    gains its slashes, spaces get percent-encoded), so the raw literal is
    checked on its own before and after parsing. The URL is stored exactly
    as supplied; ``http://example.org`` and ``http://example.org/`` remain
    distinct values.

    Attributes:
        value: The base URL string.
    """

    value: str

    ALLOWED_SCHEMES: ClassVar[FrozenSet[str]] = frozenset({"http", "https"})
    ALLOWED_CHARACTERS: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
    HOST_PATTERN: ClassVar[re.Pattern] = re.compile(
        r"[A-Za-z0-9](?:[A-Za-z0-9\-.]*[A-Za-z0-9])?|[0-9A-Fa-f:.]*:[0-9A-Fa-f:.]*"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("BaseURL value must be a string.")
        if not self.value:
            raise InvalidArgumentError("BaseURL cannot be empty.", ValidationRule.EMPTY_VALUE)

        if self.ALLOWED_CHARACTERS.fullmatch(self.value) is None:
            raise self._invalid_format()
        try:
            _URL_ADAPTER.validate_python(self.value)
        except PydanticValidationError as exc:
            raise self._invalid_format() from exc

        parts = urlsplit(self.value)
        if parts.scheme.lower() not in self.ALLOWED_SCHEMES:
            raise InvalidArgumentError(
                f"BaseURL must use HTTP or HTTPS protocol. Given: {self.value}",
                ValidationRule.INVALID_SCHEME,
            )

        has_authority = self.value[len(parts.scheme):].startswith("://")
        if not has_authority or not parts.hostname or self.HOST_PATTERN.fullmatch(parts.hostname) is None:
            raise self._invalid_format()

    def _invalid_format(self) -> InvalidArgumentError:
        return InvalidArgumentError(f"Invalid URL format: {self.value}", ValidationRule.INVALID_FORMAT)

    def __str__(self) -> str:
        return f"BaseURL(url: {self.value})"

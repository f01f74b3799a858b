"""A Value Object representing an administrator email address.

This class encapsulates the validation rules of an email address, ensuring
that any adminEmail in the domain is always in a valid state. As a Value
Object, it is immutable, and equality is based on its value (the email
string), not its identity.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email
from structlog import get_logger

from src.core.exceptions import InvalidArgumentError, ValidationRule

logger = get_logger(__name__)


@dataclass(frozen=True)
class Email:
    """An immutable, self-validating email address.

    Syntax is checked against RFC 5322 by ``email-validator`` without any DNS
    lookup. The address is stored exactly as given (no case folding), so two
    addresses that differ only in case are different values.

    Attributes:
        value: The string representation of the email address.
    """

    value: str

    def __post_init__(self):
        """Performs validation after initialization."""
        if not isinstance(self.value, str):
            raise TypeError("Email value must be a string.")

        self._validate_not_empty(self.value)
        self._validate_format(self.value)

        logger.debug("Email validated successfully", email=self.mask_for_logging())

    def _validate_not_empty(self, value: str) -> None:
        if not value.strip():
            raise InvalidArgumentError("Email cannot be empty.", ValidationRule.EMPTY_VALUE)

    def _validate_format(self, value: str) -> None:
        """Validates the syntax of the email address."""
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidArgumentError(
                f"Invalid email address: {value}", ValidationRule.INVALID_FORMAT
            ) from exc

    @property
    def domain(self) -> str:
        """Returns the domain part of the email address."""
        return self.value.rsplit("@", 1)[1]

    @property
    def local_part(self) -> str:
        """Returns the local part of the email address (before the '@')."""
        return self.value.rsplit("@", 1)[0]

    def mask_for_logging(self) -> str:
        """Returns a masked version of the email for safe logging.

        Example: 'ad***@e*********g'
        """
        local, domain_part = self.local_part, self.domain
        masked_local = f"{local[:2]}{'*' * max(len(local) - 2, 0)}"
        masked_domain = f"{domain_part[:1]}{'*' * max(len(domain_part) - 2, 0)}{domain_part[-1:]}"
        return f"{masked_local}@{masked_domain}"

    def __str__(self) -> str:
        return f"Email(email: {self.value})"

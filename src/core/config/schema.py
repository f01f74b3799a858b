"""
XML schema settings.
"""
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Packaged with the domain layer, next to the AnyUri value object.
DEFAULT_ANYURI_SCHEMA_PATH = (
    Path(__file__).resolve().parents[2] / "domain" / "schemas" / "anyURI.xsd"
)


class SchemaSettings(BaseSettings):
    """
    Defines where the XML Schema documents used for validation are loaded from.

    ANYURI_SCHEMA_PATH may point to a replacement `anyURI.xsd`; when unset the
    schema shipped with the package is used.
    """
    ANYURI_SCHEMA_PATH: Optional[Path] = None

    @field_validator("ANYURI_SCHEMA_PATH", mode="before")
    @classmethod
    def empty_path_means_default(cls, v):
        """Treats an empty environment variable as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def anyuri_schema_path(self) -> Path:
        """Returns the effective anyURI schema location."""
        return self.ANYURI_SCHEMA_PATH or DEFAULT_ANYURI_SCHEMA_PATH

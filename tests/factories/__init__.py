from __future__ import annotations

"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .oai import (
    create_fake_description,
    create_fake_description_format,
    create_fake_email,
    create_fake_metadata_format,
    create_fake_namespaces,
    create_fake_repository_identity,
)

__all__ = [
    "create_fake_description",
    "create_fake_description_format",
    "create_fake_email",
    "create_fake_metadata_format",
    "create_fake_namespaces",
    "create_fake_repository_identity",
]

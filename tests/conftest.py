import os
import sys

import pytest

# Adjust sys.path so that the `src` and `tests` packages resolve from the repository root
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.domain.value_objects import Granularity, UTCdatetime
from tests.factories import (
    create_fake_description,
    create_fake_metadata_format,
    create_fake_repository_identity,
)


@pytest.fixture
def second_granularity_datestamp():
    return UTCdatetime("2024-06-10T12:00:00Z", Granularity.DATE_TIME_SECOND)


@pytest.fixture
def dublin_core_format():
    return create_fake_metadata_format()


@pytest.fixture
def oai_identifier_description():
    return create_fake_description(
        {
            "scheme": "oai",
            "repositoryIdentifier": "example.org",
            "delimiter": ":",
            "sampleIdentifier": "oai:example.org:1",
        }
    )


@pytest.fixture
def repository_identity():
    return create_fake_repository_identity()

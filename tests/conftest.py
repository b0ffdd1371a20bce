"""Common test fixtures for artifact staging tests."""

import httpx
import pytest

from artifact_staging import MemoryBucket, ModelParameters, Project, StagingSlots, StaticBucketResolver


@pytest.fixture
def bucket() -> MemoryBucket:
    return MemoryBucket("tenant-bucket")


@pytest.fixture
def resolver(bucket: MemoryBucket) -> StaticBucketResolver:
    return StaticBucketResolver(bucket)


@pytest.fixture
def client_factory(bucket: MemoryBucket):
    """HTTP clients whose requests are answered by the in-memory bucket."""

    def _factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(bucket.serve))

    return _factory


@pytest.fixture
def slots() -> StagingSlots:
    return StagingSlots.create()


@pytest.fixture
def project() -> Project:
    return Project("wrench")


@pytest.fixture
def parameters() -> ModelParameters:
    return ModelParameters.model_validate(
        {
            "WrenchSz": {"value": '"Large"', "values": ['"Small"', '"Medium"', '"Large"']},
            "JawOffset": {"value": "10 mm", "unit": "mm"},
        }
    )

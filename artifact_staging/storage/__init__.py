"""Object store collaborators: bucket gateway protocol, resolver and in-memory bucket."""

from artifact_staging.storage.memory import MemoryBucket
from artifact_staging.storage.protocol import BucketGateway, ObjectAccess
from artifact_staging.storage.resolver import BucketResolver, StaticBucketResolver

__all__ = ["BucketGateway", "BucketResolver", "MemoryBucket", "ObjectAccess", "StaticBucketResolver"]

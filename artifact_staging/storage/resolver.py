"""Tenant to bucket resolution."""

from typing import Protocol, runtime_checkable

from artifact_staging.storage.protocol import BucketGateway

__all__ = ["BucketResolver", "StaticBucketResolver"]


@runtime_checkable
class BucketResolver(Protocol):
    """Maps the current caller to the bucket holding its objects.

    Implementations raise BucketResolutionError when the caller cannot be mapped.
    Coordinators let that error propagate unchanged.
    """

    async def get_bucket(self) -> BucketGateway: ...


class StaticBucketResolver:
    """Resolver that always returns the same bucket."""

    def __init__(self, bucket: BucketGateway) -> None:
        self._bucket = bucket

    async def get_bucket(self) -> BucketGateway:
        return self._bucket

"""Bucket gateway protocol.

The object store itself (signed URL issuance, upload, rename, delete) lives outside
this package. Coordinators talk to it only through BucketGateway.
"""

from enum import StrEnum
from typing import Protocol, runtime_checkable

__all__ = ["BucketGateway", "ObjectAccess"]


class ObjectAccess(StrEnum):
    """Capability granted by a signed URL."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "readwrite"


@runtime_checkable
class BucketGateway(Protocol):
    """Protocol for object store buckets.

    Implementations: MemoryBucket (testing, local runs). Production buckets are
    provided by the hosting application.

    All methods raise on failure. Nothing beyond the object store's own per-object
    atomicity is guaranteed.
    """

    async def create_signed_url(self, name: str, access: ObjectAccess = ObjectAccess.READ) -> str:
        """Issue a signed URL for ``name`` with the requested capability."""
        ...

    async def upload_object(self, name: str, data: bytes) -> None:
        """Store ``data`` under ``name``, replacing any existing object."""
        ...

    async def rename_object(self, old_name: str, new_name: str) -> None:
        """Move an object to a new name. The old name no longer exists afterwards."""
        ...

    async def delete_object(self, name: str) -> None:
        """Delete an object."""
        ...

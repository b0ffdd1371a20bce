"""Helpers shared across staging tests."""

from collections import Counter

from artifact_staging import MemoryBucket, ModelParameters, ObjectAccess, StagingSlots
from artifact_staging.parameters import serialize_parameters


class RecordingBucket(MemoryBucket):
    """MemoryBucket that records every call and can be told to fail some of them."""

    def __init__(self, name: str = "tenant-bucket", *, fail_on: set[tuple[str, str]] | None = None) -> None:
        super().__init__(name)
        self.calls: list[tuple[str, ...]] = []
        self.fail_on = fail_on or set()

    def _check(self, operation: str, name: str) -> None:
        if (operation, name) in self.fail_on:
            raise OSError(f"injected {operation} failure for {name}")

    async def create_signed_url(self, name: str, access: ObjectAccess = ObjectAccess.READ) -> str:
        self.calls.append(("create_signed_url", name, access.value))
        self._check("create_signed_url", name)
        return await super().create_signed_url(name, access)

    async def upload_object(self, name: str, data: bytes) -> None:
        self.calls.append(("upload_object", name))
        self._check("upload_object", name)
        await super().upload_object(name, data)

    async def rename_object(self, old_name: str, new_name: str) -> None:
        self.calls.append(("rename_object", old_name, new_name))
        self._check("rename_object", old_name)
        await super().rename_object(old_name, new_name)

    async def delete_object(self, name: str) -> None:
        self.calls.append(("delete_object", name))
        self._check("delete_object", name)
        await super().delete_object(name)

    def count(self, operation: str) -> int:
        return Counter(call[0] for call in self.calls)[operation]


def simulate_processing(bucket: MemoryBucket, slots: StagingSlots, parameters: ModelParameters) -> None:
    """Write what the external processor would produce for a full conversion."""
    bucket._objects.update(  # pyright: ignore[reportPrivateUsage]
        {
            slots.parameters: serialize_parameters(parameters),
            slots.thumbnail: b"\x89PNG thumbnail",
            slots.svf: b"PK svf",
            slots.output_model: b"PK model",
        }
    )

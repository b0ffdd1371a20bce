"""In-memory bucket for testing and local runs.

Simple dict-based storage implementing the full BucketGateway protocol.
Not for production use: all data is lost when the process exits.
"""

from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

import httpx

from artifact_staging.exceptions import ObjectNotFoundError
from artifact_staging.logging import get_pipeline_logger
from artifact_staging.settings import settings
from artifact_staging.storage.protocol import ObjectAccess

logger = get_pipeline_logger(__name__)

_READABLE = {ObjectAccess.READ, ObjectAccess.READ_WRITE}
_WRITABLE = {ObjectAccess.WRITE, ObjectAccess.READ_WRITE}


class MemoryBucket:
    """Dict-based bucket for unit tests.

    Signed URLs have the form ``<base_url>/<bucket>/<name>?access=<mode>&expires=<seconds>``.
    They are not cryptographically signed; ``serve`` honours the access mode so that
    an ``httpx.MockTransport`` can stand in for the object store's HTTP endpoint.
    """

    def __init__(self, name: str = "bucket", *, base_url: str | None = None) -> None:
        self.name = name
        self.base_url = (base_url or settings.memory_bucket_base_url).rstrip("/")
        self._objects: dict[str, bytes] = {}

    async def create_signed_url(self, name: str, access: ObjectAccess = ObjectAccess.READ) -> str:
        query = urlencode({"access": access.value, "expires": settings.signed_url_expiry})
        # the bucket name is a single path segment, so "/" is escaped too
        bucket = quote(self.name, safe="")
        return f"{self.base_url}/{bucket}/{quote(name)}?{query}"

    async def upload_object(self, name: str, data: bytes) -> None:
        self._objects[name] = data

    async def rename_object(self, old_name: str, new_name: str) -> None:
        try:
            data = self._objects.pop(old_name)
        except KeyError:
            raise ObjectNotFoundError(f"Cannot rename missing object '{old_name}' in bucket '{self.name}'") from None
        self._objects[new_name] = data

    async def delete_object(self, name: str) -> None:
        if self._objects.pop(name, None) is None:
            raise ObjectNotFoundError(f"Cannot delete missing object '{name}' in bucket '{self.name}'")

    def has_object(self, name: str) -> bool:
        return name in self._objects

    def get_object(self, name: str) -> bytes:
        try:
            return self._objects[name]
        except KeyError:
            raise ObjectNotFoundError(f"Object '{name}' not found in bucket '{self.name}'") from None

    def object_names(self) -> set[str]:
        return set(self._objects)

    def serve(self, request: httpx.Request) -> httpx.Response:
        """Answer GET/PUT requests made against signed URLs of this bucket.

        Usable as the handler of ``httpx.MockTransport``.
        """
        parts = urlsplit(str(request.url))
        bucket, _, name = parts.path.lstrip("/").partition("/")
        bucket, name = unquote(bucket), unquote(name)
        if bucket != self.name or not name:
            return httpx.Response(404)

        access_values = parse_qs(parts.query).get("access", [])
        try:
            access = ObjectAccess(access_values[0])
        except (IndexError, ValueError):
            return httpx.Response(403)

        if request.method == "GET":
            if access not in _READABLE:
                return httpx.Response(403)
            if name not in self._objects:
                return httpx.Response(404)
            return httpx.Response(200, content=self._objects[name])

        if request.method == "PUT":
            if access not in _WRITABLE:
                return httpx.Response(403)
            self._objects[name] = request.read()
            return httpx.Response(200)

        logger.debug(f"Unsupported method {request.method} for {name}")
        return httpx.Response(405)

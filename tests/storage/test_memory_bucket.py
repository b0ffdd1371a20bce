"""Tests for MemoryBucket."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from artifact_staging import BucketGateway, MemoryBucket, ObjectAccess, ObjectNotFoundError, StaticBucketResolver
from artifact_staging.storage import BucketResolver


class TestProtocolCompliance:
    def test_satisfies_bucket_gateway_protocol(self):
        assert isinstance(MemoryBucket(), BucketGateway)

    def test_static_resolver_satisfies_protocol(self):
        assert isinstance(StaticBucketResolver(MemoryBucket()), BucketResolver)

    @pytest.mark.asyncio
    async def test_static_resolver_returns_bucket(self):
        bucket = MemoryBucket()
        assert await StaticBucketResolver(bucket).get_bucket() is bucket


class TestSignedUrls:
    @pytest.mark.asyncio
    async def test_url_shape(self):
        bucket = MemoryBucket("b1", base_url="https://oss.test/")
        url = await bucket.create_signed_url("abc.json", ObjectAccess.WRITE)
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://oss.test/b1/abc.json"
        query = parse_qs(parts.query)
        assert query["access"] == ["write"]
        assert "expires" in query

    @pytest.mark.asyncio
    async def test_default_access_is_read(self):
        url = await MemoryBucket().create_signed_url("abc.json")
        assert "access=read" in url
        assert "access=readwrite" not in url


class TestObjects:
    @pytest.mark.asyncio
    async def test_upload_and_get(self):
        bucket = MemoryBucket()
        await bucket.upload_object("a.json", b"{}")
        assert bucket.has_object("a.json")
        assert bucket.get_object("a.json") == b"{}"

    @pytest.mark.asyncio
    async def test_upload_replaces(self):
        bucket = MemoryBucket()
        await bucket.upload_object("a.json", b"1")
        await bucket.upload_object("a.json", b"2")
        assert bucket.get_object("a.json") == b"2"

    @pytest.mark.asyncio
    async def test_rename_moves_object(self):
        bucket = MemoryBucket()
        await bucket.upload_object("a.zip", b"data")
        await bucket.rename_object("a.zip", "cache/p/h/model.zip")
        assert not bucket.has_object("a.zip")
        assert bucket.get_object("cache/p/h/model.zip") == b"data"

    @pytest.mark.asyncio
    async def test_rename_missing_raises(self):
        with pytest.raises(ObjectNotFoundError, match="missing.zip"):
            await MemoryBucket().rename_object("missing.zip", "x.zip")

    @pytest.mark.asyncio
    async def test_delete(self):
        bucket = MemoryBucket()
        await bucket.upload_object("a.sat", b"sat")
        await bucket.delete_object("a.sat")
        assert bucket.object_names() == set()

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self):
        with pytest.raises(ObjectNotFoundError):
            await MemoryBucket().delete_object("missing.sat")

    def test_get_missing_is_key_error(self):
        with pytest.raises(KeyError):
            MemoryBucket().get_object("missing")


class TestServe:
    @pytest.fixture
    def bucket(self) -> MemoryBucket:
        return MemoryBucket("b1")

    @pytest.fixture
    def client(self, bucket: MemoryBucket) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(bucket.serve))

    @pytest.mark.asyncio
    async def test_get_readable(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        await bucket.upload_object("p.json", b"{}")
        async with client:
            response = await client.get(await bucket.create_signed_url("p.json", ObjectAccess.READ))
        assert response.status_code == 200
        assert response.content == b"{}"

    @pytest.mark.asyncio
    async def test_get_write_only_is_forbidden(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        await bucket.upload_object("p.json", b"{}")
        async with client:
            response = await client.get(await bucket.create_signed_url("p.json", ObjectAccess.WRITE))
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_get_missing_is_not_found(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        async with client:
            response = await client.get(await bucket.create_signed_url("p.json"))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_put_with_write_access(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        async with client:
            response = await client.put(await bucket.create_signed_url("m.zip", ObjectAccess.WRITE), content=b"PK")
        assert response.status_code == 200
        assert bucket.get_object("m.zip") == b"PK"

    @pytest.mark.asyncio
    async def test_read_write_allows_both(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        url = await bucket.create_signed_url("x.sat", ObjectAccess.READ_WRITE)
        async with client:
            assert (await client.put(url, content=b"sat")).status_code == 200
            response = await client.get(url)
        assert response.content == b"sat"

    @pytest.mark.asyncio
    async def test_put_read_only_is_forbidden(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        async with client:
            response = await client.put(await bucket.create_signed_url("m.zip"), content=b"PK")
        assert response.status_code == 403
        assert not bucket.has_object("m.zip")

    @pytest.mark.asyncio
    async def test_other_bucket_is_not_found(self, bucket: MemoryBucket, client: httpx.AsyncClient):
        other = MemoryBucket("b2")
        await other.upload_object("p.json", b"{}")
        async with client:
            response = await client.get(await other.create_signed_url("p.json"))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_bucket_name_with_slash(self):
        bucket = MemoryBucket("tenant/a", base_url="https://oss.test")
        await bucket.upload_object("p.json", b"{}")
        url = await bucket.create_signed_url("p.json")
        assert urlsplit(url).path == "/tenant%2Fa/p.json"
        async with httpx.AsyncClient(transport=httpx.MockTransport(bucket.serve)) as client:
            response = await client.get(url)
        assert response.status_code == 200
        assert response.content == b"{}"

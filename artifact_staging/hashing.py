"""Canonical hash resolution for staged parameters."""

from collections.abc import Callable

import httpx

from artifact_staging.exceptions import (
    HashResolutionError,
    ParametersDeserializationError,
    TransportError,
)
from artifact_staging.logging import get_pipeline_logger
from artifact_staging.parameters import ModelParameters, compute_parameters_hash, parse_parameters
from artifact_staging.settings import settings
from artifact_staging.slots import StagingSlots
from artifact_staging.storage import BucketResolver, ObjectAccess

logger = get_pipeline_logger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]


def default_client_factory() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True)


async def fetch_bytes(client: httpx.AsyncClient, url: str) -> bytes:
    """GET ``url`` and return the body.

    Raises:
        TransportError: On network failure or a non-2xx status.
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Fetch failed with status {e.response.status_code}", status_code=e.response.status_code
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Fetch failed: {type(e).__name__}: {e}") from e
    return response.content


class HashResolver:
    """Computes the canonical hash of a run from its staged parameters.

    Expects the parameters object to have been written by the external processor.
    Nothing is retried; retry policy belongs to the caller.
    """

    def __init__(self, resolver: BucketResolver, client_factory: ClientFactory | None = None) -> None:
        self._resolver = resolver
        self._client_factory = client_factory or default_client_factory

    async def load_parameters(self, slots: StagingSlots) -> ModelParameters:
        """Download and deserialize the staged parameters document."""
        bucket = await self._resolver.get_bucket()
        url = await bucket.create_signed_url(slots.parameters, ObjectAccess.READ)

        async with self._client_factory() as client:
            content = await fetch_bytes(client, url)

        return parse_parameters(content)

    async def resolve_hash(self, slots: StagingSlots) -> str:
        """Generate the hash string for the staged parameters.

        Raises:
            HashResolutionError: If the parameters cannot be fetched or deserialized.
        """
        try:
            parameters = await self.load_parameters(slots)
        except (TransportError, ParametersDeserializationError) as e:
            logger.error(f"Hash resolution failed for {slots.parameters}: {e}")
            raise HashResolutionError(f"Cannot resolve hash of staged parameters '{slots.parameters}': {e}") from e

        hash_string = compute_parameters_hash(parameters)
        logger.debug(f"Parameters {slots.parameters} resolved to hash {hash_string}")
        return hash_string

"""Publication of staged objects under canonical, hash-derived names.

Publication is the only step that moves staged objects to canonical names. Each
batch runs concurrently and is never rolled back: if an operation fails, the ones
that already succeeded stay in place and RelocationError reports the failures.
"""

from artifact_staging.concurrency import join_all
from artifact_staging.exceptions import RelocationError
from artifact_staging.hashing import HashResolver
from artifact_staging.logging import get_pipeline_logger
from artifact_staging.naming import NamingScheme, ProjectMetadata
from artifact_staging.slots import StagingSlots
from artifact_staging.storage import BucketResolver

logger = get_pipeline_logger(__name__)


class PublicationCoordinator:
    """Moves a run's staged objects to their canonical names."""

    def __init__(self, resolver: BucketResolver, hash_resolver: HashResolver) -> None:
        self._resolver = resolver
        self._hash_resolver = hash_resolver

    async def move_project(self, slots: StagingSlots, project: NamingScheme, tla: str | None) -> str:
        """Move project objects to their canonical places and write the metadata.

        NOTE: the processor must have generated the data already.

        Returns:
            Parameters hash.
        """
        hash_string = await self._hash_resolver.resolve_hash(slots)
        names = project.oss_name_provider(hash_string)
        metadata = ProjectMetadata(hash=hash_string, tla=tla)

        bucket = await self._resolver.get_bucket()
        logger.info(f"Publishing project objects for hash {hash_string}")

        await join_all(
            {
                "thumbnail": bucket.rename_object(slots.thumbnail, names.thumbnail),
                "svf": bucket.rename_object(slots.svf, names.model_view),
                "parameters": bucket.rename_object(slots.parameters, names.parameters),
                "output_model": bucket.rename_object(slots.output_model, names.current_model),
                "metadata": bucket.upload_object(names.metadata, metadata.to_json_bytes()),
            },
            RelocationError,
        )

        return hash_string

    async def move_viewables(self, slots: StagingSlots, project: NamingScheme) -> str:
        """Move viewables to their canonical places and drop the staged input parameters.

        Returns:
            Parameters hash.
        """
        hash_string = await self._hash_resolver.resolve_hash(slots)
        names = project.oss_name_provider(hash_string)

        bucket = await self._resolver.get_bucket()
        logger.info(f"Publishing viewables for hash {hash_string}")

        await join_all(
            {
                "svf": bucket.rename_object(slots.svf, names.model_view),
                "parameters": bucket.rename_object(slots.parameters, names.parameters),
                "output_model": bucket.rename_object(slots.output_model, names.current_model),
                "input_params": bucket.delete_object(slots.input_params),
            },
            RelocationError,
        )

        return hash_string

    async def move_rfa(self, slots: StagingSlots, project: NamingScheme, hash_string: str) -> None:
        """Move the RFA to its canonical place and drop the SAT intermediate."""
        names = project.oss_name_provider(hash_string)

        bucket = await self._resolver.get_bucket()
        logger.info(f"Publishing RFA for hash {hash_string}")

        await join_all(
            {
                "output_rfa": bucket.rename_object(slots.output_rfa, names.rfa),
                "output_sat": bucket.delete_object(slots.output_sat),
            },
            RelocationError,
        )

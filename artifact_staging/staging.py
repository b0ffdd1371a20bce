"""Stage bundle preparation.

For every pipeline stage, issues the signed URLs the external processor needs to
write its outputs under the run's staged names.
"""

from artifact_staging.bundles import AdoptionData, ProcessingArgs, UpdateData
from artifact_staging.concurrency import join_all
from artifact_staging.exceptions import SignedUrlIssuanceError, TransportError
from artifact_staging.logging import get_pipeline_logger
from artifact_staging.parameters import ModelParameters, serialize_parameters
from artifact_staging.slots import StagingSlots
from artifact_staging.storage import BucketGateway, BucketResolver, ObjectAccess

logger = get_pipeline_logger(__name__)


class StagingCoordinator:
    """Prepares stage bundles for a run.

    Stateless: the run's names are passed to each call as StagingSlots. Bucket
    resolution errors propagate unchanged. If any signed URL cannot be issued, no
    bundle is returned and SignedUrlIssuanceError is raised.
    """

    def __init__(self, resolver: BucketResolver) -> None:
        self._resolver = resolver

    async def _issue_urls(self, bucket: BucketGateway, requests: dict[str, tuple[str, ObjectAccess]]) -> list[str]:
        for label, (name, access) in requests.items():
            logger.debug(f"Requesting {access.value} URL for {label} ({name})")
        return await join_all(
            {label: bucket.create_signed_url(name, access) for label, (name, access) in requests.items()},
            SignedUrlIssuanceError,
        )

    async def for_adoption(self, slots: StagingSlots, doc_url: str, tla: str | None = None) -> AdoptionData:
        """Create adoption data.

        Args:
            slots: Staged names of the run.
            doc_url: URL of the input document (IPT or zipped IAM).
            tla: Top level assembly inside the ZIP, if any.
        """
        logger.info(f"Staging adoption of {doc_url}")
        bucket = await self._resolver.get_bucket()

        thumbnail_url, svf_url, parameters_url, output_model_url = await self._issue_urls(
            bucket,
            {
                "thumbnail": (slots.thumbnail, ObjectAccess.WRITE),
                "svf": (slots.svf, ObjectAccess.WRITE),
                "parameters": (slots.parameters, ObjectAccess.WRITE),
                "output_model": (slots.output_model, ObjectAccess.WRITE),
            },
        )

        return AdoptionData(
            input_doc_url=doc_url,
            thumbnail_url=thumbnail_url,
            svf_url=svf_url,
            parameters_json_url=parameters_url,
            output_model_url=output_model_url,
            tla=tla,
        )

    async def for_update(
        self, slots: StagingSlots, doc_url: str, tla: str | None, parameters: ModelParameters
    ) -> UpdateData:
        """Create update data and stage the requested parameters.

        The parameters are uploaded to the input-params slot before this returns, so
        the processor can read them through ``input_params_url`` right away.
        """
        logger.info(f"Staging update of {doc_url} with {len(parameters)} parameter(s)")
        bucket = await self._resolver.get_bucket()

        output_model_url, svf_url, parameters_url, input_params_url = await self._issue_urls(
            bucket,
            {
                "output_model": (slots.output_model, ObjectAccess.WRITE),
                "svf": (slots.svf, ObjectAccess.WRITE),
                "parameters": (slots.parameters, ObjectAccess.WRITE),
                # the processor re-reads what was staged here
                "input_params": (slots.input_params, ObjectAccess.READ_WRITE),
            },
        )

        try:
            await bucket.upload_object(slots.input_params, serialize_parameters(parameters))
        except Exception as e:
            logger.error(f"Upload of input parameters to {slots.input_params} failed: {e}")
            raise TransportError(f"Upload of input parameters to '{slots.input_params}' failed: {e}") from e
        logger.debug(f"Uploaded input parameters to {slots.input_params}")

        return UpdateData(
            input_doc_url=doc_url,
            output_model_url=output_model_url,
            svf_url=svf_url,
            parameters_json_url=parameters_url,
            input_params_url=input_params_url,
            tla=tla,
        )

    async def for_sat(self, slots: StagingSlots, doc_url: str, tla: str | None = None) -> ProcessingArgs:
        """Create arguments for SAT extraction.

        The SAT file is an intermediate consumed by the RFA stage, so the URL grants
        both read and write access.
        """
        logger.info(f"Staging SAT extraction of {doc_url}")
        bucket = await self._resolver.get_bucket()

        (sat_url,) = await self._issue_urls(bucket, {"output_sat": (slots.output_sat, ObjectAccess.READ_WRITE)})

        return ProcessingArgs(input_doc_url=doc_url, tla=tla, sat_url=sat_url)

    async def for_rfa(self, slots: StagingSlots, doc_url: str) -> ProcessingArgs:
        """Create arguments for RFA extraction."""
        logger.info(f"Staging RFA extraction of {doc_url}")
        bucket = await self._resolver.get_bucket()

        (rfa_url,) = await self._issue_urls(bucket, {"output_rfa": (slots.output_rfa, ObjectAccess.WRITE)})

        return ProcessingArgs(input_doc_url=doc_url, rfa_url=rfa_url)

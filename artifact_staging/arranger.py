"""Per-run facade placing generated data files in their expected places."""

from artifact_staging.bundles import AdoptionData, ProcessingArgs, UpdateData
from artifact_staging.hashing import ClientFactory, HashResolver
from artifact_staging.naming import NamingScheme
from artifact_staging.parameters import ModelParameters
from artifact_staging.publication import PublicationCoordinator
from artifact_staging.slots import StagingSlots
from artifact_staging.staging import StagingCoordinator
from artifact_staging.storage import BucketResolver


class Arranger:
    """Binds one run's StagingSlots to the staging, hashing and publication steps.

    A new run needs a new Arranger. The slots are generated on construction unless
    given, and never change afterwards.

    Example:
        >>> arranger = Arranger(StaticBucketResolver(bucket))
        >>> data = await arranger.for_adoption("https://x/doc.ipt")
        >>> # ... processor writes its outputs to the URLs in ``data`` ...
        >>> hash_string = await arranger.move_project(Project("wrench"), tla=None)
    """

    def __init__(
        self,
        resolver: BucketResolver,
        *,
        client_factory: ClientFactory | None = None,
        slots: StagingSlots | None = None,
    ) -> None:
        self._slots = slots or StagingSlots.create()
        hash_resolver = HashResolver(resolver, client_factory)
        self._staging = StagingCoordinator(resolver)
        self._hash_resolver = hash_resolver
        self._publication = PublicationCoordinator(resolver, hash_resolver)

    @property
    def slots(self) -> StagingSlots:
        return self._slots

    async def for_adoption(self, doc_url: str, tla: str | None = None) -> AdoptionData:
        return await self._staging.for_adoption(self._slots, doc_url, tla)

    async def for_update(self, doc_url: str, tla: str | None, parameters: ModelParameters) -> UpdateData:
        return await self._staging.for_update(self._slots, doc_url, tla, parameters)

    async def for_sat(self, doc_url: str, tla: str | None = None) -> ProcessingArgs:
        return await self._staging.for_sat(self._slots, doc_url, tla)

    async def for_rfa(self, doc_url: str) -> ProcessingArgs:
        return await self._staging.for_rfa(self._slots, doc_url)

    async def resolve_hash(self) -> str:
        return await self._hash_resolver.resolve_hash(self._slots)

    async def move_project(self, project: NamingScheme, tla: str | None) -> str:
        return await self._publication.move_project(self._slots, project, tla)

    async def move_viewables(self, project: NamingScheme) -> str:
        return await self._publication.move_viewables(self._slots, project)

    async def move_rfa(self, project: NamingScheme, hash_string: str) -> None:
        await self._publication.move_rfa(self._slots, project, hash_string)

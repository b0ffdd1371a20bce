"""Artifact Staging - staged writes and content-addressed publication for processing runs.

A processing run writes its generated artifacts (thumbnail, SVF viewables,
parameters, converted model, SAT and RFA outputs) under random temporary names
through signed URLs. Once processing succeeds, the staged parameters are hashed
and the artifacts are renamed to canonical names derived from that hash.

Quick Start:
    >>> from artifact_staging import Arranger, MemoryBucket, Project, StaticBucketResolver
    >>>
    >>> arranger = Arranger(StaticBucketResolver(MemoryBucket("tenant")))
    >>> data = await arranger.for_adoption("https://x/doc.ipt")
    >>> # the processor writes to data.thumbnail_url, data.svf_url, ...
    >>> hash_string = await arranger.move_project(Project("wrench"), tla=None)

Environment Variables:
    - ARTIFACT_STAGING_HTTP_TIMEOUT: timeout of the default HTTP client
    - ARTIFACT_STAGING_LOG_LEVEL: log level of the default logging configuration
"""

from .arranger import Arranger
from .bundles import AdoptionData, ProcessingArgs, UpdateData
from .concurrency import join_all
from .exceptions import (
    BatchOperationError,
    BucketResolutionError,
    HashResolutionError,
    InvalidProjectNameError,
    ObjectNotFoundError,
    ParametersDeserializationError,
    RelocationError,
    SignedUrlIssuanceError,
    StagingError,
    TransportError,
)
from .hashing import HashResolver
from .logging import LoggingConfig, get_pipeline_logger, setup_logging
from .naming import CanonicalNames, NamingScheme, Project, ProjectMetadata
from .parameters import ModelParameter, ModelParameters, compute_parameters_hash
from .publication import PublicationCoordinator
from .settings import settings
from .slots import StagingSlots
from .staging import StagingCoordinator
from .storage import BucketGateway, BucketResolver, MemoryBucket, ObjectAccess, StaticBucketResolver

__version__ = "0.1.0"

__all__ = [
    # Run facade
    "Arranger",
    "StagingSlots",
    # Coordinators
    "StagingCoordinator",
    "HashResolver",
    "PublicationCoordinator",
    "join_all",
    # Bundles
    "AdoptionData",
    "UpdateData",
    "ProcessingArgs",
    # Parameters
    "ModelParameter",
    "ModelParameters",
    "compute_parameters_hash",
    # Naming
    "CanonicalNames",
    "NamingScheme",
    "Project",
    "ProjectMetadata",
    # Storage
    "BucketGateway",
    "BucketResolver",
    "MemoryBucket",
    "ObjectAccess",
    "StaticBucketResolver",
    # Exceptions
    "StagingError",
    "BucketResolutionError",
    "BatchOperationError",
    "SignedUrlIssuanceError",
    "RelocationError",
    "TransportError",
    "ParametersDeserializationError",
    "HashResolutionError",
    "ObjectNotFoundError",
    "InvalidProjectNameError",
    # Logging & settings
    "LoggingConfig",
    "get_pipeline_logger",
    "setup_logging",
    "settings",
]

"""Exception hierarchy for Artifact Staging.

All exceptions inherit from StagingError, so callers can catch every failure of a
run with a single except clause while still telling the failure kinds apart.
"""


class StagingError(Exception):
    """Base exception for all artifact staging errors."""


class BucketResolutionError(StagingError):
    """Raised when the caller's identity cannot be mapped to a storage bucket."""


class BatchOperationError(StagingError):
    """Raised when one or more operations of a concurrent batch fail.

    Every operation of the batch has settled by the time this is raised. Operations
    that succeeded are not rolled back.

    Attributes:
        failures: ``(label, exception)`` pairs, in the order the batch was dispatched.
        total: Number of operations in the batch.
    """

    def __init__(self, message: str, failures: list[tuple[str, BaseException]], total: int):
        super().__init__(message)
        self.failures = failures
        self.total = total

    @property
    def failed_labels(self) -> list[str]:
        return [label for label, _ in self.failures]


class SignedUrlIssuanceError(BatchOperationError):
    """Raised when any signed URL of a stage bundle could not be issued."""


class RelocationError(BatchOperationError):
    """Raised when any rename, delete or upload of a publication batch fails."""


class TransportError(StagingError):
    """Raised when a fetch or upload fails, including non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParametersDeserializationError(StagingError):
    """Raised when staged parameter content is not a valid parameters document."""


class HashResolutionError(StagingError):
    """Raised when the canonical hash of the staged parameters cannot be computed.

    The underlying TransportError or ParametersDeserializationError is chained as
    ``__cause__``.
    """


class ObjectNotFoundError(StagingError, KeyError):
    """Raised by in-memory buckets when an object does not exist."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class InvalidProjectNameError(StagingError, ValueError):
    """Raised when a project name cannot be used to build object names."""

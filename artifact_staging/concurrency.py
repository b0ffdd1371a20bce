"""Fan-out/fan-in helper for independent network operations."""

import asyncio
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from artifact_staging.exceptions import BatchOperationError
from artifact_staging.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

_E = TypeVar("_E", bound=BatchOperationError)


async def join_all(operations: Mapping[str, Awaitable[Any]], error_type: type[_E]) -> list[Any]:
    """Run labelled operations concurrently and wait for every one of them to settle.

    A failing operation does not cancel its siblings. Once all operations have
    finished, any failure is reported as a single ``error_type`` listing every
    failed label. Completed operations are left as they are.

    Args:
        operations: Label to awaitable. Labels only appear in logs and errors.
        error_type: BatchOperationError subclass raised on failure.

    Returns:
        Results in the insertion order of ``operations``.

    Raises:
        error_type: If at least one operation raised.
    """
    labels = list(operations)
    results = await asyncio.gather(*operations.values(), return_exceptions=True)

    failures: list[tuple[str, BaseException]] = []
    for label, result in zip(labels, results):
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, BaseException):
            failures.append((label, result))

    if failures:
        details = "\n".join(f"  {label}: {type(e).__name__}: {e}" for label, e in failures)
        message = f"{len(failures)}/{len(labels)} operations failed:\n{details}"
        logger.error(message)
        raise error_type(message, failures=failures, total=len(labels))

    return list(results)

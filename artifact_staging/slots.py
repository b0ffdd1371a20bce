"""Temporary object names for one staging run.

Each run writes its generated artifacts under names that carry no meaning beyond
uniqueness. The artifacts are moved to hash-derived names only once the run's
parameters are known, so concurrent runs never touch each other's objects.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields

__all__ = ["StagingSlots", "unique_name"]


def unique_name(extension: str) -> str:
    """Return a random object name with the given extension.

    Uses uuid4 (122 random bits), so collisions between concurrently active runs are
    practically impossible but not ruled out.
    """
    return f"{uuid.uuid4().hex}.{extension}"


@dataclass(frozen=True, slots=True)
class StagingSlots:
    """Staged object names of a single run.

    Attributes:
        parameters: Parameters JSON produced by the processor.
        thumbnail: Thumbnail image.
        svf: Zipped SVF viewables.
        input_params: Parameters JSON uploaded for the processor to read.
        output_model: Zipped converted model.
        output_sat: SAT intermediate, consumed by the RFA stage.
        output_rfa: Final RFA output.
    """

    parameters: str
    thumbnail: str
    svf: str
    input_params: str
    output_model: str
    output_sat: str
    output_rfa: str

    @classmethod
    def create(cls) -> StagingSlots:
        """Generate a fresh set of names for a new run."""
        return cls(
            parameters=unique_name("json"),
            thumbnail=unique_name("png"),
            svf=unique_name("zip"),
            input_params=unique_name("json"),
            output_model=unique_name("zip"),
            output_sat=unique_name("sat"),
            output_rfa=unique_name("rfa"),
        )

    def names(self) -> tuple[str, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

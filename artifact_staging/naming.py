"""Canonical object names of published artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from artifact_staging.exceptions import InvalidProjectNameError

__all__ = ["CanonicalNames", "NamingScheme", "Project", "ProjectMetadata"]


@dataclass(frozen=True, slots=True)
class CanonicalNames:
    """Permanent object names for one (project, hash) pair."""

    current_model: str
    model_view: str
    parameters: str
    rfa: str
    thumbnail: str
    metadata: str


@runtime_checkable
class NamingScheme(Protocol):
    """Source of canonical names, owned by the project a run belongs to.

    Must be deterministic, and distinct hashes must map to distinct names.
    """

    def oss_name_provider(self, hash_string: str) -> CanonicalNames: ...


@dataclass(frozen=True, slots=True)
class Project:
    """Project naming scheme.

    Hash-keyed artifacts live under ``cache/<project>/<hash>/``. The thumbnail and
    metadata describe the project as a whole and live under ``attributes/<project>/``.
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or "/" in self.name:
            raise InvalidProjectNameError(f"Invalid project name: {self.name!r}")

    @property
    def attributes_prefix(self) -> str:
        return f"attributes/{self.name}"

    def oss_name_provider(self, hash_string: str) -> CanonicalNames:
        if not hash_string:
            raise ValueError("Hash string must not be empty")
        cache = f"cache/{self.name}/{hash_string}"
        return CanonicalNames(
            current_model=f"{cache}/model.zip",
            model_view=f"{cache}/svf.zip",
            parameters=f"{cache}/parameters.json",
            rfa=f"{cache}/output.rfa",
            thumbnail=f"{self.attributes_prefix}/thumbnail.png",
            metadata=f"{self.attributes_prefix}/metadata.json",
        )


class ProjectMetadata(BaseModel):
    """Metadata record written once per published project run."""

    model_config = ConfigDict(frozen=True)

    hash: str
    tla: str | None = None

    def to_json_bytes(self) -> bytes:
        return self.model_dump_json(indent=2).encode("utf-8")

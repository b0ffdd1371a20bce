"""Model parameters and their canonical hash.

The parameters document is the authoritative description of a run's output: two
runs that end with the same parameters produce the same canonical hash and thus
share canonical object names.
"""

import hashlib
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from artifact_staging.exceptions import ParametersDeserializationError

__all__ = [
    "ModelParameter",
    "ModelParameters",
    "compute_parameters_hash",
    "parse_parameters",
    "serialize_parameters",
]


class ModelParameter(BaseModel):
    """A single model parameter.

    Unknown keys are kept so they take part in the hash.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    value: str
    unit: str | None = None
    values: tuple[str, ...] = ()
    label: str | None = None
    readonly: bool = False


class ModelParameters(RootModel[dict[str, ModelParameter]]):
    """Parameter name to parameter, as staged in the parameters JSON."""

    def __getitem__(self, name: str) -> ModelParameter:
        return self.root[name]

    def __len__(self) -> int:
        return len(self.root)


def parse_parameters(content: bytes | str) -> ModelParameters:
    """Deserialize a staged parameters document.

    Raises:
        ParametersDeserializationError: If the content is not valid JSON or does not
            match the parameters structure.
    """
    try:
        return ModelParameters.model_validate_json(content)
    except ValidationError as e:
        raise ParametersDeserializationError(f"Invalid parameters document: {e.error_count()} error(s)\n{e}") from e


def serialize_parameters(parameters: ModelParameters) -> bytes:
    """Serialize parameters to the JSON staging format.

    Null values are written out, so unknown keys survive a round trip unchanged.
    """
    return parameters.model_dump_json().encode("utf-8")


def compute_parameters_hash(parameters: ModelParameters) -> str:
    """Compute the canonical hash of a parameters document.

    SHA256 over compact JSON with sorted keys, as uppercase hex. Key order in the
    source document does not affect the result.
    """
    data: dict[str, Any] = parameters.model_dump(mode="json")
    canonical = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest().upper()

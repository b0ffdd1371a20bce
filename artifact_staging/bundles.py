"""Stage bundles handed to the external processor.

Each bundle carries exactly the signed URLs its stage needs. Bundles serialize with
camelCase keys (``model_dump(by_alias=True)``), the shape the processor reads.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = ["AdoptionData", "ProcessingArgs", "UpdateData"]


class _Bundle(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    input_doc_url: str
    tla: str | None = None


class AdoptionData(_Bundle):
    """Write targets for adopting a new input document."""

    thumbnail_url: str
    svf_url: str
    parameters_json_url: str
    output_model_url: str


class UpdateData(_Bundle):
    """Write targets for regenerating a model with new parameters.

    ``input_params_url`` is readable and writable and already holds the
    parameters uploaded for this update.
    """

    output_model_url: str
    svf_url: str
    parameters_json_url: str
    input_params_url: str


class ProcessingArgs(_Bundle):
    """Arguments of the SAT and RFA extraction stages."""

    sat_url: str | None = None
    rfa_url: str | None = None

"""Pydantic models for model management requests and responses.

Covers model management on the host and the embedding endpoint.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ollama_binding.models.common import (
    HostRequest,
    HostResponse,
    NonStreamingRequest,
    Quantization,
)


class ModelDetails(BaseModel):
    """Format and architecture details of a model.

    Attributes:
        parent_model: Model this one was derived from, if any
        format: Model file format (e.g., "gguf")
        family: Model family (e.g., "llama")
        families: All families the model belongs to
        parameter_size: Human-readable parameter count (e.g., "8.0B")
        quantization_level: Quantization level (e.g., "Q4_K_M")
    """

    parent_model: str = ""
    format: str = ""
    family: str = ""
    families: list[str] | None = None
    parameter_size: str = ""
    quantization_level: str = ""


class ModelDescriptor(BaseModel):
    """A model stored on the host, as reported by /api/tags."""

    name: str = Field(..., description="Model name (e.g., 'llama3.2:latest')")
    model: str = Field(..., description="Model identifier")
    modified_at: str | None = Field(default=None, description="ISO 8601 timestamp")
    size: int = Field(..., description="Size in bytes")
    digest: str = Field(..., description="Content digest")
    details: ModelDetails = Field(default_factory=ModelDetails)


class RunningModel(ModelDescriptor):
    """A model currently loaded into memory, as reported by /api/ps."""

    expires_at: str | None = Field(default=None, description="ISO 8601 timestamp")
    size_vram: int = Field(default=0, description="Bytes held in VRAM")


class ListResponse(HostResponse):
    """Response of GET /api/tags."""

    models: list[ModelDescriptor] = Field(default_factory=list)


class ProcessResponse(HostResponse):
    """Response of GET /api/ps."""

    models: list[RunningModel] = Field(default_factory=list)


class ShowRequest(HostRequest):
    """Request body for POST /api/show."""

    model: str
    verbose: bool | None = None


class ShowResponse(HostResponse):
    """Response of POST /api/show."""

    modelfile: str = ""
    parameters: str = ""
    template: str = ""
    license: str = ""
    modified_at: str | None = None
    details: ModelDetails = Field(default_factory=ModelDetails)
    model_info: dict[str, Any] = Field(default_factory=dict)
    capabilities: list[str] = Field(default_factory=list)

    model_config = ConfigDict(protected_namespaces=())


class EmbedRequest(HostRequest):
    """Request body for POST /api/embed."""

    model: str
    input: list[str]
    truncate: bool | None = None
    options: dict[str, Any] | None = None
    keep_alive: float | str | None = None


class EmbedResponse(HostResponse):
    """Response of POST /api/embed."""

    model: str = ""
    embeddings: list[list[float]] = Field(default_factory=list)
    total_duration: int | None = None
    load_duration: int | None = None
    prompt_eval_count: int | None = None


class TransferRequest(NonStreamingRequest):
    """Request body for POST /api/push and POST /api/pull."""

    model: str
    insecure: bool = False


class StatusResponse(HostResponse):
    """Response of push and pull."""

    status: str = ""


class DeleteRequest(HostRequest):
    """Request body for DELETE /api/delete."""

    model: str


class CopyRequest(HostRequest):
    """Request body for POST /api/copy."""

    source: str
    destination: str


class CreateRequest(NonStreamingRequest):
    """Request body for POST /api/create.

    ``quantize`` only accepts the codes in :class:`Quantization`; any other
    string fails validation when the request is built.
    """

    model: str
    modelfile: str | None = None
    path: str | None = None
    quantize: Quantization | None = None


class VersionResponse(HostResponse):
    """Response of GET /api/version."""

    version: str = ""

"""Pydantic models for the /api/generate completion endpoint."""

from typing import Any

from pydantic import Field

from ollama_binding.models.common import HostResponse, Metrics, NonStreamingRequest


class GenerateRequest(NonStreamingRequest):
    """Request body for POST /api/generate.

    Only ``model`` is required. Every optional field left unset is omitted
    from the payload instead of being sent as null.
    """

    model: str
    prompt: str = ""
    suffix: str | None = None
    images: list[str] | None = Field(
        default=None, description="Base64-encoded images for multimodal models"
    )
    system: str | None = None
    template: str | None = None
    context: list[int] | None = Field(
        default=None, description="Context tokens returned by a previous call"
    )
    raw: bool | None = None
    keep_alive: float | str | None = None
    format: str | dict[str, Any] | None = Field(
        default=None, description="'json' or a JSON schema for structured output"
    )
    options: dict[str, Any] | None = None


class GenerateResponse(HostResponse, Metrics):
    """Response of POST /api/generate."""

    model: str = ""
    created_at: str = ""
    response: str = ""
    done: bool = False
    done_reason: str | None = None
    context: list[int] | None = None

"""Shared building blocks for request and response schemas.

This module contains the closed enumerations used on the wire and the base
classes every request and response model derives from.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class Quantization(str, Enum):
    """Weight quantization schemes accepted by the create operation."""

    Q2_K = "q2_K"
    Q3_K_L = "q3_K_L"
    Q3_K_M = "q3_K_M"
    Q3_K_S = "q3_K_S"
    Q4_0 = "q4_0"
    Q4_1 = "q4_1"
    Q4_K_M = "q4_K_M"
    Q4_K_S = "q4_K_S"
    Q5_0 = "q5_0"
    Q5_1 = "q5_1"
    Q5_K_M = "q5_K_M"
    Q5_K_S = "q5_K_S"
    Q6_K = "q6_K"
    Q8_0 = "q8_0"


class HostRequest(BaseModel):
    """Base class for request bodies sent to the model host.

    Optional fields left as None are dropped from the payload so the host
    applies its own defaults.
    """

    def to_payload(self) -> dict[str, Any]:
        """Serialize the request into a JSON-ready dict without null fields."""
        return self.model_dump(mode="json", exclude_none=True)


class NonStreamingRequest(HostRequest):
    """Request for an endpoint that would stream unless told otherwise.

    Streaming is not supported, so ``stream`` always goes out as false.
    """

    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if payload.get("stream"):
            logger.debug("Streaming responses are not supported, sending stream=false")
        payload["stream"] = False
        return payload


class HostResponse(BaseModel):
    """Base class for decoded response bodies.

    A failing host answers with ``{"error": "..."}``. That body still decodes
    into the expected record, with ``error`` set and the other fields left at
    their defaults, so callers check ``error`` to detect host-side failures.
    """

    error: str | None = Field(default=None, description="Host-reported error")

    model_config = ConfigDict(extra="allow")


class Metrics(BaseModel):
    """Timing and token statistics reported by generate and chat."""

    total_duration: int | None = Field(default=None, description="Nanoseconds")
    load_duration: int | None = Field(default=None, description="Nanoseconds")
    prompt_eval_count: int | None = None
    prompt_eval_duration: int | None = Field(default=None, description="Nanoseconds")
    eval_count: int | None = None
    eval_duration: int | None = Field(default=None, description="Nanoseconds")

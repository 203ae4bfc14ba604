"""Pydantic models for chat messages, tool descriptors and /api/chat.

Tool descriptors are caller-facing. They never go on the wire as-is:
``ChatRequest.to_payload`` wraps each one into the ``{"type": "function",
"function": {...}}`` object the host expects.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ollama_binding.models.common import (
    HostResponse,
    Metrics,
    NonStreamingRequest,
    Role,
)


class ToolCallFunction(BaseModel):
    """Name and arguments of a function the model asked to call."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class ToolCall(BaseModel):
    """A tool call requested by the assistant. Opaque to the client."""

    function: ToolCallFunction

    model_config = ConfigDict(extra="allow")


class Message(BaseModel):
    """A single entry of a conversation history.

    Attributes:
        role: Author of the message
        content: Message text
        images: Base64-encoded images attached to the message
        tool_calls: Tool calls requested by the assistant
        tool_name: Name of the tool whose result this message carries
    """

    role: Role
    content: str = ""
    images: list[str] | None = None
    tool_calls: list[ToolCall] | None = None
    tool_name: str | None = None

    model_config = ConfigDict(extra="allow")


class ToolProperty(BaseModel):
    """JSON schema of a single tool parameter.

    Schema keywords not declared here (items, minimum, nested properties)
    are kept and sent unchanged.
    """

    type: str
    description: str | None = None
    enum: list[Any] | None = None

    model_config = ConfigDict(extra="allow")


class ToolParameters(BaseModel):
    """JSON schema of a tool's parameter object."""

    type: str = "object"
    properties: dict[str, ToolProperty] = Field(default_factory=dict)
    required: list[str] | None = None

    model_config = ConfigDict(extra="allow")


class ToolDescriptor(BaseModel):
    """A callable offered to the model, as described by the caller."""

    name: str
    description: str
    parameters: ToolParameters = Field(default_factory=ToolParameters)


class WireFunction(BaseModel):
    """The ``function`` member of a wire tool."""

    name: str
    description: str
    parameters: ToolParameters


class WireTool(BaseModel):
    """Tool schema as sent to the model host."""

    type: Literal["function"] = "function"
    function: WireFunction

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor) -> "WireTool":
        """Wrap a caller tool descriptor into the host's function schema."""
        return cls(
            function=WireFunction(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.parameters,
            )
        )


class ChatRequest(NonStreamingRequest):
    """Request body for POST /api/chat."""

    model: str
    messages: list[Message] = Field(default_factory=list)
    tools: list[ToolDescriptor] | None = None
    format: str | dict[str, Any] | None = None
    options: dict[str, Any] | None = None
    keep_alive: float | str | None = None

    @field_serializer("messages")
    def _serialize_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        # Only what the caller set, so defaults never reach the wire
        return [
            message.model_dump(mode="json", exclude_unset=True)
            for message in messages
        ]

    def to_payload(self) -> dict[str, Any]:
        """Serialize the request, re-wrapping tools into the wire schema.

        When no tools were given the ``tools`` key is absent altogether.
        """
        payload = super().to_payload()
        payload.pop("tools", None)
        if self.tools is not None:
            payload["tools"] = [
                WireTool.from_descriptor(tool).model_dump(
                    mode="json", exclude_none=True
                )
                for tool in self.tools
            ]
        return payload


class ChatResponse(HostResponse, Metrics):
    """Response of POST /api/chat."""

    model: str = ""
    created_at: str = ""
    message: Message | None = None
    done: bool = False
    done_reason: str | None = None

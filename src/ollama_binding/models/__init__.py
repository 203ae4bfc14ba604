"""Pydantic models for model host requests and responses.

This package contains one model per request body and response shape of the
model host API, plus the message and tool types used by chat.
"""

from ollama_binding.models.chat import (
    ChatRequest,
    ChatResponse,
    Message,
    ToolCall,
    ToolCallFunction,
    ToolDescriptor,
    ToolParameters,
    ToolProperty,
    WireFunction,
    WireTool,
)
from ollama_binding.models.common import (
    HostRequest,
    HostResponse,
    Metrics,
    NonStreamingRequest,
    Quantization,
    Role,
)
from ollama_binding.models.generate import GenerateRequest, GenerateResponse
from ollama_binding.models.models import (
    CopyRequest,
    CreateRequest,
    DeleteRequest,
    EmbedRequest,
    EmbedResponse,
    ListResponse,
    ModelDescriptor,
    ModelDetails,
    ProcessResponse,
    RunningModel,
    ShowRequest,
    ShowResponse,
    StatusResponse,
    TransferRequest,
    VersionResponse,
)

__all__ = [
    # Enumerations
    "Role",
    "Quantization",
    # Base classes
    "HostRequest",
    "HostResponse",
    "Metrics",
    "NonStreamingRequest",
    # Chat and tools
    "ChatRequest",
    "ChatResponse",
    "Message",
    "ToolCall",
    "ToolCallFunction",
    "ToolDescriptor",
    "ToolParameters",
    "ToolProperty",
    "WireFunction",
    "WireTool",
    # Generate
    "GenerateRequest",
    "GenerateResponse",
    # Model management
    "CopyRequest",
    "CreateRequest",
    "DeleteRequest",
    "EmbedRequest",
    "EmbedResponse",
    "ListResponse",
    "ModelDescriptor",
    "ModelDetails",
    "ProcessResponse",
    "RunningModel",
    "ShowRequest",
    "ShowResponse",
    "StatusResponse",
    "TransferRequest",
    "VersionResponse",
]

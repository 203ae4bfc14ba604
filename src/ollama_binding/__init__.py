"""ollama-binding: typed client for the Ollama model host HTTP API.

This package provides blocking and async clients that map each API operation
to one HTTP request and decode the JSON response into pydantic records.
"""

from ollama_binding.client import (
    DEFAULT_PORT,
    AsyncClient,
    Client,
    Session,
    create_client,
)
from ollama_binding.config import ClientSettings
from ollama_binding.errors import DecodeError, EncodeError, OllamaBindingError
from ollama_binding.models import (
    ChatResponse,
    EmbedResponse,
    GenerateResponse,
    Message,
    ModelDescriptor,
    ModelDetails,
    Quantization,
    Role,
    RunningModel,
    ShowResponse,
    StatusResponse,
    ToolCall,
    ToolDescriptor,
    ToolParameters,
    ToolProperty,
    VersionResponse,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "AsyncClient",
    "Client",
    "ClientSettings",
    "DEFAULT_PORT",
    "Session",
    "create_client",
    # Errors
    "DecodeError",
    "EncodeError",
    "OllamaBindingError",
    # Records
    "ChatResponse",
    "EmbedResponse",
    "GenerateResponse",
    "Message",
    "ModelDescriptor",
    "ModelDetails",
    "Quantization",
    "Role",
    "RunningModel",
    "ShowResponse",
    "StatusResponse",
    "ToolCall",
    "ToolDescriptor",
    "ToolParameters",
    "ToolProperty",
    "VersionResponse",
]

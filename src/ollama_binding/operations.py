"""Catalog of model host operations.

Each function here binds one API operation to its HTTP verb, URL path,
request body and response parser. The clients only execute the resulting
:class:`Operation`, so the blocking and async clients share one mapping.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ollama_binding.errors import DecodeError, EncodeError
from ollama_binding.models import (
    ChatRequest,
    ChatResponse,
    CopyRequest,
    CreateRequest,
    DeleteRequest,
    EmbedRequest,
    EmbedResponse,
    GenerateRequest,
    GenerateResponse,
    HostRequest,
    ListResponse,
    Message,
    ModelDescriptor,
    ProcessResponse,
    Quantization,
    RunningModel,
    ShowRequest,
    ShowResponse,
    StatusResponse,
    ToolDescriptor,
    TransferRequest,
    VersionResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
ResponseT = TypeVar("ResponseT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Operation(Generic[T]):
    """One request/response exchange with the model host.

    Attributes:
        method: HTTP verb
        path: URL path below the host's base URL
        request: Request body model, or None for bodiless requests
        parse: Turns the HTTP response into the operation's result
    """

    method: str
    path: str
    request: HostRequest | None
    parse: Callable[[httpx.Response], T]

    def encode(self) -> bytes | None:
        """Serialize the request body as UTF-8 JSON.

        Raises:
            EncodeError: If the body holds values JSON cannot represent
        """
        if self.request is None:
            return None
        try:
            payload = self.request.to_payload()
            return json.dumps(payload, allow_nan=False).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(
                f"Cannot encode request body for {self.method} {self.path}: {e}"
            ) from e


def decode(response: httpx.Response, model: type[ResponseT]) -> ResponseT:
    """Decode a JSON response body into ``model``.

    Decoding is attempted whatever the HTTP status, so a host error body
    comes back as a record with ``error`` set.

    Raises:
        DecodeError: If the body is not JSON or does not fit ``model``
    """
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(
            f"Response from {response.request.url.path} is not valid JSON: {e}",
            status_code=response.status_code,
            body=response.text,
        ) from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response from {response.request.url.path} does not match "
            f"{model.__name__}: {e}",
            status_code=response.status_code,
            body=response.text,
        ) from e


def succeeded(response: httpx.Response) -> bool:
    """Report whether the host answered with a 2xx status."""
    if not response.is_success:
        logger.debug(
            f"{response.request.method} {response.request.url.path} "
            f"failed with status {response.status_code}"
        )
    return response.is_success


def list_running() -> Operation[list[RunningModel]]:
    return Operation(
        "GET",
        "/api/ps",
        None,
        lambda response: decode(response, ProcessResponse).models,
    )


def list_local() -> Operation[list[ModelDescriptor]]:
    return Operation(
        "GET",
        "/api/tags",
        None,
        lambda response: decode(response, ListResponse).models,
    )


def embed(
    model: str,
    inputs: Sequence[str],
    truncate: bool | None = None,
    options: dict[str, Any] | None = None,
    keep_alive: float | str | None = None,
) -> Operation[EmbedResponse]:
    request = EmbedRequest(
        model=model,
        input=list(inputs),
        truncate=truncate,
        options=options,
        keep_alive=keep_alive,
    )
    return Operation(
        "POST",
        "/api/embed",
        request,
        lambda response: decode(response, EmbedResponse),
    )


def show(model: str, verbose: bool | None = None) -> Operation[ShowResponse]:
    request = ShowRequest(model=model, verbose=verbose)
    return Operation(
        "POST",
        "/api/show",
        request,
        lambda response: decode(response, ShowResponse),
    )


def push(model: str, insecure: bool = False) -> Operation[StatusResponse]:
    request = TransferRequest(model=model, insecure=insecure)
    return Operation(
        "POST",
        "/api/push",
        request,
        lambda response: decode(response, StatusResponse),
    )


def pull(model: str, insecure: bool = False) -> Operation[StatusResponse]:
    request = TransferRequest(model=model, insecure=insecure)
    return Operation(
        "POST",
        "/api/pull",
        request,
        lambda response: decode(response, StatusResponse),
    )


def delete(model: str) -> Operation[bool]:
    request = DeleteRequest(model=model)
    return Operation("DELETE", "/api/delete", request, succeeded)


def copy(source: str, destination: str) -> Operation[bool]:
    request = CopyRequest(source=source, destination=destination)
    return Operation("POST", "/api/copy", request, succeeded)


def create(
    model: str,
    modelfile: str | None = None,
    path: str | None = None,
    quantize: Quantization | str | None = None,
) -> Operation[bool]:
    request = CreateRequest(
        model=model, modelfile=modelfile, path=path, quantize=quantize
    )
    return Operation("POST", "/api/create", request, succeeded)


def generate(
    model: str,
    prompt: str = "",
    suffix: str | None = None,
    images: Sequence[str] | None = None,
    system: str | None = None,
    template: str | None = None,
    context: Sequence[int] | None = None,
    raw: bool | None = None,
    keep_alive: float | str | None = None,
    format: str | dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
) -> Operation[GenerateResponse]:
    """Build a completion request. Arguments left as None are not sent."""
    request = GenerateRequest(
        model=model,
        prompt=prompt,
        suffix=suffix,
        images=list(images) if images is not None else None,
        system=system,
        template=template,
        context=list(context) if context is not None else None,
        raw=raw,
        keep_alive=keep_alive,
        format=format,
        options=options,
    )
    return Operation(
        "POST",
        "/api/generate",
        request,
        lambda response: decode(response, GenerateResponse),
    )


def chat(
    model: str,
    messages: Sequence[Message | dict[str, Any]] | None = None,
    tools: Sequence[ToolDescriptor | dict[str, Any]] | None = None,
    format: str | dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
    keep_alive: float | str | None = None,
) -> Operation[ChatResponse]:
    """Build a chat request.

    The caller's message list is copied into the request and never modified.
    Tools, when given, are re-wrapped into the host's function schema.

    Args:
        model: Model name
        messages: Conversation history owned by the caller
        tools: Tool descriptors offered to the model
        format: "json" or a JSON schema for structured output
        options: Model parameters such as temperature
        keep_alive: How long the model stays loaded after the call
    """
    request = ChatRequest(
        model=model,
        messages=list(messages or []),
        tools=list(tools) if tools is not None else None,
        format=format,
        options=options,
        keep_alive=keep_alive,
    )
    return Operation(
        "POST",
        "/api/chat",
        request,
        lambda response: decode(response, ChatResponse),
    )


def version() -> Operation[VersionResponse]:
    return Operation(
        "GET",
        "/api/version",
        None,
        lambda response: decode(response, VersionResponse),
    )

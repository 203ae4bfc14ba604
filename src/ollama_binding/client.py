"""Blocking and async clients for the model host HTTP API.

Both clients hold an immutable :class:`Session` and expose one method per API
operation. Every call opens an httpx client, performs a single request and
closes it again. Nothing is pooled, cached, retried or streamed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence, TypeVar

import httpx

from ollama_binding import operations
from ollama_binding.config import ClientSettings
from ollama_binding.errors import DecodeError
from ollama_binding.models import Message, Quantization, ToolDescriptor

logger = logging.getLogger(__name__)

DEFAULT_PORT = 11434

T = TypeVar("T")
ClientT = TypeVar("ClientT", bound="_BaseClient")


@dataclass(frozen=True)
class Session:
    """Address of a model host.

    Attributes:
        host: Host name or IP address, used as given
        port: TCP port, DEFAULT_PORT when None
    """

    host: str
    port: int | None = None

    @property
    def base_url(self) -> str:
        """Base URL every request path is appended to."""
        return f"http://{self.host}:{self.port or DEFAULT_PORT}"


class _BaseClient:
    """Operation methods shared by Client and AsyncClient.

    Each method builds an operation and hands it to ``_send``. On
    :class:`Client` that returns the result directly. On :class:`AsyncClient`
    it returns an awaitable yielding the same result.
    """

    def __init__(
        self,
        host: str,
        port: int | None = None,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client. No connection is made.

        Args:
            host: Model host name or address
            port: Model host port (default: 11434)
            transport: Optional httpx transport, mainly for tests
        """
        self.session = Session(host=host, port=port)
        self._transport = transport
        logger.info(f"{type(self).__name__} initialized for {self.base_url}")

    @classmethod
    def from_settings(
        cls: type[ClientT],
        settings: ClientSettings,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> ClientT:
        """Create a client from a ClientSettings instance."""
        return cls(host=settings.host, port=settings.port, transport=transport)

    @property
    def base_url(self) -> str:
        return self.session.base_url

    def _send(self, operation: operations.Operation[T]) -> Any:
        raise NotImplementedError

    def _log_response(
        self, operation: operations.Operation[Any], response: httpx.Response
    ) -> None:
        logger.debug(f"{operation.method} {operation.path} -> {response.status_code}")

    def ps(self):
        """List the models currently loaded into memory.

        Returns:
            list[RunningModel]
        """
        return self._send(operations.list_running())

    def list(self):
        """List the models stored on the host.

        Returns:
            list[ModelDescriptor]
        """
        return self._send(operations.list_local())

    def embed(
        self,
        model: str,
        *inputs: str,
        truncate: bool | None = None,
        options: dict[str, Any] | None = None,
        keep_alive: float | str | None = None,
    ):
        """Generate one embedding vector per input string.

        Returns:
            EmbedResponse
        """
        return self._send(
            operations.embed(model, inputs, truncate, options, keep_alive)
        )

    def show(self, model: str, verbose: bool | None = None):
        """Show the modelfile, template, parameters and details of a model.

        Returns:
            ShowResponse
        """
        return self._send(operations.show(model, verbose))

    def push(self, model: str, insecure: bool = False):
        """Upload a model to a registry. Returns a StatusResponse."""
        return self._send(operations.push(model, insecure))

    def pull(self, model: str, insecure: bool = False):
        """Download a model from a registry. Returns a StatusResponse."""
        return self._send(operations.pull(model, insecure))

    def delete(self, model: str):
        """Delete a model. Returns True if the host answered with a 2xx status."""
        return self._send(operations.delete(model))

    def copy(self, source: str, destination: str):
        """Copy a model under a new name. Returns True on a 2xx status."""
        return self._send(operations.copy(source, destination))

    def create(
        self,
        model: str,
        modelfile: str | None = None,
        path: str | None = None,
        quantize: Quantization | str | None = None,
    ):
        """Create a model from a modelfile. Returns True on a 2xx status."""
        return self._send(operations.create(model, modelfile, path, quantize))

    def generate(
        self,
        model: str,
        prompt: str = "",
        *,
        suffix: str | None = None,
        images: Sequence[str] | None = None,
        system: str | None = None,
        template: str | None = None,
        context: Sequence[int] | None = None,
        raw: bool | None = None,
        keep_alive: float | str | None = None,
        format: str | dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ):
        """Generate a completion for a prompt.

        Arguments left as None are not sent, so the host applies its defaults.

        Returns:
            GenerateResponse
        """
        return self._send(
            operations.generate(
                model,
                prompt,
                suffix=suffix,
                images=images,
                system=system,
                template=template,
                context=context,
                raw=raw,
                keep_alive=keep_alive,
                format=format,
                options=options,
            )
        )

    def chat(
        self,
        model: str,
        messages: Sequence[Message | dict[str, Any]] | None = None,
        *,
        tools: Sequence[ToolDescriptor | dict[str, Any]] | None = None,
        format: str | dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
        keep_alive: float | str | None = None,
    ):
        """Send a conversation and return the assistant's next message.

        The conversation history belongs to the caller. Append the returned
        ``message`` (and any tool results) before the next call. Requested
        ``tool_calls`` are returned as-is and never executed here.

        Returns:
            ChatResponse
        """
        return self._send(
            operations.chat(
                model,
                messages,
                tools,
                format=format,
                options=options,
                keep_alive=keep_alive,
            )
        )

    def version(self):
        """Get the host's version. Returns a VersionResponse."""
        return self._send(operations.version())


class Client(_BaseClient):
    """Blocking client for the model host API.

    Example:
        >>> client = Client("localhost")
        >>> reply = client.chat(
        ...     model="llama3.2",
        ...     messages=[{"role": "user", "content": "Hello"}],
        ... )
        >>> print(reply.message.content)
    """

    def _send(self, operation: operations.Operation[T]) -> T:
        content = operation.encode()
        with httpx.Client(
            base_url=self.base_url, transport=self._transport, timeout=None
        ) as http:
            response = http.request(
                operation.method,
                operation.path,
                content=content,
                headers=operations.JSON_HEADERS if content is not None else None,
            )
        self._log_response(operation, response)
        return operation.parse(response)

    def check_connection(self) -> bool:
        """Check if the model host is reachable.

        Returns:
            bool: True if the host answered the version query, False otherwise
        """
        try:
            result = self.version()
        except (httpx.HTTPError, DecodeError) as e:
            logger.warning(f"Connection check against {self.base_url} failed: {e}")
            return False
        if result.error is not None:
            logger.warning(f"Connection check reported an error: {result.error}")
            return False
        logger.debug("Connection check: successful")
        return True


class AsyncClient(_BaseClient):
    """Async client for the model host API.

    Same methods as :class:`Client`; each one returns an awaitable that
    performs a single request.
    """

    async def _send(self, operation: operations.Operation[T]) -> T:
        content = operation.encode()
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self._transport, timeout=None
        ) as http:
            response = await http.request(
                operation.method,
                operation.path,
                content=content,
                headers=operations.JSON_HEADERS if content is not None else None,
            )
        self._log_response(operation, response)
        return operation.parse(response)

    async def check_connection(self) -> bool:
        """Check if the model host is reachable.

        Returns:
            bool: True if the host answered the version query, False otherwise
        """
        try:
            result = await self.version()
        except (httpx.HTTPError, DecodeError) as e:
            logger.warning(f"Connection check against {self.base_url} failed: {e}")
            return False
        if result.error is not None:
            logger.warning(f"Connection check reported an error: {result.error}")
            return False
        logger.debug("Connection check: successful")
        return True


def create_client(
    host: str,
    port: int | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Client:
    """Create a blocking client for ``http://{host}:{port or 11434}``.

    No validation is performed and nothing is sent over the network.
    """
    return Client(host=host, port=port, transport=transport)

"""Exception types raised by the ollama-binding client.

Transport failures (connection refused, DNS errors, timeouts) are not wrapped:
they surface as the ``httpx.TransportError`` subclasses httpx raises.
"""


class OllamaBindingError(Exception):
    """Base class for all errors raised by ollama-binding."""


class EncodeError(OllamaBindingError):
    """Raised when a request body cannot be serialized to JSON."""


class DecodeError(OllamaBindingError):
    """Raised when a response body is not JSON or does not fit the expected shape.

    Attributes:
        status_code: HTTP status of the response that failed to decode
        body: Raw response body text
    """

    def __init__(self, message: str, status_code: int, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

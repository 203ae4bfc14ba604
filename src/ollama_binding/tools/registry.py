"""Registry mapping tool names to Python callables."""

import json
import logging
from typing import Any, Callable

from ollama_binding.errors import OllamaBindingError
from ollama_binding.models import Message, Role, ToolDescriptor

logger = logging.getLogger(__name__)


class UnknownToolError(OllamaBindingError):
    """Raised when the model calls a tool that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No tool registered under the name '{name}'")
        self.name = name


class ToolRegistry:
    """Named tools offered to a model during chat.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(get_time, ToolDescriptor(
        ...     name="get_time", description="Get current time"))
        >>> reply = client.chat(model, history, tools=registry.descriptors())
        >>> history.append(reply.message)
        >>> history.extend(registry.dispatch(reply.message))
    """

    def __init__(self) -> None:
        self._tools: dict[str, tuple[Callable[..., Any], ToolDescriptor]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(
        self, function: Callable[..., Any], descriptor: ToolDescriptor
    ) -> None:
        """Register ``function`` under ``descriptor.name``.

        Registering the same name twice replaces the earlier tool.
        """
        if descriptor.name in self._tools:
            logger.debug(f"Replacing registered tool: {descriptor.name}")
        self._tools[descriptor.name] = (function, descriptor)

    def descriptors(self) -> list[ToolDescriptor]:
        """Descriptors of all registered tools, in registration order."""
        return [descriptor for _, descriptor in self._tools.values()]

    def dispatch(self, message: Message) -> list[Message]:
        """Execute every tool call of an assistant message.

        Arguments are passed as keyword arguments. Results that are not
        strings are JSON-encoded.

        Returns:
            list[Message]: One ``tool`` message per call, in call order

        Raises:
            UnknownToolError: If a call names an unregistered tool
        """
        results: list[Message] = []
        for call in message.tool_calls or []:
            name = call.function.name
            if name not in self._tools:
                raise UnknownToolError(name)

            function, _ = self._tools[name]
            logger.debug(f"Calling tool {name} with {call.function.arguments}")
            output = function(**call.function.arguments)
            content = output if isinstance(output, str) else json.dumps(output)
            results.append(Message(role=Role.TOOL, content=content, tool_name=name))

        return results

"""Caller-side tool execution helpers.

The clients never run tools. This package lets an application register
Python callables, offer their descriptors to ``chat`` and turn the returned
tool calls into tool-result messages.
"""

from ollama_binding.tools.registry import ToolRegistry, UnknownToolError

__all__ = ["ToolRegistry", "UnknownToolError"]

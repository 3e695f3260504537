"""Exceptions raised by the OpenAlex adapter and the tool dispatcher.

Network-level failures (``urllib.error.URLError``, ``TimeoutError``) are not
wrapped; they reach the dispatcher unchanged.
"""

from typing import Iterable


class OpenAlexMCPError(Exception):
    """Base class for every error this package raises on purpose."""


class UnknownToolError(OpenAlexMCPError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class OpenAlexAPIError(OpenAlexMCPError):
    """The OpenAlex API answered with a non-success HTTP status."""

    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"OpenAlex API error: {status} - {status_text}")


class MissingArgumentsError(OpenAlexMCPError):
    def __init__(self, tool_name: str, missing: Iterable[str]):
        self.tool_name = tool_name
        self.missing = list(missing)
        super().__init__(
            f"Missing required argument(s) for {tool_name}: {', '.join(self.missing)}"
        )


class InvalidArgumentError(OpenAlexMCPError):
    def __init__(self, tool_name: str, argument: str, value: object, allowed: Iterable[str]):
        self.tool_name = tool_name
        self.argument = argument
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid value {value!r} for {argument} in {tool_name}; "
            f"expected one of: {', '.join(self.allowed)}"
        )


class UnknownEntityTypeError(OpenAlexMCPError):
    def __init__(self, entity_type: object):
        self.entity_type = entity_type
        super().__init__(f"Unknown entity_type for get_filterable_fields: {entity_type}")

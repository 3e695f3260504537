# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows between the
# MCP layer and the OpenAlex adapter.  Nothing here knows about FastMCP or
# HTTP; they are plain structured bags of data.
#
# Two families live here:
#   - Tool contracts (ParameterSpec, ToolDescriptor): the declarative catalog
#     the registry is built from.  Created once at import, never mutated.
#   - Per-call results (TextContent, ResultEnvelope): the one output shape
#     every tool invocation produces, success or failure.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# Entity kinds that have their own collection endpoint (/works, /authors, ...).
ENTITY_TYPES: tuple[str, ...] = (
    "works",
    "authors",
    "sources",
    "institutions",
    "topics",
    "publishers",
    "funders",
)

# The autocomplete endpoint still accepts the legacy "concepts" kind.
AUTOCOMPLETE_TYPES: tuple[str, ...] = (
    "works",
    "authors",
    "sources",
    "institutions",
    "concepts",
    "publishers",
    "funders",
)


# -----------------------------------------------------------------------------
# ParameterSpec - one named argument of a tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParameterSpec:
    """A single tool argument as advertised in ``tools/list``."""

    name: str
    type: str                              # JSON-schema type: string, integer, ...
    description: str
    required: bool = False
    enum: Optional[tuple[str, ...]] = None

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum:
            schema["enum"] = list(self.enum)
        return schema


# -----------------------------------------------------------------------------
# ToolDescriptor - name + description + ordered parameter list
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as the caller sees it.

    The parameter order is preserved in the rendered JSON schema so the
    listing reads the same way every time.
    """

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        """Render the parameter list as an MCP ``inputSchema`` object."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
        }
        if self.required:
            schema["required"] = self.required
        return schema


# -----------------------------------------------------------------------------
# ResultEnvelope - the universal tool output
# -----------------------------------------------------------------------------
# Success wraps the pretty-printed upstream JSON; failure wraps
# "Error: <message>" and sets is_error.  The dispatcher is the only producer.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ResultEnvelope:
    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """All text blocks joined; envelopes built here carry exactly one."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "content": [{"type": block.type, "text": block.text} for block in self.content]
        }
        if self.is_error:
            data["isError"] = True
        return data

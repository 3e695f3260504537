# =============================================================================
# tools/dispatcher.py  -  Tool Dispatch & the Result Envelope
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Routes one invocation (tool name + argument mapping) to its handler in
#   core/ and converts WHATEVER happens into a ResultEnvelope:
#
#     success  ->  {content: [{type: "text", text: <pretty JSON>}]}
#     failure  ->  {content: [{type: "text", text: "Error: <message>"}], isError: true}
#
# THE ONE RULE:
#   No exception leaves call_tool().  Unknown tool names, missing arguments,
#   OpenAlex HTTP errors, DNS failures, a payload json can't serialise:
#   all of them are caught here, exactly once, and become an error envelope.
#   Handlers never catch anything themselves.
#
# LOGGING:
#   Requests, status lines and responses are logged with ANSI colours, to
#   STDERR (the logging config lives in tools/mcp_server.py).  STDOUT is the
#   MCP transport; writing there would corrupt the protocol stream.
#     CYAN    incoming tool calls (secrets masked)
#     YELLOW  status / failures
#     GREEN   responses (truncated)
# =============================================================================

import json
import logging
from functools import partial
from typing import Any, Callable, Mapping, Optional

from core.config import Settings
from core.errors import InvalidArgumentError, MissingArgumentsError, UnknownToolError
from core.filterable_fields import get_filterable_fields
from core.lookups import autocomplete, classify_text, get_entity
from core.models import ResultEnvelope, TextContent, ToolDescriptor
from core.search import search_entities, search_works
from tools.registry import get_tool

logger = logging.getLogger(__name__)

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_SECRET_ARGUMENTS = frozenset({"api_key", "bearer_token"})
_MAX_LOGGED_RESPONSE = 500


def _log_request(tool_name: str, arguments: Mapping[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(
        f"{k}={'***' if k in _SECRET_ARGUMENTS else repr(v)}" for k, v in arguments.items()
    )
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: ResultEnvelope) -> ResultEnvelope:
    """Log the (truncated) envelope text in GREEN, then return it."""
    text = envelope.text
    if len(text) > _MAX_LOGGED_RESPONSE:
        text = f"{text[:_MAX_LOGGED_RESPONSE]}... ({len(envelope.text)} chars)"
    label = "error" if envelope.is_error else "response"
    logger.info(f"{_GREEN}  ← {tool_name} {label}: {text}{_RESET}")
    return envelope


# =============================================================================
# Dispatch table
# =============================================================================
# Every handler has the same shape: (arguments, settings) -> JSON payload.
# The keys must match tools/registry.py one-to-one.
# =============================================================================
ToolHandler = Callable[[Mapping[str, Any], Settings], Any]


def _filterable_fields(arguments: Mapping[str, Any], settings: Settings) -> Any:
    return get_filterable_fields(arguments.get("entity_type"))


TOOL_HANDLERS: dict[str, ToolHandler] = {
    "search_works": search_works,
    "search_authors": partial(search_entities, "authors"),
    "search_sources": partial(search_entities, "sources"),
    "search_institutions": partial(search_entities, "institutions"),
    "search_topics": partial(search_entities, "topics"),
    "search_publishers": partial(search_entities, "publishers"),
    "search_funders": partial(search_entities, "funders"),
    "get_entity": get_entity,
    "autocomplete": autocomplete,
    "classify_text": classify_text,
    "get_filterable_fields": _filterable_fields,
}


def validate_arguments(descriptor: ToolDescriptor, arguments: Mapping[str, Any]) -> None:
    """Fail fast on absent required arguments or a required enum mismatch.

    Optional enums (search_works ``view``, autocomplete ``type``) are left
    alone: an unexpected ``view`` simply means the full view, and OpenAlex
    reports anything else it cannot parse.
    """
    missing = [name for name in descriptor.required if arguments.get(name) in (None, "")]
    if missing:
        raise MissingArgumentsError(descriptor.name, missing)

    for spec in descriptor.parameters:
        if spec.required and spec.enum and arguments[spec.name] not in spec.enum:
            raise InvalidArgumentError(descriptor.name, spec.name, arguments[spec.name], spec.enum)


def success_envelope(payload: Any) -> ResultEnvelope:
    return ResultEnvelope([TextContent(json.dumps(payload, indent=2, ensure_ascii=False))])


def error_envelope(error: BaseException) -> ResultEnvelope:
    message = str(error) or type(error).__name__
    return ResultEnvelope([TextContent(f"Error: {message}")], is_error=True)


def _dispatch(name: str, arguments: Mapping[str, Any], settings: Settings) -> Any:
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)
    descriptor = get_tool(name)
    if descriptor is not None:
        validate_arguments(descriptor, arguments)
    return handler(arguments, settings)


def call_tool(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> ResultEnvelope:
    """Invoke a tool by name and wrap the outcome in a ResultEnvelope.

    Args:
        name: Tool name as listed by tools/list.
        arguments: The caller's argument mapping (None means no arguments).
        settings: Process-wide defaults; an empty Settings() when omitted.

    Returns:
        Exactly one envelope.  This function does not raise.
    """
    settings = settings or Settings()
    try:
        arguments = dict(arguments or {})
        _log_request(name, arguments)
        envelope = success_envelope(_dispatch(name, arguments, settings))
    except Exception as e:
        _log_status(f"{name} failed: {type(e).__name__}: {e}")
        envelope = error_envelope(e)
    return _log_response(name, envelope)

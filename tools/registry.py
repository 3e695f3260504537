# =============================================================================
# tools/registry.py  -  The Tool Catalog (what tools/list returns)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every tool this server exposes as DATA: a name, a description
#   the LLM reads to decide when to call it, and an ordered parameter list.
#   The same table serves two readers:
#     1. tools/mcp_server.py  - registers one MCP tool per entry
#     2. tools/dispatcher.py  - checks required/enumerated arguments
#
# WHY A TABLE INSTEAD OF ONE FUNCTION SIGNATURE PER TOOL?
#   The seven search tools take the exact same thirteen parameters and
#   differ only in endpoint and filter examples.  Writing them out seven
#   times is how drift starts.  _search_tool() builds them from one list.
#
# TOOL NAMING CONVENTIONS:
#   search_*  -> collection query with filters/paging (read-only)
#   get_*     -> single lookup (read-only)
#   everything else is a read-only utility endpoint
# =============================================================================

from typing import Optional

from core.models import AUTOCOMPLETE_TYPES, ENTITY_TYPES, ParameterSpec, ToolDescriptor

# -----------------------------------------------------------------------------
# Shared parameters
# -----------------------------------------------------------------------------
MAILTO = ParameterSpec(
    "mailto", "string",
    "Contact email for OpenAlex's polite pool (overrides the server default)",
)
API_KEY = ParameterSpec("api_key", "string", "Premium API key")
BEARER_TOKEN = ParameterSpec(
    "bearer_token", "string",
    "Bearer token for authentication (overrides the server default)",
)


def _search_parameters(filter_description: str) -> tuple[ParameterSpec, ...]:
    return (
        ParameterSpec("search", "string", "Full-text search query"),
        ParameterSpec("filter", "string", filter_description),
        ParameterSpec("sort", "string", "Sort field with optional :desc (e.g., 'cited_by_count:desc')"),
        ParameterSpec("page", "integer", "Page number (max 10,000 results total)"),
        ParameterSpec("per_page", "integer", "Results per page (max 200)"),
        ParameterSpec("cursor", "string", "Cursor for deep pagination (use '*' for first call)"),
        ParameterSpec("group_by", "string", "Group results by field for faceting"),
        ParameterSpec("select", "string", "Comma-separated list of fields to return"),
        ParameterSpec("sample", "integer", "Random sample size"),
        ParameterSpec("seed", "integer", "Random seed for reproducible sampling"),
        MAILTO,
        API_KEY,
        BEARER_TOKEN,
    )


def _filter_help(attributes: str, example: str) -> str:
    return (
        "Key:value OpenAlex filters. Supports entity attributes "
        f"(e.g., {attributes}), IDs, and convenience filters "
        f"(e.g., 'display_name.search'). Example: '{example}'"
    )


def _search_tool(
    name: str,
    description: str,
    filter_description: str,
    extra: tuple[ParameterSpec, ...] = (),
) -> ToolDescriptor:
    return ToolDescriptor(name, description, _search_parameters(filter_description) + extra)


# -----------------------------------------------------------------------------
# The catalog
# -----------------------------------------------------------------------------
TOOL_DEFINITIONS: tuple[ToolDescriptor, ...] = (
    _search_tool(
        "search_works",
        "Search scholarly works in OpenAlex",
        "Key:value OpenAlex filters. Supports entity attributes (e.g., 'publication_year', "
        "'is_oa'), IDs, and convenience filters (e.g., 'title.search'). "
        "Example: 'is_oa:true,type:article'",
        extra=(
            ParameterSpec(
                "view", "string",
                "The view of the data to return. 'summary' returns a concise version "
                "(at most 5 authorships and 3 concepts/topics per work), "
                "'full' returns the complete object.",
                enum=("summary", "full"),
            ),
        ),
    ),
    _search_tool(
        "search_authors",
        "Search authors and researchers",
        _filter_help("'orcid', 'last_known_institutions.id'",
                     "has_orcid:true,last_known_institutions.country_code:US"),
    ),
    _search_tool(
        "search_sources",
        "Search journals and sources",
        _filter_help("'issn', 'country_code', 'is_oa'", "is_oa:true,type:journal"),
    ),
    _search_tool(
        "search_institutions",
        "Search institutions",
        _filter_help("'ror', 'country_code', 'type'", "country_code:US,type:education"),
    ),
    _search_tool(
        "search_topics",
        "Search research topics (formerly concepts)",
        _filter_help("'domain.id', 'field.id'", "domain.id:1"),
    ),
    _search_tool(
        "search_publishers",
        "Search publishers",
        _filter_help("'country_codes', 'hierarchy_level'", "country_codes:US,hierarchy_level:0"),
    ),
    _search_tool(
        "search_funders",
        "Search funders",
        _filter_help("'country_code', 'grants_count'", "country_code:DE,grants_count:>10"),
    ),
    ToolDescriptor(
        "get_entity",
        "Get a single entity by its OpenAlex ID",
        (
            ParameterSpec("entity_type", "string", "Type of entity to retrieve",
                          required=True, enum=ENTITY_TYPES),
            ParameterSpec("openalex_id", "string",
                          "OpenAlex ID (e.g., W2741809807, A5023888391)", required=True),
            ParameterSpec("select", "string", "Comma-separated list of fields to return"),
            MAILTO,
            API_KEY,
            BEARER_TOKEN,
        ),
    ),
    ToolDescriptor(
        "autocomplete",
        "Type ahead search across any OpenAlex entity type",
        (
            ParameterSpec("search", "string", "Search query for autocomplete", required=True),
            ParameterSpec("type", "string", "Entity type to search within", enum=AUTOCOMPLETE_TYPES),
            ParameterSpec("per_page", "integer", "Number of suggestions (max 50)"),
            MAILTO,
            API_KEY,
            BEARER_TOKEN,
        ),
    ),
    ToolDescriptor(
        "classify_text",
        "Classify arbitrary text to predict research concepts and confidence scores",
        (
            ParameterSpec("title", "string", "Title text to classify"),
            ParameterSpec("abstract", "string", "Abstract text to classify"),
            MAILTO,
            API_KEY,
            BEARER_TOKEN,
        ),
    ),
    ToolDescriptor(
        "get_filterable_fields",
        "Get a list of filterable field names and their types for a specified OpenAlex entity.",
        (
            ParameterSpec(
                "entity_type", "string",
                "The type of OpenAlex entity for which to retrieve filterable fields.",
                required=True, enum=ENTITY_TYPES,
            ),
        ),
    ),
)

_BY_NAME: dict[str, ToolDescriptor] = {tool.name: tool for tool in TOOL_DEFINITIONS}


def list_tools() -> list[ToolDescriptor]:
    """Every registered tool, in catalog order."""
    return list(TOOL_DEFINITIONS)


def get_tool(name: str) -> Optional[ToolDescriptor]:
    return _BY_NAME.get(name)

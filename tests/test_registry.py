import pytest

from core.models import ENTITY_TYPES
from tools.dispatcher import TOOL_HANDLERS
from tools.registry import TOOL_DEFINITIONS, get_tool, list_tools

SEARCH_TOOLS = (
    "search_works",
    "search_authors",
    "search_sources",
    "search_institutions",
    "search_topics",
    "search_publishers",
    "search_funders",
)

COMMON_SEARCH_PARAMETERS = {
    "search", "filter", "sort", "page", "per_page", "cursor", "group_by",
    "select", "sample", "seed", "mailto", "api_key", "bearer_token",
}


class TestRegistry:
    def test_names_are_unique(self):
        names = [tool.name for tool in TOOL_DEFINITIONS]

        assert len(names) == len(set(names)) == 11

    def test_registry_and_dispatch_table_agree(self):
        assert {tool.name for tool in list_tools()} == set(TOOL_HANDLERS)

    def test_search_tools_share_parameters(self):
        for name in SEARCH_TOOLS:
            properties = set(get_tool(name).input_schema()["properties"])
            assert COMMON_SEARCH_PARAMETERS <= properties, name

    def test_search_works_has_view_enum(self):
        view = get_tool("search_works").input_schema()["properties"]["view"]

        assert view["enum"] == ["summary", "full"]

    def test_get_entity_schema(self):
        schema = get_tool("get_entity").input_schema()

        assert schema["type"] == "object"
        assert schema["required"] == ["entity_type", "openalex_id"]
        assert schema["properties"]["entity_type"]["enum"] == list(ENTITY_TYPES)

    def test_autocomplete_requires_search(self):
        schema = get_tool("autocomplete").input_schema()

        assert schema["required"] == ["search"]
        assert "concepts" in schema["properties"]["type"]["enum"]

    def test_optional_only_tools_have_no_required_key(self):
        assert "required" not in get_tool("classify_text").input_schema()
        assert "required" not in get_tool("search_authors").input_schema()

    @pytest.mark.parametrize("name", ["get_entity", "autocomplete", "classify_text"])
    def test_lookup_tools_advertise_credentials(self, name):
        properties = get_tool(name).input_schema()["properties"]

        assert {"mailto", "api_key", "bearer_token"} <= set(properties)

    def test_unknown_name_returns_none(self):
        assert get_tool("does_not_exist") is None

import pytest

from core.lookups import autocomplete, classify_text, get_entity
from core.models import ENTITY_TYPES
from core.search import search_entities, search_works
from core.shaping import summary_select


class TestSearchWorks:
    def test_full_view_forwards_arguments_unchanged(self, openalex, settings):
        search_works({"search": "graphene", "select": "id", "view": "full"}, settings)

        assert openalex.last_path == "/works"
        assert openalex.last_query == {"search": ["graphene"], "select": ["id"]}

    def test_view_is_never_sent_upstream(self, openalex, settings):
        search_works({"view": "summary"}, settings)

        assert "view" not in openalex.last_query

    def test_summary_forces_select(self, openalex, settings):
        search_works({"select": "id", "view": "summary", "per_page": 2}, settings)

        assert openalex.last_query["select"] == [summary_select()]
        assert openalex.last_query["per_page"] == ["2"]

    def test_summary_trims_results(self, openalex, settings, works_page):
        openalex.payload = works_page

        data = search_works({"view": "summary"}, settings)

        assert data["meta"] == works_page["meta"]
        assert len(data["results"][0]["authorships"]) == 5
        assert len(data["results"][0]["concepts"]) == 3

    def test_full_view_returns_payload_untouched(self, openalex, settings, works_page):
        openalex.payload = works_page

        assert search_works({}, settings) == works_page

    def test_caller_arguments_are_not_modified(self, openalex, settings):
        arguments = {"view": "summary", "select": "id"}

        search_works(arguments, settings)

        assert arguments == {"view": "summary", "select": "id"}


@pytest.mark.parametrize("entity_type", [e for e in ENTITY_TYPES if e != "works"])
def test_search_entities_hits_collection_endpoint(openalex, settings, entity_type):
    search_entities(entity_type, {"filter": "country_code:US", "unknown": "kept"}, settings)

    assert openalex.last_path == f"/{entity_type}"
    assert openalex.last_query == {"filter": ["country_code:US"], "unknown": ["kept"]}


class TestGetEntity:
    def test_path_and_whitelist(self, openalex, settings):
        get_entity(
            {
                "entity_type": "authors",
                "openalex_id": "A5023888391",
                "select": "id,display_name",
                "mailto": "me@uni.edu",
                "filter": "ignored:true",
            },
            settings,
        )

        assert openalex.last_path == "/authors/A5023888391"
        assert openalex.last_query == {"select": ["id,display_name"], "mailto": ["me@uni.edu"]}

    def test_external_ids_keep_their_shape(self, openalex, settings):
        get_entity({"entity_type": "works", "openalex_id": "https://doi.org/10.7717/peerj.4375"}, settings)

        assert openalex.last_path == "/works/https://doi.org/10.7717/peerj.4375"

    def test_missing_identifier_raises(self, openalex, settings):
        with pytest.raises(KeyError):
            get_entity({"entity_type": "works"}, settings)


class TestAutocompleteAndClassify:
    def test_autocomplete_forwards_everything(self, openalex, settings):
        autocomplete({"search": "einst", "type": "authors", "per_page": 3}, settings)

        assert openalex.last_path == "/autocomplete"
        assert openalex.last_query == {"search": ["einst"], "type": ["authors"], "per_page": ["3"]}

    def test_classify_text_whitelist(self, openalex, settings):
        classify_text({"title": "Deep learning", "abstract": "", "search": "dropped"}, settings)

        assert openalex.last_path == "/text"
        assert openalex.last_query == {"title": ["Deep learning"]}

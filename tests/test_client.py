import urllib.error

import pytest

from core.client import OPENALEX_BASE_URL, REQUEST_TIMEOUT_SECONDS, build_url, make_request
from core.errors import OpenAlexAPIError


class TestBuildUrl:
    def test_no_question_mark_without_parameters(self):
        assert build_url("/works", {}) == f"{OPENALEX_BASE_URL}/works"
        assert build_url("/works", {"cursor": None}) == f"{OPENALEX_BASE_URL}/works"

    def test_query_appended(self):
        assert build_url("/authors", {"per_page": 5}) == f"{OPENALEX_BASE_URL}/authors?per_page=5"


class TestMakeRequest:
    def test_single_get_with_fixed_timeout(self, openalex, settings):
        make_request("/works", {"per_page": 1}, settings)

        assert len(openalex.requests) == 1
        assert openalex.last_request.get_method() == "GET"
        assert openalex.last_timeout == REQUEST_TIMEOUT_SECONDS == 30
        assert openalex.last_path == "/works"
        assert openalex.last_query == {"per_page": ["1"]}

    def test_returns_json_body_verbatim(self, openalex, settings):
        openalex.payload = {"meta": {"count": 5}, "results": [{"id": "W1"}], "extra": [1, 2]}

        assert make_request("/works", {}, settings) == openalex.payload

    def test_sends_resolved_headers(self, openalex, env_settings):
        make_request("/works", {"mailto": "me@uni.edu"}, env_settings)

        assert openalex.header("Accept") == "application/json"
        assert openalex.header("User-Agent").endswith("mailto:me@uni.edu")
        assert openalex.header("Authorization") == "Bearer env-token"

    def test_anonymous_request_has_no_authorization(self, openalex, settings):
        make_request("/works", {}, settings)

        assert openalex.header("Authorization") is None

    def test_http_error_is_normalised(self, openalex, settings):
        openalex.fail_with_status(404, "Not Found")

        with pytest.raises(OpenAlexAPIError) as excinfo:
            make_request("/works/W0", {}, settings)

        assert str(excinfo.value) == "OpenAlex API error: 404 - Not Found"
        assert excinfo.value.status == 404
        assert excinfo.value.status_text == "Not Found"

    def test_network_failure_propagates_unchanged(self, openalex, settings):
        failure = urllib.error.URLError("Name or service not known")
        openalex.error = failure

        with pytest.raises(urllib.error.URLError) as excinfo:
            make_request("/works", {}, settings)

        assert excinfo.value is failure

    def test_timeout_propagates_unchanged(self, openalex, settings):
        openalex.error = TimeoutError("timed out")

        with pytest.raises(TimeoutError):
            make_request("/works", {}, settings)

    def test_no_retry_after_failure(self, openalex, settings):
        openalex.fail_with_status(503, "Service Unavailable")

        with pytest.raises(OpenAlexAPIError):
            make_request("/works", {}, settings)

        assert len(openalex.requests) == 1

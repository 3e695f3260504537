# =============================================================================
# core/client.py  -  OpenAlex HTTP Request Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues exactly ONE GET request per tool call against the OpenAlex REST
#   API and hands back the parsed JSON body untouched.
#
# HOW IT WORKS:
#   1. Encode the parameters into a query string (core/query.py)
#   2. Resolve User-Agent / Authorization headers (core/credentials.py)
#   3. GET  https://api.openalex.org<endpoint>?<query>  with a 30 s timeout
#   4. Parse the JSON body and return it as-is (no schema validation)
#
# FAILURES:
#   - HTTP error status (400 bad filter, 404 unknown id, 429, 5xx)
#       -> OpenAlexAPIError("OpenAlex API error: <status> - <reason>")
#   - Anything below HTTP (DNS, refused connection, timeout)
#       -> propagated unchanged; the dispatcher turns it into an error result
#
#   There are no retries and no backoff.  A failed call is reported to the
#   caller immediately.
# =============================================================================

import json
import logging
import urllib.error
import urllib.request
from typing import Any, Mapping, Optional

from core.config import Settings
from core.credentials import build_headers
from core.errors import OpenAlexAPIError
from core.query import build_query_string

logger = logging.getLogger(__name__)

OPENALEX_BASE_URL = "https://api.openalex.org"
REQUEST_TIMEOUT_SECONDS = 30


def build_url(endpoint: str, params: Mapping[str, Any]) -> str:
    query = build_query_string(params)
    url = f"{OPENALEX_BASE_URL}{endpoint}"
    return f"{url}?{query}" if query else url


def make_request(
    endpoint: str,
    params: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """GET an OpenAlex endpoint and return the decoded JSON body.

    Args:
        endpoint: Path below the base URL, e.g. "/works" or "/authors/A123".
        params: Query parameters; ``None`` values are left out.
        settings: Process defaults for email and bearer token.

    Returns:
        Whatever JSON document OpenAlex returned.

    Raises:
        OpenAlexAPIError: The API answered with an HTTP error status.
    """
    params = dict(params or {})
    settings = settings or Settings()

    url = build_url(endpoint, params)
    request = urllib.request.Request(url, headers=build_headers(params, settings), method="GET")
    # The query may carry api_key / bearer_token, so only the path is logged.
    logger.debug("GET %s%s (%d params)", OPENALEX_BASE_URL, endpoint, len(params))

    try:
        with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT_SECONDS) as response:
            return json.loads(response.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        raise OpenAlexAPIError(e.code, e.reason or str(e)) from e

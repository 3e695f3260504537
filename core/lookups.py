# =============================================================================
# core/lookups.py  -  Single Entity, Autocomplete & Text Classification
# =============================================================================
#
# Three thin specialisations of the same request pattern.  Each picks a
# fixed endpoint and decides which arguments make it to the query string:
#
#   get_entity     /<entity_type>/<openalex_id>   select + identification/auth
#   autocomplete   /autocomplete                  everything the caller sent
#   classify_text  /text                          title, abstract + identification/auth
#
# Payloads come back unshaped.
# =============================================================================

from typing import Any, Mapping
from urllib.parse import quote

from core.client import make_request
from core.config import Settings

_IDENTIFICATION_KEYS = ("mailto", "api_key", "bearer_token")


def _pick(arguments: Mapping[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    """Copy the whitelisted keys that carry a non-empty value."""
    return {key: arguments[key] for key in keys if arguments.get(key)}


def get_entity(arguments: Mapping[str, Any], settings: Settings) -> Any:
    """Fetch one entity, e.g. /works/W2741809807 or /authors/A5023888391.

    ``openalex_id`` may also be an external id OpenAlex understands
    (``https://doi.org/...``, ``orcid:...``), so ":" and "/" stay unescaped.
    """
    entity_type = arguments["entity_type"]
    openalex_id = quote(str(arguments["openalex_id"]), safe=":/")
    params = _pick(arguments, ("select",) + _IDENTIFICATION_KEYS)
    return make_request(f"/{entity_type}/{openalex_id}", params, settings)


def autocomplete(arguments: Mapping[str, Any], settings: Settings) -> Any:
    return make_request("/autocomplete", dict(arguments), settings)


def classify_text(arguments: Mapping[str, Any], settings: Settings) -> Any:
    params = _pick(arguments, ("title", "abstract") + _IDENTIFICATION_KEYS)
    return make_request("/text", params, settings)

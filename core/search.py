# =============================================================================
# core/search.py  -  Entity Search (works, authors, sources, ...)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every OpenAlex collection (/works, /authors, /sources, /institutions,
#   /topics, /publishers, /funders) supports the same query vocabulary:
#
#     search      full-text query
#     filter      key:value pairs, e.g. "is_oa:true,publication_year:2020"
#     sort        "cited_by_count:desc"
#     page / per_page  or  cursor ("*" to start deep paging)
#     group_by    facet counts instead of results
#     select      comma-separated field list
#     sample / seed    random sample, reproducible with a seed
#     mailto / api_key / bearer_token   identification and auth overrides
#
#   So there is ONE search function; the tool name only picks the endpoint.
#   Arguments are forwarded as they came in, including keys this module has
#   never heard of.
#
# THE ONE SPECIAL CASE - search_works(view="summary"):
#   The `view` argument is ours, not OpenAlex's.  It is stripped before the
#   query is built.  "summary" forces a compact `select` and trims the
#   per-work lists afterwards (core/shaping.py).  Anything else, or no view
#   at all, means the full unshaped payload.
# =============================================================================

import logging
from typing import Any, Mapping

from core.client import make_request
from core.config import Settings
from core.shaping import SUMMARY_VIEW, summarize_works_response, summary_select

logger = logging.getLogger(__name__)


def search_entities(entity_type: str, arguments: Mapping[str, Any], settings: Settings) -> Any:
    """Run a search against ``/<entity_type>`` with the caller's arguments."""
    return make_request(f"/{entity_type}", dict(arguments), settings)


def search_works(arguments: Mapping[str, Any], settings: Settings) -> Any:
    """Search /works, optionally returning the summary view.

    Args:
        arguments: Search parameters plus an optional ``view``
                   ("summary" or "full").
        settings: Process defaults for email and bearer token.

    Returns:
        The OpenAlex response.  With ``view="summary"`` each work carries
        at most 5 authorships and 3 concepts/topics; meta is unchanged.
    """
    params = dict(arguments)
    view = params.pop("view", None)

    if view != SUMMARY_VIEW:
        return make_request("/works", params, settings)

    params["select"] = summary_select()
    logger.debug("search_works: summary view, select=%s", params["select"])
    data = make_request("/works", params, settings)
    return summarize_works_response(data)

# =============================================================================
# core/shaping.py  -  Summary View for Work Search Results
# =============================================================================
#
# A full OpenAlex work record can run to hundreds of authorships and dozens
# of concepts.  The "summary" view asks the API for a curated field list and
# then trims the two unbounded per-work lists:
#
#   authorships       -> first 5  (already in byline order)
#   concepts, topics  -> first 3  (already sorted by score; no re-sorting)
#
# Only `results` is rebuilt.  meta (count, cursors, timings), group_by and
# any other top-level keys are returned exactly as OpenAlex sent them.  The
# input payload is never mutated.
# =============================================================================

from typing import Any

SUMMARY_VIEW = "summary"

SUMMARY_SELECT_FIELDS: tuple[str, ...] = (
    "id",
    "doi",
    "title",
    "display_name",
    "publication_year",
    "type",
    "cited_by_count",
    "authorships",
    "concepts",
    "topics",
    "primary_location",
    "open_access",
    "best_oa_location",
)

MAX_AUTHORSHIPS = 5
MAX_TOPICS = 3

# field name -> how many entries the summary keeps
_LIST_LIMITS: dict[str, int] = {
    "authorships": MAX_AUTHORSHIPS,
    "concepts": MAX_TOPICS,
    "topics": MAX_TOPICS,
}


def summary_select() -> str:
    return ",".join(SUMMARY_SELECT_FIELDS)


def summarize_work(work: Any) -> Any:
    """Return a copy of one work with its long lists truncated."""
    if not isinstance(work, dict):
        return work
    trimmed = dict(work)
    for key, limit in _LIST_LIMITS.items():
        value = trimmed.get(key)
        if isinstance(value, list) and len(value) > limit:
            trimmed[key] = value[:limit]
    return trimmed


def summarize_works_response(data: Any) -> Any:
    """Apply :func:`summarize_work` to every item of ``data["results"]``.

    Grouped responses (``group_by``) have no ``results`` list and pass
    through unchanged.
    """
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        return data
    return {**data, "results": [summarize_work(work) for work in data["results"]]}

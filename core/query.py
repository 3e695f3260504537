# =============================================================================
# core/query.py  -  Query String Encoding
# =============================================================================
#
# Turns a tool's argument mapping into the query string OpenAlex expects.
# Absent (None) values are dropped; everything else is stringified and
# form-encoded.  The caller decides whether a "?" is needed at all.
# =============================================================================

from typing import Any, Mapping
from urllib.parse import urlencode


def _stringify(value: Any) -> str:
    # OpenAlex filters are lowercase: is_oa:true, not is_oa:True
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Encode ``params`` as ``key=value&...``, skipping ``None`` values.

    Args:
        params: Parameter names mapped to strings, numbers or booleans.

    Returns:
        The percent-encoded query string, or "" when nothing is left.
    """
    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)

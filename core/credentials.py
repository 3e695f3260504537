# =============================================================================
# core/credentials.py  -  Identification & Authorization Headers
# =============================================================================
#
# OpenAlex sorts anonymous traffic into a slower "common pool" and callers
# that identify themselves with a contact email into the "polite pool".
# Every request therefore carries a User-Agent ending in mailto:<email>.
#
# PRECEDENCE (first match wins, per call):
#   email:  params["mailto"]  ->  settings.default_email  ->  FALLBACK_EMAIL
#   token:  params["bearer_token"]  ->  settings.bearer_token  ->  (none)
#
# A per-call value always beats the process-wide default.  With no token
# from either source the request goes out anonymously.
# =============================================================================

from typing import Any, Mapping, Optional

from core.config import Settings

USER_AGENT_PRODUCT = "OpenAlex-MCP-Server/1.0.0 (https://github.com/openalex-mcp-server)"
FALLBACK_EMAIL = "mcp-server@example.com"


def resolve_email(params: Mapping[str, Any], settings: Settings) -> str:
    return params.get("mailto") or settings.default_email or FALLBACK_EMAIL


def resolve_bearer_token(params: Mapping[str, Any], settings: Settings) -> Optional[str]:
    return params.get("bearer_token") or settings.bearer_token or None


def build_user_agent(params: Mapping[str, Any], settings: Settings) -> str:
    return f"{USER_AGENT_PRODUCT} mailto:{resolve_email(params, settings)}"


def build_headers(params: Mapping[str, Any], settings: Settings) -> dict[str, str]:
    """Compute the outbound headers for one OpenAlex request.

    Args:
        params: The request's query parameters (only ``mailto`` and
                ``bearer_token`` are consulted here).
        settings: Process-wide defaults.

    Returns:
        Accept and User-Agent always; Authorization only when a bearer
        token was resolved.
    """
    headers = {
        "Accept": "application/json",
        "User-Agent": build_user_agent(params, settings),
    }
    token = resolve_bearer_token(params, settings)
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers

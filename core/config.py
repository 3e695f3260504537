# =============================================================================
# core/config.py  -  Process-wide configuration
# =============================================================================
#
# Everything the server reads from the environment is read ONCE, here, into
# a Settings object.  Handlers receive that object explicitly instead of
# calling os.environ themselves, so a per-call override (mailto,
# bearer_token) can always be compared against a known default.
#
# Environment variables:
#   OPENALEX_DEFAULT_EMAIL   contact email for the polite pool
#   OPENALEX_BEARER_TOKEN    default bearer token for authenticated calls
#   OPENALEX_MCP_LOG_LEVEL   logging level for the server (default INFO)
#
# main.py calls load_dotenv() first, so values in a local .env file count.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _clean(value: Optional[str]) -> Optional[str]:
    """Treat unset and blank variables the same way."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Defaults used when a call does not supply its own credentials."""

    default_email: Optional[str] = None
    bearer_token: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            default_email=_clean(env.get("OPENALEX_DEFAULT_EMAIL")),
            bearer_token=_clean(env.get("OPENALEX_BEARER_TOKEN")),
            log_level=(_clean(env.get("OPENALEX_MCP_LOG_LEVEL")) or "INFO").upper(),
        )

# =============================================================================
# core/config.py  —  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns environment variables into an immutable Settings record.  The
#   record is built ONCE at startup and handed to the EBirdClient; nothing
#   else in the code base reads os.environ.
#
# ENVIRONMENT VARIABLES:
#   EBIRD_API_KEY       (required)  Personal token from ebird.org/api/keygen
#   EBIRD_BASE_URL      (optional)  Defaults to https://api.ebird.org/v2
#   EBIRD_HTTP_TIMEOUT  (optional)  Seconds; unset means no client timeout
#   LOG_LEVEL           (optional)  Defaults to INFO
#
#   The .env file (if any) is loaded by the entry point with python-dotenv
#   BEFORE load_settings() is called, so it behaves exactly like a real
#   environment variable here.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import StartupConfigurationError

DEFAULT_BASE_URL = "https://api.ebird.org/v2"
API_KEY_HELP_URL = "https://ebird.org/api/keygen"


@dataclass(frozen=True)
class Settings:
    """Immutable runtime configuration shared by every tool invocation."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None    # None → let the network stack decide
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Keep the token out of tracebacks and log lines.
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, log_level={self.log_level!r})"
        )


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise StartupConfigurationError(
            f"EBIRD_HTTP_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None
    if value <= 0:
        raise StartupConfigurationError(
            f"EBIRD_HTTP_TIMEOUT must be positive, got {raw!r}"
        )
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from an environment mapping (os.environ by default).

    Raises:
        StartupConfigurationError: if EBIRD_API_KEY is missing or blank, or
            if EBIRD_HTTP_TIMEOUT is not a positive number.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("EBIRD_API_KEY") or "").strip()
    if not api_key:
        raise StartupConfigurationError(
            "EBIRD_API_KEY environment variable is not set. "
            f"Get your API key at: {API_KEY_HELP_URL}"
        )

    base_url = (env.get("EBIRD_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")

    return Settings(
        api_key=api_key,
        base_url=base_url,
        timeout=_parse_timeout(env.get("EBIRD_HTTP_TIMEOUT")),
        log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
    )

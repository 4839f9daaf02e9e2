# =============================================================================
# core/config.py  |  Process configuration
# =============================================================================
#
# The server needs exactly two settings to run:
#   COMIC_VINE_API_KEY   → sent as api_key on every request
#   COMIC_VINE_API_BASE  → e.g. "https://comicvine.gamespot.com/api"
#
# COMIC_VINE_USER_AGENT is optional.  Comic Vine refuses requests that carry
# the default Python user agent, so we always send one.
#
# The entry points call load_dotenv() first, then load_config() reads the
# environment ONCE and freezes the result.  The config object is handed to
# ComicVineClient explicitly; nothing else reads os.environ.
# =============================================================================

import os
from collections.abc import Mapping
from dataclasses import dataclass

from core.errors import ConfigurationError

DEFAULT_USER_AGENT = "dc-comics-mcp/1.2.2"


@dataclass(frozen=True)
class ComicVineConfig:
    """Immutable settings for talking to the Comic Vine API."""

    api_key: str
    api_base: str                      # No trailing slash; paths start with "/"
    user_agent: str = DEFAULT_USER_AGENT


def load_config(environ: Mapping[str, str] | None = None) -> ComicVineConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``.

    Raises:
        ConfigurationError: if the API key or the base URL is missing.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("COMIC_VINE_API_KEY") or "").strip()
    api_base = (env.get("COMIC_VINE_API_BASE") or "").strip()

    if not api_key:
        raise ConfigurationError("Missing COMIC_VINE_API_KEY env variable")
    if not api_base:
        raise ConfigurationError("Missing COMIC_VINE_API_BASE env variable")

    user_agent = (env.get("COMIC_VINE_USER_AGENT") or "").strip() or DEFAULT_USER_AGENT
    return ComicVineConfig(
        api_key=api_key,
        api_base=api_base.rstrip("/"),
        user_agent=user_agent,
    )

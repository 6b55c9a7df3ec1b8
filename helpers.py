"""
Supabase MCP helpers: transport layer for the connectivity probe.

Everything here is a thin wrapper over ``requests``:
  1. read the Supabase credentials from the environment
  2. build the optional auth headers
  3. issue a single GET with a short timeout (no retries)
  4. cut response bodies down to a printable snippet
"""
import logging
import os
from typing import NamedTuple

import requests

logger = logging.getLogger(__name__)

MCP_URL = "https://mcp.supabase.com/mcp"
PROJECT_REF = "yvcsxadahzrxuptcgtkg"
PROJECT_URL = f"{MCP_URL}?project_ref={PROJECT_REF}"

REQUEST_TIMEOUT = 5     # seconds, per request
SNIPPET_LENGTH = 300    # characters of response body shown on the console

# Where the editor expects its MCP server config (printed verbatim in the summary)
CONFIG_FILE_PATH = r"C:\Users\rajpa\.cursor\mcp.json"
REQUIRED_ENV_VARS = ("SUPABASE_URL", "SUPABASE_ANON_KEY")


class Credentials(NamedTuple):
    supabase_url: str
    api_key: str


# ---------------------------------------------------------------------------
# Credentials / headers
# ---------------------------------------------------------------------------

def _env(name: str) -> str:
    return os.environ.get(name) or ""


def read_credentials() -> Credentials:
    """Read SUPABASE_URL and SUPABASE_ANON_KEY, treating missing values as "".

    ``supabase_url`` is collected alongside the key but the request URLs are
    fixed; nothing downstream builds a URL from it.
    """
    return Credentials(
        supabase_url=_env("SUPABASE_URL"),
        api_key=_env("SUPABASE_ANON_KEY"),
    )


def build_auth_headers(api_key: str | None) -> dict[str, str]:
    """Return the bearer + apikey headers, or an empty dict when no key is set."""
    if not api_key:
        return {}
    return {
        "Authorization": f"Bearer {api_key}",
        "apikey": api_key,
    }


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def get_raw(url: str, api_key: str | None = None) -> requests.Response:
    """GET and return the raw response (for connectivity checks).

    Any status code is a valid answer here, so ``raise_for_status`` is not
    called. Transport errors (timeout, DNS, refused, TLS) propagate.
    """
    headers = build_auth_headers(api_key)
    logger.debug(
        "GET %s (timeout=%ss, auth=%s)",
        url, REQUEST_TIMEOUT, "yes" if headers else "no",
    )
    resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
    logger.debug("GET %s -> %s", url, resp.status_code)
    return resp


def snippet(body: str | None) -> str:
    """First SNIPPET_LENGTH characters of a response body."""
    if not body:
        return ""
    return body[:SNIPPET_LENGTH]

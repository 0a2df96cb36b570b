# =============================================================================
# tools/client.py  -  The one fetcher every tool shares
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Owns the process-wide ParliamentFetcher and the request/response console
#   logging.  Every tool function ends with:
#
#       return await get_result(BASE + "/path", {"Param": value, ...})
#
#   which builds the URL, performs the GET and returns the JSON envelope.
#
# LOGGING:
#   Lines go to STDERR (configured in tools/mcp_server.py).  STDOUT carries
#   the MCP stdio stream, so anything printed there corrupts the protocol.
#
#   ANSI colours make the terminal easy to scan:
#     - CYAN   outgoing request URL
#     - GREEN  successful response (size only, the body can be huge)
#     - YELLOW failed response (the error envelope)
# =============================================================================

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from core.fetcher import ParliamentFetcher
from core.models import FetchOutcome, FetchSettings
from core.url_builder import build_url

_CYAN = "\033[36m"     # Requests
_GREEN = "\033[32m"    # Successful responses
_YELLOW = "\033[33m"   # Error envelopes
_RESET = "\033[0m"

logger = logging.getLogger("parliament.tools")

_fetcher: Optional[ParliamentFetcher] = None


def get_fetcher() -> ParliamentFetcher:
    """Return the shared fetcher, creating it from the environment on first use."""
    global _fetcher
    if _fetcher is None:
        _fetcher = ParliamentFetcher(FetchSettings.from_env())
    return _fetcher


def set_fetcher(fetcher: Optional[ParliamentFetcher]) -> None:
    """Replace the shared fetcher (None resets to lazy creation)."""
    global _fetcher
    _fetcher = fetcher


def _log_request(url: str) -> None:
    logger.info(f"{_CYAN}GET {url}{_RESET}")


def _log_response(outcome: FetchOutcome) -> None:
    if outcome.ok:
        logger.info(f"{_GREEN}  <- {len(outcome.data or '')} chars from {outcome.url}{_RESET}")
    else:
        logger.info(f"{_YELLOW}  <- {json.dumps(outcome.to_dict(), separators=(',', ':'))}{_RESET}")


async def get_result(base_url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Build the request URL, fetch it, and return the serialized outcome."""
    url = build_url(base_url, params or {})
    _log_request(url)
    try:
        fetcher = get_fetcher()
    except ValueError as exc:
        # Reached only when the server was started some other way than
        # tools.mcp_server.main (e.g. `fastmcp run`); main() validates first.
        logger.error("Invalid HTTP settings: %s", exc)
        outcome = FetchOutcome.failure(url, f"Configuration error: {exc}")
    else:
        outcome = await fetcher.fetch(url)
    _log_response(outcome)
    return outcome.to_json()

# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (registration + entry point)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the FastMCP server and registers every Parliament tool on it.
#   The tools themselves live one module per upstream API; each module ends
#   with a TOOLS list, and that list is the registration table:
#
#     session      hello_parliament, goodbye_parliament
#     members      MPs, Lords, constituencies, parties
#     bills        bills, stages, amendments, publications, RSS
#     committees   committees, events, publications, evidence
#     votes        Commons and Lords divisions
#     chamber      Hansard, annunciator, calendar
#     questions    EDMs, oral question times
#     interests    Register of Interests
#     legislation  Acts, SIs, treaties, Erskine May
#
# HOW A CALL FLOWS:
#   1. The client calls a tool by name over stdio (e.g. "search_bills")
#   2. FastMCP routes it to the async function registered under that name
#   3. The function builds the URL and awaits tools/client.get_result()
#   4. The JSON envelope {url, data} or {url, error, statusCode?} goes back
#
# TOOL NAMING:
#   The Python function name IS the tool name and the docstring IS the
#   description the model reads.  Every tool is read-only, idempotent and
#   only talks to the Parliament APIs, which the annotations advertise.
#
# RUNNING THIS SERVER:
#     a) python main.py
#     b) python -m tools.mcp_server
# =============================================================================

import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from core.fetcher import ParliamentFetcher
from core.models import FetchSettings
from tools import (
    bills,
    chamber,
    committees,
    interests,
    legislation,
    members,
    questions,
    session,
    votes,
)
from tools.client import set_fetcher

logger = logging.getLogger(__name__)

SERVER_NAME = "uk-parliament"

TOOL_MODULES = [
    session,
    members,
    bills,
    committees,
    votes,
    chamber,
    questions,
    interests,
    legislation,
]

READ_ONLY = ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=False)


# =============================================================================
# Logging Setup
# =============================================================================
# STDERR only.  The MCP stdio transport owns STDOUT; a stray log line there
# corrupts the JSON-RPC stream and the client drops the connection.
# =============================================================================
def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=(level or os.environ.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def iter_tools():
    """Yield every tool function from the registration tables, in order."""
    for module in TOOL_MODULES:
        yield from module.TOOLS


def build_server() -> FastMCP:
    """Create the FastMCP server with every tool registered.

    Raises:
        ValueError: if two tables register the same tool name.
    """
    server = FastMCP(SERVER_NAME)
    seen = set()
    for fn in iter_tools():
        if fn.__name__ in seen:
            raise ValueError(f"Duplicate tool name: {fn.__name__}")
        seen.add(fn.__name__)
        server.tool(annotations=READ_ONLY)(fn)
    logger.debug("Registered %d tools", len(seen))
    return server


mcp = build_server()


# =============================================================================
# Server entry point
# =============================================================================
# The client starts this process and talks to it over stdin/stdout.  Both
# `python main.py` and `python -m tools.mcp_server` land here.
# =============================================================================
def main() -> None:
    load_dotenv()
    configure_logging()

    # Bad settings should stop the process here, not fail every tool call.
    settings = FetchSettings.from_env()
    set_fetcher(ParliamentFetcher(settings))
    logger.info(
        "Starting UK Parliament MCP server (timeout=%ss, attempts=%d, retry_delay=%ss)",
        settings.http_timeout, settings.max_retry_attempts, settings.retry_delay,
    )

    mcp.run()


if __name__ == "__main__":
    main()

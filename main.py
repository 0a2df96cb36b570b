# =============================================================================
# main.py  -  Entry Point for the UK Parliament MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (PARLIAMENT_* HTTP settings, LOG_LEVEL)
#   2. Configures logging to stderr
#   3. Validates the HTTP settings and builds the shared fetcher
#   4. Serves every Parliament tool over the MCP stdio transport until the
#      client closes the pipe
#
# CONNECTING A CLIENT:
#   Point any MCP client at this script as a stdio server, e.g.
#
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
#
#   The client discovers the tools on connect.  Calling hello_parliament
#   first gives the model the research-assistant rules.
# =============================================================================

from dotenv import load_dotenv

# Load environment variables BEFORE anything reads os.environ.
load_dotenv()

from tools.mcp_server import main  # noqa: E402


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()

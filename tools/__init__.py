# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool layer.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP client and core/.  Each
#   domain module here:
#     1. Defines one async function per upstream endpoint
#     2. Maps the typed arguments onto the endpoint's query parameter names
#     3. Hands the URL to the shared fetcher (tools/client.py)
#     4. Exports its functions in a TOOLS list for registration
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse, filter or summarise upstream JSON; the raw body is
#     passed through in the "data" field
#   - They do NOT retry or catch errors themselves (core/fetcher.py does)
#   - They do NOT call each other or keep state between calls
#
# TOOL CONTRACT:
#   Each tool has a descriptive snake_case name, a docstring the model reads
#   to decide WHEN to call it, typed parameters, and a single JSON string as
#   its result.
# =============================================================================

# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the request machinery shared by every Parliament tool.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any other tool-hosting
#   framework.  Every module here can be imported in a bare Python REPL and
#   exercised against a mock transport with zero internet access.
#
#   - models.py       FetchSettings and FetchOutcome
#   - url_builder.py  query-string assembly and value encoding
#   - fetcher.py      HTTP GET with bounded retry and error envelopes
#   - apis.py         upstream base URLs
#   - prompts.py      static session prompts
# =============================================================================

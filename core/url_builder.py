# =============================================================================
# core/url_builder.py  -  Query URL assembly
# =============================================================================
#
# Every tool turns its arguments into one GET URL:
#
#   build_url("https://x/y", {"a": "1", "b": None, "c": ""})
#       -> "https://x/y?a=1"
#
# Rules:
#   - None and "" values are dropped (optional filters the caller left out).
#   - Values are percent-encoded as a URL component (RFC 3986): only
#     A-Z a-z 0-9 - _ . ~ survive unescaped.  Keys are emitted verbatim,
#     since upstream names like "queryParameters.searchTerm" are fixed.
#   - Pairs keep the order they were supplied in.
#   - No surviving pairs means the base URL comes back untouched, no "?".
#
# Tool functions hand over typed values (ints, bools, lists of ids), so
# format_query_value() normalises those to strings first.
# =============================================================================

from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote


def format_query_value(value: Any) -> Optional[str]:
    """Render a typed tool argument as a query-string value.

    None stays None.  Booleans render as "True"/"False" (the upstream APIs
    parse them case-insensitively).  Lists and tuples are comma-joined, and
    an empty one counts as absent.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return ",".join(str(item) for item in value)
    return str(value)


def quote_path_segment(value: Any) -> str:
    """Percent-encode a value that is embedded in the URL path itself."""
    return quote(str(value), safe="")


def build_url(base_url: str, params: Mapping[str, Any]) -> str:
    """Append the non-empty entries of ``params`` to ``base_url`` as a query string.

    Args:
        base_url: Absolute endpoint URL without a query string.
        params: Ordered mapping of parameter name to value.  None and ""
                (after formatting) are skipped.

    Returns:
        The complete request URL.
    """
    pairs = []
    for key, raw in params.items():
        value = format_query_value(raw)
        if not value:
            continue
        pairs.append(f"{key}={quote(value, safe='')}")

    if not pairs:
        return base_url
    return f"{base_url}?{'&'.join(pairs)}"

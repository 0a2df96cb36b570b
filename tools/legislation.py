# =============================================================================
# tools/legislation.py  -  Acts, statutory instruments, treaties, procedure
# =============================================================================
# Upstream: https://statutoryinstruments-api.parliament.uk/api/v2
#           https://treaties-api.parliament.uk/api
#           https://erskinemay-api.parliament.uk/api
#
# Erskine May takes its search term as a path segment, not a query
# parameter, so it is encoded with quote_path_segment.
# =============================================================================

from core.apis import ERSKINE_MAY_API, STATUTORY_INSTRUMENTS_API, TREATIES_API
from core.url_builder import quote_path_segment
from tools.client import get_result


async def search_statutory_instruments(name: str) -> str:
    """Search Statutory Instruments (secondary legislation: regulations, rules, orders) by name.

    Args:
        name: Name or title of the instrument.
    """
    return await get_result(f"{STATUTORY_INSTRUMENTS_API}/StatutoryInstrument", {"Name": name})


async def search_acts_of_parliament(name: str) -> str:
    """Search Acts of Parliament (primary legislation) by name or topic.

    Args:
        name: e.g. "Climate Change Act", "Human Rights Act".
    """
    return await get_result(f"{STATUTORY_INSTRUMENTS_API}/ActOfParliament", {"Name": name})


async def search_treaties(search_text: str) -> str:
    """Search international treaties under parliamentary scrutiny.

    Args:
        search_text: e.g. "trade", "EU", "climate".
    """
    return await get_result(f"{TREATIES_API}/Treaty", {"SearchText": search_text})


async def search_erskine_may(search_term: str) -> str:
    """Search Erskine May, the authoritative guide to parliamentary procedure.

    Args:
        search_term: e.g. "Speaker", "amendment", "division".
    """
    return await get_result(
        f"{ERSKINE_MAY_API}/Search/ParagraphSearchResults/{quote_path_segment(search_term)}"
    )


TOOLS = [
    search_statutory_instruments,
    search_acts_of_parliament,
    search_treaties,
    search_erskine_may,
]

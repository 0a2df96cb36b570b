# =============================================================================
# tools/chamber.py  -  What is said and scheduled in the chambers
# =============================================================================
# Three small APIs about chamber business:
#   Hansard   https://hansard-api.parliament.uk          (official record)
#   Now       https://now-api.parliament.uk/api          (annunciator screens)
#   What's On https://whatson-api.parliament.uk/calendar (calendar, recesses)
# =============================================================================

from core.apis import HANSARD_API, NOW_API, WHATS_ON_API
from tools.client import get_result


async def search_hansard(house: int, start_date: str, end_date: str, search_term: str) -> str:
    """Search Hansard, the official record of speeches and debates.

    Args:
        house: 1 for Commons, 2 for Lords.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        search_term: e.g. "climate change", "NHS".
    """
    return await get_result(f"{HANSARD_API}/search.json", {
        "queryParameters.house": house,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
        "queryParameters.searchTerm": search_term,
    })


async def happening_now_in_commons() -> str:
    """Get what is happening in the House of Commons chamber right now."""
    return await get_result(f"{NOW_API}/Message/message/CommonsMain/current")


async def happening_now_in_lords() -> str:
    """Get what is happening in the House of Lords chamber right now."""
    return await get_result(f"{NOW_API}/Message/message/LordsMain/current")


async def search_calendar(house: str, start_date: str, end_date: str) -> str:
    """Search the parliamentary calendar for scheduled business in either chamber.

    Args:
        house: "Commons" or "Lords".
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
    """
    return await get_result(f"{WHATS_ON_API}/events/list.json", {
        "queryParameters.house": house,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
    })


async def get_sessions() -> str:
    """Get the list of parliamentary sessions and their dates."""
    return await get_result(f"{WHATS_ON_API}/sessions/list.json")


async def get_non_sitting_days(house: str, start_date: str, end_date: str) -> str:
    """Get the periods when a House is not sitting (recesses).

    Args:
        house: "Commons" or "Lords".
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
    """
    return await get_result(f"{WHATS_ON_API}/events/nonsitting.json", {
        "queryParameters.house": house,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
    })


TOOLS = [
    search_hansard,
    happening_now_in_commons,
    happening_now_in_lords,
    search_calendar,
    get_sessions,
    get_non_sitting_days,
]

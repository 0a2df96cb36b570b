# =============================================================================
# tools/questions.py  -  Oral Questions and Motions API (EDMs, question times)
# =============================================================================
# Upstream: https://oralquestionsandmotions-api.parliament.uk
# =============================================================================

from core.apis import ORAL_QUESTIONS_API
from tools.client import get_result


async def get_recently_tabled_edms(take: int = 10) -> str:
    """Get recently tabled Early Day Motions, newest first, with sponsors and supporters.

    Args:
        take: Number of EDMs to return (default 10, recommended max 50).
    """
    return await get_result(f"{ORAL_QUESTIONS_API}/EarlyDayMotions/list", {
        "parameters.orderBy": "DateTabledDesc",
        "skip": 0,
        "take": take,
    })


async def search_early_day_motions(search_term: str) -> str:
    """Search Early Day Motions by topic or keyword.

    Args:
        search_term: e.g. "climate change", "NHS funding".
    """
    return await get_result(
        f"{ORAL_QUESTIONS_API}/EarlyDayMotions/list", {"parameters.searchTerm": search_term}
    )


async def search_oral_question_times(answering_date_start: str, answering_date_end: str) -> str:
    """Get the scheduled oral question times: which departments answer when.

    Args:
        answering_date_start: Start date (YYYY-MM-DD).
        answering_date_end: End date (YYYY-MM-DD).
    """
    return await get_result(f"{ORAL_QUESTIONS_API}/oralquestiontimes/list", {
        "parameters.answeringDateStart": answering_date_start,
        "parameters.answeringDateEnd": answering_date_end,
    })


TOOLS = [
    get_recently_tabled_edms,
    search_early_day_motions,
    search_oral_question_times,
]

# =============================================================================
# tools/votes.py  -  Commons Votes and Lords Votes APIs (divisions)
# =============================================================================
# Upstream: http://commonsvotes-api.parliament.uk/data
#           http://lordsvotes-api.parliament.uk/data
#
# The two APIs cover the same ground but disagree on naming: the Commons one
# uses "divisions.json/..." paths and "queryParameters."-prefixed keys, the
# Lords one uses "Divisions/..." and bare keys.  Keys are sent exactly as
# each API expects them.
# =============================================================================

from typing import Optional

from core.apis import COMMONS_VOTES_API, LORDS_VOTES_API
from tools.client import get_result


# -----------------------------------------------------------------------------
# House of Commons
# -----------------------------------------------------------------------------

async def search_commons_divisions(
    search_term: str,
    member_id: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
) -> str:
    """Search House of Commons divisions (votes) by topic, member, date range, or number.

    Args:
        search_term: Division topic, e.g. "brexit", "climate", "NHS".
        member_id: Only divisions this member voted in.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
    """
    return await get_result(f"{COMMONS_VOTES_API}/divisions.json/search", {
        "queryParameters.searchTerm": search_term,
        "memberId": member_id,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
        "queryParameters.divisionNumber": division_number,
    })


async def get_commons_voting_record_for_member(member_id: int) -> str:
    """Get an MP's complete voting record in Commons divisions.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(
        f"{COMMONS_VOTES_API}/divisions.json/membervoting",
        {"queryParameters.memberId": member_id},
    )


async def get_commons_division_by_id(division_id: int) -> str:
    """Get one Commons division in full: how each MP voted, tellers, and totals.

    Args:
        division_id: Commons division ID.
    """
    return await get_result(f"{COMMONS_VOTES_API}/division/{division_id}.json")


async def get_commons_divisions_grouped_by_party(
    search_term: Optional[str] = None,
    member_id: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
    include_when_member_was_teller: Optional[bool] = None,
) -> str:
    """Get Commons divisions with vote counts grouped by party instead of by MP.

    Args:
        search_term: Filter divisions by topic.
        member_id: Filter by member.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
        include_when_member_was_teller: Include divisions where the member was a teller.
    """
    return await get_result(f"{COMMONS_VOTES_API}/divisions.json/groupedbyparty", {
        "queryParameters.searchTerm": search_term,
        "queryParameters.memberId": member_id,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
        "queryParameters.divisionNumber": division_number,
        "queryParameters.includeWhenMemberWasTeller": include_when_member_was_teller,
    })


async def get_commons_divisions_search_count(
    search_term: Optional[str] = None,
    member_id: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
    include_when_member_was_teller: Optional[bool] = None,
) -> str:
    """Count the Commons divisions matching a search, before fetching them.

    Args:
        search_term: Filter divisions by topic.
        member_id: Filter by member.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
        include_when_member_was_teller: Include divisions where the member was a teller.
    """
    return await get_result(f"{COMMONS_VOTES_API}/divisions.json/searchTotalResults", {
        "queryParameters.searchTerm": search_term,
        "queryParameters.memberId": member_id,
        "queryParameters.startDate": start_date,
        "queryParameters.endDate": end_date,
        "queryParameters.divisionNumber": division_number,
        "queryParameters.includeWhenMemberWasTeller": include_when_member_was_teller,
    })


# -----------------------------------------------------------------------------
# House of Lords
# -----------------------------------------------------------------------------

async def search_lords_divisions(search_term: str) -> str:
    """Search House of Lords divisions (votes) by topic.

    Args:
        search_term: Division topic, e.g. "brexit", "climate", "NHS".
    """
    return await get_result(
        f"{LORDS_VOTES_API}/divisions/search", {"queryParameters.searchTerm": search_term}
    )


async def get_lords_voting_record_for_member(
    member_id: int,
    search_term: Optional[str] = None,
    include_when_member_was_teller: Optional[bool] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
    skip: int = 0,
    take: int = 25,
) -> str:
    """Get a Lord's complete voting record in Lords divisions.

    Args:
        member_id: Parliament member ID.
        search_term: Filter divisions by topic.
        include_when_member_was_teller: Include divisions where the member was a teller.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
        skip: Records to skip.
        take: Records to return (default 25, max 100).
    """
    return await get_result(f"{LORDS_VOTES_API}/Divisions/membervoting", {
        "MemberId": member_id,
        "SearchTerm": search_term,
        "IncludeWhenMemberWasTeller": include_when_member_was_teller,
        "StartDate": start_date,
        "EndDate": end_date,
        "DivisionNumber": division_number,
        "skip": skip,
        "take": take,
    })


async def get_lords_division_by_id(division_id: int) -> str:
    """Get one Lords division in full: who voted content / not content, tellers, and totals.

    Args:
        division_id: Lords division ID.
    """
    return await get_result(f"{LORDS_VOTES_API}/Divisions/{division_id}")


async def get_lords_divisions_grouped_by_party(
    search_term: Optional[str] = None,
    member_id: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
    include_when_member_was_teller: Optional[bool] = None,
) -> str:
    """Get Lords divisions with vote counts grouped by party instead of by member.

    Args:
        search_term: Filter divisions by topic.
        member_id: Filter by member.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
        include_when_member_was_teller: Include divisions where the member was a teller.
    """
    return await get_result(f"{LORDS_VOTES_API}/Divisions/groupedbyparty", {
        "SearchTerm": search_term,
        "MemberId": member_id,
        "StartDate": start_date,
        "EndDate": end_date,
        "DivisionNumber": division_number,
        "IncludeWhenMemberWasTeller": include_when_member_was_teller,
    })


async def get_lords_divisions_search_count(
    search_term: Optional[str] = None,
    member_id: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    division_number: Optional[int] = None,
    include_when_member_was_teller: Optional[bool] = None,
) -> str:
    """Count the Lords divisions matching a search, before fetching them.

    Args:
        search_term: Filter divisions by topic.
        member_id: Filter by member.
        start_date: Start date (YYYY-MM-DD).
        end_date: End date (YYYY-MM-DD).
        division_number: Specific division number.
        include_when_member_was_teller: Include divisions where the member was a teller.
    """
    return await get_result(f"{LORDS_VOTES_API}/Divisions/searchTotalResults", {
        "SearchTerm": search_term,
        "MemberId": member_id,
        "StartDate": start_date,
        "EndDate": end_date,
        "DivisionNumber": division_number,
        "IncludeWhenMemberWasTeller": include_when_member_was_teller,
    })


TOOLS = [
    search_commons_divisions,
    get_commons_voting_record_for_member,
    get_commons_division_by_id,
    get_commons_divisions_grouped_by_party,
    get_commons_divisions_search_count,
    search_lords_divisions,
    get_lords_voting_record_for_member,
    get_lords_division_by_id,
    get_lords_divisions_grouped_by_party,
    get_lords_divisions_search_count,
]

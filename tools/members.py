# =============================================================================
# tools/members.py  -  Members API (MPs, Lords, constituencies, parties)
# =============================================================================
# Upstream: https://members-api.parliament.uk/api
#
# Most tools here take a member ID.  The usual flow for a client is
# get_member_by_name / search_members first, then the per-member tools with
# the ID from that result.
# =============================================================================

from typing import Optional

from core.apis import MEMBERS_API
from tools.client import get_result


async def get_member_by_name(name: str) -> str:
    """Search for MPs and Lords by name.

    Use for identifying members, checking spellings, or finding member IDs.
    Searches current and former members.  Returns member profiles with
    names, parties, constituencies, and current status.

    Args:
        name: Full or partial name, e.g. "Keir Starmer" or "Smith".
    """
    return await get_result(f"{MEMBERS_API}/Members/Search", {"Name": name})


async def get_answering_bodies() -> str:
    """Get government departments that answer parliamentary questions, with their policy responsibilities."""
    return await get_result(f"{MEMBERS_API}/Reference/AnsweringBodies")


async def get_member_by_id(id: int) -> str:
    """Get a full member profile by ID: roles, constituency, party, and career details.

    Args:
        id: Parliament member ID (from a member search), e.g. 1423.
    """
    return await get_result(f"{MEMBERS_API}/Members/{id}")


async def edms_for_member_id(memberid: int) -> str:
    """Get all Early Day Motions signed by a specific MP.

    Args:
        memberid: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{memberid}/Edms")


async def parties_list_by_house(house: int) -> str:
    """Get the active political parties in the House of Commons (1) or House of Lords (2).

    Args:
        house: 1 for Commons, 2 for Lords.
    """
    return await get_result(f"{MEMBERS_API}/Parties/GetActive/{house}")


async def get_departments() -> str:
    """Get the list of all government departments."""
    return await get_result(f"{MEMBERS_API}/Reference/Departments")


async def get_contributions(memberid: int) -> str:
    """Get a summary of a member's parliamentary contributions (speeches, questions, interventions).

    Args:
        memberid: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{memberid}/ContributionSummary", {"page": 1})


async def get_constituencies(skip: Optional[int] = None, take: Optional[int] = None) -> str:
    """List UK parliamentary constituencies, with pagination.

    Args:
        skip: Number of constituencies to skip.
        take: Number of constituencies to return (default 20, max 100).
    """
    return await get_result(
        f"{MEMBERS_API}/Location/Constituency/Search",
        {"skip": skip, "take": take},
    )


async def get_election_results_for_constituency(constituencyid: int) -> str:
    """Get historical election results for a constituency.

    Args:
        constituencyid: Constituency ID.
    """
    return await get_result(
        f"{MEMBERS_API}/Location/Constituency/{constituencyid}/ElectionResults"
    )


async def get_lords_interests_staff(searchterm: str = "richard") -> str:
    """Search staff interests declared by Lords.

    Args:
        searchterm: Staff name or interest to search for.
    """
    return await get_result(f"{MEMBERS_API}/LordsInterests/Staff", {"searchTerm": searchterm})


async def get_members_biography(member_id: int) -> str:
    """Get a member's biography: education, career timeline, and political milestones.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Biography")


async def get_members_contact(member_id: int) -> str:
    """Get a member's official contact details: phone numbers, email, and office addresses.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Contact")


async def search_members(
    name: Optional[str] = None,
    location: Optional[str] = None,
    post_title: Optional[str] = None,
    party_id: Optional[int] = None,
    house: Optional[int] = None,
    constituency_id: Optional[int] = None,
    name_starts_with: Optional[str] = None,
    gender: Optional[str] = None,
    membership_started_since: Optional[str] = None,
    membership_ended_since: Optional[str] = None,
    was_member_on_or_after: Optional[str] = None,
    was_member_on_or_before: Optional[str] = None,
    was_member_of_house: Optional[int] = None,
    is_eligible: Optional[bool] = None,
    is_current_member: Optional[bool] = None,
    policy_interest_id: Optional[int] = None,
    experience: Optional[str] = None,
    skip: int = 0,
    take: int = 20,
) -> str:
    """Search MPs and Lords with filtering by name, location, party, post, gender, and membership dates.

    All filters are optional; dates use YYYY-MM-DD.

    Args:
        name: Full or partial name.
        location: Location or constituency name.
        post_title: Post held, e.g. "Minister" or "Secretary of State".
        party_id: Party ID.
        house: 1 for Commons, 2 for Lords.
        constituency_id: Constituency ID.
        name_starts_with: Leading letter(s) of the name.
        gender: "M" or "F".
        membership_started_since: Membership started on or after this date.
        membership_ended_since: Membership ended on or after this date.
        was_member_on_or_after: Was a member on or after this date.
        was_member_on_or_before: Was a member on or before this date.
        was_member_of_house: House for the date range filter (1 or 2).
        is_eligible: Filter by eligibility status.
        is_current_member: Filter by current membership.
        policy_interest_id: Policy interest ID.
        experience: Search term for professional experience.
        skip: Records to skip.
        take: Records to return (default 20, max 100).
    """
    return await get_result(f"{MEMBERS_API}/Members/Search", {
        "Name": name,
        "Location": location,
        "PostTitle": post_title,
        "PartyId": party_id,
        "House": house,
        "ConstituencyId": constituency_id,
        "NameStartsWith": name_starts_with,
        "Gender": gender,
        "MembershipStartedSince": membership_started_since,
        "MembershipEnded.MembershipEndedSince": membership_ended_since,
        "MembershipInDateRange.WasMemberOnOrAfter": was_member_on_or_after,
        "MembershipInDateRange.WasMemberOnOrBefore": was_member_on_or_before,
        "MembershipInDateRange.WasMemberOfHouse": was_member_of_house,
        "IsEligible": is_eligible,
        "IsCurrentMember": is_current_member,
        "PolicyInterestId": policy_interest_id,
        "Experience": experience,
        "skip": skip,
        "take": take,
    })


async def search_members_historical(
    name: Optional[str] = None,
    date_to_search_for: Optional[str] = None,
    skip: int = 0,
    take: int = 20,
) -> str:
    """Search historical members who were serving on a specific date.

    Args:
        name: Full or partial name.
        date_to_search_for: Date the member was serving (YYYY-MM-DD).
        skip: Records to skip.
        take: Records to return (default 20, max 100).
    """
    return await get_result(f"{MEMBERS_API}/Members/SearchHistorical", {
        "name": name,
        "dateToSearchFor": date_to_search_for,
        "skip": skip,
        "take": take,
    })


async def get_member_experience(member_id: int) -> str:
    """Get a member's professional experience and career background before Parliament.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Experience")


async def get_member_focus(member_id: int) -> str:
    """Get a member's areas of focus and policy interests.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Focus")


async def get_member_registered_interests(member_id: int, house: Optional[int] = None) -> str:
    """Get a member's registered interests: directorships, consultancies, gifts.

    Args:
        member_id: Parliament member ID.
        house: 1 for Commons, 2 for Lords.
    """
    return await get_result(
        f"{MEMBERS_API}/Members/{member_id}/RegisteredInterests", {"house": house}
    )


async def get_member_staff(member_id: int) -> str:
    """Get the staff working for an MP or Lord.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Staff")


async def get_member_synopsis(member_id: int) -> str:
    """Get a brief synopsis of a member.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/Synopsis")


async def get_member_voting(member_id: int, house: int, page: Optional[int] = None) -> str:
    """Get a member's voting record in one House.

    Args:
        member_id: Parliament member ID.
        house: 1 for Commons, 2 for Lords.
        page: Page number.
    """
    return await get_result(
        f"{MEMBERS_API}/Members/{member_id}/Voting", {"house": house, "page": page}
    )


async def get_member_written_questions(member_id: int, page: Optional[int] = None) -> str:
    """Get the written questions a member has submitted to government departments.

    Args:
        member_id: Parliament member ID.
        page: Page number.
    """
    return await get_result(
        f"{MEMBERS_API}/Members/{member_id}/WrittenQuestions", {"page": page}
    )


async def get_members_history(member_ids: list[int]) -> str:
    """Get name, party, and membership history for several members at once.

    Args:
        member_ids: Parliament member IDs.
    """
    return await get_result(f"{MEMBERS_API}/Members/History", {"ids": member_ids})


async def get_member_latest_election_result(member_id: int) -> str:
    """Get the latest election result for a member: vote share and margin.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/LatestElectionResult")


async def get_member_portrait_url(member_id: int) -> str:
    """Get the URL of a member's official portrait.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/PortraitUrl")


async def get_member_thumbnail_url(member_id: int) -> str:
    """Get the URL of a member's thumbnail photograph.

    Args:
        member_id: Parliament member ID.
    """
    return await get_result(f"{MEMBERS_API}/Members/{member_id}/ThumbnailUrl")


TOOLS = [
    get_member_by_name,
    get_answering_bodies,
    get_member_by_id,
    edms_for_member_id,
    parties_list_by_house,
    get_departments,
    get_contributions,
    get_constituencies,
    get_election_results_for_constituency,
    get_lords_interests_staff,
    get_members_biography,
    get_members_contact,
    search_members,
    search_members_historical,
    get_member_experience,
    get_member_focus,
    get_member_registered_interests,
    get_member_staff,
    get_member_synopsis,
    get_member_voting,
    get_member_written_questions,
    get_members_history,
    get_member_latest_election_result,
    get_member_portrait_url,
    get_member_thumbnail_url,
]

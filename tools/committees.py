# =============================================================================
# tools/committees.py  -  Committees API (committees, events, evidence)
# =============================================================================
# Upstream: https://committees-api.parliament.uk/api
#
# The listing endpoints share one filter vocabulary (committee, business,
# dates, website visibility, skip/take).  Booleans with a fixed default are
# always sent; optional ones only when the caller sets them.
# =============================================================================

from typing import Optional

from core.apis import COMMITTEES_API
from tools.client import get_result


async def get_committee_meetings(fromdate: str, todate: str) -> str:
    """Find Commons and Lords committee meetings and hearings in a date range.

    Args:
        fromdate: Start date (YYYY-MM-DD).
        todate: End date (YYYY-MM-DD), after the start date.
    """
    return await get_result(f"{COMMITTEES_API}/Broadcast/Meetings", {
        "FromDate": fromdate,
        "ToDate": todate,
    })


async def search_committees(search_term: str) -> str:
    """Search committees by name or subject area.

    Args:
        search_term: e.g. "Treasury", "Health", "Defence".
    """
    return await get_result(f"{COMMITTEES_API}/Committees", {"SearchTerm": search_term})


async def get_committee_types() -> str:
    """Get every committee type (Select Committee, Public Bill Committee, ...)."""
    return await get_result(f"{COMMITTEES_API}/CommitteeType")


async def get_committee_by_id(
    committee_id: int,
    include_banners: bool = False,
    show_on_website_only: bool = True,
) -> str:
    """Get a committee profile: purpose, members, departments scrutinised, and contact details.

    Args:
        committee_id: Committee ID (from a committee search), e.g. 739.
        include_banners: Include banner images (larger response).
        show_on_website_only: Only public committees.
    """
    return await get_result(f"{COMMITTEES_API}/Committees/{committee_id}", {
        "includeBanners": include_banners,
        "showOnWebsiteOnly": show_on_website_only,
    })


async def get_events(
    committee_id: Optional[int] = None,
    committee_business_id: Optional[int] = None,
    search_term: Optional[str] = None,
    start_date_from: Optional[str] = None,
    start_date_to: Optional[str] = None,
    end_date_from: Optional[str] = None,
    location_id: Optional[int] = None,
    exclude_cancelled_events: Optional[bool] = None,
    sort_ascending: Optional[bool] = None,
    event_type_id: Optional[int] = None,
    include_event_attendees: bool = False,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Search committee events (meetings, hearings, visits) by committee, date, location, or type.

    Args:
        committee_id: Committee ID.
        committee_business_id: Committee business (inquiry) ID.
        search_term: Search event titles and content.
        start_date_from: Events starting on or after (YYYY-MM-DD).
        start_date_to: Events starting on or before (YYYY-MM-DD).
        end_date_from: Events ending on or after (YYYY-MM-DD).
        location_id: Location ID.
        exclude_cancelled_events: Drop cancelled events.
        sort_ascending: Oldest first.
        event_type_id: Event type ID.
        include_event_attendees: Include attendees in the response.
        show_on_website_only: Only events shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/Events", {
        "CommitteeId": committee_id,
        "CommitteeBusinessId": committee_business_id,
        "SearchTerm": search_term,
        "StartDateFrom": start_date_from,
        "StartDateTo": start_date_to,
        "EndDateFrom": end_date_from,
        "LocationId": location_id,
        "ExcludeCancelledEvents": exclude_cancelled_events,
        "SortAscending": sort_ascending,
        "EventTypeId": event_type_id,
        "IncludeEventAttendees": include_event_attendees,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


async def get_event_by_id(event_id: int, show_on_website_only: bool = True) -> str:
    """Get one committee event in full: activities, attendees, committees, and business.

    Args:
        event_id: Event ID.
        show_on_website_only: Only events shown on the website.
    """
    return await get_result(
        f"{COMMITTEES_API}/Events/{event_id}", {"showOnWebsiteOnly": show_on_website_only}
    )


async def get_committee_events(
    committee_id: int,
    committee_business_id: Optional[int] = None,
    search_term: Optional[str] = None,
    start_date_from: Optional[str] = None,
    start_date_to: Optional[str] = None,
    end_date_from: Optional[str] = None,
    location_id: Optional[int] = None,
    exclude_cancelled_events: Optional[bool] = None,
    sort_ascending: Optional[bool] = None,
    event_type_id: Optional[int] = None,
    include_event_attendees: bool = False,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Get the events of one committee, filtered by date range, business, or event type.

    Args:
        committee_id: Committee ID.
        committee_business_id: Committee business (inquiry) ID.
        search_term: Search event titles and content.
        start_date_from: Events starting on or after (YYYY-MM-DD).
        start_date_to: Events starting on or before (YYYY-MM-DD).
        end_date_from: Events ending on or after (YYYY-MM-DD).
        location_id: Location ID.
        exclude_cancelled_events: Drop cancelled events.
        sort_ascending: Oldest first.
        event_type_id: Event type ID.
        include_event_attendees: Include attendees in the response.
        show_on_website_only: Only events shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/Committees/{committee_id}/Events", {
        "CommitteeBusinessId": committee_business_id,
        "SearchTerm": search_term,
        "StartDateFrom": start_date_from,
        "StartDateTo": start_date_to,
        "EndDateFrom": end_date_from,
        "LocationId": location_id,
        "ExcludeCancelledEvents": exclude_cancelled_events,
        "SortAscending": sort_ascending,
        "EventTypeId": event_type_id,
        "IncludeEventAttendees": include_event_attendees,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


async def get_committee_members(
    committee_id: int,
    membership_status: Optional[str] = None,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Get the members (elected and lay) of a committee, with roles and membership status.

    Args:
        committee_id: Committee ID.
        membership_status: e.g. "Current" or "Former".
        show_on_website_only: Only members shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/Committees/{committee_id}/Members", {
        "MembershipStatus": membership_status,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


async def get_publications(
    search_term: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    committee_business_id: Optional[int] = None,
    committee_id: Optional[int] = None,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Search committee publications: reports, government responses, and other papers.

    Args:
        search_term: Search publication titles and content.
        start_date: Published on or after (YYYY-MM-DD).
        end_date: Published on or before (YYYY-MM-DD).
        committee_business_id: Committee business (inquiry) ID.
        committee_id: Committee ID.
        show_on_website_only: Only publications shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/Publications", {
        "SearchTerm": search_term,
        "StartDate": start_date,
        "EndDate": end_date,
        "CommitteeBusinessId": committee_business_id,
        "CommitteeId": committee_id,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


async def get_publication_by_id(publication_id: int, show_on_website_only: bool = True) -> str:
    """Get one committee publication: documents, HC numbers, and government responses.

    Args:
        publication_id: Publication ID.
        show_on_website_only: Only publications shown on the website.
    """
    return await get_result(
        f"{COMMITTEES_API}/Publications/{publication_id}",
        {"showOnWebsiteOnly": show_on_website_only},
    )


async def get_written_evidence(
    committee_business_id: Optional[int] = None,
    committee_id: Optional[int] = None,
    search_term: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Search written evidence submitted to committee inquiries.

    Args:
        committee_business_id: Committee business (inquiry) ID.
        committee_id: Committee ID.
        search_term: Search evidence content or witness names.
        start_date: Published on or after (YYYY-MM-DD).
        end_date: Published on or before (YYYY-MM-DD).
        show_on_website_only: Only evidence shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/WrittenEvidence", {
        "CommitteeBusinessId": committee_business_id,
        "CommitteeId": committee_id,
        "SearchTerm": search_term,
        "StartDate": start_date,
        "EndDate": end_date,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


async def get_oral_evidence(
    committee_business_id: Optional[int] = None,
    committee_id: Optional[int] = None,
    search_term: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    show_on_website_only: bool = True,
    skip: int = 0,
    take: int = 30,
) -> str:
    """Search oral evidence sessions (witness testimony and transcripts) from committee hearings.

    Args:
        committee_business_id: Committee business (inquiry) ID.
        committee_id: Committee ID.
        search_term: Search evidence content or witness names.
        start_date: Meeting on or after (YYYY-MM-DD).
        end_date: Meeting on or before (YYYY-MM-DD).
        show_on_website_only: Only evidence shown on the website.
        skip: Records to skip.
        take: Records to return (default 30, max 100).
    """
    return await get_result(f"{COMMITTEES_API}/OralEvidence", {
        "CommitteeBusinessId": committee_business_id,
        "CommitteeId": committee_id,
        "SearchTerm": search_term,
        "StartDate": start_date,
        "EndDate": end_date,
        "ShowOnWebsiteOnly": show_on_website_only,
        "Skip": skip,
        "Take": take,
    })


TOOLS = [
    get_committee_meetings,
    search_committees,
    get_committee_types,
    get_committee_by_id,
    get_events,
    get_event_by_id,
    get_committee_events,
    get_committee_members,
    get_publications,
    get_publication_by_id,
    get_written_evidence,
    get_oral_evidence,
]

# =============================================================================
# tools/bills.py  -  Bills API (legislation, stages, amendments, publications)
# =============================================================================
# Upstream: https://bills-api.parliament.uk/api/v1
#
# IDs nest: a bill has stages, a stage has amendments and ping pong items.
# Tools deeper in the tree need every ID above them.
# =============================================================================

from typing import Optional

from core.apis import BILLS_API
from tools.client import get_result


async def get_recently_updated_bills(take: int = 10) -> str:
    """Get the most recently updated bills: titles, stages, sponsors, and current status.

    Args:
        take: Number of bills to return (default 10, recommended max 50).
    """
    return await get_result(f"{BILLS_API}/Bills", {
        "SortOrder": "DateUpdatedDescending",
        "skip": 0,
        "take": take,
    })


async def search_bills(search_term: str, member_id: Optional[int] = None) -> str:
    """Search bills by title, subject, or keyword.

    Args:
        search_term: e.g. "environment", "health", "finance".
        member_id: Only bills sponsored by this member.
    """
    return await get_result(f"{BILLS_API}/Bills", {
        "SearchTerm": search_term,
        "MemberId": member_id,
    })


async def bill_types() -> str:
    """Get every type of bill that can be introduced (Government Bill, Private Member's Bill, ...)."""
    return await get_result(f"{BILLS_API}/BillTypes")


async def bill_stages() -> str:
    """Get every stage a bill can pass through (First Reading, Committee Stage, Royal Assent, ...)."""
    return await get_result(f"{BILLS_API}/Stages")


async def get_bill_by_id(bill_id: int) -> str:
    """Get full details of a bill: title, sponsors, stages, summary, and status.

    Args:
        bill_id: Bill ID.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}")


async def get_bill_stages(bill_id: int, skip: Optional[int] = None, take: Optional[int] = None) -> str:
    """Get all stages of a bill, to track its progress through Parliament.

    Args:
        bill_id: Bill ID.
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Stages", {"Skip": skip, "Take": take})


async def get_bill_stage_details(bill_id: int, bill_stage_id: int) -> str:
    """Get details of one stage of a bill: timings, committee involvement, related activity.

    Args:
        bill_id: Bill ID.
        bill_stage_id: Bill stage ID.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Stages/{bill_stage_id}")


async def get_bill_stage_amendments(
    bill_id: int,
    bill_stage_id: int,
    search_term: Optional[str] = None,
    amendment_number: Optional[str] = None,
    decision: Optional[str] = None,
    member_id: Optional[int] = None,
    skip: Optional[int] = None,
    take: Optional[int] = None,
) -> str:
    """Get the amendments tabled at a bill stage.

    Args:
        bill_id: Bill ID.
        bill_stage_id: Bill stage ID.
        search_term: Search amendment content.
        amendment_number: Specific amendment number.
        decision: Amendment decision status.
        member_id: Member who proposed the amendment.
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Stages/{bill_stage_id}/Amendments", {
        "SearchTerm": search_term,
        "AmendmentNumber": amendment_number,
        "Decision": decision,
        "MemberId": member_id,
        "Skip": skip,
        "Take": take,
    })


async def get_amendment_by_id(bill_id: int, bill_stage_id: int, amendment_id: int) -> str:
    """Get one amendment in full: text, sponsors, decision, and explanatory notes.

    Args:
        bill_id: Bill ID.
        bill_stage_id: Bill stage ID.
        amendment_id: Amendment ID.
    """
    return await get_result(
        f"{BILLS_API}/Bills/{bill_id}/Stages/{bill_stage_id}/Amendments/{amendment_id}"
    )


async def get_bill_stage_ping_pong_items(
    bill_id: int,
    bill_stage_id: int,
    search_term: Optional[str] = None,
    amendment_number: Optional[str] = None,
    decision: Optional[str] = None,
    member_id: Optional[int] = None,
    skip: Optional[int] = None,
    take: Optional[int] = None,
) -> str:
    """Get ping pong items (amendments and motions passed between Commons and Lords) for a bill stage.

    Args:
        bill_id: Bill ID.
        bill_stage_id: Bill stage ID.
        search_term: Search item content.
        amendment_number: Specific amendment number.
        decision: Item decision status.
        member_id: Member who proposed the item.
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Stages/{bill_stage_id}/PingPongItems", {
        "SearchTerm": search_term,
        "AmendmentNumber": amendment_number,
        "Decision": decision,
        "MemberId": member_id,
        "Skip": skip,
        "Take": take,
    })


async def get_ping_pong_item_by_id(bill_id: int, bill_stage_id: int, ping_pong_item_id: int) -> str:
    """Get one ping pong item (amendment or motion) in full.

    Args:
        bill_id: Bill ID.
        bill_stage_id: Bill stage ID.
        ping_pong_item_id: Ping pong item ID.
    """
    return await get_result(
        f"{BILLS_API}/Bills/{bill_id}/Stages/{bill_stage_id}/PingPongItems/{ping_pong_item_id}"
    )


async def get_bill_publications(bill_id: int) -> str:
    """Get all publications for a bill: impact assessments, explanatory notes, document versions.

    Args:
        bill_id: Bill ID.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Publications")


async def get_bill_stage_publications(bill_id: int, stage_id: int) -> str:
    """Get publications for one stage of a bill.

    Args:
        bill_id: Bill ID.
        stage_id: Stage ID.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/Stages/{stage_id}/Publications")


async def get_publication_document(publication_id: int, document_id: int) -> str:
    """Get metadata for a publication document: filename, content type, and size.

    Args:
        publication_id: Publication ID.
        document_id: Document ID.
    """
    return await get_result(f"{BILLS_API}/Publications/{publication_id}/Documents/{document_id}")


async def get_bill_news_articles(bill_id: int, skip: Optional[int] = None, take: Optional[int] = None) -> str:
    """Get news articles about a bill.

    Args:
        bill_id: Bill ID.
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/Bills/{bill_id}/NewsArticles", {"Skip": skip, "Take": take})


async def get_all_bills_rss() -> str:
    """Get the RSS feed of all bills."""
    return await get_result(f"{BILLS_API}/Rss/allbills.rss")


async def get_public_bills_rss() -> str:
    """Get the RSS feed of public bills only."""
    return await get_result(f"{BILLS_API}/Rss/publicbills.rss")


async def get_private_bills_rss() -> str:
    """Get the RSS feed of private bills only."""
    return await get_result(f"{BILLS_API}/Rss/privatebills.rss")


async def get_bill_rss(bill_id: int) -> str:
    """Get the RSS feed for a single bill.

    Args:
        bill_id: Bill ID.
    """
    return await get_result(f"{BILLS_API}/Rss/Bills/{bill_id}.rss")


async def get_publication_types(skip: Optional[int] = None, take: Optional[int] = None) -> str:
    """Get the publication types that can be attached to bills.

    Args:
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/PublicationTypes", {"Skip": skip, "Take": take})


async def get_sittings(
    house: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    skip: Optional[int] = None,
    take: Optional[int] = None,
) -> str:
    """Get parliamentary sittings, optionally filtered by House and date range.

    Args:
        house: "Commons" or "Lords".
        date_from: Start date (YYYY-MM-DD).
        date_to: End date (YYYY-MM-DD).
        skip: Records to skip.
        take: Records to return.
    """
    return await get_result(f"{BILLS_API}/Sittings", {
        "House": house,
        "DateFrom": date_from,
        "DateTo": date_to,
        "Skip": skip,
        "Take": take,
    })


TOOLS = [
    get_recently_updated_bills,
    search_bills,
    bill_types,
    bill_stages,
    get_bill_by_id,
    get_bill_stages,
    get_bill_stage_details,
    get_bill_stage_amendments,
    get_amendment_by_id,
    get_bill_stage_ping_pong_items,
    get_ping_pong_item_by_id,
    get_bill_publications,
    get_bill_stage_publications,
    get_publication_document,
    get_bill_news_articles,
    get_all_bills_rss,
    get_public_bills_rss,
    get_private_bills_rss,
    get_bill_rss,
    get_publication_types,
    get_sittings,
]

# =============================================================================
# tools/interests.py  -  Register of Interests API
# =============================================================================
# Upstream: https://interests-api.parliament.uk/api/v1
# =============================================================================

from core.apis import INTERESTS_API
from tools.client import get_result


async def search_roi(member_id: int) -> str:
    """Search a member's Register of Interests: directorships, consultancies, gifts, and other declarations.

    Args:
        member_id: Parliament member ID (from a member search).
    """
    return await get_result(f"{INTERESTS_API}/Interests/", {"MemberId": member_id})


async def interests_categories() -> str:
    """Get the categories of interest that MPs and Lords must declare."""
    return await get_result(f"{INTERESTS_API}/Categories")


async def get_registers_of_interests() -> str:
    """Get the list of published Registers of Interests."""
    return await get_result(f"{INTERESTS_API}/Registers")


TOOLS = [
    search_roi,
    interests_categories,
    get_registers_of_interests,
]

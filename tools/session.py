# =============================================================================
# tools/session.py  -  Session prompts (no upstream call)
# =============================================================================
# A client calls hello_parliament first to pick up the research-assistant
# rules, and goodbye_parliament to drop them.  Both return a plain string,
# not a {url, data} envelope.
# =============================================================================

from core.prompts import GOODBYE_PARLIAMENT_PROMPT, HELLO_PARLIAMENT_PROMPT


async def hello_parliament() -> str:
    """Initialise the Parliament data assistant. Call FIRST when beginning parliamentary research.

    Returns the system prompt: answer only from this server's data and list
    every API URL used.
    """
    return HELLO_PARLIAMENT_PROMPT


async def goodbye_parliament() -> str:
    """End the Parliament session and restore normal assistant behaviour."""
    return GOODBYE_PARLIAMENT_PROMPT


TOOLS = [
    hello_parliament,
    goodbye_parliament,
]

import inspect
import json
import types

import httpx
import pytest

from core.prompts import GOODBYE_PARLIAMENT_PROMPT, HELLO_PARLIAMENT_PROMPT
from tools import (
    bills,
    chamber,
    client,
    committees,
    interests,
    legislation,
    members,
    questions,
    session,
    votes,
)
from tools import mcp_server


# -----------------------------------------------------------------------------
# Request URLs
# -----------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_member_search_by_name(recorder):
    result = await members.get_member_by_name("Keir Starmer")

    url = "https://members-api.parliament.uk/api/Members/Search?Name=Keir%20Starmer"
    assert recorder.urls == [url]
    assert json.loads(result) == {"url": url, "data": '{"ok":true}'}


@pytest.mark.asyncio
async def test_search_members_sends_only_given_filters(recorder):
    await members.search_members()
    await members.search_members(
        name="Smith", house=1, membership_ended_since="2019-12-12", is_current_member=True
    )

    assert recorder.urls == [
        "https://members-api.parliament.uk/api/Members/Search?skip=0&take=20",
        "https://members-api.parliament.uk/api/Members/Search?Name=Smith&House=1"
        "&MembershipEnded.MembershipEndedSince=2019-12-12&IsCurrentMember=True&skip=0&take=20",
    ]


@pytest.mark.asyncio
async def test_member_paths_and_fixed_params(recorder):
    await members.get_member_by_id(1423)
    await members.get_contributions(172)
    await members.get_members_history([1, 2, 3])

    assert recorder.urls == [
        "https://members-api.parliament.uk/api/Members/1423",
        "https://members-api.parliament.uk/api/Members/172/ContributionSummary?page=1",
        "https://members-api.parliament.uk/api/Members/History?ids=1%2C2%2C3",
    ]


@pytest.mark.asyncio
async def test_bill_tools(recorder):
    await bills.get_recently_updated_bills()
    await bills.search_bills("NHS & Care")
    await bills.search_bills("housing", member_id=4514)
    await bills.get_bill_stage_amendments(3506, 17000, decision="Agreed", take=5)

    assert recorder.urls == [
        "https://bills-api.parliament.uk/api/v1/Bills?SortOrder=DateUpdatedDescending&skip=0&take=10",
        "https://bills-api.parliament.uk/api/v1/Bills?SearchTerm=NHS%20%26%20Care",
        "https://bills-api.parliament.uk/api/v1/Bills?SearchTerm=housing&MemberId=4514",
        "https://bills-api.parliament.uk/api/v1/Bills/3506/Stages/17000/Amendments"
        "?Decision=Agreed&Take=5",
    ]


@pytest.mark.asyncio
async def test_committee_booleans_use_title_case(recorder):
    await committees.get_committee_by_id(739)
    await committees.get_committee_by_id(739, include_banners=True, show_on_website_only=False)

    assert recorder.urls == [
        "https://committees-api.parliament.uk/api/Committees/739"
        "?includeBanners=False&showOnWebsiteOnly=True",
        "https://committees-api.parliament.uk/api/Committees/739"
        "?includeBanners=True&showOnWebsiteOnly=False",
    ]


@pytest.mark.asyncio
async def test_vote_tools(recorder):
    await votes.search_commons_divisions("brexit", member_id=172)
    await votes.get_commons_voting_record_for_member(172)
    await votes.get_commons_division_by_id(1234)

    assert recorder.urls == [
        "http://commonsvotes-api.parliament.uk/data/divisions.json/search"
        "?queryParameters.searchTerm=brexit&memberId=172",
        "http://commonsvotes-api.parliament.uk/data/divisions.json/membervoting"
        "?queryParameters.memberId=172",
        "http://commonsvotes-api.parliament.uk/data/division/1234.json",
    ]


@pytest.mark.asyncio
async def test_hansard_search(recorder):
    await chamber.search_hansard(1, "2024-01-01", "2024-01-31", "climate change")

    assert recorder.urls == [
        "https://hansard-api.parliament.uk/search.json?queryParameters.house=1"
        "&queryParameters.startDate=2024-01-01&queryParameters.endDate=2024-01-31"
        "&queryParameters.searchTerm=climate%20change",
    ]


@pytest.mark.asyncio
async def test_erskine_may_term_is_a_path_segment(recorder):
    await legislation.search_erskine_may("Speaker's chair/rules")

    assert recorder.urls == [
        "https://erskinemay-api.parliament.uk/api/Search/ParagraphSearchResults/"
        "Speaker%27s%20chair%2Frules",
    ]


@pytest.mark.asyncio
async def test_empty_required_value_is_dropped(recorder):
    await legislation.search_treaties("")
    assert recorder.urls == ["https://treaties-api.parliament.uk/api/Treaty"]


# -----------------------------------------------------------------------------
# Session prompts and error envelopes
# -----------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_session_prompts_make_no_requests(recorder):
    assert await session.hello_parliament() == HELLO_PARLIAMENT_PROMPT
    assert await session.goodbye_parliament() == GOODBYE_PARLIAMENT_PROMPT
    assert recorder.urls == []


@pytest.mark.asyncio
async def test_tool_returns_error_envelope(monkeypatch, make_fetcher):
    fetcher = make_fetcher(lambda request: httpx.Response(404))
    monkeypatch.setattr(client, "_fetcher", fetcher)

    result = json.loads(await bills.get_bill_by_id(999999))

    assert result == {
        "url": "https://bills-api.parliament.uk/api/v1/Bills/999999",
        "error": "HTTP request failed with status 404: Not Found",
        "statusCode": 404,
    }


def test_shared_fetcher_is_created_lazily(monkeypatch):
    monkeypatch.setattr(client, "_fetcher", None)
    monkeypatch.setenv("PARLIAMENT_MAX_RETRY_ATTEMPTS", "2")

    fetcher = client.get_fetcher()

    assert fetcher is client.get_fetcher()
    assert fetcher.settings.max_retry_attempts == 2


@pytest.mark.asyncio
async def test_invalid_settings_become_an_error_envelope(monkeypatch):
    monkeypatch.setattr(client, "_fetcher", None)
    monkeypatch.setenv("PARLIAMENT_HTTP_TIMEOUT", "soon")

    result = json.loads(await legislation.search_treaties("trade"))

    assert result == {
        "url": "https://treaties-api.parliament.uk/api/Treaty?SearchText=trade",
        "error": "Configuration error: PARLIAMENT_HTTP_TIMEOUT must be a number, got 'soon'",
    }


# -----------------------------------------------------------------------------
# Startup
# -----------------------------------------------------------------------------

@pytest.fixture
def startup(monkeypatch):
    """Run mcp_server.main() without .env files or a real stdio loop."""
    runs = []
    monkeypatch.setattr(client, "_fetcher", None)
    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: False)
    monkeypatch.setattr(mcp_server.mcp, "run", lambda *args, **kwargs: runs.append(args))
    return runs


def test_startup_rejects_invalid_settings_before_serving(monkeypatch, startup):
    monkeypatch.setenv("PARLIAMENT_MAX_RETRY_ATTEMPTS", "0")

    with pytest.raises(ValueError, match="PARLIAMENT_MAX_RETRY_ATTEMPTS"):
        mcp_server.main()

    assert startup == []
    assert client._fetcher is None


def test_startup_installs_configured_fetcher(monkeypatch, startup):
    monkeypatch.setenv("PARLIAMENT_HTTP_TIMEOUT", "12")

    mcp_server.main()

    assert len(startup) == 1
    assert client.get_fetcher().settings.http_timeout == 12.0


def test_script_entry_point_is_the_server_main():
    import main

    assert main.main is mcp_server.main


# -----------------------------------------------------------------------------
# Registration
# -----------------------------------------------------------------------------

def test_catalogue_is_complete_and_unique():
    names = [fn.__name__ for fn in mcp_server.iter_tools()]
    assert len(names) == 86
    assert len(set(names)) == len(names)

    counts = {module.__name__.split(".")[-1]: len(module.TOOLS)
              for module in mcp_server.TOOL_MODULES}
    assert counts == {
        "session": 2,
        "members": 25,
        "bills": 21,
        "committees": 12,
        "votes": 10,
        "chamber": 6,
        "questions": 3,
        "interests": 3,
        "legislation": 4,
    }


def test_every_tool_is_a_documented_coroutine():
    for fn in mcp_server.iter_tools():
        assert inspect.iscoroutinefunction(fn), fn.__name__
        assert fn.__doc__ and fn.__doc__.strip(), fn.__name__


def test_every_public_coroutine_is_registered():
    registered = set(mcp_server.iter_tools())
    for module in mcp_server.TOOL_MODULES:
        for name, fn in inspect.getmembers(module, inspect.iscoroutinefunction):
            if fn.__module__ == module.__name__ and not name.startswith("_"):
                assert fn in registered, name


def test_build_server_rejects_duplicate_names(monkeypatch):
    duplicate = types.SimpleNamespace(TOOLS=[session.hello_parliament])
    monkeypatch.setattr(mcp_server, "TOOL_MODULES", [session, duplicate])

    with pytest.raises(ValueError, match="Duplicate tool name: hello_parliament"):
        mcp_server.build_server()


def test_module_level_server_name():
    assert mcp_server.mcp.name == "uk-parliament"


def test_every_tool_module_is_registered():
    for module in (bills, chamber, committees, interests, legislation,
                   members, questions, session, votes):
        assert module in mcp_server.TOOL_MODULES

from urllib.parse import parse_qs, urlsplit

import pytest

from core.url_builder import build_url, format_query_value, quote_path_segment

BASE = "https://x/y"


def test_only_empty_values_yield_bare_base_url():
    assert build_url(BASE, {"a": None, "b": ""}) == BASE
    assert build_url(BASE, {}) == BASE


def test_filters_none_and_empty():
    assert build_url(BASE, {"a": "1", "b": None, "c": ""}) == "https://x/y?a=1"


def test_value_with_space_and_ampersand_round_trips():
    url = build_url(BASE, {"SearchTerm": "NHS & Care", "take": "5"})
    query = parse_qs(urlsplit(url).query)
    assert query == {"SearchTerm": ["NHS & Care"], "take": ["5"]}
    assert " " not in url


def test_reserved_and_non_ascii_characters_are_encoded():
    url = build_url(BASE, {"q": "a/b=c?d#e", "name": "Côr Ysgol"})
    assert url == "https://x/y?q=a%2Fb%3Dc%3Fd%23e&name=C%C3%B4r%20Ysgol"
    query = parse_qs(urlsplit(url).query)
    assert query["name"] == ["Côr Ysgol"]


def test_unreserved_characters_are_kept():
    assert build_url(BASE, {"d": "2024-01-15_v1.0~x"}) == "https://x/y?d=2024-01-15_v1.0~x"


def test_keys_are_not_encoded_and_order_is_preserved():
    url = build_url(BASE, {
        "queryParameters.searchTerm": "brexit",
        "MembershipEnded.MembershipEndedSince": "2019-12-12",
        "skip": 0,
    })
    assert url == (
        "https://x/y?queryParameters.searchTerm=brexit"
        "&MembershipEnded.MembershipEndedSince=2019-12-12&skip=0"
    )


def test_typed_values():
    url = build_url(BASE, {"id": 42, "flag": True, "other": False, "ids": [1, 2, 3]})
    assert url == "https://x/y?id=42&flag=True&other=False&ids=1%2C2%2C3"


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ("", ""),
    (0, "0"),
    (True, "True"),
    (False, "False"),
    ([], None),
    (("a", "b"), "a,b"),
])
def test_format_query_value(value, expected):
    assert format_query_value(value) == expected


def test_zero_is_not_treated_as_empty():
    assert build_url(BASE, {"skip": 0}) == "https://x/y?skip=0"


def test_quote_path_segment():
    assert quote_path_segment("Speaker's chair/2") == "Speaker%27s%20chair%2F2"

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from urllib.parse import quote

import pytest

from reflectguard.errors import DecodingError, UrlParseError
from reflectguard.reflection.query import decode_query, parse_target_url, percent_decode, split_query


def test_parse_target_url_exposes_parts_and_raw_pairs():
    parsed = parse_target_url("https://Example.com:8443/search/p?q=%3Cb%3E&page=2#frag")
    assert parsed.scheme == "https"
    assert parsed.host == "example.com"
    assert parsed.port == 8443
    assert parsed.path == "/search/p"
    assert parsed.query == "q=%3Cb%3E&page=2"
    assert parsed.pairs == (("q", "%3Cb%3E"), ("page", "2"))


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "/relative/path?x=1",
        "http://[::1/p?x=1",
        "http://host:port/p",
        "http:///missing-host?x=1",
    ],
)
def test_parse_target_url_rejects_malformed(url):
    with pytest.raises(UrlParseError):
        parse_target_url(url)


def test_split_query_keeps_order_blank_values_and_skips_empty_segments():
    assert split_query("a=1&&b&c=&a=2") == (("a", "1"), ("b", ""), ("c", ""), ("a", "2"))
    assert split_query("") == ()


def test_percent_decode_basic():
    assert percent_decode("%3Cscript%3Ealert(1)%3C%2Fscript%3E") == "<script>alert(1)</script>"
    assert percent_decode("caf%C3%A9") == "café"
    assert percent_decode("a+b") == "a b"
    assert percent_decode("a%2Bb") == "a+b"
    assert percent_decode("plain") == "plain"


@pytest.mark.parametrize("value", ["<img src=x onerror=alert(1)>", "a b&c=d/e?f#g", "~-._!*'();:@$,", "héllo wörld ✓"])
def test_percent_decode_reverses_quote(value):
    assert percent_decode(quote(value, safe="")) == value


@pytest.mark.parametrize("value", ["%", "abc%2", "%zz", "100%", "%G1"])
def test_percent_decode_rejects_invalid_escapes(value):
    with pytest.raises(DecodingError):
        percent_decode(value)


def test_percent_decode_rejects_invalid_utf8():
    with pytest.raises(DecodingError):
        percent_decode("%FF%FE")


def test_decode_query_decodes_values_not_keys():
    params = decode_query("http://h/p?%3Ck%3E=%3Cv%3E&x=1")
    assert [(p.key, p.raw_value, p.value) for p in params] == [
        ("%3Ck%3E", "%3Cv%3E", "<v>"),
        ("x", "1", "1"),
    ]


def test_decode_query_without_query_is_empty():
    assert decode_query("http://h/p") == []
    assert decode_query("http://h/p?") == []


def test_decode_query_failure_names_parameter():
    with pytest.raises(DecodingError) as excinfo:
        decode_query("http://h/p?ok=1&bad=%E0%A4")
    assert "bad" in excinfo.value.message
    assert excinfo.value.url == "http://h/p?ok=1&bad=%E0%A4"


def test_parse_target_url_accepts_unencoded_spaces_in_query():
    parsed = parse_target_url("http://h/p?x=<img src=x onerror=alert(1)>")
    assert parsed.host == "h"
    assert parsed.pairs == (("x", "<img src=x onerror=alert(1)>"),)


def test_decode_query_turns_plus_into_space_in_values_only():
    params = decode_query("http://h/p?a+b=%3Cimg+src%3Dx%3E")
    assert [(p.key, p.value) for p in params] == [("a+b", "<img src=x>")]

from urllib.parse import parse_qsl, unquote_plus, urlsplit

import pytest

from mhttpclient.params import (
    HttpParam,
    HttpParams,
    build_array_params_get_url,
    build_object_params_get_url,
    url_encode,
)

BASE = "http://192.168.1.32:10085/api/execCmd"


def test_unreserved_characters_pass_through():
    text = "AZaz09-_.~"
    assert url_encode(text) == text


def test_slash_is_percent_encoded():
    assert url_encode("/") == "%2F"


@pytest.mark.parametrize(
    "text", ["input keyevent 24", "a&b=c", "päth/ü?x", "100%", "tab\tand\nnewline"]
)
def test_url_encode_round_trip(text):
    encoded = url_encode(text)
    assert unquote_plus(encoded) == text
    assert " " not in encoded
    assert encoded.isascii()


def test_url_encode_uses_uppercase_hex():
    encoded = url_encode("ÿ~")
    assert encoded == encoded.upper()


def test_url_encode_bytes_matches_text():
    text = "input keyevent 24/é"
    assert url_encode(text.encode("utf-8")) == url_encode(text)


def test_url_encode_none():
    assert url_encode(None) is None


def test_params_keep_insertion_order():
    params = HttpParams()
    params.add("value", "input keyevent 24")
    params.add("timeout", "10")
    assert len(params) == 2
    assert list(params) == [
        HttpParam("value", "input keyevent 24"),
        HttpParam("timeout", "10"),
    ]


def test_params_from_pairs():
    params = HttpParams([("a", "1"), ("b", "2")])
    assert [tuple(p) for p in params] == [("a", "1"), ("b", "2")]
    assert params._items[0].key == "a"


def test_object_url_worked_example():
    params = HttpParams([("value", "input keyevent 24"), ("timeout", "10")])
    assert (
        build_object_params_get_url(BASE, params)
        == BASE + "?value=input+keyevent+24&timeout=10"
    )


def test_object_url_query_round_trip():
    pairs = [("a key", "x&y=z"), ("ü", "/path?q"), ("timeout", "10")]
    url = build_object_params_get_url(BASE, HttpParams(pairs))
    assert url.startswith(BASE + "?")
    assert parse_qsl(urlsplit(url).query) == pairs


@pytest.mark.parametrize("params", [None, HttpParams(), []])
def test_object_url_without_params_is_base(params):
    assert build_object_params_get_url(BASE, params) == BASE


def test_object_url_without_base():
    url = build_object_params_get_url(None, [("k", "v w")])
    assert url.startswith("?")
    assert parse_qsl(url[1:]) == [("k", "v w")]


def test_object_url_accepts_plain_pairs():
    pairs = [("value", "input keyevent 24"), ("timeout", "10")]
    assert build_object_params_get_url(BASE, pairs) == build_object_params_get_url(
        BASE, HttpParams(pairs)
    )


def test_array_url_matches_object_url_for_plain_keys():
    flat = ["value", "input keyevent 24", "timeout", "10"]
    pairs = [("value", "input keyevent 24"), ("timeout", "10")]
    assert build_array_params_get_url(BASE, flat) == build_object_params_get_url(
        BASE, pairs
    )


def test_array_url_does_not_encode_keys():
    key = "a b"
    url = build_array_params_get_url("u", [key, "v&w"])
    query = url.split("?", 1)[1]
    raw_key, raw_value = query.split("=", 1)
    assert raw_key == key
    assert unquote_plus(raw_value) == "v&w"


def test_array_url_skips_incomplete_pairs_but_keeps_separator():
    assert build_array_params_get_url("u", [None, "v", "k", "w"]) == "u?&k=w"


def test_array_url_all_pairs_skipped_leaves_question_mark():
    assert build_array_params_get_url(BASE, ["k", None]) == BASE + "?"


@pytest.mark.parametrize(
    "base, params",
    [(None, ["k", "v"]), (BASE, []), (BASE, None), (BASE, ["k", "v", "odd"])],
)
def test_array_url_rejects_bad_input(base, params):
    with pytest.raises(ValueError):
        build_array_params_get_url(base, params)
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_typed_config.domain.keys import lcfirst, normalize_key, strip_prefix

WORD = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=6)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", "debug"),
        ("DEBUG", "debug"),
        ("db.connection_pool", "dbConnectionPool"),
        ("DB.Connection_Pool", "dbConnectionPool"),
        ("cache_ttl", "cacheTtl"),
        ("log.level", "logLevel"),
        ("a__b", "aB"),
        ("_leading", "leading"),
        ("trailing_", "trailing"),
        ("server.http_2", "serverHttp2"),
    ],
)
def test_normalize_key(raw: str, expected: str) -> None:
    assert normalize_key(raw) == expected


def test_dot_and_underscore_are_interchangeable() -> None:
    assert normalize_key("a.b_c") == normalize_key("a_b.c") == normalize_key("a_b_c") == "aBC"


@given(st.lists(WORD, min_size=1, max_size=4), st.lists(st.sampled_from([".", "_"]), min_size=3, max_size=3))
def test_normalize_key_joins_words_in_camel_case(words, separators) -> None:
    raw = words[0] + "".join(sep + word for sep, word in zip(separators, words[1:]))
    expected = words[0] + "".join(word.capitalize() for word in words[1:])
    assert normalize_key(raw) == expected


@given(WORD)
def test_normalize_key_is_idempotent_on_lowercase_words(word) -> None:
    assert normalize_key(normalize_key(word)) == normalize_key(word) == word


def test_strip_prefix() -> None:
    assert strip_prefix("prefixOneValueOne", "prefixOne") == "valueOne"
    assert strip_prefix("prefixTwoValueOne", "prefixOne") is None
    assert strip_prefix("dbHost", "") == "dbHost"
    assert strip_prefix("DbHost", "") == "dbHost"
    assert strip_prefix("db", "db") == ""


def test_lcfirst() -> None:
    assert lcfirst("Value") == "value"
    assert lcfirst("v") == "v"
    assert lcfirst("") == ""

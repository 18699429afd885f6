from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_typed_config.application.merge import MergeOutcome, as_mapping, merge_fields

VALUE = st.one_of(st.none(), st.booleans(), st.integers(), st.floats(allow_nan=False), st.text(max_size=5))
MAPPING = st.dictionaries(st.text(min_size=1, max_size=5), VALUE, max_size=6)


def test_fill_only_skips_existing_fields() -> None:
    target = {"debug": False}
    outcome = merge_fields(target, {"debug": True, "port": 80}, overwrite=False)
    assert target == {"debug": False, "port": 80}
    assert outcome == MergeOutcome(applied=("port",), skipped=("debug",))


def test_overwrite_replaces_existing_fields() -> None:
    target = {"debug": False}
    outcome = merge_fields(target, {"debug": True}, overwrite=True)
    assert target == {"debug": True}
    assert outcome.skipped == ()


def test_existing_none_still_counts_as_present() -> None:
    target = {"obj": None}
    merge_fields(target, {"obj": {"a": 1}}, overwrite=False)
    assert target["obj"] is None


def test_merge_follows_source_order() -> None:
    target: dict[str, object] = {}
    outcome = merge_fields(target, {"b": 1, "a": 2, "c": 3}, overwrite=True)
    assert outcome.applied == ("b", "a", "c")
    assert list(target) == ["b", "a", "c"]


def test_nested_values_are_replaced_not_merged() -> None:
    target = {"db": {"host": "localhost", "port": 5432}}
    merge_fields(target, {"db": {"host": "remote"}}, overwrite=True)
    assert target["db"] == {"host": "remote"}


def test_as_mapping_accepts_records() -> None:
    @dataclass
    class Settings:
        debug: bool = True

    assert as_mapping(Settings()) == {"debug": True}
    assert as_mapping(SimpleNamespace(a=1, _b=2)) == {"a": 1}
    source = {"x": 1}
    assert as_mapping(source) is source


@pytest.mark.parametrize("source", [None, 1, 2.5, "text", [("a", 1)], dict])
def test_as_mapping_rejects_other_values(source: object) -> None:
    with pytest.raises(TypeError):
        as_mapping(source)


@given(MAPPING, MAPPING)
def test_overwrite_means_source_wins(lhs, rhs) -> None:
    target = dict(lhs)
    merge_fields(target, rhs, overwrite=True)
    assert target == {**lhs, **rhs}


@given(MAPPING, MAPPING)
def test_fill_only_means_target_wins(lhs, rhs) -> None:
    target = dict(lhs)
    merge_fields(target, rhs, overwrite=False)
    assert target == {**rhs, **lhs}


@given(MAPPING, MAPPING, st.booleans())
def test_outcome_partitions_source_keys(lhs, rhs, overwrite) -> None:
    outcome = merge_fields(dict(lhs), rhs, overwrite=overwrite)
    assert set(outcome.applied) | set(outcome.skipped) == set(rhs)
    assert not set(outcome.applied) & set(outcome.skipped)


@given(MAPPING, MAPPING)
def test_overwrite_merge_is_idempotent(lhs, rhs) -> None:
    once = dict(lhs)
    merge_fields(once, rhs, overwrite=True)
    twice = dict(once)
    merge_fields(twice, rhs, overwrite=True)
    assert once == twice

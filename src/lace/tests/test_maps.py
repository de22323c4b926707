"""Tests for mapping helpers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import pytest

from lace import move, move_new, put_if


# ═════════════════════════════════════════════════════════════════════════════
# move
# ═════════════════════════════════════════════════════════════════════════════


def test_move_renames_key() -> None:
    assert move({"name": "Marie Curie", "field": "Physics"}, "name", "full_name") == {
        "full_name": "Marie Curie",
        "field": "Physics",
    }


def test_move_overwrites_existing_key() -> None:
    assert move({1: "a", 2: "b"}, 2, 1) == {1: "b"}


@pytest.mark.parametrize("mapping", [{}, {"a": 1}, {"status": None, "b": 2}])
def test_move_missing_key_is_identity(mapping: dict[str, object]) -> None:
    assert move(mapping, "missing", "state") is mapping


def test_move_same_key_is_noop() -> None:
    mapping = {"a": 1, "b": 2}
    assert move(mapping, "a", "a") is mapping


def test_move_keeps_none_values() -> None:
    assert move({"a": None}, "a", "b") == {"b": None}


def test_move_does_not_mutate_input() -> None:
    mapping = {"a": 1, "b": 2}
    moved = move(mapping, "a", "c")

    assert mapping == {"a": 1, "b": 2}
    assert moved == {"b": 2, "c": 1}


def test_move_accepts_read_only_mappings() -> None:
    assert move(MappingProxyType({"a": 1}), "a", "b") == {"b": 1}


# ═════════════════════════════════════════════════════════════════════════════
# move_new
# ═════════════════════════════════════════════════════════════════════════════


def test_move_new_moves_into_free_key() -> None:
    assert move_new({"secondary": 20}, "secondary", "primary") == {"primary": 20}


def test_move_new_keeps_existing_key() -> None:
    mapping = {"primary": 10, "secondary": 20}
    assert move_new(mapping, "secondary", "primary") is mapping


def test_move_new_ignores_old_key_when_new_key_exists() -> None:
    """The old key is never looked at once the new key is known to exist."""

    class Probe(dict):
        looked_up: list[object] = []

        def __contains__(self, key: object) -> bool:
            self.looked_up.append(key)
            return super().__contains__(key)

    probe = Probe(primary=10, secondary=20)
    assert move_new(probe, "secondary", "primary") is probe
    assert Probe.looked_up == ["primary"]


def test_move_new_missing_old_key_is_identity() -> None:
    mapping = {"a": 1}
    assert move_new(mapping, "missing", "b") is mapping


# ═════════════════════════════════════════════════════════════════════════════
# put_if
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("mapping", [{}, {"k": 1}])
def test_put_if_none_is_identity(mapping: dict[str, object]) -> None:
    assert put_if(mapping, "k", None) is mapping


@pytest.mark.parametrize("value", [0, "", False, [], "x"])
def test_put_if_inserts_falsy_but_present_values(value: object) -> None:
    assert put_if({}, "k", value) == {"k": value}


def test_put_if_overwrites() -> None:
    mapping = {"k": 1}
    assert put_if(mapping, "k", 2) == {"k": 2}
    assert mapping == {"k": 1}


def test_put_if_predicate_called_once_with_original_mapping() -> None:
    calls: list[tuple[Mapping[str, int], int]] = []

    def larger(m: Mapping[str, int], v: int) -> bool:
        calls.append((m, v))
        return v > m.get("max", 0)

    mapping = {"max": 3}
    assert put_if(mapping, "max", 5, larger) == {"max": 5}
    assert len(calls) == 1
    assert calls[0][0] is mapping
    assert calls[0][1] == 5


def test_put_if_predicate_false_is_identity() -> None:
    mapping = {"max": 3}
    assert put_if(mapping, "max", 1, lambda m, v: v > m["max"]) is mapping


def test_put_if_predicate_may_accept_none() -> None:
    assert put_if({}, "k", None, lambda m, v: True) == {"k": None}

"""Extra helpers for mappings.

The input mapping is never mutated. When an operation changes something it
returns a new dict; when it changes nothing it returns the input object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

K = TypeVar("K")
V = TypeVar("V")


def move(mapping: Mapping[K, V], old_key: K, new_key: K) -> Mapping[K, V]:
    """Move the entry under old_key to new_key, overwriting any value already there.

    A missing old_key leaves the mapping unchanged.

    Examples:
        >>> move({"name": "Marie Curie", "field": "Physics"}, "name", "full_name")
        {'field': 'Physics', 'full_name': 'Marie Curie'}
        >>> move({1: "desert", 2: "lake"}, 2, 1)
        {1: 'lake'}
        >>> move({}, "status", "state")
        {}
    """
    if old_key not in mapping or old_key == new_key:
        return mapping
    moved = {k: v for k, v in mapping.items() if k != old_key}
    moved[new_key] = mapping[old_key]
    return moved


def move_new(mapping: Mapping[K, V], old_key: K, new_key: K) -> Mapping[K, V]:
    """Like move(), but leaves the mapping unchanged when new_key already exists.

    Examples:
        >>> move_new({"secondary": 20}, "secondary", "primary")
        {'primary': 20}
        >>> move_new({"primary": 10, "secondary": 20}, "secondary", "primary")
        {'primary': 10, 'secondary': 20}
    """
    return mapping if new_key in mapping else move(mapping, old_key, new_key)


def put_if(
    mapping: Mapping[K, V],
    key: K,
    value: V | None,
    predicate: Callable[[Mapping[K, V], V | None], bool] | None = None,
) -> Mapping[K, V]:
    """Put value under key if it passes the check.

    Without a predicate the check is ``value is not None``. A predicate is
    called once as ``predicate(mapping, value)`` with the original mapping.

    Examples:
        >>> put_if({"a": 1}, "b", 2)
        {'a': 1, 'b': 2}
        >>> put_if({"a": 1}, "b", None)
        {'a': 1}
        >>> put_if({"a": 1}, "a", 5, lambda m, v: v > m["a"])
        {'a': 5}
    """
    keep = value is not None if predicate is None else predicate(mapping, value)
    return {**mapping, key: value} if keep else mapping  # type: ignore[dict-item]

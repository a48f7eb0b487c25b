"""Membership tests and set-like operations over sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "contains",
    "contains_by",
    "every",
    "every_by",
    "some",
    "some_by",
    "none",
    "none_by",
    "intersect",
    "difference",
    "union",
    "without",
    "without_by",
    "without_empty",
    "without_nth",
]


def _same_kind(collection: Any, items: list[Any]) -> Any:
    """Build a sequence of the same kind as ``collection`` where possible."""
    if isinstance(collection, (list, tuple)):
        try:
            return type(collection)(items)
        except TypeError:
            pass
    return items


def contains(collection: Iterable[T], element: T) -> bool:
    """Whether ``element`` is present in ``collection``."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for some item."""
    return any(predicate(item) for item in collection)


def every(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether every item of ``subset`` is in ``collection`` (True if empty)."""
    return all(contains(collection, item) for item in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for every item (True if empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether at least one item of ``subset`` is in ``collection`` (False if empty)."""
    return any(contains(collection, item) for item in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for at least one item (False if empty)."""
    return any(predicate(item) for item in collection)


def none(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether no item of ``subset`` is in ``collection`` (True if empty)."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for no item (True if empty)."""
    return not some_by(collection, predicate)


def intersect(list1: Sequence[T], list2: Sequence[T]) -> Sequence[T]:
    """Items of ``list2`` that are also in ``list1``, in the order of ``list2``."""
    seen = set(list1)
    return _same_kind(list1, [item for item in list2 if item in seen])


def difference(list1: Sequence[T], list2: Sequence[T]) -> tuple[Sequence[T], Sequence[T]]:
    """Items of ``list1`` absent from ``list2``, and items of ``list2`` absent from ``list1``."""
    seen_left = set(list1)
    seen_right = set(list2)
    left = [item for item in list1 if item not in seen_right]
    right = [item for item in list2 if item not in seen_left]
    return _same_kind(list1, left), _same_kind(list1, right)


def union(*args: Sequence[T]) -> Sequence[T]:
    """Distinct items of all the given sequences, in order of first appearance."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for sequence in args:
        for item in sequence:
            if item not in seen:
                seen.add(item)
                result.append(item)
    if not args:
        return result
    return _same_kind(args[0], result)


def without(collection: Sequence[T], *args: T) -> Sequence[T]:
    """Items of ``collection`` that are none of the given values."""
    excluded = set(args)
    return _same_kind(collection, [item for item in collection if item not in excluded])


def without_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable], *args: Hashable
) -> list[T]:
    """Items whose key, as given by ``iteratee``, is none of the given keys."""
    excluded = set(args)
    return [item for item in collection if iteratee(item) not in excluded]


def without_empty(collection: Sequence[T]) -> Sequence[T]:
    """Items of ``collection`` that are not empty (None, zero, empty string and the like)."""
    return _same_kind(collection, [item for item in collection if item])


def without_nth(collection: Sequence[T], *args: int) -> Sequence[T]:
    """Items of ``collection`` except those at the given indexes; out-of-range ones are ignored."""
    length = len(collection)
    removed = {n for n in args if 0 <= n < length}
    return _same_kind(
        collection, [item for i, item in enumerate(collection) if i not in removed]
    )
"""Searching helpers for sequences and mappings."""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

__all__ = [
    "index_of",
    "last_index_of",
    "find",
    "find_index_of",
    "find_last_index_of",
    "find_or_else",
    "find_key",
    "find_key_by",
    "find_uniques",
    "find_uniques_by",
    "find_duplicates",
    "find_duplicates_by",
    "minimum",
    "min_index",
    "min_by",
    "min_index_by",
    "earliest",
    "earliest_by",
    "maximum",
    "max_index",
    "max_by",
    "max_index_by",
    "latest",
    "latest_by",
    "first",
    "first_or_empty",
    "first_or",
    "last",
    "last_or_empty",
    "last_or",
    "nth",
    "nth_or",
    "nth_or_empty",
    "sample",
    "sample_by",
    "samples",
    "samples_by",
]


def _like(collection: Any, items: Iterable[Any]) -> Any:
    """Build a sequence of the same kind as ``collection`` where possible."""
    if isinstance(collection, (list, tuple)):
        return type(collection)(items)
    return list(items)


def _random_int(n: int) -> int:
    return random.randrange(n)


def index_of(collection: Sequence[T], element: T) -> int:
    """Index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Index of the last occurrence of ``element``, or -1."""
    for i in reversed(range(len(collection))):
        if collection[i] == element:
            return i
    return -1


def find(collection: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T | None, bool]:
    """First item matching ``predicate`` and whether one was found."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """First matching item, its index and whether it was found (index -1 if not)."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Last matching item, its index and whether it was found (index -1 if not)."""
    for i in reversed(range(len(collection))):
        item = collection[i]
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_or_else(collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]) -> T:
    """First item matching ``predicate``, or ``fallback``."""
    return next((item for item in collection if predicate(item)), fallback)


def find_key(mapping: Mapping[K, V], value: V) -> tuple[K | None, bool]:
    """Key of the first entry whose value equals ``value``."""
    for key, item in mapping.items():
        if item == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> tuple[K | None, bool]:
    """Key of the first entry for which ``predicate(key, value)`` holds."""
    for key, item in mapping.items():
        if predicate(key, item):
            return key, True
    return None, False


def _count_keys(keys: Iterable[Hashable]) -> dict[Hashable, int]:
    counts: dict[Hashable, int] = {}
    for key in keys:
        counts[key] = counts.get(key, 0) + 1
    return counts


def find_uniques(collection: Sequence[T]) -> Sequence[T]:
    """Items occurring exactly once, in their original order."""
    return find_uniques_by(collection, lambda item: item)


def find_uniques_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> Sequence[T]:
    """Items whose key occurs exactly once, in their original order."""
    keyed = [(iteratee(item), item) for item in collection]
    counts = _count_keys(key for key, _ in keyed)
    return _like(collection, (item for key, item in keyed if counts[key] == 1))


def find_duplicates(collection: Sequence[T]) -> Sequence[T]:
    """First occurrence of each duplicated item, in their original order."""
    return find_duplicates_by(collection, lambda item: item)


def find_duplicates_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable]
) -> Sequence[T]:
    """First occurrence of each item whose key is duplicated, in original order."""
    keyed = [(iteratee(item), item) for item in collection]
    counts = _count_keys(key for key, _ in keyed)
    emitted: set[Hashable] = set()
    result = []
    for key, item in keyed:
        if counts[key] > 1 and key not in emitted:
            emitted.add(key)
            result.append(item)
    return _like(collection, result)


def _select_index(
    collection: Sequence[T], better: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    if not collection:
        return None, -1
    best_index = 0
    best = collection[0]
    for i, item in enumerate(collection[1:], start=1):
        if better(item, best):
            best, best_index = item, i
    return best, best_index


def minimum(collection: Sequence[T]) -> T | None:
    """Smallest item, or None when empty."""
    return _select_index(collection, lambda a, b: a < b)[0]


def min_index(collection: Sequence[T]) -> tuple[T | None, int]:
    """Smallest item and its index; (None, -1) when empty."""
    return _select_index(collection, lambda a, b: a < b)


def min_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Smallest item by ``comparison(item, current_min)``; first one wins ties."""
    return _select_index(collection, comparison)[0]


def min_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Smallest item by ``comparison`` and its index; (None, -1) when empty."""
    return _select_index(collection, comparison)


def earliest(*args: datetime) -> datetime | None:
    """Earliest of the given datetimes, or None when none are given."""
    return _select_index(args, lambda a, b: a < b)[0]


def earliest_by(collection: Sequence[T], iteratee: Callable[[T], datetime]) -> T | None:
    """Item with the earliest datetime given by ``iteratee``, or None when empty."""
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if item_time < best_time:
            best, best_time = item, item_time
    return best


def maximum(collection: Sequence[T]) -> T | None:
    """Largest item, or None when empty."""
    return _select_index(collection, lambda a, b: a > b)[0]


def max_index(collection: Sequence[T]) -> tuple[T | None, int]:
    """Largest item and its index; (None, -1) when empty."""
    return _select_index(collection, lambda a, b: a > b)


def max_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Largest item by ``comparison(item, current_max)``; first one wins ties."""
    return _select_index(collection, comparison)[0]


def max_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Largest item by ``comparison`` and its index; (None, -1) when empty."""
    return _select_index(collection, comparison)


def latest(*args: datetime) -> datetime | None:
    """Latest of the given datetimes, or None when none are given."""
    return _select_index(args, lambda a, b: a > b)[0]


def latest_by(collection: Sequence[T], iteratee: Callable[[T], datetime]) -> T | None:
    """Item with the latest datetime given by ``iteratee``, or None when empty."""
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if item_time > best_time:
            best, best_time = item, item_time
    return best


def first(collection: Sequence[T]) -> tuple[T | None, bool]:
    """First item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> T | None:
    """First item, or None when empty."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """First item, or ``fallback`` when empty."""
    item, ok = first(collection)
    return item if ok else fallback


def last(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Last item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> T | None:
    """Last item, or None when empty."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Last item, or ``fallback`` when empty."""
    item, ok = last(collection)
    return item if ok else fallback


def nth(collection: Sequence[T], n: int) -> T:
    """Item at index ``n``; negative indexes count from the end.

    Raises IndexError when ``n`` is out of bounds.
    """
    length = len(collection)
    n = int(n)
    if n >= length or -n > length:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def nth_or(collection: Sequence[T], n: int, fallback: T) -> T:
    """Item at index ``n``, or ``fallback`` when out of bounds."""
    try:
        return nth(collection, n)
    except IndexError:
        return fallback


def nth_or_empty(collection: Sequence[T], n: int) -> T | None:
    """Item at index ``n``, or None when out of bounds."""
    return nth_or(collection, n, None)


def sample(collection: Sequence[T]) -> T | None:
    """A random item, or None when empty."""
    return sample_by(collection, _random_int)


def sample_by(collection: Sequence[T], random_int: Callable[[int], int]) -> T | None:
    """A random item chosen by ``random_int(n)`` returning an int in [0, n)."""
    if not collection:
        return None
    return collection[random_int(len(collection))]


def samples(collection: Sequence[T], count: int) -> Sequence[T]:
    """Up to ``count`` random items, each position taken at most once."""
    return samples_by(collection, count, _random_int)


def samples_by(
    collection: Sequence[T], count: int, random_int: Callable[[int], int]
) -> Sequence[T]:
    """Up to ``count`` random items using ``random_int(n)`` for indexes in [0, n)."""
    pool = list(collection)
    results = []
    while pool and len(results) < count:
        index = random_int(len(pool))
        results.append(pool[index])
        pool[index] = pool[-1]
        pool.pop()
    return _like(collection, results)
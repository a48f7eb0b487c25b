"""Helpers for reading, filtering and transforming mappings."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from itertools import islice
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

__all__ = [
    "keys",
    "uniq_keys",
    "has_key",
    "values",
    "uniq_values",
    "value_or",
    "pick_by",
    "pick_by_keys",
    "pick_by_values",
    "omit_by",
    "omit_by_keys",
    "omit_by_values",
    "entries",
    "to_pairs",
    "from_entries",
    "from_pairs",
    "invert",
    "assign",
    "chunk_entries",
    "map_keys",
    "map_values",
    "map_entries",
    "map_to_slice",
]


def _empty_like(mapping: Any) -> dict[Any, Any]:
    """An empty mapping of the same kind as ``mapping`` where possible."""
    if isinstance(mapping, dict):
        try:
            return type(mapping)()
        except TypeError:
            pass
    return {}


def keys(*args: Mapping[K, V]) -> list[K]:
    """All keys of the given mappings, duplicates included."""
    return [key for mapping in args for key in mapping]


def uniq_keys(*args: Mapping[K, V]) -> list[K]:
    """Distinct keys of the given mappings, in order of first appearance."""
    return list(dict.fromkeys(keys(*args)))


def has_key(mapping: Mapping[K, V], key: K) -> bool:
    """Whether ``key`` is present in ``mapping``."""
    return key in mapping


def values(*args: Mapping[K, V]) -> list[V]:
    """All values of the given mappings, duplicates included."""
    return [value for mapping in args for value in mapping.values()]


def uniq_values(*args: Mapping[K, V]) -> list[V]:
    """Distinct values of the given mappings, in order of first appearance."""
    return list(dict.fromkeys(values(*args)))


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Value stored under ``key``, or ``fallback`` when absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Entries for which ``predicate(key, value)`` holds."""
    result = _empty_like(mapping)
    result.update((k, v) for k, v in mapping.items() if predicate(k, v))
    return result


def pick_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Entries whose key is among ``keys``."""
    result = _empty_like(mapping)
    result.update((k, mapping[k]) for k in keys if k in mapping)
    return result


def pick_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Entries whose value is among ``values``."""
    wanted = list(values)
    return pick_by(mapping, lambda _k, v: v in wanted)


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Entries for which ``predicate(key, value)`` does not hold."""
    return pick_by(mapping, lambda k, v: not predicate(k, v))


def omit_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Entries whose key is not among ``keys``."""
    result = _empty_like(mapping)
    result.update(mapping)
    for key in keys:
        result.pop(key, None)
    return result


def omit_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Entries whose value is not among ``values``."""
    unwanted = list(values)
    return pick_by(mapping, lambda _k, v: v not in unwanted)


def entries(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """The mapping as a list of (key, value) pairs."""
    return list(mapping.items())


def to_pairs(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """Alias of entries."""
    return entries(mapping)


def from_entries(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dict from (key, value) pairs; later pairs win."""
    return dict(entries)


def from_pairs(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Alias of from_entries."""
    return from_entries(entries)


def invert(mapping: Mapping[K, V]) -> dict[V, K]:
    """Swap keys and values; for repeated values the last key wins."""
    return {value: key for key, value in mapping.items()}


def assign(*args: Mapping[K, V]) -> dict[K, V]:
    """Merge mappings from left to right into a new one."""
    result = _empty_like(args[0]) if args else {}
    for mapping in args:
        result.update(mapping)
    return result


def chunk_entries(mapping: Mapping[K, V], size: int) -> list[dict[K, V]]:
    """Split ``mapping`` into dicts of at most ``size`` entries.

    Raises ValueError when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError("The chunk size must be greater than 0")
    items = iter(mapping.items())
    chunks: list[dict[K, V]] = []
    while chunk := dict(islice(items, size)):
        chunks.append(chunk)
    return chunks


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], Hashable]) -> dict[Any, V]:
    """New dict keyed by ``iteratee(value, key)``."""
    return {iteratee(value, key): value for key, value in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> dict[K, R]:
    """New dict with values replaced by ``iteratee(value, key)``."""
    return {key: iteratee(value, key) for key, value in mapping.items()}


def map_entries(
    mapping: Mapping[K, V], iteratee: Callable[[K, V], tuple[Any, Any]]
) -> dict[Any, Any]:
    """New dict built from the pairs returned by ``iteratee(key, value)``."""
    return dict(iteratee(key, value) for key, value in mapping.items())


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> list[R]:
    """List of ``iteratee(key, value)`` for every entry."""
    return [iteratee(key, value) for key, value in mapping.items()]
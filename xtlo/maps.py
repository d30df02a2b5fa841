"""Helpers for querying, filtering and transforming mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    List,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
)

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """A key/value pair taken from or destined for a mapping."""

    key: K
    value: V


def _empty_like(mapping: Mapping[Any, Any]) -> Dict[Any, Any]:
    """Return an empty mapping of the same dict type as ``mapping`` where possible."""
    if isinstance(mapping, dict) and type(mapping) is not dict:
        try:
            return type(mapping)()
        except TypeError:
            pass
    return {}


def keys(*args: Mapping[K, V]) -> List[K]:
    """Return the keys of all mappings, duplicates included."""
    return [key for mapping in args for key in mapping]


def uniq_keys(*args: Mapping[K, V]) -> List[K]:
    """Return the distinct keys of all mappings, in first-seen order."""
    return list(dict.fromkeys(key for mapping in args for key in mapping))


def has_key(mapping: Mapping[K, V], key: K) -> bool:
    """Return whether ``key`` is present."""
    return key in mapping


def values(*args: Mapping[K, V]) -> List[V]:
    """Return the values of all mappings, duplicates included."""
    return [value for mapping in args for value in mapping.values()]


def uniq_values(*args: Mapping[K, V]) -> List[V]:
    """Return the distinct values of all mappings, in first-seen order."""
    seen = set()
    result: List[V] = []
    for mapping in args:
        for value in mapping.values():
            if value not in seen:
                seen.add(value)
                result.append(value)
    return result


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Return the value at ``key``, or ``fallback`` when the key is absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Any:
    """Return the entries for which ``predicate(key, value)`` holds."""
    result = _empty_like(mapping)
    result.update((k, v) for k, v in mapping.items() if predicate(k, v))
    return result


def pick_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> Any:
    """Return the entries whose key is among ``keys``."""
    result = _empty_like(mapping)
    result.update((k, mapping[k]) for k in keys if k in mapping)
    return result


def pick_by_values(mapping: Mapping[K, V], values: Sequence[V]) -> Any:
    """Return the entries whose value is among ``values``."""
    return pick_by(mapping, lambda _k, v: v in values)


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Any:
    """Return the entries for which ``predicate(key, value)`` does not hold."""
    return pick_by(mapping, lambda k, v: not predicate(k, v))


def omit_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> Any:
    """Return the entries whose key is not among ``keys``."""
    result = _empty_like(mapping)
    result.update(mapping)
    for key in keys:
        result.pop(key, None)
    return result


def omit_by_values(mapping: Mapping[K, V], values: Sequence[V]) -> Any:
    """Return the entries whose value is not among ``values``."""
    return pick_by(mapping, lambda _k, v: v not in values)


def entries(mapping: Mapping[K, V]) -> List[Entry[K, V]]:
    """Return the mapping as a list of :class:`Entry` pairs."""
    return [Entry(k, v) for k, v in mapping.items()]


def to_pairs(mapping: Mapping[K, V]) -> List[Entry[K, V]]:
    """Same as :func:`entries`."""
    return entries(mapping)


def from_entries(entries: Iterable[Entry[K, V]]) -> Dict[K, V]:
    """Build a dict from :class:`Entry` pairs; later keys overwrite earlier ones."""
    return {entry.key: entry.value for entry in entries}


def from_pairs(entries: Iterable[Entry[K, V]]) -> Dict[K, V]:
    """Same as :func:`from_entries`."""
    return from_entries(entries)


def invert(mapping: Mapping[K, V]) -> Dict[V, K]:
    """Swap keys and values; on duplicate values the later key wins."""
    return {v: k for k, v in mapping.items()}


def assign(*args: Mapping[K, V]) -> Any:
    """Merge the mappings from left to right into a new one."""
    result = _empty_like(args[0]) if args else {}
    for mapping in args:
        result.update(mapping)
    return result


def chunk_entries(mapping: Mapping[K, V], size: int) -> List[Dict[K, V]]:
    """Split the mapping into dicts of at most ``size`` entries.

    Raises ``ValueError`` when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError("The chunk size must be greater than 0")
    items = list(mapping.items())
    return [dict(items[i : i + size]) for i in range(0, len(items), size)]


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], Hashable]) -> Dict[Any, V]:
    """Return a dict whose keys are ``iteratee(value, key)``."""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> Dict[K, R]:
    """Return a dict whose values are ``iteratee(value, key)``."""
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(
    mapping: Mapping[K, V], iteratee: Callable[[K, V], Tuple[Any, Any]]
) -> Dict[Any, Any]:
    """Return a dict built from the ``(key, value)`` pairs that ``iteratee`` returns."""
    return dict(iteratee(k, v) for k, v in mapping.items())


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> List[R]:
    """Return ``iteratee(key, value)`` for every entry."""
    return [iteratee(k, v) for k, v in mapping.items()]


def filter_map_to_slice(
    mapping: Mapping[K, V], iteratee: Callable[[K, V], Tuple[R, bool]]
) -> List[R]:
    """Return the results of ``iteratee(key, value)`` whose accompanying flag is true."""
    result: List[R] = []
    for k, v in mapping.items():
        value, ok = iteratee(k, v)
        if ok:
            result.append(value)
    return result
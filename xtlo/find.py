"""Searching helpers: lookups, extremes, positional access and random sampling."""

from __future__ import annotations

import random
from collections import Counter
from datetime import datetime
from typing import (
    Any,
    Callable,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from xtlo.constraints import SupportsOrdering

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
O = TypeVar("O", bound=SupportsOrdering)

RandomIntGenerator = Callable[[int], int]


def _like(collection: Sequence[Any], items: Iterable[Any]) -> Any:
    """Build a result of the same kind as ``collection`` where that is possible."""
    if isinstance(collection, tuple) and type(collection) is tuple:
        return tuple(items)
    if isinstance(collection, list) and type(collection) is not list:
        return type(collection)(items)
    return list(items)


def index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the last occurrence of ``element``, or -1."""
    for i in reversed(range(len(collection))):
        if collection[i] == element:
            return i
    return -1


def find(collection: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[Optional[T], bool]:
    """Return the first item matching ``predicate`` and ``True``, or ``(None, False)``."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> Tuple[Optional[T], int, bool]:
    """Return the first matching item, its index and ``True``, or ``(None, -1, False)``."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> Tuple[Optional[T], int, bool]:
    """Return the last matching item, its index and ``True``, or ``(None, -1, False)``."""
    for i in reversed(range(len(collection))):
        if predicate(collection[i]):
            return collection[i], i, True
    return None, -1, False


def find_or_else(collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]) -> T:
    """Return the first item matching ``predicate``, or ``fallback``."""
    return next((item for item in collection if predicate(item)), fallback)


def find_key(mapping: Mapping[K, V], value: V) -> Tuple[Optional[K], bool]:
    """Return the first key whose value equals ``value`` and ``True``, or ``(None, False)``."""
    for key, item in mapping.items():
        if item == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> Tuple[Optional[K], bool]:
    """Return the first key for which ``predicate(key, value)`` holds, or ``(None, False)``."""
    for key, item in mapping.items():
        if predicate(key, item):
            return key, True
    return None, False


def find_uniques(collection: Sequence[T]) -> Any:
    """Return the items that occur exactly once, in their original order."""
    counts = Counter(collection)
    return _like(collection, (item for item in collection if counts[item] == 1))


def find_uniques_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the items whose key occurs exactly once, in their original order."""
    item_keys = [iteratee(item) for item in collection]
    counts = Counter(item_keys)
    return _like(
        collection, (item for item, key in zip(collection, item_keys) if counts[key] == 1)
    )


def find_duplicates(collection: Sequence[T]) -> Any:
    """Return the first occurrence of every repeated item, in their original order."""
    return find_duplicates_by(collection, lambda item: item)


def find_duplicates_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the first item of every repeated key, in their original order."""
    item_keys = [iteratee(item) for item in collection]
    counts = Counter(item_keys)
    emitted = set()
    result = []
    for item, key in zip(collection, item_keys):
        if counts[key] > 1 and key not in emitted:
            emitted.add(key)
            result.append(item)
    return _like(collection, result)


def min_of(collection: Sequence[O]) -> Optional[O]:
    """Return the smallest item, or ``None`` when the collection is empty."""
    return min_index(collection)[0]


def min_index(collection: Sequence[O]) -> Tuple[Optional[O], int]:
    """Return the smallest item and its first index, or ``(None, -1)`` when empty."""
    return min_index_by(collection, lambda item, current: item < current)


def min_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> Optional[T]:
    """Return the item preferred by ``comparison(item, current_min)``, or ``None``.

    Ties keep the earliest item.
    """
    return min_index_by(collection, comparison)[0]


def min_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> Tuple[Optional[T], int]:
    """Like :func:`min_by`, also returning the index; ``(None, -1)`` when empty."""
    if not collection:
        return None, -1
    best, best_index = collection[0], 0
    for i, item in enumerate(collection[1:], start=1):
        if comparison(item, best):
            best, best_index = item, i
    return best, best_index


def earliest(*args: datetime) -> Optional[datetime]:
    """Return the earliest of the given datetimes, or ``None`` when none are given."""
    return min_by(args, lambda item, current: item < current)


def earliest_by(collection: Sequence[T], iteratee: Callable[[T], datetime]) -> Optional[T]:
    """Return the item whose datetime from ``iteratee`` is earliest, or ``None``."""
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if item_time < best_time:
            best, best_time = item, item_time
    return best


def max_of(collection: Sequence[O]) -> Optional[O]:
    """Return the greatest item, or ``None`` when the collection is empty."""
    return max_index(collection)[0]


def max_index(collection: Sequence[O]) -> Tuple[Optional[O], int]:
    """Return the greatest item and its first index, or ``(None, -1)`` when empty."""
    return max_index_by(collection, lambda item, current: item > current)


def max_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> Optional[T]:
    """Return the item preferred by ``comparison(item, current_max)``, or ``None``.

    Ties keep the earliest item.
    """
    return max_index_by(collection, comparison)[0]


def max_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> Tuple[Optional[T], int]:
    """Like :func:`max_by`, also returning the index; ``(None, -1)`` when empty."""
    return min_index_by(collection, comparison)


def latest(*args: datetime) -> Optional[datetime]:
    """Return the latest of the given datetimes, or ``None`` when none are given."""
    return max_by(args, lambda item, current: item > current)


def latest_by(collection: Sequence[T], iteratee: Callable[[T], datetime]) -> Optional[T]:
    """Return the item whose datetime from ``iteratee`` is latest, or ``None``."""
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if item_time > best_time:
            best, best_time = item, item_time
    return best


def first(collection: Sequence[T]) -> Tuple[Optional[T], bool]:
    """Return the first item and ``True``, or ``(None, False)`` when empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> Optional[T]:
    """Return the first item, or ``None`` when empty."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """Return the first item, or ``fallback`` when empty."""
    return collection[0] if collection else fallback


def last(collection: Sequence[T]) -> Tuple[Optional[T], bool]:
    """Return the last item and ``True``, or ``(None, False)`` when empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> Optional[T]:
    """Return the last item, or ``None`` when empty."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Return the last item, or ``fallback`` when empty."""
    return collection[-1] if collection else fallback


def nth(collection: Sequence[T], n: int) -> T:
    """Return the item at ``n``; negative values count from the end.

    Raises ``IndexError`` when ``n`` is out of bounds.
    """
    n = int(n)
    length = len(collection)
    if n >= length or -n > length:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def nth_or(collection: Sequence[T], n: int, fallback: T) -> T:
    """Like :func:`nth`, returning ``fallback`` when ``n`` is out of bounds."""
    try:
        return nth(collection, n)
    except IndexError:
        return fallback


def nth_or_empty(collection: Sequence[T], n: int) -> Optional[T]:
    """Like :func:`nth`, returning ``None`` when ``n`` is out of bounds."""
    return nth_or(collection, n, None)


def sample(collection: Sequence[T]) -> Optional[T]:
    """Return a random item, or ``None`` when the collection is empty."""
    return sample_by(collection, random.randrange)


def sample_by(
    collection: Sequence[T], random_int_generator: RandomIntGenerator
) -> Optional[T]:
    """Return an item chosen by ``random_int_generator(len)``, or ``None`` when empty."""
    if not collection:
        return None
    return collection[random_int_generator(len(collection))]


def samples(collection: Sequence[T], count: int) -> Any:
    """Return up to ``count`` distinct random items of the collection."""
    return samples_by(collection, count, random.randrange)


def samples_by(
    collection: Sequence[T], count: int, random_int_generator: RandomIntGenerator
) -> Any:
    """Return up to ``count`` items drawn without replacement using ``random_int_generator``."""
    pool: List[T] = list(collection)
    results: List[T] = []
    while pool and len(results) < count:
        index = random_int_generator(len(pool))
        results.append(pool[index])
        pool[index] = pool[-1]
        pool.pop()
    return _like(collection, results)
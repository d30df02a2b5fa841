"""Membership tests and set-like operations over sequences."""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def _like(collection: Any, items: Iterable[Any]) -> Any:
    """Build a result of the same kind as ``collection`` where that is possible."""
    if type(collection) is tuple:
        return tuple(items)
    if isinstance(collection, list) and type(collection) is not list:
        return type(collection)(items)
    return list(items)


def _is_zero(item: Any) -> bool:
    """Return whether ``item`` is ``None`` or the empty value of its own type."""
    if item is None:
        return True
    try:
        empty = type(item)()
    except Exception:
        return False
    try:
        return bool(item == empty)
    except Exception:
        return False


def contains(collection: Iterable[T], element: T) -> bool:
    """Return whether ``element`` is present in the collection."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for some item."""
    return any(predicate(item) for item in collection)


def every(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether every item of ``subset`` is in the collection (true if empty)."""
    return all(contains(collection, item) for item in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for every item (true if empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether at least one item of ``subset`` is in the collection."""
    return any(contains(collection, item) for item in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for at least one item."""
    return any(predicate(item) for item in collection)


def none(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether no item of ``subset`` is in the collection (true if empty)."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for no item (true if empty)."""
    return not some_by(collection, predicate)


def intersect(list1: Sequence[T], list2: Sequence[T]) -> Any:
    """Return the items of ``list2`` that also occur in ``list1``, in ``list2`` order."""
    seen = set(list1)
    return _like(list1, (item for item in list2 if item in seen))


def difference(list1: Sequence[T], list2: Sequence[T]) -> tuple:
    """Return the items of ``list1`` absent from ``list2`` and those of ``list2`` absent from ``list1``."""
    seen_left = set(list1)
    seen_right = set(list2)
    left = _like(list1, (item for item in list1 if item not in seen_right))
    right = _like(list1, (item for item in list2 if item not in seen_left))
    return left, right


def union(*args: Sequence[T]) -> Any:
    """Return the distinct items of all collections, keeping first-seen order."""
    seen = set()
    result = []
    for collection in args:
        for item in collection:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return _like(args[0] if args else [], result)


def without(collection: Sequence[T], *args: T) -> Any:
    """Return the collection without any of the given values."""
    excluded = set(args)
    return _like(collection, (item for item in collection if item not in excluded))


def without_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable], *args: Hashable
) -> Any:
    """Return the items whose key from ``iteratee`` is not among the given keys."""
    excluded = set(args)
    return _like(collection, (item for item in collection if iteratee(item) not in excluded))


def without_empty(collection: Sequence[T]) -> Any:
    """Return the collection without ``None`` and empty values such as ``0`` or ``""``."""
    return _like(collection, (item for item in collection if not _is_zero(item)))


def without_nth(collection: Sequence[T], *args: int) -> Any:
    """Return the collection without the items at the given non-negative indices."""
    length = len(collection)
    removed = {n for n in args if 0 <= n < length}
    return _like(collection, (item for i, item in enumerate(collection) if i not in removed))


def elements_match(list1: Sequence[T], list2: Sequence[T]) -> bool:
    """Return whether both lists hold the same items with the same counts, in any order."""
    return elements_match_by(list1, list2, lambda item: item)


def elements_match_by(
    list1: Sequence[T], list2: Sequence[T], iteratee: Callable[[T], Hashable]
) -> bool:
    """Return whether both lists hold the same keys with the same counts, in any order."""
    if len(list1) != len(list2):
        return False
    return Counter(map(iteratee, list1)) == Counter(map(iteratee, list2))
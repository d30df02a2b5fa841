"""Structural types shared by the helpers of this package."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

_T_co = TypeVar("_T_co", covariant=True)


@runtime_checkable
class Clonable(Protocol[_T_co]):
    """Objects that can produce a copy of themselves through ``clone()``."""

    def clone(self) -> _T_co:
        """Return a copy of the object."""
        ...


@runtime_checkable
class SupportsOrdering(Protocol):
    """Values that can be compared with ``<`` (numbers, strings, durations...)."""

    def __lt__(self, other: Any, /) -> bool:
        """Return whether the value sorts before ``other``."""
        ...
"""Expression-style conditionals: ternaries, if/else chains and switch/case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
P = TypeVar("P")
R = TypeVar("R")


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """Return ``if_output`` when ``condition`` holds, else ``else_output``.

    Both outputs are evaluated by the caller; see :func:`ternary_f` to defer them.
    """
    return if_output if condition else else_output


def ternary_f(condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]) -> T:
    """Call and return ``if_func`` or ``else_func`` depending on ``condition``."""
    return if_func() if condition else else_func()


@dataclass
class IfElse(Generic[T]):
    """A chain of conditions whose first satisfied branch supplies the result."""

    result: Optional[T] = None
    done: bool = False

    def else_if(self, condition: bool, result: T) -> "IfElse[T]":
        """Take ``result`` if no earlier branch matched and ``condition`` holds."""
        if not self.done and condition:
            self.result = result
            self.done = True
        return self

    def else_if_f(self, condition: bool, result_f: Callable[[], T]) -> "IfElse[T]":
        """Like :meth:`else_if`, calling ``result_f`` only when the branch is taken."""
        if not self.done and condition:
            self.result = result_f()
            self.done = True
        return self

    def else_(self, result: T) -> T:
        """Return the matched result, or ``result`` when no branch matched."""
        return self.result if self.done else result  # type: ignore[return-value]

    def else_f(self, result_f: Callable[[], T]) -> T:
        """Return the matched result, or call ``result_f`` when no branch matched."""
        return self.result if self.done else result_f()  # type: ignore[return-value]


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start an if/else chain."""
    if condition:
        return IfElse(result, True)
    return IfElse()


def if_f(condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
    """Start an if/else chain whose first result is computed lazily."""
    if condition:
        return IfElse(result_f(), True)
    return IfElse()


@dataclass
class SwitchCase(Generic[P, R]):
    """A switch on ``predicate``; the first equal case supplies the result."""

    predicate: P
    result: Optional[R] = None
    done: bool = False

    def case(self, val: P, result: R) -> "SwitchCase[P, R]":
        """Take ``result`` if no earlier case matched and ``val`` equals the predicate."""
        if not self.done and self.predicate == val:
            self.result = result
            self.done = True
        return self

    def case_f(self, val: P, callback: Callable[[], R]) -> "SwitchCase[P, R]":
        """Like :meth:`case`, calling ``callback`` only when the case is taken."""
        if not self.done and self.predicate == val:
            self.result = callback()
            self.done = True
        return self

    def default(self, result: R) -> R:
        """Return the matched result, or ``result`` when no case matched."""
        if not self.done:
            self.result = result
        return self.result  # type: ignore[return-value]

    def default_f(self, callback: Callable[[], R]) -> R:
        """Return the matched result, or call ``callback`` when no case matched."""
        if not self.done:
            self.result = callback()
        return self.result  # type: ignore[return-value]


def switch(predicate: P) -> SwitchCase[P, R]:
    """Start a switch/case chain on ``predicate``."""
    return SwitchCase(predicate)
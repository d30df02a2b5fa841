"""Partial application that binds the first argument of a function."""

from __future__ import annotations

from typing import Any, Callable


def partial(f: Callable[[Any, Any], Any], arg1: Any) -> Callable[[Any], Any]:
    """Return a one-argument function calling ``f`` with ``arg1`` bound first."""

    def bound(b: Any) -> Any:
        return f(arg1, b)

    return bound


def partial1(f: Callable[[Any, Any], Any], arg1: Any) -> Callable[[Any], Any]:
    """Same as :func:`partial`."""
    return partial(f, arg1)


def partial2(f: Callable[[Any, Any, Any], Any], arg1: Any) -> Callable[[Any, Any], Any]:
    """Bind the first of three arguments."""

    def bound(b: Any, c: Any) -> Any:
        return f(arg1, b, c)

    return bound


def partial3(f: Callable[..., Any], arg1: Any) -> Callable[[Any, Any, Any], Any]:
    """Bind the first of four arguments."""

    def bound(b: Any, c: Any, d: Any) -> Any:
        return f(arg1, b, c, d)

    return bound


def partial4(f: Callable[..., Any], arg1: Any) -> Callable[[Any, Any, Any, Any], Any]:
    """Bind the first of five arguments."""

    def bound(b: Any, c: Any, d: Any, e: Any) -> Any:
        return f(arg1, b, c, d, e)

    return bound


def partial5(f: Callable[..., Any], arg1: Any) -> Callable[[Any, Any, Any, Any, Any], Any]:
    """Bind the first of six arguments."""

    def bound(b: Any, c: Any, d: Any, e: Any, g: Any) -> Any:
        return f(arg1, b, c, d, e, g)

    return bound
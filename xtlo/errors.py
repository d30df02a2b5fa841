"""Helpers for asserting success and for swallowing failures."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Type, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class MustError(Exception):
    """Raised by the ``must`` helpers when a result is an error or ``False``."""


def validate(ok: bool, format: str, *args: Any) -> None:
    """Raise ``ValueError`` with the formatted message unless ``ok`` holds."""
    if not ok:
        raise ValueError(format % args if args else format)


def _message(args: Tuple[Any, ...]) -> str:
    if len(args) == 1:
        return args[0] if isinstance(args[0], str) else str(args[0])
    if len(args) > 1:
        return args[0] % tuple(args[1:])
    return ""


def _check(err: Any, args: Tuple[Any, ...]) -> None:
    if err is None:
        return
    if isinstance(err, bool):
        if not err:
            raise MustError(_message(args) or "not ok")
        return
    if isinstance(err, BaseException):
        message = _message(args)
        text = f"{message}: {err}" if message else str(err)
        raise MustError(text) from err
    raise MustError(
        f"must: invalid err type '{type(err).__name__}', "
        "should either be a bool or an error"
    )


def must(val: T, err: Any, *args: Any) -> T:
    """Return ``val`` unless ``err`` is an exception or ``False``.

    Extra arguments form a message prefix: a single string, or a format
    string followed by its arguments.
    """
    _check(err, args)
    return val


def must0(err: Any, *args: Any) -> None:
    """Raise :class:`MustError` if ``err`` is an exception or ``False``."""
    _check(err, args)


def must1(val: T, err: Any, *args: Any) -> T:
    """Same as :func:`must`."""
    return must(val, err, *args)


def must2(val1: Any, val2: Any, err: Any, *args: Any) -> Tuple[Any, Any]:
    """Like :func:`must` for two values."""
    _check(err, args)
    return val1, val2


def must3(val1: Any, val2: Any, val3: Any, err: Any, *args: Any) -> Tuple[Any, Any, Any]:
    """Like :func:`must` for three values."""
    _check(err, args)
    return val1, val2, val3


def must4(
    val1: Any, val2: Any, val3: Any, val4: Any, err: Any, *args: Any
) -> Tuple[Any, Any, Any, Any]:
    """Like :func:`must` for four values."""
    _check(err, args)
    return val1, val2, val3, val4


def must5(
    val1: Any, val2: Any, val3: Any, val4: Any, val5: Any, err: Any, *args: Any
) -> Tuple[Any, Any, Any, Any, Any]:
    """Like :func:`must` for five values."""
    _check(err, args)
    return val1, val2, val3, val4, val5


def must6(
    val1: Any, val2: Any, val3: Any, val4: Any, val5: Any, val6: Any, err: Any, *args: Any
) -> Tuple[Any, Any, Any, Any, Any, Any]:
    """Like :func:`must` for six values."""
    _check(err, args)
    return val1, val2, val3, val4, val5, val6


def try_(callback: Callable[[], Any]) -> bool:
    """Call ``callback`` and return ``False`` if it raised, ``True`` otherwise."""
    try:
        callback()
    except Exception:
        return False
    return True


def try0(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks whose result is ignored."""
    return try_(callback)


def try1(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`."""
    return try_(callback)


def try2(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks returning two values."""
    return try_(callback)


def try3(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks returning three values."""
    return try_(callback)


def try4(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks returning four values."""
    return try_(callback)


def try5(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks returning five values."""
    return try_(callback)


def try6(callback: Callable[[], Any]) -> bool:
    """Same as :func:`try_`, for callbacks returning six values."""
    return try_(callback)


def _try_or_many(callback: Callable[[], Any], fallbacks: Tuple[Any, ...]) -> Tuple[Any, ...]:
    try:
        results = tuple(callback())
    except Exception:
        return (*fallbacks, False)
    if len(results) != len(fallbacks):
        return (*fallbacks, False)
    return (*results, True)


def try_or(callback: Callable[[], T], fallback_a: T) -> Tuple[T, bool]:
    """Return ``(callback(), True)``, or ``(fallback_a, False)`` if it raised."""
    return try_or1(callback, fallback_a)


def try_or1(callback: Callable[[], T], fallback_a: T) -> Tuple[T, bool]:
    """Same as :func:`try_or`."""
    try:
        return callback(), True
    except Exception:
        return fallback_a, False


def try_or2(callback: Callable[[], Tuple[Any, Any]], fallback_a: Any, fallback_b: Any):
    """Return the callback's two values and ``True``, or the fallbacks and ``False``."""
    return _try_or_many(callback, (fallback_a, fallback_b))


def try_or3(callback, fallback_a, fallback_b, fallback_c):
    """Return the callback's three values and ``True``, or the fallbacks and ``False``."""
    return _try_or_many(callback, (fallback_a, fallback_b, fallback_c))


def try_or4(callback, fallback_a, fallback_b, fallback_c, fallback_d):
    """Return the callback's four values and ``True``, or the fallbacks and ``False``."""
    return _try_or_many(callback, (fallback_a, fallback_b, fallback_c, fallback_d))


def try_or5(callback, fallback_a, fallback_b, fallback_c, fallback_d, fallback_e):
    """Return the callback's five values and ``True``, or the fallbacks and ``False``."""
    return _try_or_many(
        callback, (fallback_a, fallback_b, fallback_c, fallback_d, fallback_e)
    )


def try_or6(callback, fallback_a, fallback_b, fallback_c, fallback_d, fallback_e, fallback_f):
    """Return the callback's six values and ``True``, or the fallbacks and ``False``."""
    return _try_or_many(
        callback, (fallback_a, fallback_b, fallback_c, fallback_d, fallback_e, fallback_f)
    )


def try_with_error_value(callback: Callable[[], Any]) -> Tuple[Optional[Exception], bool]:
    """Call ``callback``; return ``(exception, False)`` if it raised, else ``(None, True)``."""
    try:
        callback()
    except Exception as exc:
        return exc, False
    return None, True


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``callback`` and call ``catch`` if it raised."""
    if not try_(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``callback`` and pass the raised exception to ``catch`` if there was one."""
    error, ok = try_with_error_value(callback)
    if not ok:
        catch(error)  # type: ignore[arg-type]


def errors_as(err: Optional[BaseException], error_type: Type[E]) -> Tuple[Optional[E], bool]:
    """Find the first exception of ``error_type`` in ``err`` and its cause chain."""
    seen = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return None, False
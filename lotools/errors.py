"""Helpers for checking results and containing failures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)

__all__ = [
    "MustError",
    "validate",
    "must",
    "must0",
    "try_",
    "try_or",
    "try_with_error_value",
    "try_catch",
    "try_catch_with_error_value",
    "errors_as",
]


class MustError(Exception):
    """Raised by the must helpers when a check fails."""


def validate(ok: bool, message_format: str, *args: Any) -> None:
    """Raise ValueError with a formatted message unless ``ok`` holds."""
    if not ok:
        raise ValueError(message_format % args if args else message_format)


def _message(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    head, *rest = args
    if rest:
        return str(head) % tuple(rest)
    return head if isinstance(head, str) else str(head)


def _check(err: Any, args: tuple[Any, ...]) -> None:
    if err is None:
        return
    if isinstance(err, bool):
        if not err:
            raise MustError(_message(args) or "not ok")
        return
    if isinstance(err, BaseException):
        message = _message(args)
        raise MustError(f"{message}: {err}" if message else str(err)) from err
    raise TypeError(
        f"must: invalid err type '{type(err).__name__}', "
        "should either be a bool or an error"
    )


def must(value: T, err: Any, *args: Any) -> T:
    """Return ``value`` unless ``err`` is an exception or False.

    Extra arguments form the failure message: a single value is used as is,
    several are treated as a %-format string followed by its arguments.
    """
    _check(err, args)
    return value


def must0(err: Any, *args: Any) -> None:
    """Raise MustError if ``err`` is an exception or False."""
    _check(err, args)


def try_(callback: Callable[[], Any]) -> bool:
    """Call ``callback``; return False if it raised, True otherwise."""
    try:
        callback()
    except Exception:
        return False
    return True


def try_or(callback: Callable[[], T], fallback: T) -> tuple[T, bool]:
    """Return ``(callback(), True)``, or ``(fallback, False)`` if it raised."""
    try:
        return callback(), True
    except Exception:
        return fallback, False


def try_with_error_value(
    callback: Callable[[], Any],
) -> tuple[Exception | None, bool]:
    """Call ``callback``; return the raised exception and whether it succeeded."""
    try:
        callback()
    except Exception as exc:
        return exc, False
    return None, True


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``callback`` and run ``catch`` if it raised."""
    if not try_(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``callback`` and pass any exception it raised to ``catch``."""
    error, ok = try_with_error_value(callback)
    if not ok:
        catch(error)


def errors_as(
    err: BaseException | None, error_type: type[E]
) -> tuple[E | None, bool]:
    """Find the first exception of ``error_type`` in the chain of ``err``."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__
    return None, False
"""Function helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

R = TypeVar("R")

__all__ = ["partial"]


def partial(f: Callable[..., R], arg1: Any) -> Callable[..., R]:
    """Return a function that calls ``f`` with ``arg1`` as its first argument."""

    def bound(*args: Any) -> R:
        return f(arg1, *args)

    return bound
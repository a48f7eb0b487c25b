"""Expression-style conditionals: ternaries, if/else chains and switches."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

__all__ = [
    "IfElse",
    "SwitchCase",
    "ternary",
    "ternary_f",
    "if_",
    "if_f",
    "switch",
]


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """Return ``if_output`` when ``condition`` holds, else ``else_output``."""
    return if_output if condition else else_output


def ternary_f(condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]) -> T:
    """Call and return ``if_func`` or ``else_func`` depending on ``condition``."""
    return if_func() if condition else else_func()


@dataclass
class IfElse(Generic[T]):
    """A chain of conditions; the first one that holds provides the result."""

    result: T | None = None
    done: bool = False

    def else_if(self, condition: bool, result: T) -> IfElse[T]:
        """Take ``result`` if no earlier branch matched and ``condition`` holds."""
        if not self.done and condition:
            self.result = result
            self.done = True
        return self

    def else_if_f(self, condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
        """Like else_if, computing the result only when the branch is taken."""
        if not self.done and condition:
            self.result = result_f()
            self.done = True
        return self

    def else_(self, result: T) -> T:
        """Return the matched result, or ``result`` if nothing matched."""
        return self.result if self.done else result

    def else_f(self, result_f: Callable[[], T]) -> T:
        """Return the matched result, or call ``result_f`` if nothing matched."""
        return self.result if self.done else result_f()


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start an if/else chain."""
    return IfElse(result, True) if condition else IfElse()


def if_f(condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
    """Start an if/else chain whose first result is computed lazily."""
    return IfElse(result_f(), True) if condition else IfElse()


@dataclass
class SwitchCase(Generic[R]):
    """A switch over ``predicate``; the first matching case provides the result."""

    predicate: Any
    result: R | None = None
    done: bool = False

    def case(self, value: Any, result: R) -> SwitchCase[R]:
        """Take ``result`` if no earlier case matched and ``value`` equals the predicate."""
        if not self.done and self.predicate == value:
            self.result = result
            self.done = True
        return self

    def case_f(self, value: Any, callback: Callable[[], R]) -> SwitchCase[R]:
        """Like case, computing the result only when the case matches."""
        if not self.done and self.predicate == value:
            self.result = callback()
            self.done = True
        return self

    def default(self, result: R) -> R:
        """Return the matched result, or ``result`` if no case matched."""
        if not self.done:
            self.result = result
        return self.result

    def default_f(self, callback: Callable[[], R]) -> R:
        """Return the matched result, or call ``callback`` if no case matched."""
        if not self.done:
            self.result = callback()
        return self.result


def switch(predicate: Any) -> SwitchCase[Any]:
    """Start a switch over ``predicate``."""
    return SwitchCase(predicate)
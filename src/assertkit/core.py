"""Evaluation core: the failure type, lazy operands and the single funnel."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar, Union

T = TypeVar("T")

DEFAULT_MESSAGE = "Assertion failed"

Message = Union[str, Callable[[], "str | None"], None]


class Fail(AssertionError):
    """Raised when an assertion evaluates false.

    Carries a single human-readable diagnostic. Subclassing AssertionError
    lets pytest and unittest report it as a test failure rather than an error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"Fail({self._message!r})"


class Lazy(Generic[T]):
    """A deferred operand: a zero-argument callable evaluated on demand."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], T]) -> None:
        if not callable(fn):
            raise TypeError(f"lazy() expects a zero-argument callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self) -> T:
        return self._fn()

    def __repr__(self) -> str:
        return f"lazy({self._fn!r})"


def lazy(fn: Callable[[], T]) -> Lazy[T]:
    """Wrap ``fn`` so an assertion evaluates it exactly once, in argument order."""
    return Lazy(fn)


Operand = Union[T, Lazy[T]]


def resolve(operand: Operand[T]) -> T:
    """Materialize an operand. Exceptions raised by a lazy operand propagate as-is."""
    if isinstance(operand, Lazy):
        return operand()
    return operand


def resolve_message(message: Message, default: str) -> str:
    """Render the caller's message, falling back to ``default`` when absent."""
    if callable(message):
        message = message()
    return default if message is None else message


def resolve_condition(condition: object) -> object:
    """Materialize a condition. Any callable, lazy or bare, is called once."""
    if callable(condition):
        return condition()
    return condition


def evaluate(condition: object, message: Message = None) -> None:
    """Raise :class:`Fail` if ``condition`` is falsy.

    ``condition`` may be a value, a :class:`Lazy` or a bare zero-argument
    callable. ``message`` is only rendered on failure.
    """
    if not resolve_condition(condition):
        raise Fail(resolve_message(message, DEFAULT_MESSAGE))


def evaluate_with(condition: object, render: Callable[[], str]) -> None:
    """Like :func:`evaluate`, but the whole diagnostic comes from ``render``."""
    if not resolve_condition(condition):
        raise Fail(render())

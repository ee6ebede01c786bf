"""The assertion catalog.

Every assertion accepts plain values or :func:`~assertkit.core.lazy`
operands. Operands are evaluated left to right, each exactly once, and an
exception raised while evaluating one propagates unchanged. Messages may be
strings or zero-argument callables; they are only rendered on failure.
The truth checks also accept a bare zero-argument callable as the condition.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from assertkit.config import get_settings
from assertkit.core import (
    Fail,
    Message,
    Operand,
    evaluate,
    evaluate_with,
    resolve,
    resolve_condition,
    resolve_message,
)
from assertkit.diff import diff, render_no_difference

T = TypeVar("T")

NIL = "nil"

_MISSING: Any = object()

ErrorHandler = Callable[[Exception], Any]


def _describe(value: Any) -> str:
    return NIL if value is None else str(value)


def _with_detail(message: Message, default: str, detail: str) -> str:
    return f"{resolve_message(message, default)}\n\n{detail}"


def _describe_error(error: BaseException) -> str:
    return str(error) or type(error).__name__


# --- truth ---


def assert_that(condition: Operand[object], message: Message = None) -> None:
    """Fail with ``message`` (or "Assertion failed") unless ``condition`` holds."""
    evaluate(condition, message)


def assert_true(value: Operand[object], message: Message = None) -> None:
    evaluate(value, lambda: resolve_message(message, "Expression is not true"))


def assert_false(value: Operand[object], message: Message = None) -> None:
    resolved = resolve_condition(value)
    evaluate(not resolved, lambda: resolve_message(message, "Expression is not false"))


# --- equality ---


def _check_accuracy(accuracy: Any) -> Any:
    if accuracy < 0:
        raise ValueError(f"accuracy must be non-negative, got {accuracy}")
    return accuracy


def _approximately_equal(value1: Any, value2: Any, accuracy: Any) -> bool:
    return abs(value1 - value2) <= accuracy


def assert_equal(
    value1: Operand[T],
    value2: Operand[T],
    message: Message = None,
    *,
    accuracy: Any = _MISSING,
) -> None:
    """Fail unless the two values are equal.

    Without ``accuracy`` the failure carries a structural diff of the two
    values. With ``accuracy`` the values must be within that absolute
    tolerance of each other.
    """
    first = resolve(value1)
    second = resolve(value2)

    if accuracy is not _MISSING:
        tolerance = _check_accuracy(accuracy)
        evaluate_with(
            _approximately_equal(first, second, tolerance),
            lambda: _with_detail(
                message,
                "Values are not approximately equal",
                f"{first} != {second} +/- {accuracy}",
            ),
        )
        return

    settings = get_settings()

    def render() -> str:
        difference = diff(first, second, settings=settings)
        if difference is None:
            difference = render_no_difference(first, second, settings=settings)
        return _with_detail(message, "Values are not equal", difference)

    evaluate_with(first == second, render)


def assert_not_equal(
    value1: Operand[T],
    value2: Operand[T],
    message: Message = None,
    *,
    accuracy: Any = _MISSING,
) -> None:
    """Fail if the two values are equal (or within ``accuracy`` of each other)."""
    first = resolve(value1)
    second = resolve(value2)

    if accuracy is not _MISSING:
        tolerance = _check_accuracy(accuracy)
        evaluate_with(
            abs(first - second) > tolerance,
            lambda: _with_detail(
                message,
                "Values are approximately equal",
                f"{first} == {second} +/- {accuracy}",
            ),
        )
        return

    evaluate(not (first == second), lambda: resolve_message(message, "Values are the same"))


# --- ordering ---


def _ordering(
    value1: Operand[T],
    value2: Operand[T],
    message: Message,
    check: Callable[[Any, Any], bool],
    phrase: str,
) -> None:
    first = resolve(value1)
    second = resolve(value2)
    evaluate(
        check(first, second),
        lambda: resolve_message(message, f"{first} is not {phrase} {second}"),
    )


def assert_greater_than(value1: Operand[T], value2: Operand[T], message: Message = None) -> None:
    _ordering(value1, value2, message, lambda a, b: a > b, "greater than")


def assert_greater_than_or_equal(value1: Operand[T], value2: Operand[T], message: Message = None) -> None:
    _ordering(value1, value2, message, lambda a, b: a >= b, "greater than or equal to")


def assert_less_than(value1: Operand[T], value2: Operand[T], message: Message = None) -> None:
    _ordering(value1, value2, message, lambda a, b: a < b, "less than")


def assert_less_than_or_equal(value1: Operand[T], value2: Operand[T], message: Message = None) -> None:
    _ordering(value1, value2, message, lambda a, b: a <= b, "less than or equal to")


# --- identity ---


def assert_identical(value1: Operand[Any], value2: Operand[Any], message: Message = None) -> None:
    """Fail unless both operands are the same object. ``None`` is identical to ``None``."""
    first = resolve(value1)
    second = resolve(value2)
    evaluate(
        first is second,
        lambda: resolve_message(message, f"{_describe(first)} is not identical to {_describe(second)}"),
    )


def assert_not_identical(value1: Operand[Any], value2: Operand[Any], message: Message = None) -> None:
    first = resolve(value1)
    second = resolve(value2)
    evaluate(
        first is not second,
        lambda: resolve_message(message, f"{_describe(first)} is identical to {_describe(second)}"),
    )


# --- nullability ---


def assert_nil(value: Operand[T | None], message: Message = None) -> None:
    resolved = resolve(value)
    evaluate(resolved is None, lambda: resolve_message(message, f"{resolved} is not nil"))


def assert_not_nil(value: Operand[T | None], message: Message = None) -> T:
    """Fail if the value is ``None``; otherwise return it."""
    resolved = resolve(value)
    evaluate(resolved is not None, lambda: resolve_message(message, "Value is nil"))
    return resolved


# --- errors ---


def _no_op(error: Exception) -> None:
    return None


def _expect_error(expected_error: Exception) -> Callable[[Exception], None]:
    def handler(error: Exception) -> None:
        actual = error if isinstance(error, type(expected_error)) else None
        assert_equal(actual, expected_error)

    return handler


def assert_no_throw(expression: Callable[[], T], message: Message = None) -> T:
    """Call ``expression`` and return its result, failing if it raises."""
    try:
        return expression()
    except Exception as e:
        raise Fail(resolve_message(message, f"Expression threw error: {_describe_error(e)}")) from e


def assert_throws_error(
    expression: Callable[[], Any],
    message: Message = None,
    error_handler: ErrorHandler | None = None,
) -> None:
    """Fail unless ``expression`` raises.

    The raised error is passed to ``error_handler``; anything the handler
    raises propagates.
    """
    handler = error_handler or _no_op
    try:
        expression()
    except Exception as e:
        handler(e)
        return
    raise Fail(resolve_message(message, "Expression did not throw an error"))


def assert_throws_expected_error(
    expected_error: Exception,
    expression: Callable[[], Any],
    message: Message = None,
) -> None:
    """Fail unless ``expression`` raises an error equal to ``expected_error``."""
    assert_throws_error(expression, message, _expect_error(expected_error))


# --- errors, async ---


async def assert_no_throw_async(expression: Callable[[], Awaitable[T]], message: Message = None) -> T:
    try:
        return await expression()
    except Exception as e:
        raise Fail(resolve_message(message, f"Expression threw error: {_describe_error(e)}")) from e


async def assert_throws_error_async(
    expression: Callable[[], Awaitable[Any]],
    message: Message = None,
    error_handler: ErrorHandler | None = None,
) -> None:
    """Await ``expression`` and fail unless it raises.

    ``error_handler`` may be a plain function or a coroutine function.
    Cancellation is never caught.
    """
    handler = error_handler or _no_op
    try:
        await expression()
    except Exception as e:
        outcome = handler(e)
        if inspect.isawaitable(outcome):
            await outcome
        return
    raise Fail(resolve_message(message, "Expression did not throw an error"))


async def assert_throws_expected_error_async(
    expected_error: Exception,
    expression: Callable[[], Awaitable[Any]],
    message: Message = None,
) -> None:
    await assert_throws_error_async(expression, message, _expect_error(expected_error))

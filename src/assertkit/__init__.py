"""Assertions that raise descriptive failures, with structural diffs for equality."""

import logging

from assertkit.assertions import (
    assert_equal,
    assert_false,
    assert_greater_than,
    assert_greater_than_or_equal,
    assert_identical,
    assert_less_than,
    assert_less_than_or_equal,
    assert_nil,
    assert_no_throw,
    assert_no_throw_async,
    assert_not_equal,
    assert_not_identical,
    assert_not_nil,
    assert_that,
    assert_throws_error,
    assert_throws_error_async,
    assert_throws_expected_error,
    assert_throws_expected_error_async,
    assert_true,
)
from assertkit.config import DiffFormat, Settings, configure, get_settings, load_settings
from assertkit.core import Fail, Lazy, evaluate, lazy
from assertkit.diff import diff

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DiffFormat",
    "Fail",
    "Lazy",
    "Settings",
    "assert_equal",
    "assert_false",
    "assert_greater_than",
    "assert_greater_than_or_equal",
    "assert_identical",
    "assert_less_than",
    "assert_less_than_or_equal",
    "assert_nil",
    "assert_no_throw",
    "assert_no_throw_async",
    "assert_not_equal",
    "assert_not_identical",
    "assert_not_nil",
    "assert_that",
    "assert_throws_error",
    "assert_throws_error_async",
    "assert_throws_expected_error",
    "assert_throws_expected_error_async",
    "assert_true",
    "configure",
    "diff",
    "evaluate",
    "get_settings",
    "lazy",
    "load_settings",
]

"""Pytest plugin: select assertkit settings per test session."""

from __future__ import annotations

import logging

import pytest

from assertkit.config import DiffFormat, configure

logger = logging.getLogger(__name__)

_PREVIOUS_KEY = pytest.StashKey[object]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("assertkit")
    group.addoption(
        "--assertkit-diff-format",
        action="store",
        default=None,
        choices=[f.value for f in DiffFormat],
        help="Marker style for assertkit equality diffs",
    )
    parser.addini(
        "assertkit_diff_format",
        help="Marker style for assertkit equality diffs",
        default=None,
    )


def pytest_configure(config: pytest.Config) -> None:
    value = config.getoption("--assertkit-diff-format") or config.getini("assertkit_diff_format")
    if not value:
        return
    try:
        diff_format = DiffFormat(value)
    except ValueError:
        raise pytest.UsageError(f"Unknown assertkit diff format: '{value}'")
    logger.debug(f"Using assertkit diff format {diff_format.value}")
    config.stash[_PREVIOUS_KEY] = configure(diff_format=diff_format)


def pytest_unconfigure(config: pytest.Config) -> None:
    previous = config.stash.get(_PREVIOUS_KEY, None)
    if previous is not None:
        configure(previous)

"""Pytest configuration and fixtures."""

import logging

import pytest

from assertkit import config


@pytest.fixture(autouse=True)
def restore_settings():
    """Put back whatever settings were active before the test."""
    saved = config._current
    yield
    config._current = saved


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers added to assertkit loggers so names can be reused."""
    yield

    names = [
        name
        for name in list(logging.Logger.manager.loggerDict.keys())
        if name.startswith("assertkit")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            handler.close()
            logger.removeHandler(handler)
        # Package loggers stay registered so module-level references keep working.
        if name != "assertkit" and not name.startswith("assertkit."):
            del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def counter():
    """Callable factory that records how often each operand is evaluated."""
    calls = []

    def make(value, name="operand"):
        def operand():
            calls.append(name)
            return value

        return operand

    make.calls = calls
    return make

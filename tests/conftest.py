import logging

import pytest


@pytest.fixture
def bare_root_logger():
    """Strip root handlers so basicConfig takes effect, then put them back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item):
    """Pytest's logging plugin re-adds capture handlers for the call phase,
    after fixtures ran; strip them again for tests using bare_root_logger."""
    if "bare_root_logger" not in getattr(item, "fixturenames", ()):
        yield
        return
    root = logging.getLogger()
    handlers = root.handlers[:]
    root.handlers = []
    try:
        yield
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = handlers

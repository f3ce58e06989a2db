# tests/conftest.py
"""Shared test fixtures.

Test plugins live in tests/helpers/plugins.py so that test modules can
import them directly:

    from tests.helpers.plugins import plugin

Hypothesis settings tiers live in tests/property/settings.py.
"""

import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by a test.

    configure_logging() replaces the root handlers with one bound to the
    current sys.stdout, which pytest swaps out between tests.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()

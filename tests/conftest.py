"""
tests/conftest.py – pytest plugin: --integration flag + skip logic.

Tests marked ``integration`` hit the live PumpPortal service and are
skipped unless pytest is run with --integration.
"""

from __future__ import annotations

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests against pumpportal.fun",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="pass --integration to run against pumpportal.fun")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)

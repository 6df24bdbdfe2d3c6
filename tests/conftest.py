"""Global pytest configuration for CATDOC.

Shared fixtures are loaded as plugins from `tests/fixtures/`. Every test is
marked after the suite folder it lives in (`unit`, `integration`, `contract`
or `e2e`) unless it already carries that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.graphs",
    "tests.fixtures.snapshots",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = ("unit", "integration", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with the name of its top-level suite folder."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITE_MARKERS and item.get_closest_marker(suite) is None:
            item.add_marker(getattr(pytest.mark, suite))

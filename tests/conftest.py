"""Pytest fixtures shared across vizconfig tests."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import pytest

from vizconfig.conf import get_settings
from vizconfig.datatables import DataTable


@pytest.fixture
def datatable() -> DataTable:
    """Return a small two-column DataTable payload."""

    return DataTable(
        {
            "cols": [
                {"id": "month", "label": "Month", "type": "string"},
                {"id": "sales", "label": "Sales", "type": "number"},
            ],
            "rows": [
                {"c": [{"v": "Jan"}, {"v": 1200}]},
                {"c": [{"v": "Feb"}, {"v": 950}]},
            ],
        }
    )


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Clear cached settings before and after a test that edits VIZCONFIG_* variables."""

    for name in ("VIZCONFIG_VARIANTS_PATH", "VIZCONFIG_JSON_SORT_KEYS", "VIZCONFIG_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no IO.
    - `integration`: tests touching Django, the filesystem, or other IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )

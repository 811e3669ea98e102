"""Tests for dashboards, bindings, wrappers and control filters."""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from vizconfig import codec
from vizconfig.charting import ColumnChart, PieChart
from vizconfig.dashboard import (
    Binding,
    BindingRegistry,
    CategoryFilter,
    ChartWrapper,
    ControlWrapper,
    Dashboard,
    DateRangeFilter,
    Filter,
    NumberRangeFilter,
    StringFilter,
)
from vizconfig.exceptions import InvalidConfigValue, InvalidElementId, UnknownOption

pytestmark = pytest.mark.unit


def _control(container_id: str = "filter_div") -> ControlWrapper:
    return ControlWrapper(CategoryFilter("Month"), container_id)


def _chart(container_id: str = "chart_div") -> ChartWrapper:
    return ChartWrapper(ColumnChart("sales", title="Sales"), container_id)


def test_dashboard_requires_a_label() -> None:
    """Dashboards need a non-empty label."""

    assert Dashboard("dash1").label == "dash1"
    with pytest.raises(InvalidConfigValue, match="which is unique and non-empty"):
        Dashboard("")


def test_bind_serializes_as_pairs_of_handle_maps() -> None:
    """Binding C1 to Ch1 yields [[C1json, Ch1json]]."""

    control = _control()
    chart = _chart()
    dashboard = Dashboard("dash1").bind(control, chart)

    assert json.loads(dashboard.bindings_to_json()) == [[control.to_map(), chart.to_map()]]
    assert dashboard.get_bindings() == (Binding(control=control, chart=chart),)


def test_bindings_are_append_only_ordered_and_not_deduplicated() -> None:
    """Bindings keep insertion order and duplicates."""

    a, b = _control("a"), _chart("b")
    c, d = _control("c"), _chart("d")
    dashboard = Dashboard("dash1").bind(a, b).bind(c, d).bind(a, b)

    assert [(x.control, x.chart) for x in dashboard.get_bindings()] == [(a, b), (c, d), (a, b)]
    assert dashboard.has_bindings() is True


def test_bind_requires_wrapper_handles() -> None:
    """Dashboards only bind a ControlWrapper to a ChartWrapper."""

    with pytest.raises(InvalidConfigValue, match="Dashboard::bind"):
        Dashboard("dash1").bind(_chart(), _control())  # type: ignore[arg-type]


def test_registry_accepts_opaque_handles() -> None:
    """The registry serializes handles through to_map() when they have one, else as-is."""

    registry = BindingRegistry().bind("C1", "Ch1").bind("C1", "Ch1")
    assert len(registry) == 2
    assert json.loads(registry.to_json()) == [["C1", "Ch1"], ["C1", "Ch1"]]
    assert [binding.control for binding in registry] == ["C1", "C1"]


def test_binding_is_immutable() -> None:
    """Bindings cannot be re-pointed after construction."""

    binding = Binding(control="C1", chart="Ch1")
    with pytest.raises(AttributeError):
        binding.chart = "Ch2"  # type: ignore[misc]


def test_dashboard_to_map() -> None:
    """Dashboard serialization carries its client class and bindings."""

    payload = json.loads(Dashboard("dash1").bind(_control(), _chart()).to_json())
    assert payload["label"] == "dash1"
    assert payload["class"] == "google.visualization.Dashboard"
    assert payload["package"] == "controls"
    assert len(payload["bindings"]) == 1


def test_wrappers_serialize_type_container_and_options() -> None:
    """Wrappers name the client type and the HTML container."""

    assert ChartWrapper(PieChart("share", pieStartAngle=45), "pie_div").to_map() == {
        "chartType": "PieChart",
        "containerId": "pie_div",
        "options": {"pieStartAngle": 45},
    }
    assert ControlWrapper(NumberRangeFilter(1, step=5), "range_div").to_map() == {
        "controlType": "NumberRangeFilter",
        "containerId": "range_div",
        "options": {"filterColumnIndex": 1, "ui": {"step": 5}},
    }


@pytest.mark.parametrize("element_id", ["", "chart div", None, 3])
def test_wrappers_reject_invalid_element_ids(element_id: object) -> None:
    """Container ids must be non-empty strings without whitespace."""

    with pytest.raises(InvalidElementId):
        ChartWrapper(ColumnChart("sales"), element_id)  # type: ignore[arg-type]


def test_wrappers_require_matching_handles() -> None:
    """ChartWrapper wraps a Chart and ControlWrapper wraps a Filter."""

    with pytest.raises(InvalidConfigValue):
        ChartWrapper(CategoryFilter("Month"), "div")  # type: ignore[arg-type]
    with pytest.raises(InvalidConfigValue):
        ControlWrapper(ColumnChart("sales"), "div")  # type: ignore[arg-type]


def test_filter_splits_ui_options_from_control_options() -> None:
    """Options declared as ui are nested under "ui"."""

    control = CategoryFilter(
        "Month",
        values=["Jan", "Feb"],
        useFormattedValue=True,
        allowMultiple=False,
        caption="Pick a month",
    )
    assert control.to_map() == {
        "filterColumnLabel": "Month",
        "values": ["Jan", "Feb"],
        "useFormattedValue": True,
        "ui": {"allowMultiple": False, "caption": "Pick a month"},
    }
    assert StringFilter(0).to_map() == {"filterColumnIndex": 0}


def test_filter_options_are_validated() -> None:
    """Filter options are checked against the vocabulary and their validators."""

    with pytest.raises(UnknownOption):
        CategoryFilter("Month", pieHole=0.5)
    with pytest.raises(InvalidConfigValue, match="StringFilter::matchType"):
        StringFilter("Name", matchType="fuzzy")
    with pytest.raises(InvalidConfigValue, match="CategoryFilter::values"):
        CategoryFilter("Month", values=[])
    with pytest.raises(InvalidConfigValue):
        CategoryFilter("Month").set_options({})


def test_filter_column_must_be_index_or_label() -> None:
    """Filter columns are an int index or a non-empty label."""

    with pytest.raises(InvalidConfigValue):
        CategoryFilter("")
    with pytest.raises(InvalidConfigValue):
        CategoryFilter(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="abstract"):
        Filter("Month")


def test_date_range_filter_accepts_dates() -> None:
    """Date bounds are accepted as dates and emitted as ISO strings."""

    control = ControlWrapper(DateRangeFilter("Day", minValue=date(2025, 1, 1), step="day"), "dates")
    payload = json.loads(Dashboard("d").bind(control, _chart()).bindings_to_json())
    assert payload[0][0]["options"] == {"filterColumnLabel": "Day", "minValue": "2025-01-01", "ui": {"step": "day"}}

    with pytest.raises(InvalidConfigValue):
        DateRangeFilter("Day", maxValue="2025-01-01")


def test_filter_options_round_trip_through_json() -> None:
    """Dates are stored as ISO strings, so filter options re-parse to the stored values."""

    control = DateRangeFilter("Day", minValue=date(2025, 1, 1), maxValue=datetime(2025, 3, 1, 12, 30), step="day")

    assert control.get_option("minValue") == "2025-01-01"
    assert control.get_option("maxValue") == "2025-03-01T12:30:00"
    assert json.loads(codec.dumps(control.get_options())) == control.get_options()

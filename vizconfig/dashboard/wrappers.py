"""Dashboard handles that place a chart or control into an HTML container."""

from __future__ import annotations

import re
from typing import Any

from vizconfig.charting import Chart
from vizconfig.exceptions import InvalidElementId
from vizconfig.validators import require_instance

from .filters import Filter

_ELEMENT_ID_RE = re.compile(r"^\S+$")


def validate_element_id(element_id: object) -> str:
    """Return element_id when it is a usable HTML id.

    Raises:
        InvalidElementId: When element_id is not a non-empty string without whitespace.
    """

    if not isinstance(element_id, str) or _ELEMENT_ID_RE.match(element_id) is None:
        raise InvalidElementId(element_id=element_id)
    return element_id


class ChartWrapper:
    """A chart bound to the HTML element it renders into."""

    __slots__ = ("chart", "container_id")

    def __init__(self, chart: Chart, container_id: str) -> None:
        self.chart: Chart = require_instance(chart, Chart, operation="ChartWrapper::__init__")
        self.container_id = validate_element_id(container_id)

    def to_map(self) -> dict[str, Any]:
        assert self.chart.VARIANT is not None
        return {
            "chartType": self.chart.VARIANT.js_class,
            "containerId": self.container_id,
            "options": self.chart.get_options(),
        }

    def __repr__(self) -> str:
        return f"ChartWrapper({self.chart!r}, {self.container_id!r})"


class ControlWrapper:
    """A control filter bound to the HTML element it renders into."""

    __slots__ = ("control", "container_id")

    def __init__(self, control: Filter, container_id: str) -> None:
        self.control: Filter = require_instance(control, Filter, operation="ControlWrapper::__init__")
        self.container_id = validate_element_id(container_id)

    def to_map(self) -> dict[str, Any]:
        return {
            "controlType": self.control.TYPE,
            "containerId": self.container_id,
            "options": self.control.to_map(),
        }

    def __repr__(self) -> str:
        return f"ControlWrapper({self.control!r}, {self.container_id!r})"

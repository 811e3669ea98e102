"""Concrete chart variants.

Variant-specific setters live in small option mixins so that variants sharing
an option (axes, stacking, line styling) share one validated setter. The
class statement's `variant=` tag binds each class to its vocabulary in
`variants.yaml`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Self

from vizconfig.configs import Axis
from vizconfig.exceptions import InvalidConfigValue
from vizconfig.options import OptionBag
from vizconfig.validators import (
    is_integer,
    require_boolean,
    require_enum_member,
    require_instance,
    require_int_or_percent,
    require_integer,
    require_number,
)

from .capabilities import PngRenderable
from .chart import Chart, option

CURVE_TYPES: tuple[str, ...] = ("none", "function")
PIE_SLICE_TEXTS: tuple[str, ...] = ("percentage", "value", "label", "none")
TABLE_PAGING: tuple[str, ...] = ("enable", "event", "disable")
TABLE_SORTING: tuple[str, ...] = ("enable", "event", "disable")


def _require_fraction(value: Any, *, operation: str, inclusive: bool) -> float:
    """Require a number in [0, 1] (inclusive) or (0, 1) (exclusive)."""

    number = require_number(value, operation=operation)
    in_range = 0 <= number <= 1 if inclusive else 0 < number < 1
    if not in_range:
        bounds = "between 0 and 1" if inclusive else "greater than 0 and less than 1"
        raise InvalidConfigValue(operation=operation, expected="float", extra=bounds)
    return number


class _OptionMixin:
    """Attributes the option mixins rely on; Chart provides them."""

    _options: OptionBag
    _op: Callable[[str], str]
    _merge: Callable[[Mapping[str, Any]], Any]


class AxisOptions(_OptionMixin):
    """Horizontal and vertical axis setters."""

    @option("hAxis")
    def h_axis(self, axis: Axis) -> Self:
        return self._merge(require_instance(axis, Axis, operation=self._op("h_axis")).to_map("hAxis"))

    @option("vAxis")
    def v_axis(self, axis: Axis) -> Self:
        return self._merge(require_instance(axis, Axis, operation=self._op("v_axis")).to_map("vAxis"))


class StackedOptions(_OptionMixin):
    @option("isStacked")
    def is_stacked(self, stacked: bool) -> Self:
        """Stack series values on top of each other."""

        self._options.set("isStacked", require_boolean(stacked, operation=self._op("is_stacked")))
        return self


class PointOptions(_OptionMixin):
    @option("pointSize")
    def point_size(self, size: int) -> Self:
        """Diameter of data points in pixels; 0 hides them."""

        self._options.set("pointSize", require_integer(size, operation=self._op("point_size")))
        return self


class LineOptions(PointOptions):
    @option("lineWidth")
    def line_width(self, width: int) -> Self:
        self._options.set("lineWidth", require_integer(width, operation=self._op("line_width")))
        return self


class BarOptions(_OptionMixin):
    @option("bar")
    def bar_group_width(self, group_width: int | str) -> Self:
        """Width of a group of bars, in pixels or as a percentage like '75%'.

        Stored as `{"bar": {"groupWidth": ...}}`; `set_options({"bar": "75%"})`
        dispatches here.
        """

        value = require_int_or_percent(group_width, operation=self._op("bar_group_width"))
        self._options.set("bar", {"groupWidth": value})
        return self


class PieOptions(_OptionMixin):
    @option("is3D")
    def is_3d(self, three_d: bool) -> Self:
        self._options.set("is3D", require_boolean(three_d, operation=self._op("is_3d")))
        return self

    @option("pieSliceText")
    def pie_slice_text(self, text: str) -> Self:
        """Content shown on each slice: percentage, value, label or none."""

        value = require_enum_member(text, PIE_SLICE_TEXTS, operation=self._op("pie_slice_text"))
        self._options.set("pieSliceText", value)
        return self

    @option("pieStartAngle")
    def pie_start_angle(self, angle: int) -> Self:
        value = require_integer(angle, operation=self._op("pie_start_angle"))
        self._options.set("pieStartAngle", value)
        return self

    @option("sliceVisibilityThreshold")
    def slice_visibility_threshold(self, threshold: float) -> Self:
        """Fraction of the whole below which slices are folded into 'Other'."""

        value = _require_fraction(threshold, operation=self._op("slice_visibility_threshold"), inclusive=True)
        self._options.set("sliceVisibilityThreshold", value)
        return self


class AreaChart(AxisOptions, StackedOptions, LineOptions, PngRenderable, Chart, variant="AreaChart"):
    """Area chart rendered in the browser using SVG or VML."""

    @option("areaOpacity")
    def area_opacity(self, opacity: float) -> Self:
        """Default opacity of the colored area under a series, from 0.0 to 1.0."""

        self._options.set("areaOpacity", _require_fraction(opacity, operation=self._op("area_opacity"), inclusive=True))
        return self


class BarChart(AxisOptions, StackedOptions, BarOptions, PngRenderable, Chart, variant="BarChart"):
    """Horizontal bar chart; see ColumnChart for the vertical version."""


class ColumnChart(AxisOptions, StackedOptions, BarOptions, PngRenderable, Chart, variant="ColumnChart"):
    """Vertical bar chart; see BarChart for the horizontal version."""


class LineChart(AxisOptions, LineOptions, PngRenderable, Chart, variant="LineChart"):
    """Line chart rendered in the browser using SVG or VML."""

    @option("curveType")
    def curve_type(self, curve_type: str) -> Self:
        """Line smoothing: 'none' for straight lines, 'function' for smoothed lines."""

        self._options.set("curveType", require_enum_member(curve_type, CURVE_TYPES, operation=self._op("curve_type")))
        return self


class PieChart(PieOptions, PngRenderable, Chart, variant="PieChart"):
    """Pie chart rendered in the browser using SVG or VML."""


class DonutChart(PieOptions, PngRenderable, Chart, variant="DonutChart"):
    """Pie chart with a hole in the center, drawn by the client PieChart class."""

    DEFAULT_HOLE: float = 0.5

    def __init__(self, label: str, datatable: Any = None, **options: Any) -> None:
        super().__init__(label, datatable, **options)
        if "pieHole" not in self._options:
            self.pie_hole(self.DEFAULT_HOLE)

    @option("pieHole")
    def pie_hole(self, hole: float) -> Self:
        """Size of the hole as a fraction of the radius, strictly between 0 and 1."""

        self._options.set("pieHole", _require_fraction(hole, operation=self._op("pie_hole"), inclusive=False))
        return self


class ScatterChart(AxisOptions, PointOptions, PngRenderable, Chart, variant="ScatterChart"):
    """Scatter chart rendered in the browser using SVG or VML."""

    @option("trendlines")
    def trendlines(self, trendlines: Mapping[int, Mapping[str, Any]]) -> Self:
        """Trendlines keyed by series index.

        Args:
            trendlines: Mapping of series index to a trendline option mapping,
                e.g. `{0: {"type": "linear"}}`.
        """

        operation = self._op("trendlines")
        if not isinstance(trendlines, Mapping) or not trendlines:
            raise InvalidConfigValue(operation=operation, expected="mapping", extra="of series index to options")
        value: dict[str, dict[str, Any]] = {}
        for index, settings in trendlines.items():
            if not is_integer(index) or not isinstance(settings, Mapping):
                raise InvalidConfigValue(operation=operation, expected="mapping", extra="of series index to options")
            value[str(index)] = dict(settings)
        self._options.set("trendlines", value)
        return self


class TableChart(Chart, variant="TableChart"):
    """Sortable, pageable HTML table; it cannot be exported as an image."""

    @option("alternatingRowStyle")
    def alternating_row_style(self, alternate: bool) -> Self:
        value = require_boolean(alternate, operation=self._op("alternating_row_style"))
        self._options.set("alternatingRowStyle", value)
        return self

    @option("page")
    def page(self, page: str) -> Self:
        self._options.set("page", require_enum_member(page, TABLE_PAGING, operation=self._op("page")))
        return self

    @option("pageSize")
    def page_size(self, size: int) -> Self:
        """Rows per page when paging is enabled; must be positive."""

        value = require_integer(size, operation=self._op("page_size"))
        if value <= 0:
            raise InvalidConfigValue(operation=self._op("page_size"), expected="int", extra="greater than 0")
        self._options.set("pageSize", value)
        return self

    @option("showRowNumber")
    def show_row_number(self, show: bool) -> Self:
        self._options.set("showRowNumber", require_boolean(show, operation=self._op("show_row_number")))
        return self

    @option("sort")
    def sort(self, sort: str) -> Self:
        self._options.set("sort", require_enum_member(sort, TABLE_SORTING, operation=self._op("sort")))
        return self


CHART_TYPES: dict[str, type[Chart]] = {
    cls.TYPE: cls  # type: ignore[misc]
    for cls in (AreaChart, BarChart, ColumnChart, DonutChart, LineChart, PieChart, ScatterChart, TableChart)
}

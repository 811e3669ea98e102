"""Structured sub-configuration objects.

Each object validates its own fields on construction and exposes `to_map()`,
which returns the single top-level entry it contributes to a chart's flat
option namespace, e.g. `Legend(position="top").to_map()` is
`{"legend": {"position": "top"}}`. Field names are snake_case in Python and
camelCase in the emitted payload.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Final, Literal

from .exceptions import InvalidConfigValue
from .validators import (
    is_integer,
    require_boolean,
    require_enum_member,
    require_instance,
    require_int_or_percent,
    require_integer,
    require_non_empty_string,
    require_number,
)

LegendPosition = Literal["right", "top", "bottom", "in", "left", "none"]
LegendAlignment = Literal["start", "center", "end"]
TooltipTrigger = Literal["focus", "none", "selection"]
Easing = Literal["linear", "in", "out", "inAndOut"]
AxisTextPosition = Literal["out", "in", "none"]

LEGEND_POSITIONS: Final[tuple[str, ...]] = ("right", "top", "bottom", "in", "left", "none")
LEGEND_ALIGNMENTS: Final[tuple[str, ...]] = ("start", "center", "end")
TOOLTIP_TRIGGERS: Final[tuple[str, ...]] = ("focus", "none", "selection")
EASINGS: Final[tuple[str, ...]] = ("linear", "in", "out", "inAndOut")
AXIS_TEXT_POSITIONS: Final[tuple[str, ...]] = ("out", "in", "none")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class ConfigObject:
    """Base for sub-configuration dataclasses.

    Subclasses set `TYPE` to the option name they populate by default.
    """

    __slots__ = ()

    TYPE: ClassVar[str | None] = None

    def _op(self, field: str) -> str:
        return f"{type(self).__name__}::{field}"

    def options(self) -> dict[str, Any]:
        """Return the set fields as a camelCase mapping; nested configs are expanded."""

        result: dict[str, Any] = {}
        for field in fields(self):  # type: ignore[arg-type]
            value = getattr(self, field.name)
            if value is None:
                continue
            if isinstance(value, ConfigObject):
                value = value.options()
            result[_camel(field.name)] = value
        return result

    def to_map(self, key: str | None = None) -> dict[str, Any]:
        """Return `{key: options}` ready to merge into a parent option bag.

        Args:
            key: Option name to populate; defaults to the class `TYPE`.

        Raises:
            ValueError: When neither key nor TYPE names an option.
        """

        name = key or self.TYPE
        if not name:
            raise ValueError(f"{type(self).__name__}.to_map() requires an option name.")
        return {name: self.options()}


@dataclass(frozen=True, slots=True)
class TextStyle(ConfigObject):
    """Font settings for a text element (titles, legends, axis labels)."""

    TYPE: ClassVar[str | None] = "textStyle"

    color: str | None = None
    font_name: str | None = None
    font_size: int | None = None
    bold: bool | None = None
    italic: bool | None = None

    def __post_init__(self) -> None:
        if self.color is not None:
            require_non_empty_string(self.color, operation=self._op("color"), extra="with a valid HTML color")
        if self.font_name is not None:
            require_non_empty_string(self.font_name, operation=self._op("font_name"))
        if self.font_size is not None:
            require_integer(self.font_size, operation=self._op("font_size"))
        if self.bold is not None:
            require_boolean(self.bold, operation=self._op("bold"))
        if self.italic is not None:
            require_boolean(self.italic, operation=self._op("italic"))


@dataclass(frozen=True, slots=True)
class Legend(ConfigObject):
    """Legend placement and styling."""

    TYPE: ClassVar[str | None] = "legend"

    position: LegendPosition | None = None
    alignment: LegendAlignment | None = None
    text_style: TextStyle | None = None
    max_lines: int | None = None

    def __post_init__(self) -> None:
        if self.position is not None:
            require_enum_member(self.position, LEGEND_POSITIONS, operation=self._op("position"))
        if self.alignment is not None:
            require_enum_member(self.alignment, LEGEND_ALIGNMENTS, operation=self._op("alignment"))
        if self.text_style is not None:
            require_instance(self.text_style, TextStyle, operation=self._op("text_style"))
        if self.max_lines is not None:
            require_integer(self.max_lines, operation=self._op("max_lines"))


@dataclass(frozen=True, slots=True)
class Tooltip(ConfigObject):
    """Tooltip behavior and styling."""

    TYPE: ClassVar[str | None] = "tooltip"

    show_color_code: bool | None = None
    text_style: TextStyle | None = None
    trigger: TooltipTrigger | None = None
    is_html: bool | None = None

    def __post_init__(self) -> None:
        if self.show_color_code is not None:
            require_boolean(self.show_color_code, operation=self._op("show_color_code"))
        if self.text_style is not None:
            require_instance(self.text_style, TextStyle, operation=self._op("text_style"))
        if self.trigger is not None:
            require_enum_member(self.trigger, TOOLTIP_TRIGGERS, operation=self._op("trigger"))
        if self.is_html is not None:
            require_boolean(self.is_html, operation=self._op("is_html"))


@dataclass(frozen=True, slots=True)
class Animation(ConfigObject):
    """Animation timing for redraws.

    Args:
        duration: Animation length in milliseconds.
        easing: Easing function applied to the animation.
        startup: Whether to animate the initial draw.
    """

    TYPE: ClassVar[str | None] = "animation"

    duration: int | None = None
    easing: Easing | None = None
    startup: bool | None = None

    def __post_init__(self) -> None:
        if self.duration is not None:
            require_integer(self.duration, operation=self._op("duration"))
        if self.easing is not None:
            require_enum_member(self.easing, EASINGS, operation=self._op("easing"))
        if self.startup is not None:
            require_boolean(self.startup, operation=self._op("startup"))


@dataclass(frozen=True, slots=True)
class BackgroundColor(ConfigObject):
    """Fill and border of the chart background."""

    TYPE: ClassVar[str | None] = "backgroundColor"

    stroke: str | None = None
    stroke_width: int | None = None
    fill: str | None = None

    def __post_init__(self) -> None:
        if self.stroke is not None:
            require_non_empty_string(self.stroke, operation=self._op("stroke"), extra="with a valid HTML color")
        if self.stroke_width is not None:
            require_integer(self.stroke_width, operation=self._op("stroke_width"))
        if self.fill is not None:
            require_non_empty_string(self.fill, operation=self._op("fill"), extra="with a valid HTML color")


@dataclass(frozen=True, slots=True)
class ChartArea(ConfigObject):
    """Placement and size of the plotting area, in pixels or percentages."""

    TYPE: ClassVar[str | None] = "chartArea"

    left: int | str | None = None
    top: int | str | None = None
    width: int | str | None = None
    height: int | str | None = None
    background_color: BackgroundColor | None = None

    def __post_init__(self) -> None:
        for name in ("left", "top", "width", "height"):
            value = getattr(self, name)
            if value is not None:
                require_int_or_percent(value, operation=self._op(name))
        if self.background_color is not None:
            require_instance(self.background_color, BackgroundColor, operation=self._op("background_color"))


@dataclass(frozen=True, slots=True)
class Axis(ConfigObject):
    """Axis configuration; the owning chart decides whether it is `hAxis` or `vAxis`."""

    title: str | None = None
    title_text_style: TextStyle | None = None
    text_style: TextStyle | None = None
    text_position: AxisTextPosition | None = None
    direction: int | None = None
    format: str | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    log_scale: bool | None = None
    gridline_count: int | None = None

    def __post_init__(self) -> None:
        if self.title is not None:
            require_non_empty_string(self.title, operation=self._op("title"))
        for name in ("title_text_style", "text_style"):
            value = getattr(self, name)
            if value is not None:
                require_instance(value, TextStyle, operation=self._op(name))
        if self.text_position is not None:
            require_enum_member(self.text_position, AXIS_TEXT_POSITIONS, operation=self._op("text_position"))
        if self.direction is not None and (not is_integer(self.direction) or self.direction not in (1, -1)):
            raise InvalidConfigValue(operation=self._op("direction"), expected="int", extra="with a value of 1|-1")
        if self.format is not None:
            require_non_empty_string(self.format, operation=self._op("format"))
        for name in ("min_value", "max_value"):
            value = getattr(self, name)
            if value is not None:
                require_number(value, operation=self._op(name))
        if self.log_scale is not None:
            require_boolean(self.log_scale, operation=self._op("log_scale"))
        if self.gridline_count is not None:
            require_integer(self.gridline_count, operation=self._op("gridline_count"))

    def options(self) -> dict[str, Any]:
        result = ConfigObject.options(self)
        count = result.pop("gridlineCount", None)
        if count is not None:
            result["gridlines"] = {"count": count}
        return result

"""Static per-variant option vocabularies.

The table is read once per process from `variants.yaml` (or from the file
named by `VIZCONFIG_VARIANTS_PATH`) and is immutable afterwards. Chart and
filter classes look up their vocabulary here at class-creation time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

import yaml

from vizconfig.conf import get_settings

logger = logging.getLogger(__name__)

JS_NAMESPACE: Final[str] = "google.visualization"


@dataclass(frozen=True, slots=True)
class VariantSpec:
    """Static description of a chart variant.

    Args:
        tag: Variant tag, also the Python class name.
        package: Client library package that provides the chart.
        version: Client library package version.
        js_class: Client class name, without namespace.
        options: Complete option vocabulary (shared defaults plus variant extras).
        png: Whether the client class can export an image.
    """

    tag: str
    package: str
    version: str
    js_class: str
    options: frozenset[str]
    png: bool

    @property
    def viz_class(self) -> str:
        return f"{JS_NAMESPACE}.{self.js_class}"


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Static description of a dashboard control filter.

    Args:
        tag: Control type, also the Python class name.
        options: Top-level control option names.
        ui: Option names nested under the control's `ui` object.
    """

    tag: str
    options: frozenset[str]
    ui: frozenset[str]

    @property
    def vocabulary(self) -> frozenset[str]:
        return self.options | self.ui


@dataclass(frozen=True, slots=True)
class VariantTable:
    """Parsed variant table."""

    defaults: frozenset[str]
    charts: Mapping[str, VariantSpec]
    filters: Mapping[str, FilterSpec]

    def chart(self, tag: str) -> VariantSpec:
        """Return the spec for a chart variant.

        Raises:
            KeyError: When the tag is not in the table.
        """

        try:
            return self.charts[tag]
        except KeyError:
            raise KeyError(f"Unknown chart variant {tag!r}; known: {sorted(self.charts)}") from None

    def filter(self, tag: str) -> FilterSpec:
        try:
            return self.filters[tag]
        except KeyError:
            raise KeyError(f"Unknown filter type {tag!r}; known: {sorted(self.filters)}") from None


def _str_list(value: Any, *, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ValueError(f"{where} must be a list of non-empty strings.")
    return value


def parse_variant_table(payload: Any) -> VariantTable:
    """Build a VariantTable from a decoded YAML document.

    Args:
        payload: Result of `yaml.safe_load` on a variant table file.

    Returns:
        VariantTable with read-only mappings.

    Raises:
        ValueError: When the document does not have the expected structure.
    """

    if not isinstance(payload, dict):
        raise ValueError("Variant table must be a mapping with 'defaults', 'charts' and 'filters'.")

    defaults = frozenset(_str_list(payload.get("defaults"), where="defaults"))
    if not defaults:
        raise ValueError("Variant table 'defaults' must not be empty.")

    charts: dict[str, VariantSpec] = {}
    for tag, raw in (payload.get("charts") or {}).items():
        if not isinstance(raw, dict):
            raise ValueError(f"charts.{tag} must be a mapping.")
        package = raw.get("package")
        if not isinstance(package, str) or not package:
            raise ValueError(f"charts.{tag}.package must be a non-empty string.")
        extras = frozenset(_str_list(raw.get("options"), where=f"charts.{tag}.options"))
        charts[tag] = VariantSpec(
            tag=tag,
            package=package,
            version=str(raw.get("version", "1")),
            js_class=str(raw.get("js_class") or tag),
            options=defaults | extras,
            png=bool(raw.get("png", False)),
        )

    filters: dict[str, FilterSpec] = {}
    for tag, raw in (payload.get("filters") or {}).items():
        if not isinstance(raw, dict):
            raise ValueError(f"filters.{tag} must be a mapping.")
        options = frozenset(_str_list(raw.get("options"), where=f"filters.{tag}.options"))
        ui = frozenset(_str_list(raw.get("ui"), where=f"filters.{tag}.ui"))
        overlap = options & ui
        if overlap:
            raise ValueError(f"filters.{tag} declares {sorted(overlap)} both as options and ui.")
        filters[tag] = FilterSpec(tag=tag, options=options, ui=ui)

    return VariantTable(
        defaults=defaults,
        charts=MappingProxyType(charts),
        filters=MappingProxyType(filters),
    )


def load_variant_table(path: Path | None = None) -> VariantTable:
    """Read and parse a variant table.

    Args:
        path: Optional file to read; defaults to the packaged `variants.yaml`.

    Returns:
        Parsed VariantTable.
    """

    if path is None:
        raw = resources.files(__package__).joinpath("variants.yaml").read_text(encoding="utf-8")
    else:
        logger.warning("Loading chart variant table from override %s", path)
        raw = Path(path).read_text(encoding="utf-8")
    table = parse_variant_table(yaml.safe_load(raw))
    logger.debug("Loaded %d chart variants and %d filter types", len(table.charts), len(table.filters))
    return table


VARIANTS: Final[VariantTable] = load_variant_table(get_settings().variants_path)

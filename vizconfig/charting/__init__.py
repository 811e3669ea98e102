"""Chart variants and the option-setter machinery they share.

Charts are described by configuration objects rather than rendering code:
each chart owns a validated OptionBag whose vocabulary comes from the static
variant table in `variants.yaml`.
"""

from .capabilities import PngRenderable, supports_png
from .chart import Chart, option
from .charts import (
    CHART_TYPES,
    AreaChart,
    BarChart,
    ColumnChart,
    DonutChart,
    LineChart,
    PieChart,
    ScatterChart,
    TableChart,
)
from .variants import VARIANTS, FilterSpec, VariantSpec, VariantTable, load_variant_table, parse_variant_table

__all__ = [
    "AreaChart",
    "BarChart",
    "CHART_TYPES",
    "Chart",
    "ColumnChart",
    "DonutChart",
    "FilterSpec",
    "LineChart",
    "PieChart",
    "PngRenderable",
    "ScatterChart",
    "TableChart",
    "VARIANTS",
    "VariantSpec",
    "VariantTable",
    "load_variant_table",
    "option",
    "parse_variant_table",
    "supports_png",
]

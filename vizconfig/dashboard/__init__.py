"""Dashboards, control filters and the wrappers that bind them to charts."""

from .bindings import Binding, BindingRegistry
from .dashboard import Dashboard
from .filters import (
    FILTER_TYPES,
    CategoryFilter,
    ChartRangeFilter,
    DateRangeFilter,
    Filter,
    NumberRangeFilter,
    StringFilter,
)
from .wrappers import ChartWrapper, ControlWrapper, validate_element_id

__all__ = [
    "Binding",
    "BindingRegistry",
    "CategoryFilter",
    "ChartRangeFilter",
    "ChartWrapper",
    "ControlWrapper",
    "Dashboard",
    "DateRangeFilter",
    "FILTER_TYPES",
    "Filter",
    "NumberRangeFilter",
    "StringFilter",
    "validate_element_id",
]

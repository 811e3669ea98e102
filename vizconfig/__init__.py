"""Server-side configuration objects for client-side charts and dashboards.

Charts and dashboards are described with validated option setters and
serialized to the JSON payloads the client visualization library consumes.
"""

import logging

from .configs import Animation, Axis, BackgroundColor, ChartArea, Legend, TextStyle, Tooltip
from .datatables import DataTable
from .exceptions import (
    DataTableNotFound,
    InvalidConfigValue,
    InvalidElementId,
    InvalidInput,
    UnknownOption,
    VizConfigError,
)
from .options import OptionBag

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Animation",
    "Axis",
    "BackgroundColor",
    "ChartArea",
    "DataTable",
    "DataTableNotFound",
    "InvalidConfigValue",
    "InvalidElementId",
    "InvalidInput",
    "Legend",
    "OptionBag",
    "TextStyle",
    "Tooltip",
    "UnknownOption",
    "VizConfigError",
]

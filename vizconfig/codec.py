"""JSON encoding shared by every `to_json` in the package.

Option values and DataTable cells may carry dates, datetimes, Decimals or
UUIDs. DjangoJSONEncoder encodes those as strings; everything else follows
standard JSON rules.
"""

from __future__ import annotations

import json
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from .conf import get_settings


class VizJSONEncoder(DjangoJSONEncoder):
    """Encoder that also understands objects exposing `to_map()`."""

    def default(self, o: Any) -> Any:
        to_map = getattr(o, "to_map", None)
        if callable(to_map):
            return to_map()
        return super().default(o)


def dumps(payload: Any) -> str:
    """Serialize a payload to a JSON string using the configured formatting.

    Args:
        payload: Any JSON-serializable value, config handle, or nested mapping.

    Returns:
        JSON text.
    """

    settings = get_settings()
    return json.dumps(
        payload,
        cls=VizJSONEncoder,
        sort_keys=settings.json_sort_keys,
        indent=settings.json_indent,
    )

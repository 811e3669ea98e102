"""Optional capabilities shared by a subset of chart variants."""

from __future__ import annotations

from typing import Self

from vizconfig.validators import require_boolean


class PngRenderable:
    """Mixin for charts whose client class can be exported as a PNG image.

    Capability checks use `supports_png()` (isinstance against this mixin)
    rather than inspecting the variant tag.
    """

    _png_output: bool = False

    def set_png_output(self, png: bool) -> Self:
        """Enable or disable PNG output for this chart.

        Raises:
            InvalidConfigValue: When png is not a bool.
        """

        self._png_output = require_boolean(png, operation=f"{type(self).__name__}::set_png_output")
        return self

    def get_png_output(self) -> bool:
        return self._png_output


def supports_png(obj: object) -> bool:
    """Return True when obj has the PNG output capability."""

    return isinstance(obj, PngRenderable)

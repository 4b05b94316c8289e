"""BarChart options."""

from __future__ import annotations

from enum import Enum

from foogle_charts.options.common import Color, OptionsModel


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class BarChartOptions(OptionsModel):
    """Options specific to the BarChart kind."""

    # One HTML color per series, e.g. ("red", "#004411")
    colors: tuple[Color, ...] | None = None
    is_stacked: bool | None = None
    # "vertical" rotates the axes so bars grow rightward
    orientation: Orientation | None = None

"""LineChart options."""

from __future__ import annotations

from enum import Enum

from foogle_charts.options.common import Color, OptionsModel


class CurveType(str, Enum):
    NONE = "none"  # straight lines
    FUNCTION = "function"  # smoothed angles


class PointShape(str, Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUARE = "square"
    DIAMOND = "diamond"
    STAR = "star"
    POLYGON = "polygon"


class LineChartOptions(OptionsModel):
    """Options specific to the LineChart kind."""

    colors: tuple[Color, ...] | None = None
    curve_type: CurveType | None = None
    point_shape: PointShape | None = None
    # Point diameter in pixels; 0 hides all points
    point_size: int | None = None

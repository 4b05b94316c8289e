"""The composed chart handed to a renderer, plus constructors and combinators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from foogle_charts.core.constants import Engine
from foogle_charts.data.table import Table
from foogle_charts.options.area_chart import AreaChartOptions
from foogle_charts.options.bar_chart import BarChartOptions, Orientation
from foogle_charts.options.common import ColorAxis, Options
from foogle_charts.options.geo_chart import DisplayMode, GeoChartOptions
from foogle_charts.options.line_chart import CurveType, LineChartOptions, PointShape
from foogle_charts.options.pie_chart import PieChartOptions
from foogle_charts.viz.chart_kinds import (
    AreaChart,
    BarChart,
    ChartKind,
    GeoChart,
    LineChart,
    PieChart,
)


@dataclass(frozen=True)
class FoogleChart:
    """
    One table, one chart kind (with its options) and the shared options.

    Nothing checks that `data` suits `chart` (e.g. that a GeoChart table
    holds region names); that is up to the renderer.
    """

    chart: ChartKind
    data: Table
    options: Options = field(default_factory=Options.empty)


# ---------------------------
# Constructors
# ---------------------------


def geo_chart(
    data: Table,
    region: str | None = None,
    display_mode: DisplayMode | None = None,
) -> FoogleChart:
    opts = GeoChartOptions(region=region, display_mode=display_mode)
    return FoogleChart(chart=GeoChart(opts), data=data)


def pie_chart(data: Table, pie_hole: float | None = None) -> FoogleChart:
    return FoogleChart(chart=PieChart(PieChartOptions(pie_hole=pie_hole)), data=data)


def area_chart(data: Table, is_stacked: bool | None = None) -> FoogleChart:
    return FoogleChart(chart=AreaChart(AreaChartOptions(is_stacked=is_stacked)), data=data)


def bar_chart(
    data: Table,
    colors: Sequence[str] | None = None,
    is_stacked: bool | None = None,
    orientation: Orientation | None = None,
) -> FoogleChart:
    opts = BarChartOptions(
        colors=tuple(colors) if colors is not None else None,
        is_stacked=is_stacked,
        orientation=orientation,
    )
    return FoogleChart(chart=BarChart(opts), data=data)


def line_chart(
    data: Table,
    colors: Sequence[str] | None = None,
    curve_type: CurveType | None = None,
    point_shape: PointShape | None = None,
    point_size: int | None = None,
) -> FoogleChart:
    opts = LineChartOptions(
        colors=tuple(colors) if colors is not None else None,
        curve_type=curve_type,
        point_shape=point_shape,
        point_size=point_size,
    )
    return FoogleChart(chart=LineChart(opts), data=data)


# ---------------------------
# Combinators (return a new chart)
# ---------------------------


def with_options(chart: FoogleChart, options: Options) -> FoogleChart:
    return replace(chart, options=options)


def with_title(chart: FoogleChart, title: str) -> FoogleChart:
    return replace(chart, options=chart.options.model_copy(update={"title": title}))


def with_engine(chart: FoogleChart, engine: Engine) -> FoogleChart:
    return replace(chart, options=chart.options.model_copy(update={"engine": Engine(engine)}))


def with_color_axis(chart: FoogleChart, color_axis: ColorAxis) -> FoogleChart:
    return replace(
        chart, options=chart.options.model_copy(update={"color_axis": color_axis})
    )

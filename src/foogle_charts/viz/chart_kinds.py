"""
Chart kinds.

Each kind carries exactly its own options record, so options of one kind
cannot be attached to another:

    BarChart(BarChartOptions(is_stacked=True))   # ok
    PieChart(BarChartOptions())                  # pydantic ValidationError
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from foogle_charts.options.area_chart import AreaChartOptions
from foogle_charts.options.bar_chart import BarChartOptions
from foogle_charts.options.geo_chart import GeoChartOptions
from foogle_charts.options.line_chart import LineChartOptions
from foogle_charts.options.pie_chart import PieChartOptions


class _ChartKindBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, options: Any = None, /, **data: Any) -> None:
        # Allow the options record to be passed positionally
        if options is not None:
            data["options"] = options
        super().__init__(**data)


class GeoChart(_ChartKindBase):
    kind: Literal["geo"] = "geo"
    options: GeoChartOptions = Field(default_factory=GeoChartOptions)


class PieChart(_ChartKindBase):
    kind: Literal["pie"] = "pie"
    options: PieChartOptions = Field(default_factory=PieChartOptions)


class AreaChart(_ChartKindBase):
    kind: Literal["area"] = "area"
    options: AreaChartOptions = Field(default_factory=AreaChartOptions)


class BarChart(_ChartKindBase):
    kind: Literal["bar"] = "bar"
    options: BarChartOptions = Field(default_factory=BarChartOptions)


class LineChart(_ChartKindBase):
    kind: Literal["line"] = "line"
    options: LineChartOptions = Field(default_factory=LineChartOptions)


ChartKind = Annotated[
    Union[GeoChart, PieChart, AreaChart, BarChart, LineChart],
    Field(discriminator="kind"),
]

CHART_KINDS: dict[str, type[_ChartKindBase]] = {
    "geo": GeoChart,
    "pie": PieChart,
    "area": AreaChart,
    "bar": BarChart,
    "line": LineChart,
}

chart_kind_adapter: TypeAdapter[ChartKind] = TypeAdapter(ChartKind)

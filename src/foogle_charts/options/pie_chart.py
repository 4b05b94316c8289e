"""PieChart options."""

from __future__ import annotations

from foogle_charts.options.common import OptionsModel


class PieChartOptions(OptionsModel):
    # Between 0 and 1 draws a donut with a hole of pie_hole * radius.
    # Values outside that range are passed through unchanged.
    pie_hole: float | None = None

"""AreaChart options."""

from __future__ import annotations

from foogle_charts.options.common import OptionsModel


class AreaChartOptions(OptionsModel):
    is_stacked: bool | None = None

"""GeoChart options."""

from __future__ import annotations

from enum import Enum

from foogle_charts.options.common import OptionsModel


class DisplayMode(str, Enum):
    """Which type of geochart this is. The table format must match."""

    REGION = "regions"  # color the regions
    MARKERS = "markers"  # place markers on the regions
    TEXT = "text"  # label the regions with text from the table
    AUTO = "auto"  # choose based on the table format


class GeoChartOptions(OptionsModel):
    """
    Options specific to the GeoChart kind.

    `region` is the area to display (surrounding areas are shown as well):
      - "world" for the entire world
      - a 3-digit continent or sub-continent code, e.g. "011" (Western Africa)
      - an ISO 3166-1 alpha-2 country code, e.g. "AU"
      - an ISO 3166-2:US state code, e.g. "US-AL"
    """

    region: str | None = None
    display_mode: DisplayMode | None = None

"""Constants and enums shared by tables, options and chart kinds."""

from __future__ import annotations

from enum import Enum


class Engine(str, Enum):
    """Rendering backends a chart can ask for."""

    GOOGLE = "google"
    HIGHCHARTS = "highcharts"


# Header of the implicit key column produced by the key-based builders
KEY_COLUMN_LABEL: str = ""

DEFAULT_VALUE_LABEL: str = "Value"
DEFAULT_TWO_VALUE_LABELS: tuple[str, str] = ("Value 1", "Value 2")

ENV_DEFAULT_ENGINE: str = "FOOGLE_DEFAULT_ENGINE"

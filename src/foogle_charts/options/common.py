"""Options shared by every chart kind."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from foogle_charts.core.constants import Engine

# An HTML color string: "#rrggbb" or a well-known name like "red"
Color = str


class OptionsModel(BaseModel):
    """Frozen base for option records. Unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ColorAxis(OptionsModel):
    """
    Mapping between color column values and colors or a gradient scale.

    Fields are passed to the renderer as-is; e.g. `values` and `colors` of
    different lengths are not reported here.
    """

    # Color data at or below this value gets the first color
    min_value: float | None = None
    # Color data at or above this value gets the last color
    max_value: float | None = None
    # Break points, one per color; absent means [min_value, max_value]
    values: tuple[float, ...] | None = None
    # At least two colors, smallest value first
    colors: tuple[Color, ...] | None = None


class Options(OptionsModel):
    """Common options understood by all charts."""

    title: str | None = None
    color_axis: ColorAxis | None = None
    engine: Engine | None = None

    @classmethod
    def empty(cls) -> Options:
        """Options with every field absent."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.color_axis is None and self.engine is None

import pytest
from pydantic import ValidationError as PydanticValidationError

from foogle_charts.core.constants import Engine
from foogle_charts.options.area_chart import AreaChartOptions
from foogle_charts.options.bar_chart import BarChartOptions, Orientation
from foogle_charts.options.common import ColorAxis, Options
from foogle_charts.options.geo_chart import DisplayMode, GeoChartOptions
from foogle_charts.options.line_chart import CurveType, LineChartOptions, PointShape
from foogle_charts.options.pie_chart import PieChartOptions


def test_empty_options_have_every_field_absent():
    o = Options.empty()
    assert o.title is None
    assert o.color_axis is None
    assert o.engine is None
    assert o.is_empty
    assert o == Options()


def test_options_with_fields_are_not_empty():
    o = Options(title="Sales", engine="highcharts")
    assert o.engine is Engine.HIGHCHARTS
    assert not o.is_empty


def test_options_are_frozen():
    o = Options(title="a")
    with pytest.raises(PydanticValidationError):
        o.title = "b"


def test_unknown_fields_are_rejected():
    with pytest.raises(PydanticValidationError):
        Options(subtitle="x")
    with pytest.raises(PydanticValidationError):
        PieChartOptions(is_stacked=True)
    with pytest.raises(PydanticValidationError):
        GeoChartOptions(pie_hole=0.5)


def test_color_axis_fields_pass_through_without_cross_checks():
    axis = ColorAxis(values=[0, 50, 100], colors=["red"])
    assert axis.values == (0.0, 50.0, 100.0)
    assert axis.colors == ("red",)
    assert axis.min_value is None and axis.max_value is None


def test_pie_hole_is_not_range_checked():
    assert PieChartOptions(pie_hole=1.5).pie_hole == 1.5
    assert PieChartOptions(pie_hole=-1).pie_hole == -1.0


def test_per_kind_defaults_are_absent():
    for opts in (
        GeoChartOptions(),
        PieChartOptions(),
        AreaChartOptions(),
        BarChartOptions(),
        LineChartOptions(),
    ):
        assert all(v is None for v in opts.model_dump().values())


def test_enum_fields_accept_their_string_values():
    assert GeoChartOptions(display_mode="markers").display_mode is DisplayMode.MARKERS
    assert BarChartOptions(orientation="horizontal").orientation is Orientation.HORIZONTAL
    line = LineChartOptions(curve_type="function", point_shape="star", point_size=4)
    assert line.curve_type is CurveType.FUNCTION
    assert line.point_shape is PointShape.STAR
    assert line.point_size == 4


def test_invalid_enum_value_is_rejected():
    with pytest.raises(PydanticValidationError):
        LineChartOptions(point_shape="hexagon")


def test_colors_are_stored_as_tuples():
    opts = BarChartOptions(colors=["red", "#004411"], is_stacked=True)
    assert opts.colors == ("red", "#004411")
    assert opts.is_stacked is True

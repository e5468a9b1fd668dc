import pytest

from sectorfile.exceptions import MalformedRegionError, UnrecognizedLineError
from sectorfile.models import Color, Coordinate
from sectorfile.parsers.registry import ColorTable
from sectorfile.parsers.regions import RegionBuilder


@pytest.fixture
def builder():
    colors = ColorTable()
    colors.define('COLOR_Building', '3881787')
    colors.define('COLOR_Grass', '32768')
    return RegionBuilder(colors)


def test_region_name_comment_and_spaces(builder):
    assert builder.start_region('REGIONNAME ENGM Buildings ; apron', 1) == 'ENGM Buildings'
    assert builder.current_region == 'ENGM Buildings'


def test_color_switch_starts_new_polygon(builder):
    builder.start_region('REGIONNAME ENGM', 1)
    builder.add_point(['COLOR_Building', 'N060.00.00.000', 'E011.00.00.000'], 2)
    builder.add_point(['N060.00.01.000', 'E011.00.01.000'], 3)
    builder.add_point(['COLOR_Grass', 'N060.00.02.000', 'E011.00.02.000'], 4)

    region, = builder.regions()
    assert [polygon.color for polygon in region.polygons] == [
        Color('COLOR_Building', 3881787),
        Color('COLOR_Grass', 32768),
    ]
    assert region.polygons[0].points == (
        Coordinate.from_dms('N060.00.00.000', 'E011.00.00.000'),
        Coordinate.from_dms('N060.00.01.000', 'E011.00.01.000'),
    )


def test_empty_region_is_kept(builder):
    builder.start_region('REGIONNAME EMPTY', 1)
    assert builder.regions()[0].polygons == ()


def test_point_needs_two_fields(builder):
    builder.start_region('REGIONNAME ENGM', 1)
    with pytest.raises(UnrecognizedLineError):
        builder.add_point(['N060.00.00.000'], 2)


def test_point_without_color_in_new_region(builder):
    builder.start_region('REGIONNAME A', 1)
    builder.add_point(['COLOR_Grass', 'N060.00.00.000', 'E011.00.00.000'], 2)
    builder.start_region('REGIONNAME B', 3)
    with pytest.raises(MalformedRegionError) as exc_info:
        builder.add_point(['N060.00.01.000', 'E011.00.01.000'], 4)
    assert exc_info.value.line == 4

import operator

from geojson_builder.builders.position import position
from geojson_builder.core.accessors import PointAccessor, check_point_accessor
from geojson_builder.core.constants import MIN_LINE_STRING_POINTS
from geojson_builder.core.exceptions import InvalidGeometry


def read_count(count: int) -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError(f'Counts must be non-negative, got {count}')
    return count


def point_sequence(count: int, accessor: PointAccessor) -> list[list[float]]:
    """Pulls `count` positions out of `accessor`, in index order, once each."""
    check_point_accessor(accessor)
    count = read_count(count)
    return [position(*accessor(i)) for i in range(count)]


def line_string_coordinates(count: int, accessor: PointAccessor) -> list[list[float]]:
    check_point_accessor(accessor)
    count = read_count(count)
    if count < MIN_LINE_STRING_POINTS:
        raise InvalidGeometry(f'LineString objects must have at least {MIN_LINE_STRING_POINTS} points', count)
    return point_sequence(count, accessor)

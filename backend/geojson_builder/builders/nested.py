"""Coordinate trees for the nested geometry types.

Each level calls its count accessor once per index, then hands an accessor
bound to that index down to the level below. Line and ring assembly is shared
by every depth.
"""
import logging

from geojson_builder.builders.ring import linear_ring_coordinates
from geojson_builder.builders.sequence import line_string_coordinates, read_count
from geojson_builder.core.accessors import CountAccessor, PointAccessor, bind_count, check_point_accessor
from geojson_builder.core.exceptions import InvalidGeometry


logger = logging.getLogger(__name__)


def multi_line_string_coordinates(line_count: int, line_length: CountAccessor, accessor: PointAccessor) -> list[list[list[float]]]:
    check_point_accessor(accessor)
    coords = []
    for i in range(read_count(line_count)):
        try:
            coords.append(line_string_coordinates(line_length(i), accessor.bind(i)))
        except InvalidGeometry as err:
            err.at(i)
            raise
    return coords


def polygon_coordinates(ring_count: int, ring_length: CountAccessor, accessor: PointAccessor) -> list[list[list[float]]]:
    """The first ring is the exterior and comes out CCW, holes come out CW."""
    check_point_accessor(accessor)
    coords = []
    for i in range(read_count(ring_count)):
        try:
            coords.append(linear_ring_coordinates(ring_length(i), i == 0, accessor.bind(i)))
        except InvalidGeometry as err:
            err.at(i)
            raise
    return coords


def multi_polygon_coordinates(
    polygon_count: int,
    ring_count: CountAccessor,
    ring_length: CountAccessor,
    accessor: PointAccessor,
) -> list[list[list[list[float]]]]:
    check_point_accessor(accessor)
    coords = []
    for i in range(read_count(polygon_count)):
        try:
            coords.append(polygon_coordinates(ring_count(i), bind_count(ring_length, i), accessor.bind(i)))
        except InvalidGeometry as err:
            err.at(i)
            raise
    logger.debug('Assembled %d polygons', len(coords))
    return coords

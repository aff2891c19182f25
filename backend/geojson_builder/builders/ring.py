import logging

from geojson_builder.builders.orientation import is_clockwise
from geojson_builder.builders.sequence import point_sequence, read_count
from geojson_builder.core.accessors import PointAccessor, check_point_accessor
from geojson_builder.core.constants import MIN_LINEAR_RING_POINTS
from geojson_builder.core.exceptions import InvalidGeometry


logger = logging.getLogger(__name__)


def linear_ring_coordinates(count: int, want_ccw: bool, accessor: PointAccessor) -> list[list[float]]:
    """Returns a closed linear ring wound the requested way.

    `count` is the number of distinct vertices; the result holds `count + 1`
    positions, the last one repeating the first. Orientation is tested on the
    lon/lat projection, so altitude never affects the winding decision.
    """
    check_point_accessor(accessor)
    count = read_count(count)
    if count < MIN_LINEAR_RING_POINTS:
        raise InvalidGeometry(f'Linear rings must have at least {MIN_LINEAR_RING_POINTS} points', count)

    coords = point_sequence(count, accessor)

    # Zero-area rings count as CCW: exteriors keep their order, holes are reversed
    is_ccw = not is_clockwise(coords)
    if is_ccw != want_ccw:
        logger.debug('Reversing %d point ring to %s order', count, 'CCW' if want_ccw else 'CW')
        coords.reverse()

    coords.append(list(coords[0]))
    return coords

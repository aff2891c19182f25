import pytest
from shapely.geometry import LinearRing

from geojson_builder.builders.nested import multi_line_string_coordinates, multi_polygon_coordinates, polygon_coordinates
from geojson_builder.builders.orientation import is_clockwise
from geojson_builder.core.accessors import Accessor2D
from geojson_builder.core.exceptions import InvalidGeometry


def test_multi_line_string_2d(accessor):
    lines = [[(0, 0.5), (1, 1.5), (2, 2.5)], [(2, 3), (4, 5)]]
    get_point = accessor(lines)

    coords = multi_line_string_coordinates(len(lines), lambda i: len(lines[i]), get_point)

    assert coords == [[[0.0, 0.5], [1.0, 1.5], [2.0, 2.5]], [[2.0, 3.0], [4.0, 5.0]]]
    assert get_point.get.calls == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]


def test_multi_line_string_3d_lines_stay_open(accessor):
    lines = [[(0, 1, 2), (3, 4.1, 5)], [(3, 4, 5), (6, 7, 8), (9, 10, 11)]]
    coords = multi_line_string_coordinates(2, lambda i: len(lines[i]), accessor(lines, dimensions=3))
    assert [len(line) for line in coords] == [2, 3]
    assert coords[1][-1] == [9.0, 10.0, 11.0]


def test_multi_line_string_reports_failing_line(accessor):
    lines = [[(0, 0), (1, 1)], [(0, 0), (1, 1)], [(5, 5)]]
    with pytest.raises(InvalidGeometry) as excinfo:
        multi_line_string_coordinates(3, lambda i: len(lines[i]), accessor(lines))
    assert excinfo.value.path == (2,)
    assert '[2]' in str(excinfo.value)


def test_polygon_rings_follow_right_hand_rule(accessor, exterior_3d, holes_3d):
    rings = [exterior_3d, *holes_3d]
    coords = polygon_coordinates(len(rings), lambda i: len(rings[i]), accessor(rings, dimensions=3))

    assert len(coords) == 3
    assert coords[0][0] == [0.0, 0.0, 0.5]
    assert coords[0][-1] == [0.0, 0.0, 0.5]
    assert LinearRing(coords[0]).is_ccw
    for hole in coords[1:]:
        assert hole[0] == hole[-1]
        assert not LinearRing(hole).is_ccw


def test_polygon_hole_reversed_only_when_needed(accessor, exterior_3d, holes_3d):
    rings = [exterior_3d, *holes_3d]
    coords = polygon_coordinates(3, lambda i: len(rings[i]), accessor(rings, dimensions=3))

    # first hole is already CW, second one is CCW in the input
    assert coords[1][:-1] == [[0.25, 0.25, 0.5], [0.35, 0.75, 0.6], [0.5, 0.25, 0.7]]
    assert coords[2][:-1] == [[1.125, 0.5, 0.7], [1.25, 0.25, 0.6], [1.0, 0.25, 0.5]]


def test_polygon_without_rings(accessor):
    assert polygon_coordinates(0, lambda i: 0, accessor([])) == []


def test_polygon_calls_ring_length_once_per_ring(accessor, unit_square_ccw):
    asked = []

    def ring_length(i):
        asked.append(i)
        return 4

    polygon_coordinates(2, ring_length, accessor([unit_square_ccw, unit_square_ccw]))
    assert asked == [0, 1]


def test_polygon_reports_failing_ring(accessor, unit_square_ccw):
    rings = [unit_square_ccw, [(0, 0), (1, 1)]]
    with pytest.raises(InvalidGeometry) as excinfo:
        polygon_coordinates(2, lambda i: len(rings[i]), accessor(rings))
    assert excinfo.value.path == (1,)
    assert excinfo.value.count == 2


def test_multi_polygon(accessor, exterior_3d, holes_3d):
    polygons = [
        [exterior_3d, *holes_3d],
        [[(1, 2, 3), (4, 5, 6), (7, 8, 9)]],
    ]
    ring_counts = [len(polygon) for polygon in polygons]

    coords = multi_polygon_coordinates(
        len(polygons),
        lambda i: ring_counts[i],
        lambda i, j: len(polygons[i][j]),
        accessor(polygons, dimensions=3),
    )

    assert len(coords) == 2
    assert sum(len(polygon) for polygon in coords) == sum(ring_counts)
    for polygon in coords:
        assert not is_clockwise(polygon[0][:-1])
        for hole in polygon[1:]:
            assert not LinearRing(hole).is_ccw


def test_multi_polygon_degenerate_exterior_kept(accessor):
    polygons = [[[(1, 2, 3), (4, 5, 6), (7, 8, 9)]]]
    coords = multi_polygon_coordinates(1, lambda i: 1, lambda i, j: 3, accessor(polygons, dimensions=3))
    assert coords == [[[[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0], [1.0, 2.0, 3.0]]]]


def test_multi_polygon_reports_polygon_and_ring(accessor, unit_square_ccw):
    polygons = [[unit_square_ccw], [[(0, 0), (1, 0)]]]
    with pytest.raises(InvalidGeometry) as excinfo:
        multi_polygon_coordinates(2, lambda i: len(polygons[i]), lambda i, j: len(polygons[i][j]), accessor(polygons))
    assert excinfo.value.path == (1, 0)


def test_multi_polygon_rebuild_reinvokes_accessors(unit_square_cw):
    calls = []

    def get_point(i, j, k):
        calls.append((i, j, k))
        return unit_square_cw[k]

    for _ in range(2):
        multi_polygon_coordinates(1, lambda i: 1, lambda i, j: 4, Accessor2D(get_point))

    assert len(calls) == 8

"""Right-hand-rule GeoJSON from shapely geometries.

`shapely.geometry.mapping` copies coordinates as they are stored, so rings keep
whatever winding they were digitized with. `from_shape` instead drives the
builders with accessors over the shapely coordinate sequences, which orients
every ring and re-closes it.
"""
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from geojson_builder.builders import geometry as builders
from geojson_builder.core.accessors import Accessor2D, Accessor3D, PointAccessor


def _accessor(has_z: bool, get) -> PointAccessor:
    return Accessor3D(get) if has_z else Accessor2D(get)


def _polygon_rings(polygon: Polygon) -> list:
    return [polygon.exterior.coords, *(interior.coords for interior in polygon.interiors)]


def _ring_length(coords) -> int:
    # shapely stores the closing vertex, the ring builder adds its own
    return len(coords) - 1


def from_shape(geometry: BaseGeometry) -> builders.GeoJSON:
    geom_type = geometry.geom_type

    if geom_type == 'GeometryCollection':
        parts = geometry.geoms
        return builders.geometry_collection(len(parts), lambda i: from_shape(parts[i]))

    if geometry.is_empty:
        raise ValueError(f'Cannot build GeoJSON from an empty {geom_type}')

    has_z = geometry.has_z
    if geom_type == 'Point':
        return builders.point(*geometry.coords[0])
    elif geom_type == 'MultiPoint':
        points = geometry.geoms
        return builders.multi_point(len(points), _accessor(has_z, lambda i: points[i].coords[0]))
    elif geom_type in ('LineString', 'LinearRing'):
        coords = geometry.coords
        return builders.line_string(len(coords), _accessor(has_z, lambda i: coords[i]))
    elif geom_type == 'MultiLineString':
        lines = [line.coords for line in geometry.geoms]
        return builders.multi_line_string(
            len(lines),
            lambda i: len(lines[i]),
            _accessor(has_z, lambda i, j: lines[i][j]),
        )
    elif geom_type == 'Polygon':
        rings = _polygon_rings(geometry)
        return builders.polygon(
            len(rings),
            lambda i: _ring_length(rings[i]),
            _accessor(has_z, lambda i, j: rings[i][j]),
        )
    elif geom_type == 'MultiPolygon':
        polygons = [_polygon_rings(polygon) for polygon in geometry.geoms]
        return builders.multi_polygon(
            len(polygons),
            lambda i: len(polygons[i]),
            lambda i, j: _ring_length(polygons[i][j]),
            _accessor(has_z, lambda i, j, k: polygons[i][j][k]),
        )
    raise ValueError(f'Unsupported geometry type: {geom_type}')

"""GeoJSON geometry, Feature and FeatureCollection objects.

Every builder returns a fresh `dict` whose members are ordered the way
RFC 7946 lists them (`type` first).
"""
import logging
from typing import Any, Callable

from geojson_builder.builders.nested import multi_line_string_coordinates, multi_polygon_coordinates, polygon_coordinates
from geojson_builder.builders.position import position
from geojson_builder.builders.sequence import line_string_coordinates, point_sequence, read_count
from geojson_builder.core.accessors import CountAccessor, PointAccessor
from geojson_builder.core.constants import (
    COORDINATES_MEMBER, FEATURES_MEMBER, GEOMETRIES_MEMBER, GEOMETRY_MEMBER, ID_MEMBER, PROPERTIES_MEMBER, TYPE_MEMBER
)
from geojson_builder.core.exceptions import InvalidGeometry
from geojson_builder.core.settings import Settings
from geojson_builder.enums.geometry_type import GeometryType, type_name


logger = logging.getLogger(__name__)

GeoJSON = dict[str, Any]


def _coordinates_object(geometry_type: GeometryType, coords: list) -> GeoJSON:
    return {
        TYPE_MEMBER: type_name(geometry_type),
        COORDINATES_MEMBER: coords,
    }


def point(lon: float, lat: float, alt: float | None = None) -> GeoJSON:
    return _coordinates_object(GeometryType.POINT, position(lon, lat, alt))


def multi_point(point_count: int, accessor: PointAccessor) -> GeoJSON:
    return _coordinates_object(GeometryType.MULTI_POINT, point_sequence(point_count, accessor))


def line_string(point_count: int, accessor: PointAccessor) -> GeoJSON:
    return _coordinates_object(GeometryType.LINE_STRING, line_string_coordinates(point_count, accessor))


def multi_line_string(line_count: int, line_length: CountAccessor, accessor: PointAccessor) -> GeoJSON:
    return _coordinates_object(
        GeometryType.MULTI_LINE_STRING,
        multi_line_string_coordinates(line_count, line_length, accessor),
    )


def polygon(ring_count: int, ring_length: CountAccessor, accessor: PointAccessor) -> GeoJSON:
    return _coordinates_object(GeometryType.POLYGON, polygon_coordinates(ring_count, ring_length, accessor))


def multi_polygon(polygon_count: int, ring_count: CountAccessor, ring_length: CountAccessor, accessor: PointAccessor) -> GeoJSON:
    return _coordinates_object(
        GeometryType.MULTI_POLYGON,
        multi_polygon_coordinates(polygon_count, ring_count, ring_length, accessor),
    )


def _collection_depth(geometry: Any) -> int:
    if not isinstance(geometry, dict) or geometry.get(TYPE_MEMBER) != GeometryType.GEOMETRY_COLLECTION:
        return 0
    return 1 + max((_collection_depth(child) for child in geometry.get(GEOMETRIES_MEMBER, [])), default=0)


def geometry_collection(geometry_count: int, get_geometry: Callable[[int], GeoJSON]) -> GeoJSON:
    geometries = [get_geometry(i) for i in range(read_count(geometry_count))]

    max_depth = Settings.MAX_COLLECTION_DEPTH
    if max_depth > 0:
        depth = 1 + max((_collection_depth(child) for child in geometries), default=0)
        if depth > max_depth:
            raise InvalidGeometry(f'GeometryCollection objects may nest at most {max_depth} levels deep', depth)

    return {
        TYPE_MEMBER: type_name(GeometryType.GEOMETRY_COLLECTION),
        GEOMETRIES_MEMBER: geometries,
    }


def feature(geometry: GeoJSON | None, properties: dict[str, Any] | None = None, id: str | int | float | None = None) -> GeoJSON:
    obj = {
        TYPE_MEMBER: type_name(GeometryType.FEATURE),
        GEOMETRY_MEMBER: geometry,
        PROPERTIES_MEMBER: properties,
    }
    if id is not None:
        if isinstance(id, bool) or not isinstance(id, (str, int, float)):
            raise TypeError(f'Feature ids must be a string or a number, got {type(id).__name__}')
        obj[ID_MEMBER] = id
    return obj


def feature_collection(feature_count: int, get_feature: Callable[[int], GeoJSON]) -> GeoJSON:
    features = [get_feature(i) for i in range(read_count(feature_count))]
    logger.debug('Assembled FeatureCollection of %d features', len(features))
    return {
        TYPE_MEMBER: type_name(GeometryType.FEATURE_COLLECTION),
        FEATURES_MEMBER: features,
    }

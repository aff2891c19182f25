from enum import StrEnum


class GeometryType(StrEnum):
    POINT = 'Point'
    MULTI_POINT = 'MultiPoint'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'


def type_name(geometry_type: GeometryType) -> str:
    if not isinstance(geometry_type, GeometryType):
        raise ValueError(f'Invalid geometry type given: {geometry_type!r}')
    return geometry_type.value

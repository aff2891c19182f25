from geojson_builder.schemas.responses.geojson import (
    Feature, FeatureCollection, Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint,
    MultiPolygon, Point, Polygon,
)

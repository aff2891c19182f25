from geojson_builder.schemas.requests.geometry import (
    LineStringRequest, MultiLineStringRequest, MultiPointRequest, MultiPolygonRequest, PointRequest, PolygonRequest,
)
from geojson_builder.schemas.requests.polygon_feature_collection import PolygonFeature, PolygonFeatureCollection

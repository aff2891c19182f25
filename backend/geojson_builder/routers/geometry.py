from geojson_builder.builders import geometry as builders
from geojson_builder.core.accessors import Accessor2D, Accessor3D, PointAccessor
from geojson_builder.core.constants import POSITION_3D_SIZE
from geojson_builder.schemas import requests, responses
from fastapi import APIRouter, HTTPException
from itertools import chain
from typing import Callable, Iterable


api_router = APIRouter(prefix='')


def _accessor(positions: Iterable[tuple[float, ...]], get: Callable) -> PointAccessor:
    sizes = {len(position) for position in positions}
    if len(sizes) > 1:
        raise HTTPException(status_code=422, detail='Positions mix 2D and 3D coordinates')
    if sizes == {POSITION_3D_SIZE}:
        return Accessor3D(get)
    return Accessor2D(get)


def _polygon(rings: list[list[tuple[float, ...]]]) -> builders.GeoJSON:
    return builders.polygon(
        len(rings),
        lambda i: len(rings[i]),
        _accessor(chain.from_iterable(rings), lambda i, j: rings[i][j]),
    )


@api_router.post('/point')
async def build_point(point: requests.PointRequest) -> responses.Point:
    return builders.point(*point.coordinates)


@api_router.post('/multi_point')
async def build_multi_point(multi_point: requests.MultiPointRequest) -> responses.MultiPoint:
    points = multi_point.points
    return builders.multi_point(len(points), _accessor(points, lambda i: points[i]))


@api_router.post('/line_string')
async def build_line_string(line_string: requests.LineStringRequest) -> responses.LineString:
    points = line_string.points
    return builders.line_string(len(points), _accessor(points, lambda i: points[i]))


@api_router.post('/multi_line_string')
async def build_multi_line_string(multi_line_string: requests.MultiLineStringRequest) -> responses.MultiLineString:
    lines = multi_line_string.lines
    return builders.multi_line_string(
        len(lines),
        lambda i: len(lines[i]),
        _accessor(chain.from_iterable(lines), lambda i, j: lines[i][j]),
    )


@api_router.post('/polygon')
async def build_polygon(polygon: requests.PolygonRequest) -> responses.Polygon:
    return _polygon(polygon.rings)


@api_router.post('/multi_polygon')
async def build_multi_polygon(multi_polygon: requests.MultiPolygonRequest) -> responses.MultiPolygon:
    polygons = multi_polygon.polygons
    return builders.multi_polygon(
        len(polygons),
        lambda i: len(polygons[i]),
        lambda i, j: len(polygons[i][j]),
        _accessor(chain.from_iterable(chain.from_iterable(polygons)), lambda i, j, k: polygons[i][j][k]),
    )


@api_router.post('/polygon_features', response_model_exclude_unset=True)
async def build_polygon_features(collection: requests.PolygonFeatureCollection) -> responses.FeatureCollection:
    features = collection.features
    return builders.feature_collection(
        len(features),
        lambda i: builders.feature(_polygon(features[i].rings), features[i].properties, features[i].id),
    )

from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator

from geojson_builder.core.constants import MIN_LINE_STRING_POINTS, MIN_LINEAR_RING_POINTS

POSITION_TYPE = tuple[float, float] | tuple[float, float, float]


def _check_ring(ring: list[POSITION_TYPE]) -> list[POSITION_TYPE]:
    if len(ring) < MIN_LINEAR_RING_POINTS + 1:
        raise ValueError(f'linear rings need at least {MIN_LINEAR_RING_POINTS + 1} positions, got {len(ring)}')
    if ring[0] != ring[-1]:
        raise ValueError('linear rings must be closed')
    return ring


def _check_line(line: list[POSITION_TYPE]) -> list[POSITION_TYPE]:
    if len(line) < MIN_LINE_STRING_POINTS:
        raise ValueError(f'line strings need at least {MIN_LINE_STRING_POINTS} positions, got {len(line)}')
    return line

# ----- Geometry Types -----
class Point(BaseModel):
    type: Literal["Point"]
    coordinates: POSITION_TYPE

class MultiPoint(BaseModel):
    type: Literal["MultiPoint"]
    coordinates: list[POSITION_TYPE]

class LineString(BaseModel):
    type: Literal["LineString"]
    coordinates: list[POSITION_TYPE]

    @field_validator('coordinates')
    @classmethod
    def check_line(cls, value):
        return _check_line(value)

class MultiLineString(BaseModel):
    type: Literal["MultiLineString"]
    coordinates: list[list[POSITION_TYPE]]

    @field_validator('coordinates')
    @classmethod
    def check_lines(cls, value):
        return [_check_line(line) for line in value]

class Polygon(BaseModel):
    type: Literal["Polygon"]
    # Winding is checked by the builders, only closure and size here
    coordinates: list[list[POSITION_TYPE]]

    @field_validator('coordinates')
    @classmethod
    def check_rings(cls, value):
        return [_check_ring(ring) for ring in value]

class MultiPolygon(BaseModel):
    type: Literal["MultiPolygon"]
    coordinates: list[list[list[POSITION_TYPE]]]

    @field_validator('coordinates')
    @classmethod
    def check_polygons(cls, value):
        return [[_check_ring(ring) for ring in polygon] for polygon in value]

class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"]
    geometries: list['Geometry']

Geometry = Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection

GeometryCollection.model_rebuild()

# ----- Core GeoJSON Objects -----
class Feature(BaseModel):
    type: Literal["Feature"]
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = Field(default=None)
    id: str | int | float | None = None

class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"]
    features: list[Feature]

from pydantic import BaseModel, Field

from geojson_builder.schemas.responses.geojson import POSITION_TYPE


class PointRequest(BaseModel):
    coordinates: POSITION_TYPE


class MultiPointRequest(BaseModel):
    points: list[POSITION_TYPE]


class LineStringRequest(BaseModel):
    points: list[POSITION_TYPE]


class MultiLineStringRequest(BaseModel):
    lines: list[list[POSITION_TYPE]]


class PolygonRequest(BaseModel):
    # Open rings in any winding, exterior first
    rings: list[list[POSITION_TYPE]] = Field(..., description="Exterior ring then holes, without closing vertex")


class MultiPolygonRequest(BaseModel):
    polygons: list[list[list[POSITION_TYPE]]]

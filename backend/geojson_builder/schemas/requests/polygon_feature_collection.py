from pydantic import BaseModel
from typing import Any

from geojson_builder.schemas.requests.geometry import PolygonRequest


class PolygonFeature(PolygonRequest):
    id: str | int | float | None = None
    properties: dict[str, Any] | None = None


class PolygonFeatureCollection(BaseModel):
    features: list[PolygonFeature]

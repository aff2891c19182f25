from geojson_builder.builders.geometry import (
    feature, feature_collection, geometry_collection, line_string, multi_line_string, multi_point, multi_polygon,
    point, polygon,
)
from geojson_builder.builders.nested import multi_line_string_coordinates, multi_polygon_coordinates, polygon_coordinates
from geojson_builder.builders.orientation import is_clockwise, is_counter_clockwise, signed_edge_sum
from geojson_builder.builders.position import position
from geojson_builder.builders.ring import linear_ring_coordinates
from geojson_builder.builders.sequence import line_string_coordinates, point_sequence
from geojson_builder.core.accessors import Accessor2D, Accessor3D, PointAccessor
from geojson_builder.core.exceptions import InvalidGeometry
from geojson_builder.enums.geometry_type import GeometryType, type_name

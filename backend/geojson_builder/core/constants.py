MIN_LINE_STRING_POINTS = 2
MIN_LINEAR_RING_POINTS = 3

POSITION_2D_SIZE = 2
POSITION_3D_SIZE = 3

# GeoJSON member names (RFC 7946)
TYPE_MEMBER = 'type'
COORDINATES_MEMBER = 'coordinates'
GEOMETRIES_MEMBER = 'geometries'
GEOMETRY_MEMBER = 'geometry'
PROPERTIES_MEMBER = 'properties'
FEATURES_MEMBER = 'features'
ID_MEMBER = 'id'

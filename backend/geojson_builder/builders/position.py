def position(lon: float, lat: float, alt: float | None = None) -> list[float]:
    """Returns a position array (RFC 7946 section 3.1.1).

    Longitude and latitude are in decimal degrees, altitude in meters above the
    WGS84 ellipsoid. Ranges are not checked.
    """
    if alt is None:
        return [float(lon), float(lat)]
    return [float(lon), float(lat), float(alt)]

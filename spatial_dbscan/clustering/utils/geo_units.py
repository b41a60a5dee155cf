# spatial_dbscan/clustering/utils/geo_units.py

import math

EARTH_RADIUS_M = 6371000.0  # mean Earth radius in meters

# Returned by degree conversions when a search window wraps around a pole or
# the antimeridian; wider than any longitude/latitude span.
FULL_CIRCLE_DEG = 360.0


def haversine_term(lat1, lng1, lat2, lng2):
    """
    The 'a' term of the haversine formula for two points given in degrees.

    a = sin^2(dLat/2) + cos(lat1) * cos(lat2) * sin^2(dLng/2)

    It grows monotonically with the great-circle distance and skips the
    atan2/sqrt needed to turn it into meters.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    sin_dlat = math.sin(math.radians(lat2 - lat1) / 2)
    sin_dlng = math.sin(math.radians(lng2 - lng1) / 2)
    return sin_dlat * sin_dlat + math.cos(phi1) * math.cos(phi2) * sin_dlng * sin_dlng


def haversine_distance(lat1, lng1, lat2, lng2):
    """Great-circle distance in meters between two points given in degrees."""
    a = haversine_term(lat1, lng1, lat2, lng2)
    # Rounding can push a marginally outside [0, 1] for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def haversine_threshold(radius_m):
    """
    Converts a radius in meters into the haversine 'a' value of that distance.

    Radii at or beyond half the Earth's circumference map to 1.0, which every
    pair of points satisfies.
    """
    c = min(radius_m / EARTH_RADIUS_M, math.pi)
    s = math.sin(c / 2)
    return s * s


def meters_to_lat_degrees(radius_m):
    """Degrees of latitude spanned by radius_m (constant along a meridian)."""
    return math.degrees(radius_m / EARTH_RADIUS_M)


def meters_to_lng_degrees(radius_m, lat, lng):
    """
    Degrees of longitude guaranteed to cover radius_m around (lat, lng).

    The scale factor is taken at the most poleward latitude the radius can
    reach, so the window never underestimates the reach. Windows touching a
    pole or crossing the antimeridian return FULL_CIRCLE_DEG.

    Args:
        radius_m (float): Search radius in meters.
        lat (float): Latitude of the search center in degrees.
        lng (float): Longitude of the search center in degrees.

    Returns:
        float: Half-width of the longitude window in degrees.
    """
    dlat = meters_to_lat_degrees(radius_m)
    extreme_lat = abs(lat) + dlat
    if extreme_lat >= 90.0:
        return FULL_CIRCLE_DEG

    cos_lat = math.cos(math.radians(extreme_lat))
    if cos_lat <= 0.0:
        return FULL_CIRCLE_DEG

    # sin(dLng/2) * cos(extreme_lat) <= sin(c/2) for every point within the radius
    ratio = math.sin(min(radius_m / EARTH_RADIUS_M, math.pi) / 2) / cos_lat
    if ratio >= 1.0:
        return FULL_CIRCLE_DEG

    dlng = math.degrees(2 * math.asin(ratio))
    if dlng >= 180.0 or lng - dlng < -180.0 or lng + dlng > 180.0:
        return FULL_CIRCLE_DEG
    return dlng


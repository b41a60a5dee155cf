# spatial_dbscan/clustering/models/lat_lng_point.py

from ..errors import CoordinateIndexError
from ..utils.geo_units import (
    haversine_term,
    haversine_distance,
    haversine_threshold,
    meters_to_lat_degrees,
    meters_to_lng_degrees,
)
from .identifiers import PointId
from .spatial_point import SpatialPoint

LNG_AXIS = 0
LAT_AXIS = 1


class LatLngPoint(SpatialPoint):
    """
    A geographic point (degrees) clustered with the haversine distance in meters.

    Axis 0 is longitude and axis 1 is latitude. The comparison value is the
    haversine 'a' term, which is monotonic in the great-circle distance.
    """
    __slots__ = ('_id', 'lat', 'lng', 'info')

    def __init__(self, point_id, lat, lng, info=None):
        if not isinstance(point_id, PointId):
            point_id = PointId(int(point_id))
        self._id = point_id
        self.lat = float(lat)
        self.lng = float(lng)
        self.info = info

    def point_id(self):
        return self._id

    def distance_to(self, other):
        if not isinstance(other, LatLngPoint):
            raise TypeError("Cannot calculate distance to non-LatLngPoint")
        return haversine_distance(self.lat, self.lng, other.lat, other.lng)

    def dimension(self):
        return 2

    def coordinate_at(self, axis):
        if axis == LNG_AXIS:
            return self.lng
        if axis == LAT_AXIS:
            return self.lat
        raise CoordinateIndexError(f"Invalid dimension: {axis}")

    def comparison_value(self, other):
        return haversine_term(self.lat, self.lng, other.lat, other.lng)

    def threshold_for(self, radius):
        return haversine_threshold(radius)

    def axis_radius(self, radius, axis):
        if axis == LAT_AXIS:
            return meters_to_lat_degrees(radius)
        if axis == LNG_AXIS:
            return meters_to_lng_degrees(radius, self.lat, self.lng)
        raise CoordinateIndexError(f"Invalid dimension: {axis}")

    def __eq__(self, other):
        if not isinstance(other, LatLngPoint):
            return NotImplemented
        return self._id == other._id and self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self._id, self.lat, self.lng))

    def __repr__(self):
        return f"LatLngPoint(id: {self._id.value}, lat: {self.lat}, lng: {self.lng})"

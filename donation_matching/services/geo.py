# donation_matching/services/geo.py
from math import radians, sin, cos, atan2

from donation_matching.schemas import GeoPoint

EARTH_RADIUS_KM = 6371.0

def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """
    Great-circle distance between two points (haversine), in km.
    """
    dlat = radians(b.latitude - a.latitude)
    dlon = radians(b.longitude - a.longitude)
    s = sin(dlat/2)**2 + cos(radians(a.latitude)) * cos(radians(b.latitude)) * sin(dlon/2)**2
    return 2 * EARTH_RADIUS_KM * atan2(s**0.5, (1 - s)**0.5)

# donation_matching/services/routing.py
from typing import List, Tuple

from donation_matching.schemas import GeoPoint
from donation_matching.services.geo import distance_km

AVG_SPEED_KMH = 25.0

def optimize_route(points: List[GeoPoint], start: GeoPoint) -> List[GeoPoint]:
    """
    Nearest-neighbour visiting order beginning at `start`.

    Returns [start, *points in visiting order]; points equal to `start` are not
    visited again. Ties go to the earliest point in the input.
    """
    un = [p for p in points if p != start]
    cur = start
    out = [start]
    while un:
        # min() returns the first minimal element
        nxt = min(un, key=lambda p: distance_km(cur, p))
        out.append(nxt)
        cur = nxt
        un.remove(nxt)
    return out

def route_summary(route: List[GeoPoint], avg_speed_kmh: float = AVG_SPEED_KMH) -> Tuple[float, float]:
    """
    Straight-line length (km) of a route and its ETA (minutes) at `avg_speed_kmh`.
    """
    if len(route) < 2:
        return 0.0, 0.0
    dist = 0.0
    for a, b in zip(route, route[1:]):
        dist += distance_km(a, b)
    duration_min = (dist / avg_speed_kmh) * 60.0
    return round(dist, 3), round(duration_min, 1)

""" Planar calculations over lat/lon pairs """

__all__ = ['centroid_lat_lon']

from typing import Iterable, Tuple

from localenu.utils.logging import warn_once


def centroid_lat_lon(points: Iterable[Tuple[float, float]]) -> Tuple[float, float]:
    """
    Average a collection of (latitude, longitude) pairs, in degrees.

    This is a simple planar mean, suitable for picking a local ENU origin over a small
    area. It is not a geodesic centroid: results are meaningless near the poles, and
    points straddling the antimeridian average towards the prime meridian (a warning is
    logged when the longitudes span more than 180 degrees).

    Args:
        points:
            An iterable of (latitude, longitude) pairs

    Returns:
        (mean latitude, mean longitude)
    """
    count = 0
    sum_lat = sum_lon = 0.0
    min_lon = max_lon = None
    for lat, lon in points:
        count += 1
        sum_lat += lat
        sum_lon += lon
        min_lon = lon if min_lon is None else min(min_lon, lon)
        max_lon = lon if max_lon is None else max(max_lon, lon)

    if not count:
        raise ValueError('Cannot compute the centroid of an empty set of points')

    if max_lon - min_lon > 180:
        warn_once(
            'Points span more than 180 degrees of longitude; the planar centroid does '
            'not account for the antimeridian'
        )

    return sum_lat / count, sum_lon / count

"""
Value types for the three supported coordinate frames
"""

__all__ = ['EcefCoordinate', 'EnuCoordinate', 'GeodeticCoordinate']

from typing import NamedTuple


class GeodeticCoordinate(NamedTuple):
    """
    A position referenced to the ellipsoid. Latitude and longitude are in degrees, height
    is in meters above the ellipsoid surface.

    Values are not range-checked; a latitude beyond +/-90 still yields a (meaningless)
    projection rather than an error.
    """
    latitude: float
    longitude: float
    height: float = 0.0


class EcefCoordinate(NamedTuple):
    """Earth-Centered-Earth-Fixed cartesian position, in meters"""
    x: float
    y: float
    z: float


class EnuCoordinate(NamedTuple):
    """
    East-North-Up position in meters, relative to whichever reference origin was used to
    compute it. The origin is not stored; callers must keep track of it.
    """
    east: float
    north: float
    up: float

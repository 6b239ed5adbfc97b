"""
Conversions between geodetic, Earth-Centered-Earth-Fixed (ECEF) and local
East-North-Up (ENU) coordinates.

Angles are accepted and returned in degrees, lengths in meters. Every function takes an
optional `ellipsoid` keyword (default WGS84) and is a pure function of its inputs; out of
range or non-finite values are not rejected and propagate arithmetically to the result.
"""

__all__ = [
    'ecef_to_enu', 'ecef_to_geodetic', 'enu_to_ecef', 'enu_to_llh',
    'geodetic_to_ecef', 'llh_to_enu', 'rotation_ecef_to_enu', 'rotation_enu_to_ecef',
]

import math

import numpy as np

from localenu._const import BOWRING_MAX_ITERATIONS, BOWRING_TOLERANCE_METERS
from localenu.coordinates import EcefCoordinate, EnuCoordinate, GeodeticCoordinate
from localenu.ellipsoid import WGS84, Ellipsoid
from localenu.utils.logging import warn_once


def _check_ellipsoid(ellipsoid: Ellipsoid) -> Ellipsoid:
    if not isinstance(ellipsoid, Ellipsoid):
        raise TypeError(f'Expected an Ellipsoid, not {type(ellipsoid)}')

    return ellipsoid


def geodetic_to_ecef(
    lat_deg: float,
    lon_deg: float,
    height: float,
    ellipsoid: Ellipsoid = WGS84,
) -> EcefCoordinate:
    """
    Project a geodetic position onto ECEF cartesian axes.

        X = (N + h) * cos(lat) * cos(lon)
        Y = (N + h) * cos(lat) * sin(lon)
        Z = (N * (1 - e^2) + h) * sin(lat)

    where N is the prime vertical radius of curvature at the latitude.

    Args:
        lat_deg:
            The geodetic latitude, in degrees

        lon_deg:
            The longitude, in degrees

        height:
            The height above the ellipsoid, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        EcefCoordinate
    """
    ellipsoid = _check_ellipsoid(ellipsoid)
    lat, lon = math.radians(lat_deg), math.radians(lon_deg)

    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    n = ellipsoid.prime_vertical_radius(lat)

    return EcefCoordinate(
        (n + height) * cos_lat * math.cos(lon),
        (n + height) * cos_lat * math.sin(lon),
        (n * (1 - ellipsoid.eccentricity_squared) + height) * sin_lat,
    )


def ecef_to_geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodeticCoordinate:
    """
    Recover geodetic latitude, longitude and height from an ECEF position using Bowring's
    iteration on the z-offset between the position and the point where its ellipsoid
    normal crosses the polar axis.

    On the polar axis the longitude is undefined and reported as 0. The Earth's center
    is reported as (0, 0, -a).

    Args:
        x:
            ECEF x, in meters

        y:
            ECEF y, in meters

        z:
            ECEF z, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        GeodeticCoordinate
    """
    ellipsoid = _check_ellipsoid(ellipsoid)
    a, e2 = ellipsoid.semi_major_axis, ellipsoid.eccentricity_squared

    rho2 = x * x + y * y
    if rho2 == 0 and z == 0:
        return GeodeticCoordinate(0.0, 0.0, -a)

    dz = e2 * z
    for _ in range(BOWRING_MAX_ITERATIONS):
        zdz = z + dz
        sin_lat = zdz / math.sqrt(rho2 + zdz * zdz)
        n = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
        dz_prev, dz = dz, n * e2 * sin_lat
        if abs(dz - dz_prev) < BOWRING_TOLERANCE_METERS:
            break
    else:
        if math.isfinite(dz):
            warn_once(
                'ECEF to geodetic conversion did not converge within %d iterations; '
                'results may be inaccurate',
                BOWRING_MAX_ITERATIONS,
            )

    zdz = z + dz
    nh = math.sqrt(rho2 + zdz * zdz)
    n = a / math.sqrt(1 - e2 * (zdz / nh) ** 2)

    return GeodeticCoordinate(
        math.degrees(math.atan2(zdz, math.sqrt(rho2))),
        math.degrees(math.atan2(y, x)) if rho2 else 0.0,
        nh - n,
    )


def rotation_ecef_to_enu(lat0_deg: float, lon0_deg: float) -> np.ndarray:
    """
    The 3x3 rotation taking an ECEF vector into the local East-North-Up frame at a
    geodetic origin. Rows are the East, North and Up unit vectors expressed in ECEF.

    Args:
        lat0_deg:
            Latitude of the origin, in degrees

        lon0_deg:
            Longitude of the origin, in degrees

    Returns:
        np.ndarray of shape (3, 3)
    """
    lat0, lon0 = math.radians(lat0_deg), math.radians(lon0_deg)
    sin_lat, cos_lat = math.sin(lat0), math.cos(lat0)
    sin_lon, cos_lon = math.sin(lon0), math.cos(lon0)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])


def rotation_enu_to_ecef(lat0_deg: float, lon0_deg: float) -> np.ndarray:
    """Transpose (and inverse) of rotation_ecef_to_enu"""
    return rotation_ecef_to_enu(lat0_deg, lon0_deg).T


def ecef_to_enu(
    x: float,
    y: float,
    z: float,
    lat0_deg: float,
    lon0_deg: float,
    h0: float,
    ellipsoid: Ellipsoid = WGS84,
) -> EnuCoordinate:
    """
    Express an ECEF position in the East-North-Up frame anchored at a geodetic origin.

    The origin is projected to ECEF, and the vector from the origin to the position is
    rotated into the local tangent plane. The rotation is orthonormal, so the length of
    the ENU vector equals the ECEF distance between the two points.

    Args:
        x:
            ECEF x of the target, in meters

        y:
            ECEF y of the target, in meters

        z:
            ECEF z of the target, in meters

        lat0_deg:
            Latitude of the origin, in degrees

        lon0_deg:
            Longitude of the origin, in degrees

        h0:
            Height of the origin above the ellipsoid, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        EnuCoordinate
    """
    origin = geodetic_to_ecef(lat0_deg, lon0_deg, h0, ellipsoid)
    delta = np.array([x - origin.x, y - origin.y, z - origin.z])
    east, north, up = rotation_ecef_to_enu(lat0_deg, lon0_deg) @ delta
    return EnuCoordinate(float(east), float(north), float(up))


def enu_to_ecef(
    east: float,
    north: float,
    up: float,
    lat0_deg: float,
    lon0_deg: float,
    h0: float,
    ellipsoid: Ellipsoid = WGS84,
) -> EcefCoordinate:
    """
    Inverse of ecef_to_enu: place an ENU offset, relative to a geodetic origin, back into
    ECEF.

    Args:
        east:
            Offset towards local east, in meters

        north:
            Offset towards local north, in meters

        up:
            Offset along the ellipsoid normal, in meters

        lat0_deg:
            Latitude of the origin, in degrees

        lon0_deg:
            Longitude of the origin, in degrees

        h0:
            Height of the origin above the ellipsoid, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        EcefCoordinate
    """
    origin = geodetic_to_ecef(lat0_deg, lon0_deg, h0, ellipsoid)
    dx, dy, dz = rotation_enu_to_ecef(lat0_deg, lon0_deg) @ np.array([east, north, up])
    return EcefCoordinate(
        origin.x + float(dx),
        origin.y + float(dy),
        origin.z + float(dz),
    )


def llh_to_enu(
    lat_deg: float,
    lon_deg: float,
    height: float,
    lat0_deg: float,
    lon0_deg: float,
    h0: float,
    ellipsoid: Ellipsoid = WGS84,
) -> EnuCoordinate:
    """
    Convenience wrapper: geodetic position to ENU relative to a geodetic origin.

    Args:
        lat_deg:
            Latitude of the target, in degrees

        lon_deg:
            Longitude of the target, in degrees

        height:
            Height of the target above the ellipsoid, in meters

        lat0_deg:
            Latitude of the origin, in degrees

        lon0_deg:
            Longitude of the origin, in degrees

        h0:
            Height of the origin above the ellipsoid, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        EnuCoordinate
    """
    x, y, z = geodetic_to_ecef(lat_deg, lon_deg, height, ellipsoid)
    return ecef_to_enu(x, y, z, lat0_deg, lon0_deg, h0, ellipsoid)


def enu_to_llh(
    east: float,
    north: float,
    up: float,
    lat0_deg: float,
    lon0_deg: float,
    h0: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodeticCoordinate:
    """Convenience wrapper: ENU offset from a geodetic origin back to a geodetic position"""
    x, y, z = enu_to_ecef(east, north, up, lat0_deg, lon0_deg, h0, ellipsoid)
    return ecef_to_geodetic(x, y, z, ellipsoid)

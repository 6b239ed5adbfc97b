
from localenu._version import __version__  # noqa: F401
from localenu.utils.logging import LOGGER
from localenu.calc import centroid_lat_lon
from localenu.coordinates import EcefCoordinate, EnuCoordinate, GeodeticCoordinate
from localenu.ellipsoid import WGS84, Ellipsoid
from localenu.transforms import (
    ecef_to_enu, ecef_to_geodetic, enu_to_ecef, enu_to_llh,
    geodetic_to_ecef, llh_to_enu, rotation_ecef_to_enu, rotation_enu_to_ecef
)

__all__ = [
    'EcefCoordinate',
    'Ellipsoid',
    'EnuCoordinate',
    'GeodeticCoordinate',
    'WGS84',
    'centroid_lat_lon',
    'ecef_to_enu',
    'ecef_to_geodetic',
    'enu_to_ecef',
    'enu_to_llh',
    'geodetic_to_ecef',
    'llh_to_enu',
    'rotation_ecef_to_enu',
    'rotation_enu_to_ecef',
    'LOGGER',
]

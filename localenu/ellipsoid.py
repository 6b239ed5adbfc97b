"""
Reference ellipsoid model used by the geodetic projections
"""

__all__ = ['Ellipsoid', 'WGS84']

import math
from typing import Union

from localenu._const import WGS84_A, WGS84_E2


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis (meters) and its
    first eccentricity squared (dimensionless).

    Instances are immutable; two ellipsoids with the same constants are equal.
    """

    __slots__ = ('_a', '_e2')

    def __init__(
        self,
        semi_major_axis: Union[float, int],
        eccentricity_squared: Union[float, int],
    ):
        a, e2 = float(semi_major_axis), float(eccentricity_squared)
        if not (math.isfinite(a) and a > 0):
            raise ValueError(f'Semi-major axis must be a positive finite number, got {a!r}')

        if not 0 <= e2 < 1:
            raise ValueError(f'Eccentricity squared must lie in [0, 1), got {e2!r}')

        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_e2', e2)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        # Rebuild through __init__; pickle and copy cannot restore slots via setattr
        return self.__class__, (self._a, self._e2)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self._a == other._a and self._e2 == other._e2

    def __hash__(self):
        return hash((self._a, self._e2))

    def __repr__(self):
        return f'<Ellipsoid(a={self._a}, e2={self._e2})>'

    @classmethod
    def from_flattening(cls, semi_major_axis: float, flattening: float) -> 'Ellipsoid':
        """
        Create an Ellipsoid from its semi-major axis and flattening, the form in which
        most geodetic datums publish their parameters.

        Args:
            semi_major_axis:
                The semi-major (equatorial) axis, in meters

            flattening:
                The flattening, f = (a - b) / a

        Returns:
            Ellipsoid
        """
        return cls(semi_major_axis, flattening * (2 - flattening))

    @property
    def semi_major_axis(self) -> float:
        return self._a

    @property
    def eccentricity_squared(self) -> float:
        return self._e2

    @property
    def semi_minor_axis(self) -> float:
        """The semi-minor (polar) axis, in meters"""
        return self._a * math.sqrt(1 - self._e2)

    @property
    def flattening(self) -> float:
        return 1 - math.sqrt(1 - self._e2)

    @property
    def second_eccentricity_squared(self) -> float:
        return self._e2 / (1 - self._e2)

    def prime_vertical_radius(self, latitude_radians: float) -> float:
        """
        The prime vertical radius of curvature N at a geodetic latitude, i.e. the distance
        along the ellipsoid normal from the surface to the polar axis.

            N = a / sqrt(1 - e^2 * sin^2(lat))

        Args:
            latitude_radians:
                The geodetic latitude, in radians

        Returns:
            (float) N, in meters
        """
        sin_lat = math.sin(latitude_radians)
        return self._a / math.sqrt(1 - self._e2 * sin_lat * sin_lat)


WGS84 = Ellipsoid(WGS84_A, WGS84_E2)

"""
Constants declarations for localenu
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_E2 = 6.6943799901413165e-3  # First eccentricity squared
WGS84_F = 1 / 298.257223563  # Flattening

# Bowring iteration controls for ECEF -> geodetic
BOWRING_TOLERANCE_METERS = 1e-9
BOWRING_MAX_ITERATIONS = 10

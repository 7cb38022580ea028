"""
Constants declarations for geocalc
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.31424518  # Semi-minor axis (meters)

# Linear eccentricity (meters)
WGS84_E = math.sqrt(WGS84_A ** 2 - WGS84_B ** 2)

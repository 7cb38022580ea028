"""
Point transformations between geodetic, ECEF, ENU and AER representations on the
WGS84 ellipsoid.

Angles cross every function boundary in degrees and distances in meters; radians
are used internally only.
"""

__all__ = [
    'aer2ecef', 'aer2enu', 'aer2geodetic',
    'ecef2geodetic', 'enu2uvw', 'geodetic2ecef',
]

import math

from geocalc._const import WGS84_A, WGS84_B, WGS84_E
from geocalc.coordinates import Ecef, Enu, Geodetic, Uvw
from geocalc.utils.logging import warn_once


def geodetic2ecef(lat0: float, lon0: float, h0: float) -> Ecef:
    """
    Convert a geodetic position to Earth-Centered Earth-Fixed coordinates.

    Args:
        lat0:
            Geodetic latitude, in degrees

        lon0:
            Geodetic longitude, in degrees

        h0:
            Altitude above the ellipsoid, in meters

    Returns:
        Ecef
    """
    lat = math.radians(lat0)
    lon = math.radians(lon0)

    # Radius of curvature of the prime vertical section
    N = WGS84_A ** 2 / math.sqrt(
        WGS84_A ** 2 * math.cos(lat) ** 2 + WGS84_B ** 2 * math.sin(lat) ** 2
    )

    return Ecef(
        (N + h0) * math.cos(lat) * math.cos(lon),
        (N + h0) * math.cos(lat) * math.sin(lon),
        (N * (WGS84_B / WGS84_A) ** 2 + h0) * math.sin(lat),
    )


def aer2enu(az: float, el: float, srange: float) -> Enu:
    """
    Convert azimuth, elevation and slant range to a target into East-North-Up offsets
    from the observer.

    Args:
        az:
            Azimuth, in degrees clockwise from north

        el:
            Elevation above the horizon, in degrees

        srange:
            Slant range, in meters. Not validated; a negative range points the
            vector the opposite way.

    Returns:
        Enu
    """
    az_rad = math.radians(az)
    el_rad = math.radians(el)
    r = srange * math.cos(el_rad)

    return Enu(r * math.sin(az_rad), r * math.cos(az_rad), srange * math.sin(el_rad))


def enu2uvw(east: float, north: float, up: float, lat0: float, lon0: float) -> Uvw:
    """
    Rotate an East-North-Up offset into axes parallel to ECEF. The result is still an
    offset; it is not translated to the observer's position.

    Args:
        east, north, up:
            The offset from the observer, in meters

        lat0:
            The observer's geodetic latitude, in degrees

        lon0:
            The observer's geodetic longitude, in degrees

    Returns:
        Uvw
    """
    lat = math.radians(lat0)
    lon = math.radians(lon0)

    t = math.cos(lat) * up - math.sin(lat) * north
    w = math.sin(lat) * up + math.cos(lat) * north
    u = math.cos(lon) * t - math.sin(lon) * east
    v = math.sin(lon) * t + math.cos(lon) * east

    return Uvw(u, v, w)


def aer2ecef(
    az: float,
    el: float,
    srange: float,
    lat0: float,
    lon0: float,
    h0: float,
) -> Ecef:
    """
    Convert a target's azimuth, elevation and slant range from an observer into an
    absolute ECEF position.

    Args:
        az:
            Azimuth to the target, in degrees clockwise from north

        el:
            Elevation to the target, in degrees above the horizon

        srange:
            Slant range to the target, in meters

        lat0, lon0:
            The observer's geodetic latitude and longitude, in degrees

        h0:
            The observer's altitude above the ellipsoid, in meters

    Returns:
        Ecef
    """
    origin = geodetic2ecef(lat0, lon0, h0)
    enu = aer2enu(az, el, srange)
    uvw = enu2uvw(enu.east, enu.north, enu.up, lat0, lon0)

    return origin + uvw


def ecef2geodetic(x: float, y: float, z: float) -> Geodetic:
    """
    Convert an ECEF position to geodetic latitude, longitude and altitude using
    a direct (non-iterative) solution.

    The reduced latitude is estimated on the confocal ellipsoid passing through the
    point, then refined with exactly one correction step. Points on the polar axis,
    and points on the equatorial plane within the focal circle (where the confocal
    ellipsoid degenerates), take a reduced latitude of +/-90 degrees according to
    the sign of z. Points inside the ellipsoid report a negative altitude.

    Inputs large enough to overflow produce inf/nan components rather than raising.

    The earth's center (0, 0, 0) has no geodetic position. A result is still
    returned for it, but it carries no meaning and a warning is logged.

    References:
        Vermeille, H. "Direct transformation from geocentric coordinates to
        geodetic coordinates." Journal of Geodesy 76 (2002).

        You, R.-J. "Transformation of Cartesian to Geodetic Coordinates without
        Iterations." Journal of Surveying Engineering 126 (2000).

    Args:
        x, y, z:
            The ECEF position, in meters

    Returns:
        Geodetic
    """
    if x == 0 and y == 0 and z == 0:
        warn_once(
            'The ECEF origin has no defined geodetic position; the returned '
            'coordinates are meaningless. (this warning will not repeat)'
        )

    r = math.sqrt(x * x + y * y + z * z)
    E2 = WGS84_E * WGS84_E

    # eqn. 4a
    u = math.sqrt(
        0.5 * (r * r - E2)
        + 0.5 * math.sqrt((r * r - E2) * (r * r - E2) + 4 * E2 * (z * z))
    )

    Q = math.hypot(x, y)
    huE = math.hypot(u, WGS84_E)

    # eqn. 4b
    if u == 0 or Q == 0:
        # On the polar axis, or on the equatorial plane inside the focal circle
        beta = math.pi / 2 if z >= 0 else -math.pi / 2
    else:
        beta = math.atan(huE / u * z / Q)

    # eqn. 13, applied once
    eps = (
        ((WGS84_B * u - WGS84_A * huE + E2) * math.sin(beta))
        / (WGS84_A * huE / math.cos(beta) - E2 * math.cos(beta))
    )
    beta += eps

    lat = math.atan(WGS84_A / WGS84_B * math.tan(beta))
    lon = math.atan2(y, x)

    # eqn. 7
    alt = math.hypot(z - WGS84_B * math.sin(beta), Q - WGS84_A * math.cos(beta))

    # Semi-major axis under both x and y: WGS84 is biaxial, so this is the
    # true interior test
    a2, b2 = WGS84_A * WGS84_A, WGS84_B * WGS84_B
    if x * x / a2 + y * y / a2 + z * z / b2 < 1:
        alt = -alt

    return Geodetic(math.degrees(lat), math.degrees(lon), alt)


def aer2geodetic(
    az: float,
    el: float,
    srange: float,
    lat0: float,
    lon0: float,
    h0: float,
) -> Geodetic:
    """
    Convert a target's azimuth, elevation and slant range from an observer into an
    absolute geodetic position.

    Args:
        az:
            Azimuth to the target, in degrees clockwise from north

        el:
            Elevation to the target, in degrees above the horizon

        srange:
            Slant range to the target, in meters

        lat0, lon0:
            The observer's geodetic latitude and longitude, in degrees

        h0:
            The observer's altitude above the ellipsoid, in meters

    Returns:
        Geodetic
    """
    ecef = aer2ecef(az, el, srange, lat0, lon0, h0)
    return ecef2geodetic(ecef.x, ecef.y, ecef.z)

"""
Representations of a position or offset in each of the supported reference frames
"""

__all__ = ['Ecef', 'Enu', 'Geodetic', 'Uvw']

import numpy as np

from geocalc._base import Point3DBase


class Geodetic(Point3DBase):
    """
    A geodetic position on the WGS84 ellipsoid: latitude and longitude in degrees,
    altitude above the ellipsoid in meters.
    """

    __slots__ = ()
    _fields = ('latitude', 'longitude', 'altitude')

    @property
    def latitude(self) -> float:
        return self._values[0]

    @property
    def longitude(self) -> float:
        return self._values[1]

    @property
    def altitude(self) -> float:
        return self._values[2]

    def to_ecef(self) -> 'Ecef':
        """Convert this position to Earth-Centered Earth-Fixed coordinates"""
        from geocalc.transforms import geodetic2ecef  # pylint: disable=import-outside-toplevel
        return geodetic2ecef(*self._values)


class Ecef(Point3DBase):
    """An absolute Earth-Centered Earth-Fixed position, in meters"""

    __slots__ = ()
    _fields = ('x', 'y', 'z')

    def __add__(self, other):
        # Only an ECEF-aligned offset can translate an ECEF position
        if not isinstance(other, Uvw):
            return NotImplemented

        return Ecef(
            self.x + other.u,
            self.y + other.v,
            self.z + other.w,
        )

    @property
    def x(self) -> float:
        return self._values[0]

    @property
    def y(self) -> float:
        return self._values[1]

    @property
    def z(self) -> float:
        return self._values[2]

    def to_geodetic(self) -> Geodetic:
        """Convert this position to geodetic latitude, longitude and altitude"""
        from geocalc.transforms import ecef2geodetic  # pylint: disable=import-outside-toplevel
        return ecef2geodetic(*self._values)


class Enu(Point3DBase):
    """A local East-North-Up offset from an observer, in meters"""

    __slots__ = ()
    _fields = ('east', 'north', 'up')

    @property
    def east(self) -> float:
        return self._values[0]

    @property
    def north(self) -> float:
        return self._values[1]

    @property
    def up(self) -> float:
        return self._values[2]

    @property
    def magnitude(self) -> float:
        """Length of the offset vector, in meters"""
        return float(np.linalg.norm(self.to_array()))

    def to_uvw(self, lat0: float, lon0: float) -> 'Uvw':
        """
        Rotate this offset into axes parallel to ECEF.

        Args:
            lat0:
                The observer's geodetic latitude, in degrees

            lon0:
                The observer's geodetic longitude, in degrees

        Returns:
            Uvw
        """
        from geocalc.transforms import enu2uvw  # pylint: disable=import-outside-toplevel
        return enu2uvw(*self._values, lat0, lon0)


class Uvw(Point3DBase):
    """
    An offset expressed in axes parallel to ECEF but not anchored to the earth's
    center; adding it to an Ecef position yields another Ecef position.
    """

    __slots__ = ()
    _fields = ('u', 'v', 'w')

    @property
    def u(self) -> float:
        return self._values[0]

    @property
    def v(self) -> float:
        return self._values[1]

    @property
    def w(self) -> float:
        return self._values[2]

    @property
    def magnitude(self) -> float:
        """Length of the offset vector, in meters"""
        return float(np.linalg.norm(self.to_array()))

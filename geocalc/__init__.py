
from geocalc._version import __version__  # noqa: F401
from geocalc.utils.logging import LOGGER
from geocalc.coordinates import Ecef, Enu, Geodetic, Uvw
from geocalc.transforms import (
    aer2ecef, aer2enu, aer2geodetic, ecef2geodetic, enu2uvw, geodetic2ecef
)

__all__ = [
    'Ecef',
    'Enu',
    'Geodetic',
    'Uvw',
    'aer2ecef',
    'aer2enu',
    'aer2geodetic',
    'ecef2geodetic',
    'enu2uvw',
    'geodetic2ecef',
    'LOGGER',
]

import math

import numpy as np
import pytest
from pytest import approx

from geocalc import Ecef, Enu, Geodetic, Uvw
from geocalc._const import WGS84_A, WGS84_B
from geocalc.transforms import *
from tests.functions import assert_points_equal


def test_geodetic2ecef():
    expected = Ecef(4414779.404204623, 2892253.247069592, 3569485.1750017917)
    actual = geodetic2ecef(34.25, 33.23, 146.304)
    assert_points_equal(actual, expected)

    # Equator / prime meridian lands on the semi-major axis
    assert_points_equal(geodetic2ecef(0., 0., 0.), Ecef(WGS84_A, 0., 0.))

    # Poles collapse onto the z axis
    actual = geodetic2ecef(90., 0., 100.)
    assert actual.x == approx(0., abs=1e-6)
    assert actual.y == approx(0., abs=1e-6)
    assert actual.z == approx(WGS84_B + 100., abs=1e-6)

    actual = geodetic2ecef(-90., 45., 0.)
    assert actual.z == approx(-WGS84_B, abs=1e-6)


def test_aer2enu():
    assert_points_equal(aer2enu(270, 0, 91440), Enu(-91440., 0., 0.))
    assert_points_equal(aer2enu(0, 0, 1000), Enu(0., 1000., 0.))
    assert_points_equal(aer2enu(90, 90, 1000), Enu(0., 0., 1000.))

    # Range is not validated
    assert_points_equal(aer2enu(90, 0, -1000), Enu(-1000., 0., 0.))


def test_enu2uvw():
    expected = Uvw(50109.23678568162, -76487.5021736, 0.0)
    actual = enu2uvw(-91440, 0, 0, 34.25, 33.23)
    assert_points_equal(actual, expected)

    # At lat/lon 0, up points along x and east along y
    assert_points_equal(enu2uvw(0., 0., 10., 0., 0.), Uvw(10., 0., 0.))
    assert_points_equal(enu2uvw(10., 0., 0., 0., 0.), Uvw(0., 10., 0.))
    assert_points_equal(enu2uvw(0., 10., 0., 0., 0.), Uvw(0., 0., 10.))


@pytest.mark.parametrize('east, north, up, lat0, lon0', [
    (-91440., 0., 0., 34.25, 33.23),
    (1234.5, -678.9, 42., -45., 170.),
    (0., 0., 1., 89.999, -179.9),
    (1e6, 1e6, -1e6, -12.3, 0.),
])
def test_enu2uvw_preserves_magnitude(east, north, up, lat0, lon0):
    enu = Enu(east, north, up)
    uvw = enu2uvw(east, north, up, lat0, lon0)
    assert uvw.magnitude == approx(enu.magnitude, rel=1e-12)
    assert np.linalg.norm(uvw.to_array()) == approx(math.sqrt(east ** 2 + north ** 2 + up ** 2))


def test_aer2ecef():
    expected = Ecef(4464888.640990304, 2815765.744895992, 3569485.1750017917)
    actual = aer2ecef(270, 0, 91440, 34.25, 33.23, 146.304)
    assert_points_equal(actual, expected)

    # Zero range is the observer's own position
    assert aer2ecef(12., 34., 0., 34.25, 33.23, 146.304) == geodetic2ecef(34.25, 33.23, 146.304)

    # Straight up from the equator moves along x only
    assert_points_equal(aer2ecef(0., 90., 1000., 0., 0., 0.), Ecef(WGS84_A + 1000., 0., 0.))


def test_ecef2geodetic():
    expected = Geodetic(34.24598189, 32.23743112, 801.02382184)
    actual = ecef2geodetic(4464888.640990304, 2815765.744895992, 3569485.1750017917)
    assert_points_equal(actual, expected)

    assert_points_equal(ecef2geodetic(WGS84_A, 0., 0.), Geodetic(0., 0., 0.))
    assert_points_equal(ecef2geodetic(0., WGS84_A + 500., 0.), Geodetic(0., 90., 500.))
    assert_points_equal(ecef2geodetic(-WGS84_A, 0., 0.), Geodetic(0., 180., 0.))


def test_ecef2geodetic_inside_ellipsoid():
    actual = ecef2geodetic(WGS84_A - 1000., 0., 0.)
    assert_points_equal(actual, Geodetic(0., 0., -1000.))

    actual = ecef2geodetic(0., 0., -(WGS84_B - 250.))
    assert actual.latitude == approx(-90.)
    assert actual.altitude == approx(-250., abs=1e-6)


@pytest.mark.parametrize('z, latitude', [
    (WGS84_B + 1000., 90.),
    (WGS84_B, 90.),
    (1., 90.),
    (-1., -90.),
    (-WGS84_B, -90.),
    (-(WGS84_B + 1000.), -90.),
])
def test_ecef2geodetic_polar_axis(z, latitude):
    actual = ecef2geodetic(0., 0., z)
    assert actual.latitude == approx(latitude, abs=1e-7)
    assert not any(math.isnan(x) for x in actual)


def test_ecef2geodetic_focal_circle():
    # On the equatorial plane, closer to the axis than the linear eccentricity,
    # the confocal ellipsoid collapses (u == 0) even though Q != 0
    actual = ecef2geodetic(1000., 0., 0.)
    assert actual.latitude == approx(90., abs=1e-7)
    assert actual.longitude == approx(0., abs=1e-7)
    assert actual.altitude < 0
    assert not any(math.isnan(x) for x in actual)


@pytest.mark.parametrize('x, y, z', [
    (1e200, 0., 0.),
    (0., -1e200, 0.),
    (0., 0., 1e200),
    (1e300, 1e300, -1e300),
])
def test_ecef2geodetic_large_values(x, y, z):
    # Overflow propagates as inf/nan instead of raising
    actual = ecef2geodetic(x, y, z)
    assert isinstance(actual, Geodetic)


def test_ecef2geodetic_pole_altitude():
    assert ecef2geodetic(0., 0., WGS84_B + 1000.).altitude == approx(1000., abs=1e-6)
    assert ecef2geodetic(0., 0., -(WGS84_B + 1000.)).altitude == approx(1000., abs=1e-6)


def test_ecef2geodetic_origin(caplog):
    # Undefined; must not raise, and must say so
    actual = ecef2geodetic(0., 0., 0.)
    assert isinstance(actual, Geodetic)
    assert 'ECEF origin' in caplog.text


@pytest.mark.parametrize('lat, lon, h', [
    (34.25, 33.23, 146.304),
    (0., 0., 0.),
    (0., 0., -1000.),
    (45., -120., 10_000.),
    (-33.8688, 151.2093, 58.),
    (89.9, 12., 0.),
    (-89.9, -170., 2500.),
    (60., 179.9, -500.),
    (-12.5, -45., 1_000.),
])
def test_geodetic_roundtrip(lat, lon, h):
    actual = ecef2geodetic(*geodetic2ecef(lat, lon, h))
    assert_points_equal(actual, Geodetic(lat, lon, h))


def test_aer2geodetic():
    expected = Geodetic(34.24598189, 32.23743112, 801.02382184)
    actual = aer2geodetic(270, 0, 91440, 34.25, 33.23, 146.304)
    assert_points_equal(actual, expected)


@pytest.mark.parametrize('az, el, srange, lat0, lon0, h0', [
    (270., 0., 91440., 34.25, 33.23, 146.304),
    (45., 10., 250_000., -20., 100., 0.),
    (180., -5., 1_000., 70., -30., 3000.),
])
def test_aer2geodetic_composition(az, el, srange, lat0, lon0, h0):
    ecef = aer2ecef(az, el, srange, lat0, lon0, h0)
    assert aer2geodetic(az, el, srange, lat0, lon0, h0) == ecef2geodetic(*ecef)

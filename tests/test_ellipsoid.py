import math

import numpy as np
import pytest
from pytest import approx

from geoprojections.ellipsoid import Ellipsoid
from tests.functions import dms


WGS84 = Ellipsoid(6378137.0, 298.257223563, name='WGS 84')


def test_ellipsoid_init():
    assert WGS84.a == 6378137.0
    assert WGS84.f == approx(1 / 298.257223563)
    assert WGS84.b == approx(6356752.314245, abs=1e-6)
    assert WGS84.e_squared == approx(0.00669437999014, abs=1e-14)
    assert WGS84.e == approx(0.0818191908426, abs=1e-12)
    assert WGS84.second_eccentricity == approx(0.0820944379497, abs=1e-12)
    assert WGS84.inverse_flattening == 298.257223563

    # Numeric strings are coerced
    assert Ellipsoid('6378137', '298.257223563') == WGS84

    # Sphere
    sphere = Ellipsoid(6371000.)
    assert sphere.f == 0.
    assert sphere.e == 0.
    assert sphere.b == sphere.a
    assert sphere.authalic_radius == 6371000.

    with pytest.raises(ValueError):
        Ellipsoid(0., 298.257223563)

    with pytest.raises(ValueError):
        Ellipsoid(-1., 298.257223563)

    with pytest.raises(ValueError):
        Ellipsoid(6378137., 1.)

    with pytest.raises(ValueError):
        Ellipsoid(math.nan, 298.257223563)

    with pytest.raises(ValueError):
        Ellipsoid('not a number', 298.257223563)


def test_ellipsoid_alternate_constructors():
    assert Ellipsoid.from_a_f_inv(6378137.0, 298.257223563) == WGS84

    clarke_1866 = Ellipsoid.from_a_b(6378206.4, 6356583.8, name='Clarke 1866')
    assert clarke_1866.inverse_flattening == approx(294.9786982, abs=1e-6)
    assert clarke_1866.b == approx(6356583.8, abs=1e-6)
    assert clarke_1866.name == 'Clarke 1866'

    assert Ellipsoid.from_a_b(6371000., 6371000.).inverse_flattening == math.inf

    with pytest.raises(ValueError):
        Ellipsoid.from_a_b(6371000., 6371001.)

    with pytest.raises(ValueError):
        Ellipsoid.from_a_b(6371000., 0.)


def test_ellipsoid_dunder():
    assert WGS84 == Ellipsoid(6378137.0, 298.257223563)
    assert WGS84 != Ellipsoid(6378137.0, 298.257222101)
    assert WGS84 != 'WGS 84'

    # Name is descriptive only
    assert hash(WGS84) == hash(Ellipsoid(6378137.0, 298.257223563, name='other'))
    assert len({WGS84, Ellipsoid(6378137.0, 298.257223563)}) == 1

    assert repr(WGS84) == '<Ellipsoid WGS 84 a=6378137.0 1/f=298.257223563>'
    assert repr(Ellipsoid(6371000.)) == '<Ellipsoid a=6371000.0 1/f=inf>'


def test_radii_of_curvature():
    # At the equator
    assert WGS84.nu(0.) == approx(WGS84.a)
    assert WGS84.rho(0.) == approx(WGS84.a * (1 - WGS84.e_squared))

    # At the pole, both equal a^2 / b
    assert WGS84.nu(math.pi / 2) == approx(WGS84.a ** 2 / WGS84.b)
    assert WGS84.rho(math.pi / 2) == approx(WGS84.a ** 2 / WGS84.b)

    lat = math.radians(52.)
    assert WGS84.conformal_radius(lat) == approx(math.sqrt(WGS84.rho(lat) * WGS84.nu(lat)))

    # Arrays broadcast
    result = WGS84.nu(np.radians([0., 45., 90.]))
    assert result.shape == (3,)

    assert WGS84.authalic_radius == approx(6371007.181, abs=1e-3)


def test_deg_to_geocentric():
    x, y, z = WGS84.deg_to_geocentric(10.183034, 54.327389, 53.7)
    assert x == approx(3668985.10, abs=0.1)
    assert y == approx(659033.08, abs=0.1)
    assert z == approx(5158122.64, abs=0.1)

    x, y, z = WGS84.deg_to_geocentric(dms(2, 7, 46.38), dms(53, 48, 33.82), 73.)
    assert x == approx(3771793.968, abs=0.001)
    assert y == approx(140253.342, abs=0.001)
    assert z == approx(5124304.349, abs=0.001)

    # Height defaults to the ellipsoid surface
    x, y, z = WGS84.deg_to_geocentric(0., 0.)
    assert (x, y, z) == approx((WGS84.a, 0., 0.))

    x, y, z = WGS84.deg_to_geocentric(0., 90.)
    assert z == approx(WGS84.b)

    # Out of range latitudes are not rejected
    x, y, z = WGS84.deg_to_geocentric(0., 120.)
    assert np.isfinite(x)

    x, y, z = WGS84.rad_to_geocentric(math.pi / 2, 0.)
    assert (x, y, z) == approx((0., WGS84.a, 0.), abs=1e-6)


def test_geocentric_to_deg():
    lon, lat, height = WGS84.geocentric_to_deg(3771793.968, 140253.342, 5124304.349)
    assert lon == approx(dms(2, 7, 46.38), abs=1e-6)
    assert lat == approx(dms(53, 48, 33.82), abs=1e-6)
    assert height == approx(73.0, abs=0.01)

    lon, lat, height = WGS84.geocentric_to_rad(WGS84.a, 0., 0.)
    assert (lon, lat, height) == approx((0., 0., 0.), abs=1e-9)

    # Heights stay well conditioned at and near the poles
    lon, lat, height = WGS84.geocentric_to_deg(0., 0., WGS84.b + 100.)
    assert lat == approx(90.)
    assert height == approx(100., abs=1e-3)

    lon, lat, height = WGS84.geocentric_to_deg(0., 0., -WGS84.b - 2500.)
    assert lat == approx(-90.)
    assert height == approx(2500., abs=1e-3)

    lon, lat, height = WGS84.geocentric_to_deg(*WGS84.deg_to_geocentric(45., 89.99999, 100.))
    assert lat == approx(89.99999, abs=1e-8)
    assert height == approx(100., abs=1e-3)

    # Round trip, vectorized
    lons = np.array([-170., -45., 0., 30., 179.])
    lats = np.array([-80., -10., 0., 45., 85.])
    heights = np.array([0., 100., -50., 2500., 9000.])
    result = WGS84.geocentric_to_deg(*WGS84.deg_to_geocentric(lons, lats, heights))
    assert result[0] == approx(lons, abs=1e-8)
    assert result[1] == approx(lats, abs=1e-8)
    assert result[2] == approx(heights, abs=1e-3)

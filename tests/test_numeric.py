import logging
import math

import numpy as np
from pytest import approx

from geoprojections._numeric import *
from geoprojections.ellipsoid import Ellipsoid


GRS80 = Ellipsoid(6378137.0, 298.257222101)


def test_conformal_t_and_m():
    assert conformal_t(0., GRS80.e) == approx(1.)
    assert conformal_t(math.pi / 2, GRS80.e) == approx(0., abs=1e-15)
    assert conformal_m(0., GRS80.e_squared) == approx(1.)
    assert conformal_m(math.pi / 2, GRS80.e_squared) == approx(0., abs=1e-15)

    # Sphere reduces to the spherical forms
    lat = math.radians(40.)
    assert conformal_t(lat, 0.) == approx(math.tan(math.pi / 4 - lat / 2))
    assert conformal_m(lat, 0.) == approx(math.cos(lat))

    # Southern latitudes mirror northern ones
    assert conformal_t(-lat, GRS80.e) == approx(1 / conformal_t(lat, GRS80.e))


def test_authalic_q():
    assert authalic_q(0., GRS80.e, GRS80.e_squared) == approx(0., abs=1e-15)
    assert authalic_q(-0.5, GRS80.e, GRS80.e_squared) == approx(
        -authalic_q(0.5, GRS80.e, GRS80.e_squared)
    )
    assert authalic_q(math.pi / 2, GRS80.e, GRS80.e_squared) == approx(1.9955310, abs=1e-7)

    # Sphere
    assert authalic_q(0.5, 0., 0.) == approx(2 * math.sin(0.5))


def test_conformal_to_geodetic_latitude():
    lats = np.radians([-89., -60., -30., 0., 15., 45., 75., 89.])
    chi = np.arctan(np.sinh(isometric_latitude(lats, GRS80.e)))
    assert conformal_to_geodetic_latitude(chi, GRS80.e_squared) == approx(lats, abs=1e-10)


def test_authalic_to_geodetic_latitude():
    lats = np.radians([-89., -60., -30., 0., 15., 45., 75., 89.])
    q_pole = authalic_q(math.pi / 2, GRS80.e, GRS80.e_squared)
    beta = np.arcsin(authalic_q(lats, GRS80.e, GRS80.e_squared) / q_pole)
    assert authalic_to_geodetic_latitude(beta, GRS80.e_squared) == approx(lats, abs=1e-8)

    # Polished by Newton iteration
    q = authalic_q(lats, GRS80.e, GRS80.e_squared)
    result = latitude_from_authalic_q(
        q, authalic_to_geodetic_latitude(beta, GRS80.e_squared), GRS80.e, GRS80.e_squared
    )
    assert result == approx(lats, abs=1e-12)

    # Poles are held fixed
    result = latitude_from_authalic_q(q_pole, math.pi / 2, GRS80.e, GRS80.e_squared)
    assert result == approx(math.pi / 2)


def test_polar_authalic_gap():
    e, e_squared = GRS80.e, GRS80.e_squared
    q_pole = authalic_q(math.pi / 2, e, e_squared)

    lats = np.radians([-60., 0., 45., 80.])
    assert polar_authalic_gap(lats, e, e_squared) == approx(q_pole - authalic_q(lats, e, e_squared), abs=1e-14)
    assert polar_authalic_gap(math.pi / 2, e, e_squared) == 0.
    assert polar_authalic_gap(lats, 0., 0.) == approx(2 - 2 * np.sin(lats))

    # Keeps its precision a few centimeters from the pole
    lats = math.pi / 2 - np.array([1e-9, 1e-8, 1e-7])
    gap = polar_authalic_gap(lats, e, e_squared)
    assert gap == approx((math.pi / 2 - lats) ** 2 / (1 - e_squared), rel=1e-6)
    assert latitude_from_polar_authalic_gap(gap, e, e_squared) == approx(lats, abs=1e-15)

    lats = np.radians([-89., -30., 0., 30., 60., 89.])
    gap = polar_authalic_gap(lats, e, e_squared)
    assert latitude_from_polar_authalic_gap(gap, e, e_squared) == approx(lats, abs=1e-12)
    assert latitude_from_polar_authalic_gap(gap, 0., 0.) == approx(
        np.arcsin(1 - polar_authalic_gap(lats, e, e_squared) / 2), abs=1e-12
    )


def test_fixed_point():
    # Heron's method
    assert fixed_point(lambda x: (x + 2 / x) / 2, 1.) == approx(math.sqrt(2), abs=1e-12)

    # Vectorized
    targets = np.array([2., 9., 16.])
    result = fixed_point(lambda x: (x + targets / x) / 2, np.ones(3))
    assert result == approx(np.sqrt(targets), abs=1e-12)

    # Nan elements do not prevent convergence
    targets = np.array([2., np.nan])
    result = fixed_point(lambda x: (x + targets / x) / 2, np.ones(2))
    assert result[0] == approx(math.sqrt(2), abs=1e-12)
    assert np.isnan(result[1])


def test_fixed_point_nonconvergence(caplog):
    caplog.set_level(logging.DEBUG, logger='geoprojections')

    # x = cos(x) converges too slowly for the iteration cap
    result = fixed_point(math.cos, 1.)
    assert 'did not converge' in caplog.text
    assert result == approx(0.739085, abs=1e-2)

    caplog.clear()
    fixed_point(math.cos, 1., tolerance=0.1, max_iterations=MAX_ITERATIONS)
    assert 'did not converge' not in caplog.text


def test_unwrap():
    value = unwrap(np.where(True, 1., 2.))
    assert isinstance(value, np.float64)
    assert value == 1.

    value = unwrap(np.where([True, False], 1., 2.))
    assert value.tolist() == [1., 2.]

import math

import numpy as np
import pytest
from pytest import approx

from geoprojections import get_ellipsoid, get_projection
from geoprojections.ellipsoid import Ellipsoid
from geoprojections.mercator import *
from tests.functions import assert_points_equal, dms


def test_transverse_mercator_forward():
    bng = get_projection(27700)
    assert isinstance(bng, TransverseMercator)
    assert_points_equal(bng.deg_to_projected(0.5, 50.5), (577274.98, 69740.49), abs_tol=0.02)

    # Natural origin maps to the false origin
    assert_points_equal(bng.deg_to_projected(-2., 49.), (400000., -100000.), abs_tol=1e-6)

    utm = get_projection(32632)
    assert_points_equal(utm.deg_to_projected(9., 0.), (500000., 0.), abs_tol=1e-6)

    # Symmetric about the central meridian
    east = utm.deg_to_projected(11., 48.)
    west = utm.deg_to_projected(7., 48.)
    assert east[0] - 500000. == approx(500000. - west[0], abs=1e-6)
    assert east[1] == approx(west[1], abs=1e-6)

    # Southern hemisphere false northing
    south = get_projection(32732)
    assert_points_equal(south.deg_to_projected(9., -10.), (500000., 8894587.), abs_tol=1.)


def test_transverse_mercator_inverse():
    bng = get_projection(27700)
    assert_points_equal(bng.projected_to_deg(577274.98, 69740.49), (0.5, 50.5), abs_tol=1e-6)

    utm = get_projection(32632)
    assert_points_equal(
        utm.projected_to_deg(576935.86, 6020593.46),
        (10.183034, 54.327389),
        abs_tol=1e-6
    )
    assert_points_equal(utm.projected_to_rad(500000., 0.), (math.radians(9.), 0.), abs_tol=1e-12)


def test_transverse_mercator_sphere():
    sphere = Ellipsoid(6371000.)
    tm = TransverseMercator(sphere, lon_orig=0.)
    lon, lat = math.radians(3.), math.radians(40.)

    expected = (
        6371000. * math.atanh(math.cos(lat) * math.sin(lon)),
        6371000. * math.atan(math.tan(lat) / math.cos(lon))
    )
    assert_points_equal(tm.rad_to_projected(lon, lat), expected, abs_tol=1e-6)


def test_transverse_mercator_arrays():
    utm = get_projection(32632)
    lons = np.array([[6., 9.], [10., 12.]])
    lats = np.array([[0., 45.], [54., 70.]])

    easting, northing = utm.deg_to_projected(lons, lats)
    assert easting.shape == (2, 2)
    assert northing.shape == (2, 2)

    for i in range(2):
        for j in range(2):
            assert_points_equal(
                (easting[i, j], northing[i, j]),
                utm.deg_to_projected(lons[i, j], lats[i, j]),
                abs_tol=1e-6
            )

    result = utm.projected_to_deg(easting, northing)
    assert result[0] == approx(lons, abs=1e-8)
    assert result[1] == approx(lats, abs=1e-8)


def test_transverse_mercator_out_of_domain():
    utm = get_projection(32632)

    # 90 degrees off the central meridian on the equator is singular
    easting, northing = utm.deg_to_projected(99., 0.)
    assert not np.isfinite(easting) or not np.isfinite(northing)

    lon, lat = utm.projected_to_deg(np.nan, 0.)
    assert np.isnan(lon)


def test_transverse_mercator_origin_latitude():
    grs80 = get_ellipsoid(7019)
    equator = TransverseMercator(grs80, lon_orig=0., lat_orig=0.)
    shifted = TransverseMercator(grs80, lon_orig=0., lat_orig=45.)

    # Northings differ by the meridian arc to the origin latitude
    arc = equator.deg_to_projected(0., 45.)[1]
    assert arc == approx(4984944.378, abs=0.01)
    assert_points_equal(shifted.deg_to_projected(0., 45.), (0., 0.), abs_tol=1e-6)
    assert shifted.deg_to_projected(1., 50.)[1] == approx(
        equator.deg_to_projected(1., 50.)[1] - arc, abs=1e-6
    )

    # Arc to the pole
    polar = TransverseMercator(grs80, lon_orig=0., lat_orig=90.)
    assert polar.deg_to_projected(0., 90.)[1] == approx(0., abs=1e-6)


def test_pseudo_mercator():
    web = get_projection(3857)
    assert isinstance(web, PseudoMercator)

    lon, lat = dms(-100, 20), dms(24, 22, 54.433)
    assert_points_equal(web.deg_to_projected(lon, lat), (-11169055.58, 2800000.00))
    assert_points_equal(web.projected_to_deg(-11169055.58, 2800000.00), (lon, lat), abs_tol=1e-7)

    assert_points_equal(web.deg_to_projected(0., 0.), (0., 0.), abs_tol=1e-9)
    assert_points_equal(web.deg_to_projected(180., 0.), (20037508.342789244, 0.), abs_tol=1e-6)

    # The pole is singular, but does not raise
    northing = web.deg_to_projected(0., 90.)[1]
    assert not np.isfinite(northing) or northing > 1e8

    with pytest.raises(TypeError):
        PseudoMercator(get_ellipsoid(7030), k_orig=1.)

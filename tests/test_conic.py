import math

import numpy as np
import pytest
from pytest import approx

from geoprojections import get_ellipsoid, get_projection
from geoprojections.conic import *
from geoprojections.conversion import convert_to_meters
from geoprojections.ellipsoid import Ellipsoid
from tests.functions import assert_points_equal, dms, sample_points

US_SURVEY_FOOT = 1200 / 3937
GRS80 = Ellipsoid(6378137.0, 298.257222101)


def _assert_round_trip(projection, lons, lats):
    easting, northing = projection.deg_to_projected(lons, lats)
    lon, lat = projection.projected_to_deg(easting, northing)
    assert lon == approx(lons, abs=1e-7)
    assert lat == approx(lats, abs=1e-7)

    easting2, northing2 = projection.deg_to_projected(lon, lat)
    assert easting2 == approx(easting, abs=1e-3)
    assert northing2 == approx(northing, abs=1e-3)


def test_lambert_conic_conformal_1sp():
    jamaica = get_projection(24200)
    assert isinstance(jamaica, LambertConicConformal1SP)

    lon, lat = dms(-76, 56, 37.26), dms(17, 55, 55.80)
    assert_points_equal(jamaica.deg_to_projected(lon, lat), (255966.58, 142493.51))
    assert_points_equal(jamaica.projected_to_deg(255966.58, 142493.51), (lon, lat), abs_tol=1e-6)

    assert_points_equal(jamaica.deg_to_projected(-77., 18.), (250000., 150000.), abs_tol=1e-6)

    # A tangent cone at the equator is a cylinder
    with pytest.raises(ValueError):
        LambertConicConformal1SP(GRS80, lat_orig=0.)


def test_lambert_conic_conformal_2sp():
    clarke_1866 = get_ellipsoid(7008)
    texas = LambertConicConformal2SP(
        clarke_1866,
        lon_orig=-99.,
        lat_orig=dms(27, 50),
        lat_sp1=dms(28, 23),
        lat_sp2=dms(30, 17),
        false_easting=convert_to_meters(2000000., 9003),
        false_northing=0.,
    )
    easting, northing = texas.deg_to_projected(-96., 28.5)
    assert easting / US_SURVEY_FOOT == approx(2963503.91, abs=0.05)
    assert northing / US_SURVEY_FOOT == approx(254759.80, abs=0.05)

    lon, lat = texas.projected_to_deg(2963503.91 * US_SURVEY_FOOT, 254759.80 * US_SURVEY_FOOT)
    assert lon == approx(-96., abs=1e-7)
    assert lat == approx(28.5, abs=1e-7)

    lambert93 = get_projection(2154)
    assert_points_equal(lambert93.deg_to_projected(3., 46.5), (700000., 6600000.), abs_tol=1e-6)

    with pytest.raises(ValueError):
        LambertConicConformal2SP(GRS80, lat_sp1=30., lat_sp2=-30.)


def test_lambert_conic_conformal_equal_parallels():
    tangent = LambertConicConformal1SP(GRS80, lon_orig=10., lat_orig=45., k_orig=1.)
    secant = LambertConicConformal2SP(GRS80, lon_orig=10., lat_orig=45., lat_sp1=45., lat_sp2=45.)

    lons, lats = sample_points(tangent.origin)
    result_tangent = tangent.deg_to_projected(lons, lats)
    result_secant = secant.deg_to_projected(lons, lats)
    assert result_secant[0] == approx(result_tangent[0], abs=1e-6)
    assert result_secant[1] == approx(result_tangent[1], abs=1e-6)


def test_lambert_conic_conformal_round_trip():
    parallels = [
        (30., 60.),
        (60., 30.),
        (-20., -40.),
        (10., -5.),
        (45., 45.),
        (45., 45. + 1e-9),
        (45., 45. + 1e-6),
        (89., 89.5),
    ]
    for sp1, sp2 in parallels:
        lat_orig = (sp1 + sp2) / 2
        projection = LambertConicConformal2SP(
            GRS80, lon_orig=-20., lat_orig=lat_orig, lat_sp1=sp1, lat_sp2=sp2,
            false_easting=1000000., false_northing=500000.
        )
        lons, lats = sample_points(projection.origin)
        _assert_round_trip(projection, lons, lats)

    for lat_orig in (-60., -15., 5., 45., 80.):
        projection = LambertConicConformal1SP(GRS80, lon_orig=100., lat_orig=lat_orig, k_orig=0.9996)
        lons, lats = sample_points(projection.origin)
        _assert_round_trip(projection, lons, lats)


def test_lambert_conic_conformal_pole():
    lambert93 = get_projection(2154)

    # The apex of the cone
    easting, northing = lambert93.deg_to_projected(3., 90.)
    lon, lat = lambert93.projected_to_deg(easting, northing)
    assert lat == approx(90., abs=1e-7)

    # The opposite pole is at (numerically) infinite radius, but does not raise
    easting, northing = lambert93.deg_to_projected(3., -90.)
    assert abs(northing) > 1e12


def test_albers_equal_area():
    conus = get_projection(5070)
    assert isinstance(conus, AlbersEqualArea)
    assert_points_equal(conus.deg_to_projected(-96., 23.), (0., 0.), abs_tol=1e-6)

    # Symmetric about the central meridian
    east = conus.deg_to_projected(-90., 40.)
    west = conus.deg_to_projected(-102., 40.)
    assert east[0] == approx(-west[0], abs=1e-6)
    assert east[1] == approx(west[1], abs=1e-6)

    bc = get_projection(3005)
    assert_points_equal(bc.deg_to_projected(-126., 45.), (1000000., 0.), abs_tol=1e-6)

    with pytest.raises(ValueError):
        AlbersEqualArea(GRS80, lat_sp1=30., lat_sp2=-30.)


def test_albers_equal_area_sphere():
    radius = 6371000.
    sphere = Ellipsoid(radius)
    lat1, lat2, lat0 = math.radians(29.5), math.radians(45.5), math.radians(23.)
    albers = AlbersEqualArea(sphere, lon_orig=-96., lat_orig=23., lat_sp1=29.5, lat_sp2=45.5)

    n = (math.sin(lat1) + math.sin(lat2)) / 2
    c = math.cos(lat1) ** 2 + 2 * n * math.sin(lat1)
    rho0 = radius * math.sqrt(c - 2 * n * math.sin(lat0)) / n
    rho = radius * math.sqrt(c - 2 * n * math.sin(math.radians(35.))) / n
    theta = n * math.radians(-75. + 96.)

    expected = (rho * math.sin(theta), rho0 - rho * math.cos(theta))
    assert_points_equal(albers.deg_to_projected(-75., 35.), expected, abs_tol=1e-6)
    assert_points_equal(albers.projected_to_deg(*expected), (-75., 35.), abs_tol=1e-9)


def test_albers_equal_area_round_trip():
    # Southern cone (negative cone constant)
    australia = get_projection(3577)
    lons, lats = sample_points((132., -27.))
    _assert_round_trip(australia, lons, lats)

    parallels = [(29.5, 45.5), (45.5, 29.5), (50., 50.), (-10., 20.), (60., 70.)]
    for sp1, sp2 in parallels:
        projection = AlbersEqualArea(
            GRS80, lon_orig=10., lat_orig=(sp1 + sp2) / 2, lat_sp1=sp1, lat_sp2=sp2
        )
        lons, lats = sample_points(projection.origin)
        _assert_round_trip(projection, lons, lats)

import numpy as np
import pytest
from pytest import approx

from geoprojections import get_ellipsoid
from geoprojections._base import ProjectionBase
from geoprojections.azimuthal import PolarStereographicA
from geoprojections.conic import AlbersEqualArea, LambertConicConformal2SP
from geoprojections.mercator import TransverseMercator
from geoprojections.projections import *
from tests.functions import assert_points_equal

WGS84 = get_ellipsoid(7030)
UTM_32N = {8801: 0., 8802: 9., 8805: 0.9996, 8806: 500000., 8807: 0.}


def test_projection_base_abstract():
    with pytest.raises(TypeError):
        ProjectionBase(WGS84)


def test_from_epsg_parameters():
    utm = TransverseMercator.from_epsg_parameters(UTM_32N, WGS84)
    assert utm == TransverseMercator(
        WGS84, lon_orig=9., lat_orig=0., k_orig=0.9996, false_easting=500000., false_northing=0.
    )
    assert dict(utm.parameters) == {
        'lat_orig': 0., 'lon_orig': 9., 'k_orig': 0.9996,
        'false_easting': 500000., 'false_northing': 0.
    }

    # Unused codes are ignored
    assert TransverseMercator.from_epsg_parameters({**UTM_32N, 8823: 45.}, WGS84) == utm

    missing = dict(UTM_32N)
    del missing[8805]
    with pytest.raises(ValueError, match='8805'):
        TransverseMercator.from_epsg_parameters(missing, WGS84)

    conic = LambertConicConformal2SP.from_epsg_parameters(
        {8821: 46.5, 8822: 3., 8823: 49., 8824: 44., 8826: 700000., 8827: 6600000.},
        WGS84
    )
    assert conic.origin == (3., 46.5)


def test_projection_parameters_read_only():
    utm = TransverseMercator.from_epsg_parameters(UTM_32N, WGS84)
    with pytest.raises(TypeError):
        utm.parameters['k_orig'] = 1.


def test_projection_dunder():
    utm = TransverseMercator.from_epsg_parameters(UTM_32N, WGS84)
    same = TransverseMercator.from_epsg_parameters(UTM_32N, WGS84)
    other_ellipsoid = TransverseMercator.from_epsg_parameters(UTM_32N, get_ellipsoid(7019))

    assert utm == same
    assert hash(utm) == hash(same)
    assert utm != other_ellipsoid
    assert utm != TransverseMercator(WGS84, lon_orig=15.)
    assert utm != IdentityProjection(WGS84)
    assert len({utm, same, other_ellipsoid}) == 2

    assert repr(utm) == (
        '<TransverseMercator(lon_orig=9.0, lat_orig=0.0, k_orig=0.9996, false_easting=500000.0, '
        'false_northing=0.0) on <Ellipsoid WGS 84 a=6378137.0 1/f=298.257223563>>'
    )


def test_projection_logger():
    utm = TransverseMercator.from_epsg_parameters(UTM_32N, WGS84)
    assert utm.logger.name == 'geoprojections.mercator.TransverseMercator'


class _Shift(ProjectionBase):
    PARAMETER_CODES = {'false_easting': 8806}

    def rad_to_projected(self, lon, lat):
        return lon + self.parameters['false_easting'], lat

    def projected_to_rad(self, easting, northing):
        return easting - self.parameters['false_easting'], northing


def test_projection_subclass():
    shift = _Shift(WGS84, false_easting=1.)
    assert shift.rad_to_projected(1., 2.) == (2., 2.)
    assert shift.projected_to_deg(2., 2.) == approx((np.degrees(1.), np.degrees(2.)))
    assert shift.logger.name.endswith('test_projections._Shift')

    with pytest.raises(ValueError):
        _Shift(WGS84, lat_sp1=10.)


def test_identity_projection():
    identity = IdentityProjection(WGS84)
    assert identity.deg_to_projected(10., 50.) == (10., 50.)
    assert identity.projected_to_deg(10., 50.) == (10., 50.)

    # Sequences are coerced to arrays like every other projection
    lon, lat = identity.deg_to_projected([10., 20.], (50., 60.))
    assert isinstance(lon, np.ndarray) and lon.dtype == np.float64
    assert list(lat) == [50., 60.]
    easting, northing = identity.projected_to_deg([1, 2], [3, 4])
    assert isinstance(northing, np.ndarray) and northing.dtype == np.float64

    assert_points_equal(identity.rad_to_projected(np.pi / 2, np.pi / 4), (90., 45.), abs_tol=1e-12)
    assert_points_equal(identity.projected_to_rad(90., 45.), (np.pi / 2, np.pi / 4), abs_tol=1e-12)
    assert identity.origin == (0., 0.)
    assert identity == IdentityProjection(WGS84)
    assert identity != IdentityProjection(get_ellipsoid(7019))


def test_build_projection():
    assert build_projection(9807, UTM_32N, WGS84) == TransverseMercator.from_epsg_parameters(
        UTM_32N, WGS84
    )
    assert build_projection(None, {}, WGS84) == IdentityProjection(WGS84)
    assert build_projection(9999, UTM_32N, WGS84) is None

    polar = build_projection(9810, {**UTM_32N, 8801: 90.}, WGS84)
    assert isinstance(polar, PolarStereographicA)

    with pytest.raises(ValueError):
        build_projection(9822, UTM_32N, WGS84)


def test_projection_methods():
    assert set(PROJECTION_METHODS) == {1024, 9801, 9802, 9807, 9809, 9810, 9820, 9822}
    assert PROJECTION_METHODS[9822] is AlbersEqualArea
    for code, cls in PROJECTION_METHODS.items():
        assert cls.METHOD_CODE == code
        assert cls.METHOD_NAME

    with pytest.raises(TypeError):
        PROJECTION_METHODS[1] = IdentityProjection


def test_total_functions():
    # Out of domain input produces nan/inf rather than raising
    for cls in PROJECTION_METHODS.values():
        kwargs = {'lat_orig': 45.} if 'lat_sp1' not in cls.PARAMETER_CODES else {
            'lat_orig': 45., 'lat_sp1': 40., 'lat_sp2': 50.
        }
        projection = cls(WGS84, **kwargs)
        for lon, lat in ((0., 135.), (720., -100.), (np.nan, 0.), (np.inf, 45.)):
            projection.deg_to_projected(lon, lat)

        for easting, northing in ((1e30, -1e30), (np.nan, 0.), (np.inf, 0.)):
            projection.projected_to_deg(easting, northing)

    projection = TransverseMercator(WGS84, lon_orig=9., k_orig=0.9996)
    easting, northing = projection.deg_to_projected(np.array([9., np.nan]), np.array([45., 45.]))
    assert np.isfinite(easting[0])
    assert np.isnan(easting[1])
    assert northing[0] == approx(0.9996 * 4984944.378, abs=1.)

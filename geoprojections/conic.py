"""
Conic projections: Lambert Conic Conformal (1SP and 2SP) and Albers Equal Area
"""

__all__ = ['AlbersEqualArea', 'LambertConicConformal1SP', 'LambertConicConformal2SP']

import math
from typing import Tuple

import numpy as np

from geoprojections._base import ProjectionBase
from geoprojections._const import (
    METHOD_ALBERS_EQUAL_AREA, METHOD_LAMBERT_CONIC_1SP, METHOD_LAMBERT_CONIC_2SP,
    PARAM_EASTING_FALSE_ORIGIN, PARAM_FALSE_EASTING, PARAM_FALSE_NORTHING,
    PARAM_LAT_1ST_PARALLEL, PARAM_LAT_2ND_PARALLEL, PARAM_LAT_FALSE_ORIGIN,
    PARAM_LAT_NATURAL_ORIGIN, PARAM_LON_FALSE_ORIGIN, PARAM_LON_NATURAL_ORIGIN,
    PARAM_NORTHING_FALSE_ORIGIN, PARAM_SCALE_NATURAL_ORIGIN
)
from geoprojections._numeric import (
    as_float, authalic_q, authalic_to_geodetic_latitude, conformal_m, conformal_t, fixed_point,
    latitude_from_authalic_q, unwrap
)
from geoprojections.ellipsoid import Ellipsoid

_FALSE_ORIGIN_PARAMETERS = {
    'lat_orig': PARAM_LAT_FALSE_ORIGIN,
    'lon_orig': PARAM_LON_FALSE_ORIGIN,
    'lat_sp1': PARAM_LAT_1ST_PARALLEL,
    'lat_sp2': PARAM_LAT_2ND_PARALLEL,
    'false_easting': PARAM_EASTING_FALSE_ORIGIN,
    'false_northing': PARAM_NORTHING_FALSE_ORIGIN,
}


def _check_cone_constant(n: float, name: str):
    if n == 0 or not math.isfinite(n):
        raise ValueError(
            f'{name} parameters give a cone constant of {n}; '
            'standard parallels must not be symmetric about the equator'
        )


class _LambertConicConformal(ProjectionBase):
    """
    Shared evaluation for both Lambert Conic Conformal variants. Subclasses
    set the cone constant (_n), the radius factor a*F (including any scale
    factor, _af) and the radius at the origin latitude (_r0).
    """

    _n: float
    _af: float
    _r0: float

    def _set_common(self, lon_orig: float, false_easting: float, false_northing: float):
        self._lon0 = math.radians(lon_orig)
        self._fe = false_easting
        self._fn = false_northing
        self._e = self.ellipsoid.e
        self._sign = math.copysign(1., self._n)

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            r = self._af * conformal_t(lat, self._e) ** self._n
            theta = self._n * (lon - self._lon0)
            easting = self._fe + r * np.sin(theta)
            northing = self._fn + self._r0 - r * np.cos(theta)
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        e = self._e
        with np.errstate(all='ignore'):
            d_east = easting - self._fe
            d_north = self._r0 - (northing - self._fn)
            theta = np.arctan2(self._sign * d_east, self._sign * d_north)
            r = self._sign * np.hypot(d_east, d_north)
            t = (r / self._af) ** (1 / self._n)

            def _step(lat):
                e_sin = e * np.sin(lat)
                return np.pi / 2 - 2 * np.arctan(t * ((1 - e_sin) / (1 + e_sin)) ** (e / 2))

            lat = fixed_point(_step, np.pi / 2 - 2 * np.arctan(t), logger=self.logger)
            lon = theta / self._n + self._lon0
            return lon, lat


class LambertConicConformal2SP(_LambertConicConformal):
    """
    Lambert Conic Conformal with two standard parallels (EPSG method 9802).
    The cone intersects the ellipsoid along both standard parallels, where
    the scale is true. Equal standard parallels reduce to the tangent cone.

    Keyword Args:
        lon_orig: Longitude of false origin, degrees
        lat_orig: Latitude of false origin, degrees
        lat_sp1: Latitude of the first standard parallel, degrees
        lat_sp2: Latitude of the second standard parallel, degrees
        false_easting: Easting at the false origin, meters
        false_northing: Northing at the false origin, meters
    """

    METHOD_CODE = METHOD_LAMBERT_CONIC_2SP
    METHOD_NAME = 'Lambert Conic Conformal (2SP)'
    PARAMETER_CODES = _FALSE_ORIGIN_PARAMETERS

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lon_orig: float = 0.,
        lat_orig: float = 0.,
        lat_sp1: float = 0.,
        lat_sp2: float = 0.,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        super().__init__(
            ellipsoid,
            lon_orig=lon_orig, lat_orig=lat_orig, lat_sp1=lat_sp1, lat_sp2=lat_sp2,
            false_easting=false_easting, false_northing=false_northing,
        )
        e, e_squared = ellipsoid.e, ellipsoid.e_squared
        lat1, lat2, lat_f = math.radians(lat_sp1), math.radians(lat_sp2), math.radians(lat_orig)

        with np.errstate(all='ignore'):
            t1, t2, t_f = (float(conformal_t(x, e)) for x in (lat1, lat2, lat_f))
            m1, m2 = float(conformal_m(lat1, e_squared)), float(conformal_m(lat2, e_squared))

            if lat_sp1 == lat_sp2:
                self._n = math.sin(lat1)
            else:
                self._n = (math.log(m1) - math.log(m2)) / (math.log(t1) - math.log(t2))

            _check_cone_constant(self._n, self.METHOD_NAME)
            self._af = ellipsoid.a * m1 / (self._n * t1 ** self._n)
            self._r0 = self._af * t_f ** self._n

        self._set_common(lon_orig, false_easting, false_northing)


class LambertConicConformal1SP(_LambertConicConformal):
    """
    Lambert Conic Conformal with one standard parallel (EPSG method 9801).
    The cone is tangent at the latitude of natural origin, where the scale
    factor k_orig applies.

    Keyword Args:
        lon_orig: Longitude of natural origin, degrees
        lat_orig: Latitude of natural origin, degrees
        k_orig: Scale factor at the natural origin
        false_easting: Meters
        false_northing: Meters
    """

    METHOD_CODE = METHOD_LAMBERT_CONIC_1SP
    METHOD_NAME = 'Lambert Conic Conformal (1SP)'
    PARAMETER_CODES = {
        'lat_orig': PARAM_LAT_NATURAL_ORIGIN,
        'lon_orig': PARAM_LON_NATURAL_ORIGIN,
        'k_orig': PARAM_SCALE_NATURAL_ORIGIN,
        'false_easting': PARAM_FALSE_EASTING,
        'false_northing': PARAM_FALSE_NORTHING,
    }

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lon_orig: float = 0.,
        lat_orig: float = 0.,
        k_orig: float = 1.,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        super().__init__(
            ellipsoid,
            lon_orig=lon_orig, lat_orig=lat_orig, k_orig=k_orig,
            false_easting=false_easting, false_northing=false_northing,
        )
        lat0 = math.radians(lat_orig)
        with np.errstate(all='ignore'):
            t0 = float(conformal_t(lat0, ellipsoid.e))
            m0 = float(conformal_m(lat0, ellipsoid.e_squared))

            self._n = math.sin(lat0)
            _check_cone_constant(self._n, self.METHOD_NAME)
            self._af = ellipsoid.a * m0 / (self._n * t0 ** self._n) * k_orig
            self._r0 = self._af * t0 ** self._n

        self._set_common(lon_orig, false_easting, false_northing)


class AlbersEqualArea(ProjectionBase):
    """
    Albers Equal Area (EPSG method 9822), an equal area conic with two
    standard parallels.

    Keyword Args:
        lon_orig: Longitude of false origin, degrees
        lat_orig: Latitude of false origin, degrees
        lat_sp1: Latitude of the first standard parallel, degrees
        lat_sp2: Latitude of the second standard parallel, degrees
        false_easting: Easting at the false origin, meters
        false_northing: Northing at the false origin, meters
    """

    METHOD_CODE = METHOD_ALBERS_EQUAL_AREA
    METHOD_NAME = 'Albers Equal Area'
    PARAMETER_CODES = _FALSE_ORIGIN_PARAMETERS

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lon_orig: float = 0.,
        lat_orig: float = 0.,
        lat_sp1: float = 0.,
        lat_sp2: float = 0.,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        super().__init__(
            ellipsoid,
            lon_orig=lon_orig, lat_orig=lat_orig, lat_sp1=lat_sp1, lat_sp2=lat_sp2,
            false_easting=false_easting, false_northing=false_northing,
        )
        self._a = ellipsoid.a
        self._e = ellipsoid.e
        self._e_squared = ellipsoid.e_squared
        self._lon0 = math.radians(lon_orig)
        self._fe = false_easting
        self._fn = false_northing

        lat1, lat2, lat0 = math.radians(lat_sp1), math.radians(lat_sp2), math.radians(lat_orig)
        with np.errstate(all='ignore'):
            q0, q1, q2 = (float(self._q(x)) for x in (lat0, lat1, lat2))
            m1 = float(conformal_m(lat1, self._e_squared))
            m2 = float(conformal_m(lat2, self._e_squared))

            if lat_sp1 == lat_sp2:
                self._n = math.sin(lat1)
            else:
                self._n = (m1 ** 2 - m2 ** 2) / (q2 - q1)

            _check_cone_constant(self._n, self.METHOD_NAME)
            self._c = m1 ** 2 + self._n * q1
            self._rho0 = self._a * math.sqrt(self._c - self._n * q0) / self._n
            self._q_pole = float(self._q(math.pi / 2))

        self._sign = math.copysign(1., self._n)

    def _q(self, lat):
        return authalic_q(lat, self._e, self._e_squared)

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            rho = self._a * np.sqrt(self._c - self._n * self._q(lat)) / self._n
            theta = self._n * (lon - self._lon0)
            easting = self._fe + rho * np.sin(theta)
            northing = self._fn + self._rho0 - rho * np.cos(theta)
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        with np.errstate(all='ignore'):
            d_east = easting - self._fe
            d_north = self._rho0 - (northing - self._fn)
            theta = np.arctan2(self._sign * d_east, self._sign * d_north)
            rho = np.hypot(d_east, d_north)

            q = (self._c - rho ** 2 * self._n ** 2 / self._a ** 2) / self._n
            beta = np.arcsin(np.clip(q / self._q_pole, -1., 1.))
            lat = latitude_from_authalic_q(
                q,
                authalic_to_geodetic_latitude(beta, self._e_squared),
                self._e,
                self._e_squared,
                logger=self.logger,
            )
            lon = self._lon0 + theta / self._n
            return lon, unwrap(lat)

"""
Azimuthal projections: Oblique Stereographic, Polar Stereographic (variant A)
and Lambert Azimuthal Equal Area
"""

__all__ = ['LambertAzimuthalEqualArea', 'ObliqueStereographic', 'PolarStereographicA']

import math
from typing import Tuple

import numpy as np

from geoprojections._base import ProjectionBase
from geoprojections._const import (
    METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA, METHOD_OBLIQUE_STEREOGRAPHIC,
    METHOD_POLAR_STEREOGRAPHIC_A, PARAM_FALSE_EASTING, PARAM_FALSE_NORTHING,
    PARAM_LAT_NATURAL_ORIGIN, PARAM_LON_NATURAL_ORIGIN, PARAM_SCALE_NATURAL_ORIGIN
)
from geoprojections._numeric import (
    as_float, authalic_q, authalic_to_geodetic_latitude, conformal_t, conformal_to_geodetic_latitude,
    fixed_point, isometric_latitude, latitude_from_authalic_q, latitude_from_polar_authalic_gap,
    polar_authalic_gap, unwrap
)
from geoprojections.ellipsoid import Ellipsoid

_NATURAL_ORIGIN_PARAMETERS = {
    'lat_orig': PARAM_LAT_NATURAL_ORIGIN,
    'lon_orig': PARAM_LON_NATURAL_ORIGIN,
    'k_orig': PARAM_SCALE_NATURAL_ORIGIN,
    'false_easting': PARAM_FALSE_EASTING,
    'false_northing': PARAM_FALSE_NORTHING,
}


class ObliqueStereographic(ProjectionBase):
    """
    Oblique Stereographic (EPSG method 9809). The ellipsoid is first mapped
    conformally onto the Gauss conformal sphere, which is then projected
    stereographically from the point opposite the origin.

    Keyword Args:
        lon_orig: Longitude of natural origin, degrees
        lat_orig: Latitude of natural origin, degrees
        k_orig: Scale factor at the natural origin
        false_easting: Meters
        false_northing: Meters
    """

    METHOD_CODE = METHOD_OBLIQUE_STEREOGRAPHIC
    METHOD_NAME = 'Oblique Stereographic'
    PARAMETER_CODES = _NATURAL_ORIGIN_PARAMETERS

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
        if abs(lat_orig) >= 90:
            raise ValueError(
                f'{self.METHOD_NAME} requires a non-polar origin latitude, got {lat_orig}'
            )

        e, e_squared = ellipsoid.e, ellipsoid.e_squared
        self._e = e
        self._e_squared = e_squared
        self._lon0 = math.radians(lon_orig)
        self._fe = false_easting
        self._fn = false_northing

        lat0 = math.radians(lat_orig)
        sin_lat0 = math.sin(lat0)
        radius = math.sqrt(float(ellipsoid.rho(lat0)) * float(ellipsoid.nu(lat0)))
        self._two_rk = 2 * radius * k_orig
        self._n = math.sqrt(1 + e_squared * math.cos(lat0) ** 4 / (1 - e_squared))

        s1 = (1 + sin_lat0) / (1 - sin_lat0)
        s2 = (1 - e * sin_lat0) / (1 + e * sin_lat0)
        w1 = (s1 * s2 ** e) ** self._n
        sin_chi0 = (w1 - 1) / (w1 + 1)
        self._c = (
            (self._n + sin_lat0) * (1 - sin_chi0)
            / ((self._n - sin_lat0) * (1 + sin_chi0))
        )
        w2 = self._c * w1
        self._chi0 = math.asin((w2 - 1) / (w2 + 1))

        self._g = self._two_rk * math.tan(math.pi / 4 - self._chi0 / 2)
        self._h = 2 * self._two_rk * math.tan(self._chi0) + self._g

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        e = self._e
        with np.errstate(all='ignore'):
            d_lambda = self._n * (lon - self._lon0)
            sin_lat = np.sin(lat)
            sa = (1 + sin_lat) / (1 - sin_lat)
            sb = (1 - e * sin_lat) / (1 + e * sin_lat)
            w = self._c * (sa * sb ** e) ** self._n
            chi = np.arcsin((w - 1) / (w + 1))

            sin_chi0, cos_chi0 = math.sin(self._chi0), math.cos(self._chi0)
            sin_chi, cos_chi = np.sin(chi), np.cos(chi)
            b = 1 + sin_chi * sin_chi0 + cos_chi * cos_chi0 * np.cos(d_lambda)

            easting = self._fe + self._two_rk * cos_chi * np.sin(d_lambda) / b
            northing = self._fn + self._two_rk * (
                sin_chi * cos_chi0 - cos_chi * sin_chi0 * np.cos(d_lambda)
            ) / b
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        e, e_squared = self._e, self._e_squared
        with np.errstate(all='ignore'):
            d_east = easting - self._fe
            d_north = northing - self._fn
            i = np.arctan(d_east / (self._h + d_north))
            j = np.arctan(d_east / (self._g - d_north)) - i
            chi = self._chi0 + 2 * np.arctan((d_north - d_east * np.tan(j / 2)) / self._two_rk)
            lon = (j + 2 * i) / self._n + self._lon0

            sin_chi = np.sin(chi)
            psi = 0.5 * np.log((1 + sin_chi) / (self._c * (1 - sin_chi))) / self._n

            def _step(lat):
                return lat - (isometric_latitude(lat, e) - psi) * np.cos(lat) * (
                    1 - e_squared * np.sin(lat) ** 2
                ) / (1 - e_squared)

            lat = fixed_point(_step, 2 * np.arctan(np.exp(psi)) - np.pi / 2, logger=self.logger)
            return lon, lat


class PolarStereographicA(ProjectionBase):
    """
    Polar Stereographic, variant A (EPSG method 9810). The origin is one of
    the poles; the sign of the origin latitude selects which.

    Keyword Args:
        lon_orig: Longitude of natural origin (the meridian pointing to grid south/north), degrees
        lat_orig: Latitude of natural origin, +90 or -90 degrees
        k_orig: Scale factor at the pole
        false_easting: Meters
        false_northing: Meters
    """

    METHOD_CODE = METHOD_POLAR_STEREOGRAPHIC_A
    METHOD_NAME = 'Polar Stereographic (variant A)'
    PARAMETER_CODES = _NATURAL_ORIGIN_PARAMETERS

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lon_orig: float = 0.,
        lat_orig: float = 90.,
        k_orig: float = 1.,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        super().__init__(
            ellipsoid,
            lon_orig=lon_orig, lat_orig=lat_orig, k_orig=k_orig,
            false_easting=false_easting, false_northing=false_northing,
        )
        e = ellipsoid.e
        self._e = e
        self._e_squared = ellipsoid.e_squared
        self._lon0 = math.radians(lon_orig)
        self._fe = false_easting
        self._fn = false_northing
        self._north = lat_orig > 0
        if abs(lat_orig) != 90:
            self.warn_once(
                'Polar Stereographic origin latitude %s is not a pole; it only selects the %s pole',
                lat_orig, 'north' if self._north else 'south'
            )

        # rho = t * _rho_factor
        self._rho_factor = 2 * ellipsoid.a * k_orig / math.sqrt(
            (1 + e) ** (1 + e) * (1 - e) ** (1 - e)
        )

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            d_lambda = lon - self._lon0
            if self._north:
                rho = self._rho_factor * conformal_t(lat, self._e)
                return self._fe + rho * np.sin(d_lambda), self._fn - rho * np.cos(d_lambda)

            rho = self._rho_factor * conformal_t(-lat, self._e)
            return self._fe + rho * np.sin(d_lambda), self._fn + rho * np.cos(d_lambda)

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        with np.errstate(all='ignore'):
            d_east = easting - self._fe
            d_north = northing - self._fn
            t = np.hypot(d_east, d_north) / self._rho_factor

            if self._north:
                chi = np.pi / 2 - 2 * np.arctan(t)
                lon = self._lon0 + np.arctan2(d_east, -d_north)
            else:
                chi = 2 * np.arctan(t) - np.pi / 2
                lon = self._lon0 + np.arctan2(d_east, d_north)

            return lon, conformal_to_geodetic_latitude(chi, self._e_squared)


class LambertAzimuthalEqualArea(ProjectionBase):
    """
    Lambert Azimuthal Equal Area (EPSG method 9820), in its oblique aspect
    or, when the origin is a pole, its polar aspect.

    Keyword Args:
        lon_orig: Longitude of natural origin, degrees
        lat_orig: Latitude of natural origin, degrees
        false_easting: Meters
        false_northing: Meters
    """

    METHOD_CODE = METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA
    METHOD_NAME = 'Lambert Azimuthal Equal Area'
    PARAMETER_CODES = {
        'lat_orig': PARAM_LAT_NATURAL_ORIGIN,
        'lon_orig': PARAM_LON_NATURAL_ORIGIN,
        'false_easting': PARAM_FALSE_EASTING,
        'false_northing': PARAM_FALSE_NORTHING,
    }

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        lon_orig: float = 0.,
        lat_orig: float = 0.,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        super().__init__(
            ellipsoid,
            lon_orig=lon_orig, lat_orig=lat_orig,
            false_easting=false_easting, false_northing=false_northing,
        )
        self._a = ellipsoid.a
        self._e = ellipsoid.e
        self._e_squared = ellipsoid.e_squared
        self._lon0 = math.radians(lon_orig)
        self._lat0 = math.radians(lat_orig)
        self._fe = false_easting
        self._fn = false_northing

        # 0 for the oblique aspect, otherwise +1 / -1 for the north / south pole
        self._polar = 0 if abs(lat_orig) != 90 else int(math.copysign(1, lat_orig))

        self._q_pole = float(self._q(math.pi / 2))
        q0 = float(self._q(self._lat0))
        self._beta0 = math.asin(max(-1., min(1., q0 / self._q_pole)))
        self._rq = self._a * math.sqrt(self._q_pole / 2)
        self._d = 1.
        if not self._polar:
            self._d = self._a * (
                math.cos(self._lat0) / math.sqrt(1 - self._e_squared * math.sin(self._lat0) ** 2)
            ) / (self._rq * math.cos(self._beta0))

    def _q(self, lat):
        return authalic_q(lat, self._e, self._e_squared)

    def _latitude(self, q):
        """Geodetic latitude from the authalic q value"""
        beta = np.arcsin(np.clip(q / self._q_pole, -1., 1.))
        return latitude_from_authalic_q(
            q,
            authalic_to_geodetic_latitude(beta, self._e_squared),
            self._e,
            self._e_squared,
            logger=self.logger,
        )

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            d_lambda = lon - self._lon0

            if self._polar:
                # South polar points are reflected onto the north pole
                rho = self._a * np.sqrt(polar_authalic_gap(self._polar * lat, self._e, self._e_squared))
                return (
                    self._fe + rho * np.sin(d_lambda),
                    self._fn - self._polar * rho * np.cos(d_lambda),
                )

            q = self._q(lat)
            beta = np.arcsin(np.clip(q / self._q_pole, -1., 1.))
            sin_beta0, cos_beta0 = math.sin(self._beta0), math.cos(self._beta0)
            b = self._rq * np.sqrt(
                2 / (1 + sin_beta0 * np.sin(beta) + cos_beta0 * np.cos(beta) * np.cos(d_lambda))
            )
            easting = self._fe + b * self._d * np.cos(beta) * np.sin(d_lambda)
            northing = self._fn + (b / self._d) * (
                cos_beta0 * np.sin(beta) - sin_beta0 * np.cos(beta) * np.cos(d_lambda)
            )
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        with np.errstate(all='ignore'):
            d_east = easting - self._fe
            d_north = northing - self._fn

            if self._polar:
                rho = np.hypot(d_east, d_north)
                lat = latitude_from_polar_authalic_gap(
                    (rho / self._a) ** 2, self._e, self._e_squared, logger=self.logger
                )
                lon = self._lon0 + np.arctan2(d_east, -self._polar * d_north)
                return lon, unwrap(self._polar * lat)

            sin_beta0, cos_beta0 = math.sin(self._beta0), math.cos(self._beta0)
            rho = np.hypot(d_east / self._d, self._d * d_north)
            c = 2 * np.arcsin(rho / (2 * self._rq))
            sin_c, cos_c = np.sin(c), np.cos(c)

            beta = np.arcsin(cos_c * sin_beta0 + self._d * d_north * sin_c * cos_beta0 / rho)
            lon = self._lon0 + np.arctan2(
                d_east * sin_c,
                self._d * rho * cos_beta0 * cos_c - self._d ** 2 * d_north * sin_beta0 * sin_c,
            )
            lat = self._latitude(self._q_pole * np.sin(beta))

            at_origin = rho == 0
            return (
                unwrap(np.where(at_origin, self._lon0, lon)),
                unwrap(np.where(at_origin, self._lat0, lat)),
            )

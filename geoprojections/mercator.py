"""
Cylindrical projections: Transverse Mercator and Popular Visualisation
Pseudo-Mercator
"""

__all__ = ['PseudoMercator', 'TransverseMercator']

import math
from typing import Tuple

import numpy as np

from geoprojections._base import ProjectionBase
from geoprojections._const import (
    METHOD_PSEUDO_MERCATOR, METHOD_TRANSVERSE_MERCATOR, PARAM_FALSE_EASTING,
    PARAM_FALSE_NORTHING, PARAM_LAT_NATURAL_ORIGIN, PARAM_LON_NATURAL_ORIGIN,
    PARAM_SCALE_NATURAL_ORIGIN
)
from geoprojections._numeric import as_float, conformal_to_geodetic_latitude
from geoprojections.ellipsoid import Ellipsoid


class TransverseMercator(ProjectionBase):
    """
    Transverse Mercator (EPSG method 9807), using the JHS formulas: the
    Krüger series in the third flattening n, carried to n^4, applied to the
    conformal latitude. Accurate to a few millimeters within 4 degrees of
    the central meridian and well behaved much further out.

    Args:
        ellipsoid:
            The ellipsoid to project from

    Keyword Args:
        lon_orig: Longitude of natural origin (central meridian), degrees
        lat_orig: Latitude of natural origin, degrees
        k_orig: Scale factor on the central meridian
        false_easting: Meters
        false_northing: Meters
    """

    METHOD_CODE = METHOD_TRANSVERSE_MERCATOR
    METHOD_NAME = 'Transverse Mercator'
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
        self._lon0 = math.radians(lon_orig)
        lat0 = math.radians(lat_orig)
        self._k0 = k_orig
        self._fe = false_easting
        self._fn = false_northing
        self._e = ellipsoid.e
        self._e_squared = ellipsoid.e_squared

        f = ellipsoid.f
        n = f / (2 - f)
        n2, n3, n4 = n ** 2, n ** 3, n ** 4
        self._b = ellipsoid.a / (1 + n) * (1 + n2 / 4 + n4 / 64)

        self._h = (
            n / 2 - 2 / 3 * n2 + 5 / 16 * n3 + 41 / 180 * n4,
            13 / 48 * n2 - 3 / 5 * n3 + 557 / 1440 * n4,
            61 / 240 * n3 - 103 / 140 * n4,
            49561 / 161280 * n4,
        )
        self._h_inv = (
            n / 2 - 2 / 3 * n2 + 37 / 96 * n3 - 1 / 360 * n4,
            1 / 48 * n2 + 1 / 15 * n3 - 437 / 1440 * n4,
            17 / 480 * n3 - 37 / 840 * n4,
            4397 / 161280 * n4,
        )

        # Meridional arc from the equator to the latitude of origin
        if lat0 == 0:
            self._m0 = 0.
        elif abs(lat_orig) == 90:
            self._m0 = math.copysign(self._b * math.pi / 2, lat0)
        else:
            beta0 = float(self._conformal_latitude(lat0))
            xi0 = beta0 + sum(
                h * math.sin(2 * k * beta0) for k, h in enumerate(self._h, start=1)
            )
            self._m0 = self._b * xi0

    def _conformal_latitude(self, lat):
        q = np.arcsinh(np.tan(lat)) - self._e * np.arctanh(self._e * np.sin(lat))
        return np.arctan(np.sinh(q))

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            beta = self._conformal_latitude(lat)
            eta0 = np.arctanh(np.cos(beta) * np.sin(lon - self._lon0))
            xi0 = np.arcsin(np.sin(beta) * np.cosh(eta0))

            xi, eta = xi0, eta0
            for k, h in enumerate(self._h, start=1):
                xi = xi + h * np.sin(2 * k * xi0) * np.cosh(2 * k * eta0)
                eta = eta + h * np.cos(2 * k * xi0) * np.sinh(2 * k * eta0)

            easting = self._fe + self._k0 * self._b * eta
            northing = self._fn + self._k0 * (self._b * xi - self._m0)
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        with np.errstate(all='ignore'):
            eta_prime = (easting - self._fe) / (self._b * self._k0)
            xi_prime = ((northing - self._fn) + self._k0 * self._m0) / (self._b * self._k0)

            xi0, eta0 = xi_prime, eta_prime
            for k, h in enumerate(self._h_inv, start=1):
                xi0 = xi0 - h * np.sin(2 * k * xi_prime) * np.cosh(2 * k * eta_prime)
                eta0 = eta0 - h * np.cos(2 * k * xi_prime) * np.sinh(2 * k * eta_prime)

            beta = np.arcsin(np.sin(xi0) / np.cosh(eta0))
            lat = conformal_to_geodetic_latitude(beta, self._e_squared)
            lon = self._lon0 + np.arcsin(np.tanh(eta0) / np.cos(beta))
            return lon, lat


class PseudoMercator(ProjectionBase):
    """
    Popular Visualisation Pseudo-Mercator (EPSG method 1024), the spherical
    Mercator used by web map tiles. Ellipsoidal coordinates are treated as
    if they were on a sphere of radius a.
    """

    METHOD_CODE = METHOD_PSEUDO_MERCATOR
    METHOD_NAME = 'Popular Visualisation Pseudo Mercator'
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
        self._lon0 = math.radians(lon_orig)
        self._fe = false_easting
        self._fn = false_northing

    def rad_to_projected(self, lon, lat) -> Tuple:
        lon, lat = as_float(lon), as_float(lat)
        with np.errstate(all='ignore'):
            easting = self._fe + self._a * (lon - self._lon0)
            northing = self._fn + self._a * np.log(np.tan(np.pi / 4 + lat / 2))
            return easting, northing

    def projected_to_rad(self, easting, northing) -> Tuple:
        easting, northing = as_float(easting), as_float(northing)
        with np.errstate(all='ignore'):
            d = (self._fn - northing) / self._a
            lat = np.pi / 2 - 2 * np.arctan(np.exp(d))
            lon = (easting - self._fe) / self._a + self._lon0
            return lon, lat

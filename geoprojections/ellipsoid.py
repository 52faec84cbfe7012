"""
Reference ellipsoid model, including geodetic <-> geocentric conversions
"""

__all__ = ['Ellipsoid']

import math
from typing import Optional, Tuple

import numpy as np
from pydantic import validate_call
from typing_extensions import Self


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis and
    inverse flattening. A sphere has an infinite inverse flattening.

    Args:
        semi_major_axis:
            The equatorial radius, in meters

        inverse_flattening: (Default inf)
            The inverse flattening, 1/f

    Keyword Args:
        name: (str) (Default None)
            A human-readable name, e.g. "WGS 84"
    """

    @validate_call
    def __init__(
        self,
        semi_major_axis: float,
        inverse_flattening: float = math.inf,
        name: Optional[str] = None,
    ):
        if not semi_major_axis > 0 or math.isinf(semi_major_axis):
            raise ValueError(f'semi-major axis must be a positive finite length, got {semi_major_axis}')

        if not inverse_flattening > 1:
            raise ValueError(f'inverse flattening must be greater than 1, got {inverse_flattening}')

        self._a = semi_major_axis
        self._f_inv = inverse_flattening
        self.name = name

        self._f = 0. if math.isinf(inverse_flattening) else 1 / inverse_flattening
        self._b = semi_major_axis * (1 - self._f)
        self._e_squared = 2 * self._f - self._f ** 2
        self._e = math.sqrt(self._e_squared)

    @classmethod
    def from_a_f_inv(cls, a: float, f_inv: float, name: Optional[str] = None) -> Self:
        """Creates an ellipsoid from its semi-major axis and inverse flattening"""
        return cls(a, f_inv, name=name)

    @classmethod
    def from_a_b(cls, a: float, b: float, name: Optional[str] = None) -> Self:
        """
        Creates an ellipsoid from its semi-major and semi-minor axes.

        Args:
            a:
                The semi-major axis, in meters

            b:
                The semi-minor axis, in meters. Equal axes define a sphere.

        Returns:
            Ellipsoid
        """
        if not 0 < b <= a:
            raise ValueError(f'semi-minor axis must be in (0, {a}], got {b}')

        f_inv = math.inf if a == b else a / (a - b)
        return cls(a, f_inv, name=name)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self._a == other._a and self._f_inv == other._f_inv

    def __hash__(self):
        return hash((self._a, self._f_inv))

    def __repr__(self):
        name = f' {self.name}' if self.name else ''
        return f'<Ellipsoid{name} a={self._a} 1/f={self._f_inv}>'

    @property
    def a(self) -> float:
        """The semi-major axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """The semi-minor axis, in meters"""
        return self._b

    @property
    def f(self) -> float:
        """The flattening"""
        return self._f

    @property
    def inverse_flattening(self) -> float:
        return self._f_inv

    @property
    def e(self) -> float:
        """The first eccentricity"""
        return self._e

    @property
    def e_squared(self) -> float:
        return self._e_squared

    @property
    def second_eccentricity(self) -> float:
        """The second eccentricity, sqrt(e^2 / (1 - e^2))"""
        return math.sqrt(self._e_squared / (1 - self._e_squared))

    @property
    def authalic_radius(self) -> float:
        """The radius of the sphere with the same surface area as this ellipsoid"""
        if self._e == 0:
            return self._a

        e = self._e
        return self._a * math.sqrt(
            (1 - (1 - self._e_squared) / (2 * e) * math.log((1 - e) / (1 + e))) * 0.5
        )

    def rho(self, lat):
        """
        The radius of curvature in the meridian.

        Args:
            lat:
                Geodetic latitude, in radians

        Returns:
            The radius in meters
        """
        with np.errstate(all='ignore'):
            return self._a * (1 - self._e_squared) / (1 - self._e_squared * np.sin(lat) ** 2) ** 1.5

    def nu(self, lat):
        """
        The radius of curvature in the prime vertical.

        Args:
            lat:
                Geodetic latitude, in radians

        Returns:
            The radius in meters
        """
        with np.errstate(all='ignore'):
            return self._a / np.sqrt(1 - self._e_squared * np.sin(lat) ** 2)

    def conformal_radius(self, lat):
        """The radius of the conformal sphere at a latitude (radians), sqrt(rho * nu)"""
        with np.errstate(all='ignore'):
            return np.sqrt(self.rho(lat) * self.nu(lat))

    def rad_to_geocentric(self, lon, lat, height=0.) -> Tuple:
        """
        Converts geodetic coordinates to earth-centered, earth-fixed cartesian
        coordinates.

        Args:
            lon:
                Longitude in radians

            lat:
                Latitude in radians

            height:
                Ellipsoidal height in meters

        Returns:
            (x, y, z) in meters
        """
        with np.errstate(all='ignore'):
            sin_lat, cos_lat = np.sin(lat), np.cos(lat)
            nu = self._a / np.sqrt(1 - self._e_squared * sin_lat ** 2)
            x = (nu + height) * cos_lat * np.cos(lon)
            y = (nu + height) * cos_lat * np.sin(lon)
            z = ((1 - self._e_squared) * nu + height) * sin_lat
            return x, y, z

    def deg_to_geocentric(self, lon, lat, height=0.) -> Tuple:
        """
        Converts geodetic coordinates to earth-centered, earth-fixed cartesian
        coordinates.

        Args:
            lon:
                Longitude in degrees

            lat:
                Latitude in degrees

            height:
                Ellipsoidal height in meters

        Returns:
            (x, y, z) in meters
        """
        return self.rad_to_geocentric(np.radians(lon), np.radians(lat), height)

    def geocentric_to_rad(self, x, y, z) -> Tuple:
        """
        Converts earth-centered, earth-fixed cartesian coordinates to geodetic
        coordinates using Bowring's closed form.

        Args:
            x, y, z:
                Cartesian coordinates in meters

        Returns:
            (lon, lat, height), angles in radians and height in meters
        """
        a, b, e_squared = self._a, self._b, self._e_squared
        epsilon = e_squared / (1 - e_squared)
        with np.errstate(all='ignore'):
            lon = np.arctan2(y, x)
            p = np.hypot(x, y)
            q = np.arctan2(z * a, p * b)
            lat = np.arctan2(
                z + epsilon * b * np.sin(q) ** 3,
                p - e_squared * a * np.cos(q) ** 3
            )
            sin_lat = np.sin(lat)
            height = p * np.cos(lat) + z * sin_lat - a * np.sqrt(1 - e_squared * sin_lat ** 2)
            return lon, lat, height

    def geocentric_to_deg(self, x, y, z) -> Tuple:
        """
        Converts earth-centered, earth-fixed cartesian coordinates to geodetic
        coordinates.

        Args:
            x, y, z:
                Cartesian coordinates in meters

        Returns:
            (lon, lat, height), angles in degrees and height in meters
        """
        lon, lat, height = self.geocentric_to_rad(x, y, z)
        return np.degrees(lon), np.degrees(lat), height

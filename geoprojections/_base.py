"""
Base class declarations for geoprojections
"""

from __future__ import annotations

__all__ = ['ProjectionBase']

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping, Optional, Tuple

import numpy as np
from typing_extensions import Self

from geoprojections.ellipsoid import Ellipsoid
from geoprojections.utils.mixins import LoggingMixin


class ProjectionBase(LoggingMixin, ABC):
    """
    Abstract class for a map projection bound to an ellipsoid.

    Subclasses receive their defining parameters as keyword arguments in
    degrees, meters or unity, derive every constant they need once in
    __init__, and implement the radian conversions. Coordinates are always
    ordered (x, y): (longitude, latitude) or (easting, northing).
    """

    METHOD_CODE: ClassVar[Optional[int]] = None
    METHOD_NAME: ClassVar[str] = ''

    # Keyword argument name -> EPSG parameter code
    PARAMETER_CODES: ClassVar[Dict[str, int]] = {}

    def __init__(self, ellipsoid: Ellipsoid, **parameters: float):
        super().__init__()
        unknown = set(parameters) - set(self.PARAMETER_CODES)
        if unknown:
            raise ValueError(
                f'Unexpected parameters for {self.__class__.__name__}: {", ".join(sorted(unknown))}'
            )

        self.ellipsoid = ellipsoid
        self.parameters: Mapping[str, float] = MappingProxyType(
            {key: float(value) for key, value in parameters.items()}
        )

    @classmethod
    def from_epsg_parameters(cls, parameters: Mapping[int, float], ellipsoid: Ellipsoid) -> Self:
        """
        Creates the projection from EPSG parameter codes.

        Args:
            parameters:
                A mapping of EPSG parameter code to value, already converted
                to degrees, meters or unity. Extra codes are ignored.

            ellipsoid:
                The ellipsoid the projection operates on

        Returns:
            The projection
        """
        kwargs = {}
        for name, code in cls.PARAMETER_CODES.items():
            if code not in parameters:
                raise ValueError(
                    f'{cls.METHOD_NAME} requires parameter {code} ({name}), which was not provided'
                )
            kwargs[name] = parameters[code]

        return cls(ellipsoid, **kwargs)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False

        return self.ellipsoid == other.ellipsoid and self.parameters == other.parameters

    def __hash__(self):
        return hash((self.__class__.__name__, self.ellipsoid, tuple(sorted(self.parameters.items()))))

    def __repr__(self):
        params = ', '.join(f'{key}={value}' for key, value in self.parameters.items())
        return f'<{self.__class__.__name__}({params}) on {self.ellipsoid!r}>'

    @property
    def origin(self) -> Tuple[float, float]:
        """The (longitude, latitude) of the projection origin, in degrees"""
        return self.parameters.get('lon_orig', 0.), self.parameters.get('lat_orig', 0.)

    @abstractmethod
    def rad_to_projected(self, lon, lat) -> Tuple:
        """
        Projects geographic coordinates.

        Args:
            lon:
                Longitude(s) in radians

            lat:
                Latitude(s) in radians

        Returns:
            (easting, northing) in meters
        """

    @abstractmethod
    def projected_to_rad(self, easting, northing) -> Tuple:
        """
        Unprojects planar coordinates.

        Args:
            easting:
                Easting(s) in meters

            northing:
                Northing(s) in meters

        Returns:
            (longitude, latitude) in radians
        """

    def deg_to_projected(self, lon, lat) -> Tuple:
        """
        Projects geographic coordinates.

        Args:
            lon:
                Longitude(s) in degrees

            lat:
                Latitude(s) in degrees

        Returns:
            (easting, northing) in meters
        """
        with np.errstate(all='ignore'):
            return self.rad_to_projected(np.radians(lon), np.radians(lat))

    def projected_to_deg(self, easting, northing) -> Tuple:
        """
        Unprojects planar coordinates.

        Args:
            easting:
                Easting(s) in meters

            northing:
                Northing(s) in meters

        Returns:
            (longitude, latitude) in degrees
        """
        with np.errstate(all='ignore'):
            lon, lat = self.projected_to_rad(easting, northing)
            return np.degrees(lon), np.degrees(lat)

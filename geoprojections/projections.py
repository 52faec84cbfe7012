"""
Projection method dispatch, plus the identity "projection" of geographic CRS
"""

__all__ = ['IdentityProjection', 'PROJECTION_METHODS', 'build_projection']

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Type

import numpy as np

from geoprojections._base import ProjectionBase
from geoprojections._numeric import as_float
from geoprojections.azimuthal import (
    LambertAzimuthalEqualArea, ObliqueStereographic, PolarStereographicA
)
from geoprojections.conic import (
    AlbersEqualArea, LambertConicConformal1SP, LambertConicConformal2SP
)
from geoprojections.ellipsoid import Ellipsoid
from geoprojections.mercator import PseudoMercator, TransverseMercator


class IdentityProjection(ProjectionBase):
    """
    The passthrough used by geographic 2D CRS: "projected" coordinates are
    the longitude and latitude in degrees.
    """

    METHOD_NAME = 'Geographic 2D'

    def __init__(self, ellipsoid: Ellipsoid):
        super().__init__(ellipsoid)

    def rad_to_projected(self, lon, lat) -> Tuple:
        return np.degrees(lon), np.degrees(lat)

    def projected_to_rad(self, easting, northing) -> Tuple:
        return np.radians(easting), np.radians(northing)

    def deg_to_projected(self, lon, lat) -> Tuple:
        return as_float(lon), as_float(lat)

    def projected_to_deg(self, easting, northing) -> Tuple:
        return as_float(easting), as_float(northing)


_METHODS: Dict[int, Type[ProjectionBase]] = {
    cls.METHOD_CODE: cls for cls in (
        AlbersEqualArea,
        LambertAzimuthalEqualArea,
        LambertConicConformal1SP,
        LambertConicConformal2SP,
        ObliqueStereographic,
        PolarStereographicA,
        PseudoMercator,
        TransverseMercator,
    )
}

# EPSG method code -> projection class
PROJECTION_METHODS: Mapping[int, Type[ProjectionBase]] = MappingProxyType(_METHODS)


def build_projection(
    method_code: Optional[int],
    parameters: Mapping[int, float],
    ellipsoid: Ellipsoid,
) -> Optional[ProjectionBase]:
    """
    Creates a projection from an EPSG method code and its parameters.

    Args:
        method_code:
            The EPSG operation method code, or None for a geographic CRS

        parameters:
            A mapping of EPSG parameter code to value, in degrees, meters
            or unity

        ellipsoid:
            The ellipsoid the projection operates on

    Returns:
        The projection, or None if the method is not implemented
    """
    if method_code is None:
        return IdentityProjection(ellipsoid)

    cls = PROJECTION_METHODS.get(method_code)
    if cls is None:
        return None

    return cls.from_epsg_parameters(parameters, ellipsoid)

"""
geoprojections: EPSG map projections for converting between geographic and
projected coordinates
"""

from geoprojections._version import __version__  # noqa: F401
from geoprojections._base import ProjectionBase
from geoprojections.azimuthal import (
    LambertAzimuthalEqualArea, ObliqueStereographic, PolarStereographicA
)
from geoprojections.conic import (
    AlbersEqualArea, LambertConicConformal1SP, LambertConicConformal2SP
)
from geoprojections.ellipsoid import Ellipsoid
from geoprojections.mercator import PseudoMercator, TransverseMercator
from geoprojections.projections import IdentityProjection, PROJECTION_METHODS, build_projection
from geoprojections.registry import (
    RegistryEntry, create_projection, custom_projection, get_ellipsoid, get_ellipsoid_code,
    get_projection, get_reference_system_name, get_registry_entry, reference_systems
)
from geoprojections.utils.logging import LOGGER

__all__ = [
    'AlbersEqualArea',
    'Ellipsoid',
    'IdentityProjection',
    'LOGGER',
    'LambertAzimuthalEqualArea',
    'LambertConicConformal1SP',
    'LambertConicConformal2SP',
    'ObliqueStereographic',
    'PROJECTION_METHODS',
    'PolarStereographicA',
    'ProjectionBase',
    'PseudoMercator',
    'RegistryEntry',
    'TransverseMercator',
    'build_projection',
    'create_projection',
    'custom_projection',
    'get_ellipsoid',
    'get_ellipsoid_code',
    'get_projection',
    'get_reference_system_name',
    'get_registry_entry',
    'reference_systems',
]

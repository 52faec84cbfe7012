"""
Registry of supported EPSG coordinate reference systems, and the lookup
functions over it.

The registry is built once, when this module is first imported, and is
read-only afterwards. Every lookup returns None for a code that is not
registered.
"""

__all__ = [
    'RegistryEntry', 'create_projection', 'custom_projection', 'get_ellipsoid',
    'get_ellipsoid_code', 'get_projection', 'get_reference_system_name',
    'get_registry_entry', 'reference_systems'
]

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional, Tuple

from geoprojections._base import ProjectionBase
from geoprojections._epsg_data import CRS_ROWS, ELLIPSOID_ROWS, PRIME_MERIDIAN_ROWS
from geoprojections.conversion import convert_parameter, convert_to_degrees
from geoprojections.ellipsoid import Ellipsoid
from geoprojections.projections import PROJECTION_METHODS, build_projection
from geoprojections.utils.logging import LOGGER, warn_once


class RegistryEntry(NamedTuple):
    """A registered coordinate reference system"""
    projection: ProjectionBase
    ellipsoid_code: int
    name: str
    method_code: Optional[int]
    parameters: Mapping[int, float]


def _build_ellipsoids() -> Dict[int, Ellipsoid]:
    ellipsoids = {}
    for code, name, a, f_inv, b in ELLIPSOID_ROWS:
        if f_inv is not None:
            ellipsoids[code] = Ellipsoid.from_a_f_inv(a, f_inv, name=name)
        else:
            ellipsoids[code] = Ellipsoid.from_a_b(a, b, name=name)

    return ellipsoids


def _build_prime_meridians() -> Dict[int, float]:
    """Greenwich longitude of each prime meridian, in degrees"""
    return {
        code: convert_to_degrees(longitude, uom_code)
        for code, _, longitude, uom_code in PRIME_MERIDIAN_ROWS
    }


def _build_entries(
    ellipsoids: Mapping[int, Ellipsoid],
    prime_meridians: Mapping[int, float],
) -> Dict[int, RegistryEntry]:
    entries = {}
    for crs_code, method_code, ellipsoid_code, pm_code, raw_params, name in CRS_ROWS:
        if prime_meridians.get(pm_code) != 0:
            LOGGER.debug(
                'Skipping EPSG:%s (%s); prime meridian %s is not Greenwich (%s degrees)',
                crs_code, name, pm_code, prime_meridians.get(pm_code)
            )
            continue

        parameters = MappingProxyType({
            param_code: convert_parameter(value, uom_code)
            for param_code, value, uom_code in raw_params
        })
        projection = build_projection(method_code, parameters, ellipsoids[ellipsoid_code])
        if projection is None:
            LOGGER.debug('Skipping EPSG:%s (%s); method %s is not implemented', crs_code, name, method_code)
            continue

        entries[crs_code] = RegistryEntry(projection, ellipsoid_code, name, method_code, parameters)

    return entries


_ELLIPSOIDS: Mapping[int, Ellipsoid] = MappingProxyType(_build_ellipsoids())
_PRIME_MERIDIANS: Mapping[int, float] = MappingProxyType(_build_prime_meridians())
_REGISTRY: Mapping[int, RegistryEntry] = MappingProxyType(_build_entries(_ELLIPSOIDS, _PRIME_MERIDIANS))

LOGGER.debug(
    'Registered %s coordinate reference systems on %s ellipsoids',
    len(_REGISTRY), len(_ELLIPSOIDS)
)


def get_registry_entry(crs_code: int) -> Optional[RegistryEntry]:
    """
    Looks up everything registered for a coordinate reference system.

    Args:
        crs_code:
            The EPSG code of the CRS, e.g. 32632

    Returns:
        The RegistryEntry, or None if the code is not registered
    """
    return _REGISTRY.get(crs_code)


def get_projection(crs_code: int) -> Optional[ProjectionBase]:
    """
    Returns the projection of a coordinate reference system.

    Args:
        crs_code:
            The EPSG code of the CRS, e.g. 32632

    Returns:
        The projection, or None if the code is not registered
    """
    entry = _REGISTRY.get(crs_code)
    return entry.projection if entry else None


def get_ellipsoid(ellipsoid_code: int) -> Optional[Ellipsoid]:
    """
    Returns an ellipsoid by its EPSG code (e.g. 7030 for WGS 84), or None
    if the code is not registered.
    """
    return _ELLIPSOIDS.get(ellipsoid_code)


def get_ellipsoid_code(crs_code: int) -> Optional[int]:
    """Returns the EPSG code of the ellipsoid a CRS is defined on"""
    entry = _REGISTRY.get(crs_code)
    return entry.ellipsoid_code if entry else None


def get_reference_system_name(crs_code: int) -> Optional[str]:
    """Returns the name of a CRS, e.g. 'WGS 84 / UTM zone 32N'"""
    entry = _REGISTRY.get(crs_code)
    return entry.name if entry else None


def reference_systems() -> Iterator[Tuple[int, str]]:
    """
    Iterates the registered coordinate reference systems.

    Returns:
        (crs_code, name) pairs, ordered by code
    """
    for code in sorted(_REGISTRY):
        yield code, _REGISTRY[code].name


def create_projection(crs_code: int, ellipsoid: Ellipsoid) -> Optional[ProjectionBase]:
    """
    Creates the projection of a registered CRS on a different ellipsoid.
    No datum transformation is implied; only the ellipsoid changes.

    Args:
        crs_code:
            The EPSG code of the CRS

        ellipsoid:
            The ellipsoid to use instead of the CRS's own

    Returns:
        The projection, or None if the code is not registered
    """
    entry = _REGISTRY.get(crs_code)
    if entry is None:
        return None

    return build_projection(entry.method_code, entry.parameters, ellipsoid)


def custom_projection(
    method_code: int,
    parameters: Mapping[int, float],
    ellipsoid: Ellipsoid,
) -> Optional[ProjectionBase]:
    """
    Creates a projection that is not in the registry.

    Args:
        method_code:
            The EPSG operation method code, e.g. 9807 for Transverse Mercator

        parameters:
            A mapping of EPSG parameter code to value, in degrees, meters or
            unity (see geoprojections.conversion.convert_parameter)

        ellipsoid:
            The ellipsoid the projection operates on

    Returns:
        The projection, or None if the method is not implemented
    """
    if method_code not in PROJECTION_METHODS:
        warn_once(f'EPSG operation method {method_code} is not implemented')
        return None

    return build_projection(method_code, parameters, ellipsoid)

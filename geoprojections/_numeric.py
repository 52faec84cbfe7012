"""
Numeric building blocks shared by the projection methods: auxiliary latitude
functions, their series inversions and the bounded solvers.

All functions accept floats or numpy arrays and are evaluated with numpy
ufuncs; callers suppress floating point warnings via np.errstate.
"""

__all__ = [
    'MAX_ITERATIONS', 'TOLERANCE', 'as_float', 'authalic_q', 'authalic_to_geodetic_latitude',
    'conformal_m', 'conformal_t', 'conformal_to_geodetic_latitude', 'fixed_point',
    'isometric_latitude', 'latitude_from_authalic_q', 'latitude_from_polar_authalic_gap',
    'polar_authalic_gap', 'unwrap'
]

import logging
from typing import Callable

import numpy as np

from geoprojections.utils.logging import LOGGER

# Every solver stops after this many steps
MAX_ITERATIONS = 15

# Radians, roughly 6 micrometers on the ground
TOLERANCE = 1e-12


def unwrap(value):
    """Converts 0-d arrays (as produced by np.where on scalars) back to numpy scalars"""
    return np.asarray(value)[()]


def as_float(value):
    """Coerces floats, sequences or arrays to numpy float64 (scalar or array)"""
    return np.asarray(value, dtype=np.float64)[()]


def conformal_t(lat, e: float):
    """
    The conformal "t" function of the Lambert and polar stereographic methods.

    Args:
        lat: Geodetic latitude in radians
        e: The ellipsoid eccentricity

    Returns:
        tan(pi/4 - lat/2) / ((1 - e sin(lat)) / (1 + e sin(lat))) ^ (e/2)
    """
    e_sin = e * np.sin(lat)
    return np.tan(np.pi / 4 - lat / 2) / ((1 - e_sin) / (1 + e_sin)) ** (e / 2)


def conformal_m(lat, e_squared: float):
    """The "m" function, cos(lat) / sqrt(1 - e^2 sin^2(lat))"""
    return np.cos(lat) / np.sqrt(1 - e_squared * np.sin(lat) ** 2)


def authalic_q(lat, e: float, e_squared: float):
    """
    The authalic "q" (or alpha) function used by the equal area methods.

    Args:
        lat: Geodetic latitude in radians
        e: The ellipsoid eccentricity
        e_squared: The ellipsoid eccentricity, squared

    Returns:
        (1 - e^2) * [sin(lat) / (1 - e^2 sin^2(lat)) - 1/(2e) ln((1 - e sin(lat)) / (1 + e sin(lat)))]
    """
    sin_lat = np.sin(lat)
    if e == 0:
        return 2 * sin_lat

    return (1 - e_squared) * (
        sin_lat / (1 - e_squared * sin_lat ** 2)
        - (1 / (2 * e)) * np.log((1 - e * sin_lat) / (1 + e * sin_lat))
    )


def isometric_latitude(lat, e: float):
    """The isometric latitude, asinh(tan(lat)) - e atanh(e sin(lat))"""
    return np.arcsinh(np.tan(lat)) - e * np.arctanh(e * np.sin(lat))


def conformal_to_geodetic_latitude(chi, e_squared: float):
    """
    Converts a conformal latitude to a geodetic latitude using the closed
    series in e^2 (to e^8). No iteration required.

    Args:
        chi: Conformal latitude in radians
        e_squared: The ellipsoid eccentricity, squared

    Returns:
        Geodetic latitude in radians
    """
    e2, e4, e6, e8 = e_squared, e_squared ** 2, e_squared ** 3, e_squared ** 4
    return (
        chi
        + (e2 / 2 + 5 * e4 / 24 + e6 / 12 + 13 * e8 / 360) * np.sin(2 * chi)
        + (7 * e4 / 48 + 29 * e6 / 240 + 811 * e8 / 11520) * np.sin(4 * chi)
        + (7 * e6 / 120 + 81 * e8 / 1120) * np.sin(6 * chi)
        + (4279 * e8 / 161280) * np.sin(8 * chi)
    )


def authalic_to_geodetic_latitude(beta, e_squared: float):
    """Converts an authalic latitude to a geodetic latitude (series to e^6)"""
    e2, e4, e6 = e_squared, e_squared ** 2, e_squared ** 3
    return (
        beta
        + (e2 / 3 + 31 * e4 / 180 + 517 * e6 / 5040) * np.sin(2 * beta)
        + (23 * e4 / 360 + 251 * e6 / 3780) * np.sin(4 * beta)
        + (761 * e6 / 45360) * np.sin(6 * beta)
    )


def fixed_point(
    step: Callable,
    initial,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
    logger: logging.Logger = LOGGER,
):
    """
    Iterates `value = step(value)` until every element moves by less than
    the tolerance, or until the iteration cap is reached.

    Elements that are nan (out-of-domain input) do not hold up convergence.
    When the cap is reached the last iterate is returned and a debug record
    is emitted.

    Args:
        step:
            The update function. Must accept and return floats or arrays of
            the same shape as `initial`.

        initial:
            The starting estimate

    Keyword Args:
        tolerance: (float) (Default 1e-12)
            The absolute update size below which the solve is complete

        max_iterations: (int) (Default 15)
            The iteration cap

        logger: (logging.Logger) (Default package logger)
            Where to report non-convergence

    Returns:
        The converged (or last) estimate
    """
    current = initial
    for _ in range(max_iterations):
        updated = step(current)
        if not np.any(np.abs(updated - current) >= tolerance):
            return updated

        current = updated

    logger.debug(
        'Solver did not converge to %s within %s iterations; returning last estimate',
        tolerance, max_iterations
    )
    return current


def latitude_from_authalic_q(q, initial, e: float, e_squared: float, logger: logging.Logger = LOGGER):
    """
    Solves authalic_q(lat) = q for the geodetic latitude by Newton iteration
    (Snyder eq. 3-16), starting from `initial`. Poles are held fixed.

    Args:
        q: The target value of the authalic q function
        initial: The starting latitude in radians, usually from the authalic series
        e: The ellipsoid eccentricity
        e_squared: The ellipsoid eccentricity, squared

    Returns:
        Geodetic latitude in radians
    """
    if e == 0:
        return initial

    def _step(lat):
        sin_lat, cos_lat = np.sin(lat), np.cos(lat)
        one_minus = 1 - e_squared * sin_lat ** 2
        delta = one_minus ** 2 / (2 * cos_lat) * (
            q / (1 - e_squared)
            - sin_lat / one_minus
            + (1 / (2 * e)) * np.log((1 - e * sin_lat) / (1 + e * sin_lat))
        )
        return np.where(np.abs(cos_lat) < 1e-12, lat, lat + delta)

    return unwrap(fixed_point(_step, initial, logger=logger))


def _polar_gap(w, e: float, e_squared: float):
    # q(pi/2) - q(lat) written in w = 1 - sin(lat)
    if e == 0:
        return 2 * w

    s = 1 - w
    return (
        w * (1 + e_squared * s) / (1 - e_squared * s ** 2)
        + (1 - e_squared) / (2 * e) * (np.log1p(e * w / (1 - e)) - np.log1p(-e * w / (1 + e)))
    )


def polar_authalic_gap(lat, e: float, e_squared: float):
    """
    The difference authalic_q(pi/2) - authalic_q(lat), evaluated without
    cancellation so it keeps full precision next to the north pole.

    Args:
        lat: Geodetic latitude in radians
        e: The ellipsoid eccentricity
        e_squared: The ellipsoid eccentricity, squared

    Returns:
        The non-negative gap in q
    """
    return _polar_gap(2 * np.sin(np.pi / 4 - lat / 2) ** 2, e, e_squared)


def latitude_from_polar_authalic_gap(gap, e: float, e_squared: float, logger: logging.Logger = LOGGER):
    """Inverse of polar_authalic_gap, by Newton iteration on 1 - sin(lat)"""
    def _step(w):
        s = 1 - w
        return w - (_polar_gap(w, e, e_squared) - gap) * (1 - e_squared * s ** 2) ** 2 / (2 * (1 - e_squared))

    w = fixed_point(_step, gap * (1 - e_squared) / 2, logger=logger)
    return np.pi / 2 - 2 * np.arcsin(np.sqrt(w / 2))

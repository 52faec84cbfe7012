"""
Module for EPSG unit-of-measure conversions
"""
__all__ = [
    'convert_parameter', 'convert_to_degrees', 'convert_to_meters',
    'sexagesimal_to_degrees'
]

from decimal import Decimal
import math

from geoprojections._const import (
    UOM_DEGREE, UOM_DEGREE_SUPPLIER, UOM_FOOT, UOM_GRAD, UOM_KILOMETRE, UOM_METRE,
    UOM_RADIAN, UOM_SEXAGESIMAL_DMS, UOM_UNITY, UOM_US_SURVEY_FOOT
)

_LENGTH_FACTORS = {
    UOM_METRE: 1.0,
    UOM_FOOT: 0.3048,
    UOM_US_SURVEY_FOOT: 1200 / 3937,
    UOM_KILOMETRE: 1000.0,
}

_ANGLE_FACTORS = {
    UOM_DEGREE: 1.0,
    UOM_DEGREE_SUPPLIER: 1.0,
    UOM_RADIAN: 180 / math.pi,
    UOM_GRAD: 0.9,
}


def sexagesimal_to_degrees(value: float) -> float:
    """
    Converts an angle in EPSG sexagesimal DMS encoding (unit 9110) to decimal degrees.

    The encoding packs degrees, minutes and seconds into the digits of a decimal
    number: DDD.MMSSsss, e.g. 52.0922178 is 52°09'22.178". The digits are read
    from the shortest decimal representation of the value, so no binary
    floating point residue leaks into the minutes or seconds.

    Args:
        value (float): The angle, sexagesimal encoded.

    Returns:
        float: The angle in decimal degrees.
    """
    sign = -1 if value < 0 else 1
    packed = Decimal(repr(abs(float(value))))
    degrees = int(packed)
    minutes_seconds = (packed - degrees) * 100
    minutes = int(minutes_seconds)
    seconds = (minutes_seconds - minutes) * 100
    return sign * (degrees + minutes / 60 + float(seconds) / 3600)


def convert_to_degrees(value: float, uom_code: int) -> float:
    """
    Converts an angle to decimal degrees.

    Args:
        value (float): The angle value.
        uom_code (int): The EPSG unit of measure of the value (radian = 9101,
        degree = 9102 or 9122, grad = 9105, sexagesimal DMS = 9110).

    Returns:
        float: The angle in decimal degrees.
    """
    if uom_code == UOM_SEXAGESIMAL_DMS:
        return sexagesimal_to_degrees(value)

    if uom_code in _ANGLE_FACTORS:
        return value * _ANGLE_FACTORS[uom_code]

    raise ValueError(f'Unsupported angular unit of measure: {uom_code}')


def convert_to_meters(distance: float, uom_code: int) -> float:
    """
    Converts a length to meters.

    Args:
        distance (float): The length value.
        uom_code (int): The EPSG unit of measure of the value (metre = 9001,
        foot = 9002, US survey foot = 9003, kilometre = 9036).

    Returns:
        float: The length in meters.
    """
    if uom_code in _LENGTH_FACTORS:
        return distance * _LENGTH_FACTORS[uom_code]

    raise ValueError(f'Unsupported length unit of measure: {uom_code}')


def convert_parameter(value: float, uom_code: int) -> float:
    """
    Converts an operation parameter value to the units projections are defined
    in: degrees for angles, meters for lengths, unity for scale factors.

    Args:
        value (float): The parameter value.
        uom_code (int): The EPSG unit of measure of the value.

    Returns:
        float
    """
    if uom_code == UOM_UNITY:
        return float(value)

    if uom_code in _LENGTH_FACTORS:
        return convert_to_meters(value, uom_code)

    return convert_to_degrees(value, uom_code)

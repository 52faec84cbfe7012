"""
Constants declarations for geoprojections. Codes are EPSG registry codes.
"""

# Operation methods
METHOD_PSEUDO_MERCATOR = 1024
METHOD_LAMBERT_CONIC_1SP = 9801
METHOD_LAMBERT_CONIC_2SP = 9802
METHOD_TRANSVERSE_MERCATOR = 9807
METHOD_OBLIQUE_STEREOGRAPHIC = 9809
METHOD_POLAR_STEREOGRAPHIC_A = 9810
METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA = 9820
METHOD_ALBERS_EQUAL_AREA = 9822

# Operation parameters
PARAM_LAT_NATURAL_ORIGIN = 8801
PARAM_LON_NATURAL_ORIGIN = 8802
PARAM_SCALE_NATURAL_ORIGIN = 8805
PARAM_FALSE_EASTING = 8806
PARAM_FALSE_NORTHING = 8807
PARAM_LAT_FALSE_ORIGIN = 8821
PARAM_LON_FALSE_ORIGIN = 8822
PARAM_LAT_1ST_PARALLEL = 8823
PARAM_LAT_2ND_PARALLEL = 8824
PARAM_EASTING_FALSE_ORIGIN = 8826
PARAM_NORTHING_FALSE_ORIGIN = 8827

# Units of measure
UOM_METRE = 9001
UOM_FOOT = 9002
UOM_US_SURVEY_FOOT = 9003
UOM_KILOMETRE = 9036
UOM_RADIAN = 9101
UOM_DEGREE = 9102
UOM_GRAD = 9105
UOM_SEXAGESIMAL_DMS = 9110
UOM_DEGREE_SUPPLIER = 9122
UOM_UNITY = 9201

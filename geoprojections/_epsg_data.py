"""
Defining parameters of the supported EPSG coordinate reference systems.

Generated from the EPSG geodetic parameter dataset; do not edit by hand.

ELLIPSOID_ROWS:
    (ellipsoid_code, name, semi_major_axis, inverse_flattening, semi_minor_axis)
    exactly one of inverse_flattening and semi_minor_axis is set

PRIME_MERIDIAN_ROWS:
    (prime_meridian_code, name, greenwich_longitude, uom_code)

CRS_ROWS:
    (crs_code, method_code, ellipsoid_code, prime_meridian_code,
     ((parameter_code, value, uom_code), ...), name)
    a method_code of None marks a geographic 2D CRS
"""
# pylint: disable=too-many-lines

ELLIPSOID_ROWS = (
    (7001, 'Airy 1830', 6377563.396, 299.3249646, None),
    (7003, 'Australian National Spheroid', 6378160.0, 298.25, None),
    (7004, 'Bessel 1841', 6377397.155, 299.1528128, None),
    (7008, 'Clarke 1866', 6378206.4, None, 6356583.8),
    (7011, 'Clarke 1880 (IGN)', 6378249.2, None, 6356515.0),
    (7012, 'Clarke 1880 (RGS)', 6378249.145, 293.465, None),
    (7019, 'GRS 1980', 6378137.0, 298.257222101, None),
    (7022, 'International 1924', 6378388.0, 297.0, None),
    (7024, 'Krassowsky 1940', 6378245.0, 298.3, None),
    (7030, 'WGS 84', 6378137.0, 298.257223563, None),
    (7036, 'GRS 1967', 6378160.0, 298.247167427, None),
    (7043, 'WGS 72', 6378135.0, 298.26, None),
)

PRIME_MERIDIAN_ROWS = (
    (8901, 'Greenwich', 0.0, 9102),
    (8903, 'Paris', 2.5969213, 9105),
)

CRS_ROWS = (
    # Geographic 2D
    (4121, None, 7019, 8901, (), 'GGRS87'),
    (4141, None, 7019, 8901, (), 'Israel 1993'),
    (4167, None, 7019, 8901, (), 'NZGD2000'),
    (4171, None, 7019, 8901, (), 'RGF93 v1'),
    (4179, None, 7024, 8901, (), 'Pulkovo 1942(58)'),
    (4230, None, 7022, 8901, (), 'ED50'),
    (4242, None, 7008, 8901, (), 'JAD69'),
    (4258, None, 7019, 8901, (), 'ETRS89'),
    (4267, None, 7008, 8901, (), 'NAD27'),
    (4269, None, 7019, 8901, (), 'NAD83'),
    (4277, None, 7001, 8901, (), 'OSGB36'),
    (4283, None, 7019, 8901, (), 'GDA94'),
    (4289, None, 7004, 8901, (), 'Amersfoort'),
    (4313, None, 7022, 8901, (), 'Belge 1972'),
    (4314, None, 7004, 8901, (), 'DHDN'),
    (4322, None, 7043, 8901, (), 'WGS 72'),
    (4326, None, 7030, 8901, (), 'WGS 84'),
    (4617, None, 7019, 8901, (), 'NAD83(CSRS)'),
    (4619, None, 7019, 8901, (), 'SWEREF99'),
    (4807, None, 7011, 8903, (), 'NTF (Paris)'),

    # Transverse Mercator
    (32601, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -177, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 1N'),
    (32602, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -171, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 2N'),
    (32603, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 3N'),
    (32604, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 4N'),
    (32605, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 5N'),
    (32606, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 6N'),
    (32607, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 7N'),
    (32608, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 8N'),
    (32609, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 9N'),
    (32610, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 10N'),
    (32611, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 11N'),
    (32612, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 12N'),
    (32613, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 13N'),
    (32614, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 14N'),
    (32615, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 15N'),
    (32616, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 16N'),
    (32617, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 17N'),
    (32618, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 18N'),
    (32619, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 19N'),
    (32620, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 20N'),
    (32621, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 21N'),
    (32622, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 22N'),
    (32623, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 23N'),
    (32624, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 24N'),
    (32625, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 25N'),
    (32626, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 26N'),
    (32627, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 27N'),
    (32628, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 28N'),
    (32629, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 29N'),
    (32630, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 30N'),
    (32631, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 31N'),
    (32632, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 32N'),
    (32633, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 33N'),
    (32634, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 34N'),
    (32635, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 35N'),
    (32636, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 36N'),
    (32637, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 37N'),
    (32638, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 38N'),
    (32639, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 39N'),
    (32640, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 40N'),
    (32641, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 41N'),
    (32642, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 42N'),
    (32643, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 43N'),
    (32644, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 44N'),
    (32645, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 45N'),
    (32646, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 46N'),
    (32647, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 47N'),
    (32648, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 48N'),
    (32649, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 49N'),
    (32650, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 50N'),
    (32651, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 51N'),
    (32652, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 52N'),
    (32653, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 53N'),
    (32654, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 54N'),
    (32655, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 55N'),
    (32656, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 56N'),
    (32657, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 57N'),
    (32658, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 58N'),
    (32659, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 171, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 59N'),
    (32660, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 177, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'WGS 84 / UTM zone 60N'),
    (32701, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -177, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 1S'),
    (32702, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -171, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 2S'),
    (32703, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 3S'),
    (32704, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 4S'),
    (32705, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 5S'),
    (32706, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 6S'),
    (32707, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 7S'),
    (32708, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 8S'),
    (32709, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 9S'),
    (32710, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 10S'),
    (32711, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 11S'),
    (32712, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 12S'),
    (32713, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 13S'),
    (32714, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 14S'),
    (32715, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 15S'),
    (32716, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 16S'),
    (32717, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 17S'),
    (32718, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 18S'),
    (32719, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 19S'),
    (32720, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 20S'),
    (32721, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 21S'),
    (32722, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 22S'),
    (32723, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 23S'),
    (32724, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 24S'),
    (32725, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 25S'),
    (32726, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 26S'),
    (32727, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 27S'),
    (32728, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 28S'),
    (32729, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 29S'),
    (32730, 9807, 7030, 8901, ((8801, 0, 9102), (8802, -3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 30S'),
    (32731, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 31S'),
    (32732, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 32S'),
    (32733, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 33S'),
    (32734, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 34S'),
    (32735, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 35S'),
    (32736, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 36S'),
    (32737, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 37S'),
    (32738, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 38S'),
    (32739, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 39S'),
    (32740, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 40S'),
    (32741, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 41S'),
    (32742, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 42S'),
    (32743, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 43S'),
    (32744, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 44S'),
    (32745, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 45S'),
    (32746, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 46S'),
    (32747, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 47S'),
    (32748, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 48S'),
    (32749, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 49S'),
    (32750, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 50S'),
    (32751, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 51S'),
    (32752, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 52S'),
    (32753, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 53S'),
    (32754, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 54S'),
    (32755, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 55S'),
    (32756, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 56S'),
    (32757, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 57S'),
    (32758, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 58S'),
    (32759, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 171, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 59S'),
    (32760, 9807, 7030, 8901, ((8801, 0, 9102), (8802, 177, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'WGS 84 / UTM zone 60S'),
    (25828, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 28N'),
    (25829, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 29N'),
    (25830, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 30N'),
    (25831, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 31N'),
    (25832, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 32N'),
    (25833, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 33N'),
    (25834, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 34N'),
    (25835, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 35N'),
    (25836, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 36N'),
    (25837, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 37N'),
    (25838, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / UTM zone 38N'),
    (26903, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 3N'),
    (26904, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 4N'),
    (26905, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 5N'),
    (26906, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 6N'),
    (26907, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 7N'),
    (26908, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 8N'),
    (26909, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 9N'),
    (26910, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 10N'),
    (26911, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 11N'),
    (26912, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 12N'),
    (26913, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 13N'),
    (26914, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 14N'),
    (26915, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 15N'),
    (26916, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 16N'),
    (26917, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 17N'),
    (26918, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 18N'),
    (26919, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 19N'),
    (26920, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 20N'),
    (26921, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 21N'),
    (26922, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 22N'),
    (26923, 9807, 7019, 8901, ((8801, 0, 9102), (8802, -45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD83 / UTM zone 23N'),
    (26703, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -165, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 3N'),
    (26704, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -159, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 4N'),
    (26705, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 5N'),
    (26706, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 6N'),
    (26707, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 7N'),
    (26708, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 8N'),
    (26709, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 9N'),
    (26710, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 10N'),
    (26711, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 11N'),
    (26712, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 12N'),
    (26713, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -105, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 13N'),
    (26714, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -99, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 14N'),
    (26715, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -93, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 15N'),
    (26716, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -87, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 16N'),
    (26717, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -81, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 17N'),
    (26718, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -75, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 18N'),
    (26719, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -69, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 19N'),
    (26720, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -63, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 20N'),
    (26721, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -57, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 21N'),
    (26722, 9807, 7008, 8901, ((8801, 0, 9102), (8802, -51, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'NAD27 / UTM zone 22N'),
    (23028, 9807, 7022, 8901, ((8801, 0, 9102), (8802, -15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 28N'),
    (23029, 9807, 7022, 8901, ((8801, 0, 9102), (8802, -9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 29N'),
    (23030, 9807, 7022, 8901, ((8801, 0, 9102), (8802, -3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 30N'),
    (23031, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 3, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 31N'),
    (23032, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 9, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 32N'),
    (23033, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 33N'),
    (23034, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 21, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 34N'),
    (23035, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 35N'),
    (23036, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 33, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 36N'),
    (23037, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 39, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 37N'),
    (23038, 9807, 7022, 8901, ((8801, 0, 9102), (8802, 45, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ED50 / UTM zone 38N'),
    (28349, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 111, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 49'),
    (28350, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 117, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 50'),
    (28351, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 123, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 51'),
    (28352, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 129, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 52'),
    (28353, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 135, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 53'),
    (28354, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 141, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 54'),
    (28355, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 147, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 55'),
    (28356, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 153, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 10000000, 9001)), 'GDA94 / MGA zone 56'),
    (27700, 9807, 7001, 8901, ((8801, 49, 9102), (8802, -2, 9102), (8805, 0.9996012717, 9201), (8806, 400000, 9001), (8807, -100000, 9001)), 'OSGB36 / British National Grid'),
    (31467, 9807, 7004, 8901, ((8801, 0, 9102), (8802, 9, 9102), (8805, 1, 9201), (8806, 3500000, 9001), (8807, 0, 9001)), 'DHDN / 3-degree Gauss-Kruger zone 3'),
    (31468, 9807, 7004, 8901, ((8801, 0, 9102), (8802, 12, 9102), (8805, 1, 9201), (8806, 4500000, 9001), (8807, 0, 9001)), 'DHDN / 3-degree Gauss-Kruger zone 4'),
    (2193, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 173, 9102), (8805, 0.9996, 9201), (8806, 1600000, 9001), (8807, 10000000, 9001)), 'NZGD2000 / New Zealand Transverse Mercator 2000'),
    (3006, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 15, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'SWEREF99 TM'),
    (2039, 9807, 7019, 8901, ((8801, 31.4403817, 9110), (8802, 35.1216261, 9110), (8805, 1.0000067, 9201), (8806, 219529.584, 9001), (8807, 626907.39, 9001)), 'Israel 1993 / Israeli TM Grid'),
    (2100, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 24, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'GGRS87 / Greek Grid'),
    (3067, 9807, 7019, 8901, ((8801, 0, 9102), (8802, 27, 9102), (8805, 0.9996, 9201), (8806, 500000, 9001), (8807, 0, 9001)), 'ETRS89 / TM35FIN(E,N)'),

    # Lambert Conic Conformal (2SP)
    (2154, 9802, 7019, 8901, ((8821, 46.5, 9102), (8822, 3, 9102), (8823, 49, 9102), (8824, 44, 9102), (8826, 700000, 9001), (8827, 6600000, 9001)), 'RGF93 v1 / Lambert-93'),
    (3942, 9802, 7019, 8901, ((8821, 42, 9102), (8822, 3, 9102), (8823, 41.25, 9102), (8824, 42.75, 9102), (8826, 1700000, 9001), (8827, 1200000, 9001)), 'RGF93 v1 / CC42'),
    (3943, 9802, 7019, 8901, ((8821, 43, 9102), (8822, 3, 9102), (8823, 42.25, 9102), (8824, 43.75, 9102), (8826, 1700000, 9001), (8827, 2200000, 9001)), 'RGF93 v1 / CC43'),
    (3944, 9802, 7019, 8901, ((8821, 44, 9102), (8822, 3, 9102), (8823, 43.25, 9102), (8824, 44.75, 9102), (8826, 1700000, 9001), (8827, 3200000, 9001)), 'RGF93 v1 / CC44'),
    (3945, 9802, 7019, 8901, ((8821, 45, 9102), (8822, 3, 9102), (8823, 44.25, 9102), (8824, 45.75, 9102), (8826, 1700000, 9001), (8827, 4200000, 9001)), 'RGF93 v1 / CC45'),
    (3946, 9802, 7019, 8901, ((8821, 46, 9102), (8822, 3, 9102), (8823, 45.25, 9102), (8824, 46.75, 9102), (8826, 1700000, 9001), (8827, 5200000, 9001)), 'RGF93 v1 / CC46'),
    (3947, 9802, 7019, 8901, ((8821, 47, 9102), (8822, 3, 9102), (8823, 46.25, 9102), (8824, 47.75, 9102), (8826, 1700000, 9001), (8827, 6200000, 9001)), 'RGF93 v1 / CC47'),
    (3948, 9802, 7019, 8901, ((8821, 48, 9102), (8822, 3, 9102), (8823, 47.25, 9102), (8824, 48.75, 9102), (8826, 1700000, 9001), (8827, 7200000, 9001)), 'RGF93 v1 / CC48'),
    (3949, 9802, 7019, 8901, ((8821, 49, 9102), (8822, 3, 9102), (8823, 48.25, 9102), (8824, 49.75, 9102), (8826, 1700000, 9001), (8827, 8200000, 9001)), 'RGF93 v1 / CC49'),
    (3950, 9802, 7019, 8901, ((8821, 50, 9102), (8822, 3, 9102), (8823, 49.25, 9102), (8824, 50.75, 9102), (8826, 1700000, 9001), (8827, 9200000, 9001)), 'RGF93 v1 / CC50'),
    (3034, 9802, 7019, 8901, ((8821, 52, 9102), (8822, 10, 9102), (8823, 35, 9102), (8824, 65, 9102), (8826, 4000000, 9001), (8827, 2800000, 9001)), 'ETRS89-extended / LCC Europe'),
    (31370, 9802, 7022, 8901, ((8821, 90, 9110), (8822, 4.2202952, 9110), (8823, 51.100000204, 9110), (8824, 49.500000204, 9110), (8826, 150000.013, 9001), (8827, 5400088.438, 9001)), 'Belge 1972 / Belgian Lambert 72'),
    (3347, 9802, 7019, 8901, ((8821, 63.390675, 9110), (8822, -91.52, 9110), (8823, 49, 9102), (8824, 77, 9102), (8826, 6200000, 9001), (8827, 3000000, 9001)), 'NAD83 / Statistics Canada Lambert'),
    (3107, 9802, 7019, 8901, ((8821, -32, 9102), (8822, 135, 9102), (8823, -28, 9102), (8824, -36, 9102), (8826, 1000000, 9001), (8827, 2000000, 9001)), 'GDA94 / SA Lambert'),

    # Lambert Conic Conformal (1SP)
    (24200, 9801, 7008, 8901, ((8801, 18, 9102), (8802, -77, 9102), (8805, 1, 9201), (8806, 250000, 9001), (8807, 150000, 9001)), 'JAD69 / Jamaica National Grid'),
    (2192, 9801, 7022, 8901, ((8801, 46.48, 9110), (8802, 2.2014025, 9110), (8805, 0.99987742, 9201), (8806, 600000, 9001), (8807, 2200000, 9001)), 'ED50 / France EuroLambert'),
    (27572, 9801, 7011, 8903, ((8801, 52, 9105), (8802, 0, 9105), (8805, 0.99987742, 9201), (8806, 600000, 9001), (8807, 2200000, 9001)), 'NTF (Paris) / Lambert zone II'),

    # Albers Equal Area
    (3577, 9822, 7019, 8901, ((8821, 0, 9102), (8822, 132, 9102), (8823, -18, 9102), (8824, -36, 9102), (8826, 0, 9001), (8827, 0, 9001)), 'GDA94 / Australian Albers'),
    (5070, 9822, 7019, 8901, ((8821, 23, 9102), (8822, -96, 9102), (8823, 29.5, 9102), (8824, 45.5, 9102), (8826, 0, 9001), (8827, 0, 9001)), 'NAD83 / Conus Albers'),
    (3338, 9822, 7019, 8901, ((8821, 50, 9102), (8822, -154, 9102), (8823, 55, 9102), (8824, 65, 9102), (8826, 0, 9001), (8827, 0, 9001)), 'NAD83 / Alaska Albers'),
    (3005, 9822, 7019, 8901, ((8821, 45, 9102), (8822, -126, 9102), (8823, 50, 9102), (8824, 58.5, 9102), (8826, 1000000, 9001), (8827, 0, 9001)), 'NAD83 / BC Albers'),

    # Oblique Stereographic
    (28992, 9809, 7004, 8901, ((8801, 52.0922178, 9110), (8802, 5.23155, 9110), (8805, 0.9999079, 9201), (8806, 155000, 9001), (8807, 463000, 9001)), 'Amersfoort / RD New'),
    (2953, 9809, 7019, 8901, ((8801, 46.5, 9102), (8802, -66.5, 9102), (8805, 0.999912, 9201), (8806, 2500000, 9001), (8807, 7500000, 9001)), 'NAD83(CSRS) / New Brunswick Stereographic'),
    (3844, 9809, 7024, 8901, ((8801, 46, 9102), (8802, 25, 9102), (8805, 0.99975, 9201), (8806, 500000, 9001), (8807, 500000, 9001)), 'Pulkovo 1942(58) / Stereo70'),

    # Polar Stereographic (variant A)
    (5041, 9810, 7030, 8901, ((8801, 90, 9102), (8802, 0, 9102), (8805, 0.994, 9201), (8806, 2000000, 9001), (8807, 2000000, 9001)), 'WGS 84 / UPS North (E,N)'),
    (5042, 9810, 7030, 8901, ((8801, -90, 9102), (8802, 0, 9102), (8805, 0.994, 9201), (8806, 2000000, 9001), (8807, 2000000, 9001)), 'WGS 84 / UPS South (E,N)'),
    (32661, 9810, 7030, 8901, ((8801, 90, 9102), (8802, 0, 9102), (8805, 0.994, 9201), (8806, 2000000, 9001), (8807, 2000000, 9001)), 'WGS 84 / UPS North (N,E)'),
    (32761, 9810, 7030, 8901, ((8801, -90, 9102), (8802, 0, 9102), (8805, 0.994, 9201), (8806, 2000000, 9001), (8807, 2000000, 9001)), 'WGS 84 / UPS South (N,E)'),

    # Lambert Azimuthal Equal Area
    (3035, 9820, 7019, 8901, ((8801, 52, 9102), (8802, 10, 9102), (8806, 4321000, 9001), (8807, 3210000, 9001)), 'ETRS89-extended / LAEA Europe'),
    (6931, 9820, 7030, 8901, ((8801, 90, 9102), (8802, 0, 9102), (8806, 0, 9001), (8807, 0, 9001)), 'WGS 84 / NSIDC EASE-Grid 2.0 North'),
    (6932, 9820, 7030, 8901, ((8801, -90, 9102), (8802, 0, 9102), (8806, 0, 9001), (8807, 0, 9001)), 'WGS 84 / NSIDC EASE-Grid 2.0 South'),
    (3571, 9820, 7030, 8901, ((8801, 90, 9102), (8802, 180, 9102), (8806, 0, 9001), (8807, 0, 9001)), 'WGS 84 / North Pole LAEA Bering Sea'),
    (3574, 9820, 7030, 8901, ((8801, 90, 9102), (8802, -40, 9102), (8806, 0, 9001), (8807, 0, 9001)), 'WGS 84 / North Pole LAEA Atlantic'),

    # Popular Visualisation Pseudo Mercator
    (3857, 1024, 7030, 8901, ((8801, 0, 9102), (8802, 0, 9102), (8806, 0, 9001), (8807, 0, 9001)), 'WGS 84 / Pseudo-Mercator'),
)

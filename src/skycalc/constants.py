"""Fixed constants: time units, epochs, physical radii and photometric fits."""

# Time: seconds per unit (for step conversion and sexagesimal)
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_WEEK = 7.0 * SECONDS_PER_DAY
MONTHS_PER_YEAR = 12

# Epochs. rms-julian counts UTC days from 2000-01-01 (day 0).
JD_OF_DAY_ZERO = 2451544.5  # Julian Date at 2000-01-01T00:00 UTC
JD_OF_J2000 = 2451545.0  # Julian Date at J2000.0 (2000-01-01T12:00 TT)
UNIX_EPOCH_DAY = -10957  # day number of 1970-01-01

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
QUARTER_CIRCLE_DEGREES = 90.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Earth rotation
SIDEREAL_PER_SOLAR = 1.00273790935  # sidereal days per solar day
STANDARD_ALTITUDE_DEG = -0.5667  # refraction at the horizon for rise/set

# Distances
AU_KM = 149597870.7
GM_SUN_KM3_S2 = 1.32712440018e11

# Mean obliquity of the ecliptic at J2000 (radians)
OBLIQUITY_J2000_RAD = 0.40909280422232897

# Body radii (km)
SUN_RADIUS_KM = 696000.0
MOON_RADIUS_KM = 1737.4

# Planet number as used by pyerfa plan94 (1=Mercury .. 8=Neptune); 9=Pluto
MERCURY_NUM = 1
VENUS_NUM = 2
EARTH_NUM = 3
MARS_NUM = 4
JUPITER_NUM = 5
SATURN_NUM = 6
URANUS_NUM = 7
NEPTUNE_NUM = 8
PLUTO_NUM = 9

PLANET_RADIUS_KM: dict[int, float] = {
    MERCURY_NUM: 2439.7,
    VENUS_NUM: 6051.8,
    MARS_NUM: 3389.5,
    JUPITER_NUM: 69911.0,
    SATURN_NUM: 58232.0,
    URANUS_NUM: 25362.0,
    NEPTUNE_NUM: 24622.0,
    PLUTO_NUM: 1188.3,
}

# Visual magnitude fits: V = V0 + 5 log10(r * delta) + c1*i + c2*i^2 + c3*i^3,
# i = phase angle in degrees (Astronomical Almanac 1984, Saturn without rings).
PLANET_MAGNITUDE_COEFFS: dict[int, tuple[float, float, float, float]] = {
    MERCURY_NUM: (-0.42, 0.0380, -0.000273, 0.000002),
    VENUS_NUM: (-4.40, 0.0009, 0.000239, -0.00000065),
    MARS_NUM: (-1.52, 0.016, 0.0, 0.0),
    JUPITER_NUM: (-9.40, 0.005, 0.0, 0.0),
    SATURN_NUM: (-8.88, 0.044, 0.0, 0.0),
    URANUS_NUM: (-7.19, 0.002, 0.0, 0.0),
    NEPTUNE_NUM: (-6.87, 0.0, 0.0, 0.0),
    PLUTO_NUM: (-1.00, 0.0, 0.0, 0.0),
}

SUN_ABSOLUTE_MAGNITUDE = -26.74  # at 1 AU
MOON_MAGNITUDE_COEFFS = (-12.73, 0.026, 4.0e-9)  # V0, |i|, i^4

# Pluto J2000 mean ecliptic elements (Standish): a [AU], e, I, L, long.peri, long.node [deg]
PLUTO_ELEMENTS = (39.48211675, 0.24882730, 17.14001206, 238.92903833, 224.06891629, 110.30393684)

"""Physical and astronomical constants used by the solar pipeline."""

from __future__ import annotations

# Julian Day / calendar
J2000_JULIAN_DAY = 2451545.0
DAYS_PER_CENTURY = 36525.0
DAYS_PER_JULIAN_YEAR = 365.25
MEAN_MONTH_FACTOR = 30.6001
JULIAN_DAY_OFFSET = 1524.5
JULIAN_YEAR_OFFSET = 4716
GREGORIAN_START_YEAR = 1582
MINUTES_PER_DAY = 1440
SECONDS_PER_MINUTE = 60

# Low-precision solar orbital elements referenced to J2000.0, per day.
MEAN_LONGITUDE_AT_J2000 = 280.46
MEAN_LONGITUDE_DAILY_MOTION = 0.9856474
MEAN_ANOMALY_AT_J2000 = 357.528
MEAN_ANOMALY_DAILY_MOTION = 0.9856003
ECLIPTIC_CORRECTION_1 = 1.915
ECLIPTIC_CORRECTION_2 = 0.020
OBLIQUITY_AT_J2000 = 23.439
OBLIQUITY_DAILY_DRIFT = 0.0000004

FULL_CIRCLE_DEG = 360.0
DEGREES_PER_HOUR = 15.0
SOLAR_NOON_HOUR = 12.0

# Zenith / altitude
ZENITH_MIN_DEG = 0.0
ZENITH_HORIZON_DEG = 90.0
ZENITH_MAX_DEG = 180.0

# Earth-Sun distance
ASTRONOMICAL_UNIT_KM = 149_597_870.7
ORBIT_ECCENTRICITY = 0.01671123
MEAN_ANOMALY_PERIHELION_DEG = 357.5291
MEAN_DISTANCE_FACTOR = 1.00014
SECOND_HARMONIC_FACTOR = 0.00014

# Air mass, Kasten & Young (1989)
PLANE_PARALLEL_MAX_ZENITH_DEG = 60.0
KASTEN_YOUNG_A = 0.50572
KASTEN_YOUNG_B = 96.07995
KASTEN_YOUNG_EXPONENT = -1.6364

# Irradiance, W/m^2
SOLAR_CONSTANT_W_M2 = 1361.0

# Informal optical depth bands (reference only, never validated).
OPTICAL_DEPTH_CLEAR_SKY = (0.1, 0.3)
OPTICAL_DEPTH_THIN_CLOUD = (0.1, 1.0)
OPTICAL_DEPTH_THICK_CLOUD = (10.0, 50.0)

# Geographic bounds
LATITUDE_MIN = -90.0
LATITUDE_MAX = 90.0
LONGITUDE_MIN = -180.0
LONGITUDE_MAX = 180.0

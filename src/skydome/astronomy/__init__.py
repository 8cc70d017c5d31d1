from .sidereal import greenwich_mean_sidereal_time, local_sidereal_time
from .time import julian_date, julian_date_now, parse_iso_utc
from .transform import (
    OBLIQUITY_DEG,
    calculate_alt_az,
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
)

__all__ = [
    "greenwich_mean_sidereal_time",
    "local_sidereal_time",
    "julian_date",
    "julian_date_now",
    "parse_iso_utc",
    "OBLIQUITY_DEG",
    "calculate_alt_az",
    "ecliptic_to_equatorial",
    "equatorial_to_horizontal",
]

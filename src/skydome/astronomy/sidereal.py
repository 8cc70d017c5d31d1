import math

from ..models.time import J2000_JD

GMST_AT_J2000_DEG = 280.46061837
EARTH_ROTATION_DEG_PER_DAY = 360.98564736629

TWO_PI = 2.0 * math.pi


def greenwich_mean_sidereal_time(jd: float) -> float:
    """GMST in radians, not reduced. Linear model, drifts ~0.1s per century."""
    return math.radians(
        GMST_AT_J2000_DEG + EARTH_ROTATION_DEG_PER_DAY * (jd - J2000_JD)
    )


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """Local sidereal time in radians, reduced into [0, 2π).

    Args:
        jd: Julian Date
        longitude_deg: Observer longitude in degrees, east positive

    Returns:
        Local sidereal time angle in radians
    """
    lst = (greenwich_mean_sidereal_time(jd) + math.radians(longitude_deg)) % TWO_PI
    # float modulo can round up to exactly 2π for tiny negative inputs
    return 0.0 if lst >= TWO_PI else lst

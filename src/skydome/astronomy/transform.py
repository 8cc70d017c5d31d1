"""Ecliptic -> equatorial -> horizontal coordinate transforms.

All angles are radians except observer latitude, which is given in degrees.
Degenerate input (zero-length vectors) yields NaN rather than raising.
"""

import math
from typing import Tuple

from ..models.bodies import CelestialBody
from ..models.coordinates import CartesianVector, HorizontalCoordinate
from ..models.time import JulianDate
from .sidereal import TWO_PI

# Mean obliquity at J2000; precession is ignored.
OBLIQUITY_DEG = 23.43929111

_OBLIQUITY_RAD = math.radians(OBLIQUITY_DEG)
_COS_OBLIQUITY = math.cos(_OBLIQUITY_RAD)
_SIN_OBLIQUITY = math.sin(_OBLIQUITY_RAD)


def _asin(value: float) -> float:
    if math.isnan(value):
        return value
    return math.asin(max(-1.0, min(1.0, value)))


def _wrap_angle(angle: float) -> float:
    wrapped = angle % TWO_PI
    return 0.0 if wrapped >= TWO_PI else wrapped


def ecliptic_to_equatorial(v: CartesianVector) -> Tuple[float, float]:
    """
    Rotate an ecliptic vector about the x-axis into the equatorial frame.

    Args:
        v: Geocentric ecliptic vector (any length unit)

    Returns:
        (ra, dec) in radians. ra is in (-π, π] and is not wrapped.
    """
    x = v.x
    y = v.y * _COS_OBLIQUITY - v.z * _SIN_OBLIQUITY
    z = v.y * _SIN_OBLIQUITY + v.z * _COS_OBLIQUITY

    ra = math.atan2(y, x)
    norm = math.sqrt(x * x + y * y + z * z)
    dec = _asin(z / norm) if norm > 0.0 else math.nan
    return ra, dec


def equatorial_to_horizontal(
    ra: float, dec: float, lat_deg: float, lst: float
) -> Tuple[float, float]:
    """
    Convert right ascension/declination to azimuth/altitude for an observer.

    Args:
        ra: Right ascension in radians (any sign)
        dec: Declination in radians
        lat_deg: Observer latitude in degrees
        lst: Local sidereal time in radians

    Returns:
        (azimuth, altitude) in radians. Azimuth runs from south (0) through
        west (π/2) and is wrapped into [0, 2π).
    """
    ha = lst - ra
    lat = math.radians(lat_deg)

    sin_alt = math.sin(dec) * math.sin(lat) + math.cos(dec) * math.cos(lat) * math.cos(ha)
    altitude = _asin(sin_alt)

    azimuth = math.atan2(
        math.sin(ha), math.cos(ha) * math.sin(lat) - math.tan(dec) * math.cos(lat)
    )
    return _wrap_angle(azimuth), altitude


def calculate_alt_az(
    jd: JulianDate,
    body: CelestialBody,
    earth_position: CartesianVector,
    observer_lat: float,
    lst: float,
) -> HorizontalCoordinate:
    """Horizontal coordinate of a catalog body for one observer and instant.

    Args:
        jd: Time of observation
        body: Catalog entry supplying the barycentric position
        earth_position: Earth's barycentric position at jd, shared across bodies
        observer_lat: Observer latitude in degrees
        lst: Local sidereal time in radians
    """
    geocentric = body.position(jd) - earth_position
    ra, dec = ecliptic_to_equatorial(geocentric)
    azimuth, altitude = equatorial_to_horizontal(ra, dec, observer_lat, lst)
    return HorizontalCoordinate(azimuth=azimuth, altitude=altitude)

from .bodies import CelestialBody, PositionFn, hex_to_rgb
from .coordinates import CartesianVector, HorizontalCoordinate, ScreenPoint
from .observer import ObserverLocation
from .scene import Scene
from .time import J2000_JD, JulianDate

__all__ = [
    "CelestialBody",
    "PositionFn",
    "hex_to_rgb",
    "CartesianVector",
    "HorizontalCoordinate",
    "ScreenPoint",
    "ObserverLocation",
    "Scene",
    "J2000_JD",
    "JulianDate",
]

from dataclasses import dataclass
from typing import Callable, Tuple

from .coordinates import CartesianVector
from .time import JulianDate

PositionFn = Callable[[JulianDate], CartesianVector]


@dataclass(frozen=True)
class CelestialBody:
    name: str
    display_color: Tuple[int, int, int]
    position_fn: PositionFn

    def position(self, jd: JulianDate) -> CartesianVector:
        return self.position_fn(jd)


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Parse a '#RRGGBB' string into an (r, g, b) tuple."""
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected #RRGGBB color, got '{value}'")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

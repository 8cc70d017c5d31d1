import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class CartesianVector:
    """Position in astronomical units, ecliptic frame."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values) -> "CartesianVector":
        x, y, z = (float(v) for v in np.asarray(values, dtype=np.float64).reshape(3))
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: "CartesianVector") -> "CartesianVector":
        return CartesianVector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "CartesianVector") -> "CartesianVector":
        return CartesianVector(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Azimuth in [0, 2π) and altitude in [-π/2, π/2], both radians.

    Azimuth is measured from south towards west.
    """

    azimuth: float
    altitude: float

    @property
    def azimuth_deg(self) -> float:
        return math.degrees(self.azimuth)

    @property
    def altitude_deg(self) -> float:
        return math.degrees(self.altitude)

    @property
    def above_horizon(self) -> bool:
        return self.altitude > 0.0


@dataclass(frozen=True)
class ScreenPoint:
    x: float
    y: float

    def distance(self, other: "ScreenPoint") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

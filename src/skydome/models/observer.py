from dataclasses import dataclass

from ..errors import ObserverLocationError


@dataclass(frozen=True)
class ObserverLocation:
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90.0 <= self.latitude <= 90.0):
            raise ObserverLocationError(self.latitude, self.longitude)
        if not (-180.0 < self.longitude <= 180.0):
            raise ObserverLocationError(self.latitude, self.longitude)

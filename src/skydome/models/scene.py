from dataclasses import dataclass


@dataclass(frozen=True)
class Scene:
    utc_time: str
    julian_date: float
    latitude: float
    longitude: float
    width: int
    height: int
    renderer_id: str

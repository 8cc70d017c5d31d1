"""Built-in table of observer locations by city name."""

import difflib
from dataclasses import dataclass

from .errors import CityNotFoundError
from .models.observer import ObserverLocation

DEFAULT_CITY = "New York City"


@dataclass(frozen=True)
class City:
    name: str
    country: str
    latitude: float
    longitude: float

    @property
    def location(self) -> ObserverLocation:
        return ObserverLocation(latitude=self.latitude, longitude=self.longitude)


CITIES = (
    City("New York City", "United States", 40.7128, -74.0060),
    City("Los Angeles", "United States", 34.0522, -118.2437),
    City("Chicago", "United States", 41.8781, -87.6298),
    City("Anchorage", "United States", 61.2181, -149.9003),
    City("Honolulu", "United States", 21.3069, -157.8583),
    City("Mexico City", "Mexico", 19.4326, -99.1332),
    City("Toronto", "Canada", 43.6532, -79.3832),
    City("Reykjavik", "Iceland", 64.1466, -21.9426),
    City("London", "United Kingdom", 51.5074, -0.1278),
    City("Paris", "France", 48.8566, 2.3522),
    City("Berlin", "Germany", 52.5200, 13.4050),
    City("Madrid", "Spain", 40.4168, -3.7038),
    City("Rome", "Italy", 41.9028, 12.4964),
    City("Moscow", "Russia", 55.7558, 37.6173),
    City("Cairo", "Egypt", 30.0444, 31.2357),
    City("Nairobi", "Kenya", -1.2921, 36.8219),
    City("Cape Town", "South Africa", -33.9249, 18.4241),
    City("Dubai", "United Arab Emirates", 25.2048, 55.2708),
    City("Mumbai", "India", 19.0760, 72.8777),
    City("Singapore", "Singapore", 1.3521, 103.8198),
    City("Beijing", "China", 39.9042, 116.4074),
    City("Seoul", "South Korea", 37.5665, 126.9780),
    City("Tokyo", "Japan", 35.6762, 139.6503),
    City("Sydney", "Australia", -33.8688, 151.2093),
    City("Auckland", "New Zealand", -36.8485, 174.7633),
    City("Sao Paulo", "Brazil", -23.5505, -46.6333),
    City("Buenos Aires", "Argentina", -34.6037, -58.3816),
    City("Lima", "Peru", -12.0464, -77.0428),
    City("Quito", "Ecuador", -0.1807, -78.4678),
)

_BY_NAME = {city.name.lower(): city for city in CITIES}


def find_city(name: str) -> City:
    """
    Look up a city by name, ignoring case and surrounding whitespace.

    Raises:
        CityNotFoundError: If the name is not in the table
    """
    city = _BY_NAME.get(name.strip().lower())
    if city is None:
        matches = difflib.get_close_matches(
            name.strip().lower(), list(_BY_NAME.keys()), n=3, cutoff=0.6
        )
        raise CityNotFoundError(name, [_BY_NAME[m].name for m in matches])
    return city

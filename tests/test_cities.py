import pytest

from skydome.cities import CITIES, DEFAULT_CITY, find_city
from skydome.errors import CityNotFoundError
from skydome.models import ObserverLocation


def test_default_city_present():
    city = find_city(DEFAULT_CITY)
    assert city.name == "New York City"
    assert city.latitude == pytest.approx(40.7128)


def test_lookup_ignores_case_and_whitespace():
    assert find_city("  tokyo ") == find_city("Tokyo")
    assert find_city("LONDON").name == "London"


def test_unknown_city_suggests_close_matches():
    with pytest.raises(CityNotFoundError) as excinfo:
        find_city("Lodnon")
    assert "London" in str(excinfo.value)


def test_unknown_city_without_matches():
    with pytest.raises(CityNotFoundError, match="Unknown city: 'Atlantis'"):
        find_city("Atlantis")


def test_every_city_is_a_valid_observer():
    for city in CITIES:
        assert isinstance(city.location, ObserverLocation)


def test_city_names_unique():
    names = [city.name.lower() for city in CITIES]
    assert len(names) == len(set(names))


def test_table_is_an_immutable_tuple():
    assert isinstance(CITIES, tuple)
    assert len(CITIES) == 29

"""Tests for the ephemeris adapter and body catalog, using in-memory kernels."""

import numpy as np
import pytest
from skyfield.framelib import ecliptic_J2000_frame

from skydome.ephemeris import (
    BODY_COLORS,
    KERNEL_TARGETS,
    EphemerisAdapter,
    build_catalog,
)
from skydome.errors import BodyNotFoundError, EphemerisLoadError
from skydome.models import CartesianVector, JulianDate


class FakeDistance:
    def __init__(self, au):
        self.au = au


class FakePosition:
    def __init__(self, xyz, frames):
        self._xyz = np.asarray(xyz, dtype=np.float64)
        self._frames = frames

    def frame_xyz(self, frame):
        self._frames.append(frame)
        return FakeDistance(self._xyz)


class FakeTarget:
    """Mimics a skyfield vector function: `.at(t)` and subtraction."""

    def __init__(self, fn, frames):
        self._fn = fn
        self._frames = frames

    def at(self, t):
        return FakePosition(self._fn(t), self._frames)

    def __sub__(self, other):
        return FakeTarget(
            lambda t: np.asarray(self._fn(t)) - np.asarray(other._fn(t)), self._frames
        )


class FakeTimescale:
    def __init__(self):
        self.requested = []

    def tt_jd(self, jd):
        self.requested.append(jd)
        return jd


@pytest.fixture
def frames():
    return []


@pytest.fixture
def kernel(frames):
    """Linear-in-time positions, distinct for every segment."""
    offsets = {
        "sun": (0.001, -0.002, 0.0001),
        "earth": (0.9, 0.3, 0.0),
        "moon": (0.9025, 0.301, 0.0002),
        "mercury": (0.3, -0.1, 0.02),
        "venus": (-0.7, 0.1, 0.01),
        "mars barycenter": (1.2, 0.8, -0.03),
        "jupiter barycenter": (-4.0, 3.0, 0.1),
        "saturn barycenter": (8.0, -5.0, -0.3),
        "uranus barycenter": (15.0, 12.0, -0.2),
        "neptune barycenter": (29.0, -6.0, -0.6),
    }

    def segment(base):
        return FakeTarget(
            lambda t: np.array(base) + (t - 2451545.0) * 1e-3, frames
        )

    return {name: segment(base) for name, base in offsets.items()}


@pytest.fixture
def timescale():
    return FakeTimescale()


@pytest.fixture
def adapter(kernel, timescale):
    return EphemerisAdapter(kernel, timescale)


JD = JulianDate(2451555.0)


class TestEphemerisAdapter:
    def test_barycentric_reads_ecliptic_frame(self, adapter, frames):
        vector = adapter.barycentric("earth", JD)

        np.testing.assert_allclose(vector.as_array(), [0.91, 0.31, 0.01])
        assert frames == [ecliptic_J2000_frame]

    def test_time_converted_from_julian_date(self, adapter, timescale):
        adapter.barycentric("sun", JD)
        assert timescale.requested == [2451555.0]

    def test_planet_position(self, adapter):
        vector = adapter.position("Mars", JD)
        assert vector.x == pytest.approx(1.21)
        assert vector.y == pytest.approx(0.81)
        assert vector.z == pytest.approx(-0.02)

    def test_position_lookup_case_insensitive(self, adapter):
        assert adapter.position("JUPITER", JD) == adapter.position("jupiter", JD)

    def test_heliocentric_subtracts_sun(self, adapter):
        helio = adapter.heliocentric("moon", JD)
        assert helio.x == pytest.approx(0.9025 - 0.001)
        assert helio.y == pytest.approx(0.301 + 0.002)
        assert helio.z == pytest.approx(0.0002 - 0.0001)

    def test_moon_composes_heliocentric_and_sun(self, adapter):
        moon = adapter.position("Moon", JD)
        helio = adapter.heliocentric("moon", JD)
        sun = adapter.barycentric("sun", JD)

        assert moon.x == pytest.approx(helio.x + sun.x)
        assert moon.y == pytest.approx(helio.y + sun.y)
        assert moon.z == pytest.approx(helio.z + sun.z)
        assert moon.x == pytest.approx(0.9125)

    def test_earth(self, adapter):
        assert adapter.earth(JD) == adapter.barycentric("earth", JD)

    def test_unknown_body_raises(self, adapter):
        with pytest.raises(BodyNotFoundError, match="Unknown body: 'Pluto'"):
            adapter.position("Pluto", JD)

    def test_unknown_body_is_value_error(self, adapter):
        with pytest.raises(ValueError):
            adapter.position_fn("Vulcan")

    def test_position_fn_binds_body(self, adapter):
        position_fn = adapter.position_fn("Saturn")
        assert position_fn(JD) == adapter.position("saturn", JD)

    def test_load_wraps_missing_kernel(self, tmp_path, monkeypatch):
        def failing_loader(self, filename, *args, **kwargs):
            raise OSError("no network")

        monkeypatch.setattr("skyfield.iokit.Loader.__call__", failing_loader)
        with pytest.raises(EphemerisLoadError, match="de421.bsp"):
            EphemerisAdapter.load("de421.bsp", str(tmp_path))


class TestCatalog:
    def test_nine_bodies_in_fixed_order(self, adapter):
        catalog = build_catalog(adapter)
        assert [body.name for body in catalog] == [
            "Sun",
            "Mercury",
            "Venus",
            "Mars",
            "Jupiter",
            "Saturn",
            "Uranus",
            "Neptune",
            "Moon",
        ]

    def test_colors_parsed(self, adapter):
        catalog = build_catalog(adapter)
        assert catalog[0].display_color == (255, 255, 255)
        assert catalog[-1].display_color == (0x9D, 0xA9, 0xA0)

    def test_catalog_is_immutable(self, adapter):
        catalog = build_catalog(adapter)
        assert isinstance(catalog, tuple)
        with pytest.raises(AttributeError):
            catalog[0].name = "Sol"

    def test_earth_not_in_catalog(self, adapter):
        names = {body.name.lower() for body in build_catalog(adapter)}
        assert "earth" not in names
        assert names <= set(KERNEL_TARGETS)

    def test_positions_come_from_adapter(self, adapter):
        catalog = build_catalog(adapter)
        moon = catalog[-1]
        assert moon.position(JD) == adapter.moon(JD)

    def test_color_table_matches_catalog_size(self):
        assert len(BODY_COLORS) == 9

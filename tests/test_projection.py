import math

import pytest

from skydome.models import ScreenPoint
from skydome.projection import DomeGeometry, project


@pytest.fixture
def center():
    return ScreenPoint(500.0, 500.0)


class TestDomeGeometry:
    def test_square_canvas(self):
        geometry = DomeGeometry.from_canvas(1000, 1000)
        assert geometry.center == ScreenPoint(500.0, 500.0)
        assert geometry.radius == pytest.approx(450.0)
        assert geometry.marker_size == pytest.approx(10.0)

    def test_wide_canvas_uses_smaller_side(self):
        geometry = DomeGeometry.from_canvas(1600, 800)
        assert geometry.center == ScreenPoint(800.0, 400.0)
        assert geometry.radius == pytest.approx(360.0)
        assert geometry.marker_size == pytest.approx(8.0)


class TestProject:
    @pytest.mark.parametrize("azimuth", [0.0, 0.7, math.pi, 4.0, 2 * math.pi - 1e-9])
    def test_zenith_maps_to_center(self, center, azimuth):
        point = project(azimuth, math.pi / 2, center, 450.0)
        assert point.x == pytest.approx(center.x, abs=1e-9)
        assert point.y == pytest.approx(center.y, abs=1e-9)

    @pytest.mark.parametrize("azimuth", [0.0, 1.0, 2.5, math.pi, 5.5])
    def test_horizon_maps_to_rim(self, center, azimuth):
        point = project(azimuth, 0.0, center, 450.0)
        assert point.distance(center) == pytest.approx(450.0, abs=1e-9)

    def test_radius_linear_in_zenith_angle(self, center):
        point = project(0.0, math.radians(45.0), center, 450.0)
        assert point.distance(center) == pytest.approx(225.0, abs=1e-9)

    def test_azimuth_zero_points_along_positive_y(self, center):
        point = project(0.0, 0.0, center, 100.0)
        assert point.x == pytest.approx(500.0, abs=1e-9)
        assert point.y == pytest.approx(600.0, abs=1e-9)

    def test_azimuth_quarter_turn_points_along_positive_x(self, center):
        point = project(math.pi / 2, 0.0, center, 100.0)
        assert point.x == pytest.approx(600.0, abs=1e-9)
        assert point.y == pytest.approx(500.0, abs=1e-9)

    def test_below_horizon_lands_outside(self, center):
        point = project(1.0, math.radians(-10.0), center, 450.0)
        assert point.distance(center) > 450.0

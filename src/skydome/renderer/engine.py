"""Single-pass sky dome renderer."""

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..astronomy.sidereal import local_sidereal_time
from ..astronomy.time import julian_date_now
from ..astronomy.transform import calculate_alt_az
from ..models.bodies import CelestialBody
from ..models.coordinates import CartesianVector, HorizontalCoordinate, ScreenPoint
from ..models.observer import ObserverLocation
from ..models.time import JulianDate
from ..projection.dome import DomeGeometry, project
from .surface import DrawingSurface

DOME_COLOR = "#181C25"
LABEL_COLOR = "#DFE3EB"
CARDINAL_COLOR = "#5C6A72"

HIGHLIGHT_SCALE = 1.5
LABEL_FONT_SCALE = 3.0

# Altitude (degrees) at which cardinal labels sit, just outside the rim
CARDINAL_ALTITUDE_DEG = -6.0
# Azimuth is measured from south through west
CARDINAL_POINTS = (("S", 0.0), ("W", 90.0), ("N", 180.0), ("E", 270.0))

EarthPositionFn = Callable[[JulianDate], CartesianVector]


@dataclass(frozen=True)
class BodyPlacement:
    """Where one catalog body ended up in a render pass."""

    body: CelestialBody
    horizontal: HorizontalCoordinate
    screen_point: Optional[ScreenPoint]
    highlighted: bool

    @property
    def drawn(self) -> bool:
        return self.screen_point is not None


@dataclass(frozen=True)
class RenderResult:
    julian_date: JulianDate
    local_sidereal_time: float
    geometry: DomeGeometry
    placements: Tuple[BodyPlacement, ...]

    @property
    def visible(self) -> Tuple[BodyPlacement, ...]:
        return tuple(p for p in self.placements if p.drawn)

    @property
    def highlighted(self) -> Optional[BodyPlacement]:
        for placement in self.placements:
            if placement.highlighted:
                return placement
        return None


def is_highlighted(marker: ScreenPoint, pointer: ScreenPoint, base_size: float) -> bool:
    """Pointer strictly within 1.5x the base marker radius."""
    return marker.distance(pointer) < base_size * HIGHLIGHT_SCALE


class SkyRenderer:
    """Draws catalog bodies above the horizon onto a circular dome."""

    def __init__(
        self,
        catalog: Sequence[CelestialBody],
        earth_position_fn: EarthPositionFn,
        show_cardinals: bool = True,
    ):
        """Initialize renderer.

        Args:
            catalog: Bodies to place, in drawing order
            earth_position_fn: Barycentric Earth position for a Julian Date
            show_cardinals: Draw N/E/S/W labels around the dome
        """
        self.catalog = tuple(catalog)
        self.earth_position_fn = earth_position_fn
        self.show_cardinals = show_cardinals

    def render(
        self,
        surface: DrawingSurface,
        observer: ObserverLocation,
        width: float,
        height: float,
        pointer: ScreenPoint,
        jd: Optional[JulianDate] = None,
    ) -> RenderResult:
        """Render one frame.

        Nothing is cached between calls; every pass recomputes the sky.

        Args:
            surface: Target drawing surface
            observer: Observer latitude/longitude
            width: Canvas width in pixels
            height: Canvas height in pixels
            pointer: Pointer position in canvas pixels
            jd: Time of the frame (defaults to the current wall clock)

        Returns:
            RenderResult describing every body's placement
        """
        geometry = DomeGeometry.from_canvas(width, height)

        surface.begin_path()
        surface.arc(
            geometry.center.x, geometry.center.y, geometry.radius, 0.0, 2.0 * math.pi
        )
        surface.set_fill_style(DOME_COLOR)
        surface.fill()

        if self.show_cardinals:
            self._draw_cardinals(surface, geometry)

        if jd is None:
            jd = julian_date_now()
        lst = local_sidereal_time(jd.value, observer.longitude)
        earth_position = self.earth_position_fn(jd)

        placements = []
        for body in self.catalog:
            horizontal = calculate_alt_az(
                jd, body, earth_position, observer.latitude, lst
            )

            if not horizontal.above_horizon:
                placements.append(BodyPlacement(body, horizontal, None, False))
                continue

            point = project(
                horizontal.azimuth, horizontal.altitude, geometry.center, geometry.radius
            )
            highlighted = self._draw_body(
                surface, body, point, geometry.marker_size, pointer
            )
            placements.append(BodyPlacement(body, horizontal, point, highlighted))

        return RenderResult(
            julian_date=jd,
            local_sidereal_time=lst,
            geometry=geometry,
            placements=tuple(placements),
        )

    def _draw_body(
        self,
        surface: DrawingSurface,
        body: CelestialBody,
        pos: ScreenPoint,
        base_size: float,
        pointer: ScreenPoint,
    ) -> bool:
        highlight = is_highlighted(pos, pointer, base_size)
        radius = base_size * HIGHLIGHT_SCALE if highlight else base_size

        surface.begin_path()
        surface.arc(pos.x, pos.y, radius, 0.0, 2.0 * math.pi)
        surface.set_fill_style(body.display_color)
        surface.fill()

        if highlight:
            surface.set_font(f"{base_size * LABEL_FONT_SCALE}px monospace")
            surface.set_text_align("left")
            surface.set_fill_style(LABEL_COLOR)
            surface.fill_text(body.name, pos.x + radius, pos.y - radius)

        return highlight

    def _draw_cardinals(self, surface: DrawingSurface, geometry: DomeGeometry) -> None:
        altitude = math.radians(CARDINAL_ALTITUDE_DEG)
        size = geometry.marker_size * LABEL_FONT_SCALE

        surface.set_font(f"{size}px monospace")
        surface.set_text_align("center")
        surface.set_fill_style(CARDINAL_COLOR)
        for label, azimuth_deg in CARDINAL_POINTS:
            point = project(
                math.radians(azimuth_deg), altitude, geometry.center, geometry.radius
            )
            surface.fill_text(label, point.x, point.y + size / 3.0)

        # Small wedge on the rim pointing at north
        north = math.radians(180.0)
        tip = project(north, 0.0, geometry.center, geometry.radius)
        spread = math.radians(2.0)
        base_altitude = math.radians(-2.0)
        left = project(north - spread, base_altitude, geometry.center, geometry.radius)
        right = project(north + spread, base_altitude, geometry.center, geometry.radius)

        surface.begin_path()
        surface.move_to(tip.x, tip.y)
        surface.line_to(left.x, left.y)
        surface.line_to(right.x, right.y)
        surface.close_path()
        surface.fill()


def render_sky(
    surface: DrawingSurface,
    observer: ObserverLocation,
    width: float,
    height: float,
    pointer: ScreenPoint,
    catalog: Sequence[CelestialBody],
    earth_position_fn: EarthPositionFn,
    jd: Optional[JulianDate] = None,
    show_cardinals: bool = True,
) -> RenderResult:
    """Render one sky frame onto a drawing surface.

    Args:
        surface: Target drawing surface
        observer: Observer latitude/longitude
        width: Canvas width in pixels
        height: Canvas height in pixels
        pointer: Pointer position in canvas pixels
        catalog: Bodies to place
        earth_position_fn: Barycentric Earth position for a Julian Date
        jd: Time of the frame (defaults to now)
        show_cardinals: Draw N/E/S/W labels around the dome

    Returns:
        RenderResult describing every body's placement
    """
    renderer = SkyRenderer(catalog, earth_position_fn, show_cardinals)
    return renderer.render(surface, observer, width, height, pointer, jd)

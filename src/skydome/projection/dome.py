"""Azimuthal-equidistant dome projection.

The zenith maps to the dome center and the horizon to its rim, with radial
distance linear in zenith angle. Azimuth 0 lies along +y from the center and
azimuth grows towards +x (sine/cosine swapped relative to a math-convention
polar plot). On a y-down surface with south-based azimuths this puts north at
the top and east on the left, as on a chart held overhead. Anything that
places directional markers must go through `project` so the drawn sky and its
labels share one convention.
"""

import math
from dataclasses import dataclass

from ..models.coordinates import ScreenPoint

MARGIN_FRACTION = 0.05
MARKER_FRACTION = 0.01


@dataclass(frozen=True)
class DomeGeometry:
    center: ScreenPoint
    radius: float
    marker_size: float

    @classmethod
    def from_canvas(cls, width: float, height: float) -> "DomeGeometry":
        """Dome centered on the canvas, inset by 5% of the smaller side."""
        min_dim = min(width, height)
        margin = min_dim * MARGIN_FRACTION
        return cls(
            center=ScreenPoint(width / 2.0, height / 2.0),
            radius=min_dim / 2.0 - margin,
            marker_size=min_dim * MARKER_FRACTION,
        )


def project(
    azimuth: float, altitude: float, screen_center: ScreenPoint, dome_radius: float
) -> ScreenPoint:
    """
    Map a horizontal coordinate onto the dome.

    Args:
        azimuth: Azimuth in radians
        altitude: Altitude in radians; negative values land outside the rim
        screen_center: Pixel position of the zenith
        dome_radius: Pixel radius of the horizon circle

    Returns:
        Pixel position on the drawing surface
    """
    r = (90.0 - math.degrees(altitude)) / 90.0 * dome_radius
    return ScreenPoint(
        screen_center.x + r * math.sin(azimuth),
        screen_center.y + r * math.cos(azimuth),
    )

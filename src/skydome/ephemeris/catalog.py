from typing import Tuple

from ..models.bodies import CelestialBody, hex_to_rgb
from .adapter import EphemerisAdapter

# Drawing order; later entries are painted over earlier ones.
BODY_COLORS = (
    ("Sun", "#FFFFFF"),
    ("Mercury", "#DBBC7F"),
    ("Venus", "#E69875"),
    ("Mars", "#E67E80"),
    ("Jupiter", "#D3C6AA"),
    ("Saturn", "#D699B6"),
    ("Uranus", "#83C092"),
    ("Neptune", "#7FBBB3"),
    ("Moon", "#9DA9A0"),
)


def build_catalog(adapter: EphemerisAdapter) -> Tuple[CelestialBody, ...]:
    """Build the fixed 9-body catalog backed by an ephemeris adapter."""
    return tuple(
        CelestialBody(
            name=name,
            display_color=hex_to_rgb(color),
            position_fn=adapter.position_fn(name),
        )
        for name, color in BODY_COLORS
    )

from .engine import BodyPlacement, RenderResult, SkyRenderer, render_sky
from .surface import DrawingSurface, PillowSurface

__all__ = [
    "BodyPlacement",
    "RenderResult",
    "SkyRenderer",
    "render_sky",
    "DrawingSurface",
    "PillowSurface",
]

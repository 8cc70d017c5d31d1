"""Minimal 2D drawing surface used by the sky renderer."""

import math
import re
from typing import List, Protocol, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

Color = Union[str, Tuple[int, int, int]]

_FONT_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)px")

# Canvas text-align -> horizontal part of a Pillow anchor (baseline aligned)
_TEXT_ANCHORS = {
    "left": "ls",
    "start": "ls",
    "center": "ms",
    "right": "rs",
    "end": "rs",
}

_MONOSPACE_FONTS = ("DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "Menlo.ttc")


class DrawingSurface(Protocol):
    """Subset of the HTML canvas 2D context the renderer relies on."""

    def begin_path(self) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def set_fill_style(self, color: Color) -> None: ...

    def set_font(self, font: str) -> None: ...

    def set_text_align(self, align: str) -> None: ...


def parse_font_size(font: str, default: float = 10.0) -> float:
    """Pixel size from a CSS font shorthand such as '12px monospace'."""
    match = _FONT_SIZE_PATTERN.search(font)
    if match is None:
        return default
    return float(match.group(1))


class PillowSurface:
    """DrawingSurface that rasterizes onto an RGB PIL image.

    Paths follow canvas semantics: `begin_path` discards the current path,
    `move_to` and `close_path` start new sub-paths, and `fill` paints every
    sub-path with the current fill style. A single full-turn arc becomes an
    ellipse; other arcs are flattened into polygon vertices.
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        if width <= 0 or height <= 0:
            raise ValueError("Surface dimensions must be positive")

        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

        self._fill_style: Color = "#000000"
        self._font_size = 10.0
        self._text_align = "start"
        self._font_cache = {}

        self._subpaths: List[List[Tuple[float, float]]] = []
        self._circles: List[Tuple[float, float, float]] = []

    def begin_path(self) -> None:
        self._subpaths = []
        self._circles = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self._subpaths.append([])
        self._subpaths[-1].append((x, y))

    def close_path(self) -> None:
        if self._subpaths and self._subpaths[-1]:
            self._subpaths.append([self._subpaths[-1][0]])

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        if radius < 0:
            raise ValueError("Arc radius must be non-negative")

        sweep = start_angle - end_angle if anticlockwise else end_angle - start_angle
        current_empty = not self._subpaths or not self._subpaths[-1]
        if sweep >= 2.0 * math.pi and current_empty:
            self._circles.append((x, y, radius))
            return

        sweep = sweep % (2.0 * math.pi) if sweep < 2.0 * math.pi else 2.0 * math.pi
        direction = -1.0 if anticlockwise else 1.0
        steps = max(8, int(math.ceil(sweep * max(radius, 1.0) / 2.0)))
        for i in range(steps + 1):
            angle = start_angle + direction * sweep * i / steps
            self.line_to(x + radius * math.cos(angle), y + radius * math.sin(angle))

    def fill(self) -> None:
        for cx, cy, r in self._circles:
            self._draw.ellipse(
                [cx - r, cy - r, cx + r, cy + r], fill=self._fill_style
            )
        for points in self._subpaths:
            if len(points) >= 3:
                self._draw.polygon(points, fill=self._fill_style)

    def fill_text(self, text: str, x: float, y: float) -> None:
        anchor = _TEXT_ANCHORS.get(self._text_align, "ls")
        self._draw.text(
            (x, y), text, fill=self._fill_style, font=self._font(), anchor=anchor
        )

    def set_fill_style(self, color: Color) -> None:
        self._fill_style = color

    def set_font(self, font: str) -> None:
        self._font_size = parse_font_size(font, self._font_size)

    def set_text_align(self, align: str) -> None:
        if align not in _TEXT_ANCHORS:
            raise ValueError(f"Unsupported text alignment: {align}")
        self._text_align = align

    def _font(self) -> ImageFont.FreeTypeFont:
        size = max(1, int(round(self._font_size)))
        font = self._font_cache.get(size)
        if font is None:
            font = _load_monospace(size)
            self._font_cache[size] = font
        return font


def _load_monospace(size: int):
    for name in _MONOSPACE_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)

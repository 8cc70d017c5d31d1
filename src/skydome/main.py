import argparse
import math
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .astronomy.time import julian_date, parse_iso_utc
from .caption.generator import format_location, generate_caption
from .cities import DEFAULT_CITY, find_city
from .ephemeris import DEFAULT_KERNEL, EphemerisAdapter, build_catalog
from .errors import (
    CityNotFoundError,
    EphemerisLoadError,
    ObserverLocationError,
    SkyDomeError,
    TimeParseError,
    handle_error,
)
from .metadata.embedder import embed_metadata
from .models import ObserverLocation, Scene, ScreenPoint
from .renderer import PillowSurface, SkyRenderer

DEFAULT_SIZE = 1000
BACKGROUND_COLOR = "#0E1016"


def parse_args(argv: Optional[Sequence[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the Sun, Moon and planets on a sky dome for an observer."
    )
    parser.add_argument(
        "--utc-time",
        type=str,
        default=None,
        help="ISO-8601 UTC timestamp (default: current time)",
    )
    parser.add_argument(
        "--city",
        type=str,
        default=DEFAULT_CITY,
        help=f"Observer city from the built-in table (default: {DEFAULT_CITY})",
    )
    parser.add_argument(
        "--lat",
        type=float,
        default=None,
        help="Observer latitude in degrees (overrides --city, requires --lon)",
    )
    parser.add_argument(
        "--lon",
        type=float,
        default=None,
        help="Observer longitude in degrees, east positive (requires --lat)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Canvas width in pixels (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Canvas height in pixels (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--pointer",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Pointer position in canvas pixels, used for highlighting",
    )
    parser.add_argument(
        "--ephemeris",
        type=str,
        default=DEFAULT_KERNEL,
        help=f"JPL ephemeris kernel to load (default: {DEFAULT_KERNEL})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory where ephemeris kernels are cached (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PNG file path (default: output/YYYYMMDD-HHMMSS-sky.png)",
    )
    parser.add_argument(
        "--caption",
        action="store_true",
        help="Print caption to stdout",
    )
    parser.add_argument(
        "--no-cardinals",
        action="store_true",
        help="Do not draw N/E/S/W markers around the dome",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed internal state during rendering",
    )
    return parser.parse_args(argv)


def resolve_observer(
    city: Optional[str], latitude: Optional[float], longitude: Optional[float]
) -> ObserverLocation:
    """Build the observer from explicit coordinates, falling back to a city.

    Raises:
        ObserverLocationError: If only one coordinate is given or values are out of range
        CityNotFoundError: If the city is unknown
    """
    if latitude is not None or longitude is not None:
        if latitude is None or longitude is None:
            raise ObserverLocationError(
                latitude if latitude is not None else math.nan,
                longitude if longitude is not None else math.nan,
            )
        return ObserverLocation(latitude=latitude, longitude=longitude)

    return find_city(city or DEFAULT_CITY).location


def print_verbose_info(observer, result, scene):
    """Print detailed internal state information for verbose output.

    Args:
        observer: Observer location
        result: RenderResult of the pass
        scene: Scene metadata
    """
    print("=== VERBOSE: Internal State ===")
    print()

    print("Observer:")
    print(f"  Latitude: {observer.latitude:.6f}°")
    print(f"  Longitude: {observer.longitude:.6f}°")
    print()

    print("Time:")
    print(f"  UTC time: {scene.utc_time}")
    print(f"  Julian Date: {result.julian_date.value:.6f}")
    print(f"  Local sidereal time: {math.degrees(result.local_sidereal_time):.4f}°")
    print()

    geometry = result.geometry
    print("Dome Geometry:")
    print(f"  Canvas: {scene.width} x {scene.height} px")
    print(f"  Center: ({geometry.center.x:.1f}, {geometry.center.y:.1f})")
    print(f"  Radius: {geometry.radius:.1f} px")
    print(f"  Marker size: {geometry.marker_size:.2f} px")
    print()

    print("Bodies:")
    for placement in result.placements:
        h = placement.horizontal
        line = f"  {placement.body.name:<8} az {h.azimuth_deg:7.2f}°  alt {h.altitude_deg:7.2f}°"
        if placement.screen_point is not None:
            point = placement.screen_point
            line += f"  -> ({point.x:.1f}, {point.y:.1f})"
            if placement.highlighted:
                line += " [highlighted]"
        else:
            line += "  below horizon"
        print(line)

    print("=== END VERBOSE ===")
    print()


def render_sky_image(
    utc_time: Optional[str] = None,
    city: Optional[str] = DEFAULT_CITY,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    pointer: Optional[Sequence[float]] = None,
    ephemeris: str = DEFAULT_KERNEL,
    data_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    print_caption: bool = False,
    show_cardinals: bool = True,
    verbose: bool = False,
    adapter: Optional[EphemerisAdapter] = None,
) -> int:
    """Render one sky frame and save it as PNG with embedded metadata.

    Args:
        utc_time: ISO-8601 UTC timestamp (None for now)
        city: Built-in city name used when no coordinates are given
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        width: Canvas width in pixels
        height: Canvas height in pixels
        pointer: Pointer (x, y) in canvas pixels (None for no pointer)
        ephemeris: Kernel file name for skyfield
        data_dir: Directory for kernel downloads
        output_path: Path to save output PNG (None for auto-generated)
        print_caption: If True, print caption to stdout
        show_cardinals: If True, draw N/E/S/W markers
        verbose: If True, print detailed internal state
        adapter: Preloaded ephemeris adapter (skips kernel loading)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        if width <= 0 or height <= 0:
            raise SkyDomeError(
                f"Canvas size {width}x{height} must be positive",
                suggestions=["Pass positive values to --width and --height"],
            )

        try:
            if utc_time is None:
                moment = datetime.now(timezone.utc)
                utc_time = moment.isoformat(timespec="seconds").replace("+00:00", "Z")
            else:
                moment = parse_iso_utc(utc_time)
        except TimeParseError as e:
            return handle_error(e, "parsing UTC time")

        try:
            observer = resolve_observer(city, latitude, longitude)
        except (ObserverLocationError, CityNotFoundError) as e:
            return handle_error(e, "resolving observer location")

        if adapter is None:
            try:
                adapter = EphemerisAdapter.load(ephemeris, data_dir)
            except EphemerisLoadError as e:
                return handle_error(e, "loading ephemeris")

        jd = julian_date(moment)
        if pointer is None:
            pointer_point = ScreenPoint(math.inf, math.inf)
        else:
            pointer_point = ScreenPoint(float(pointer[0]), float(pointer[1]))

        print(f"Rendering sky over {format_location(observer.latitude, observer.longitude)}")
        print(f"  UTC time: {utc_time}")
        print(f"  Canvas: {width} x {height} px")
        print()

        surface = PillowSurface(width, height, background=BACKGROUND_COLOR)
        renderer = SkyRenderer(
            build_catalog(adapter), adapter.earth, show_cardinals=show_cardinals
        )
        result = renderer.render(surface, observer, width, height, pointer_point, jd)

        scene = Scene(
            utc_time=utc_time,
            julian_date=jd.value,
            latitude=observer.latitude,
            longitude=observer.longitude,
            width=width,
            height=height,
            renderer_id=f"skydome-{__version__}",
        )

        if verbose:
            print_verbose_info(observer, result, scene)

        visible_names = [p.body.name for p in result.visible]
        print(f"Bodies above the horizon: {', '.join(visible_names) or 'none'}")

        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
            output_path = f"output/{timestamp}-sky.png"

        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        embed_metadata(surface.image, scene, str(output_file), visible_names)
        print(f"Saved: {output_file}")

        if print_caption:
            print(generate_caption(scene, result))

        return 0

    except Exception as e:
        return handle_error(e, "rendering sky")


def main():
    """CLI entry point."""
    args = parse_args()

    exit_code = render_sky_image(
        utc_time=args.utc_time,
        city=args.city,
        latitude=args.lat,
        longitude=args.lon,
        width=args.width,
        height=args.height,
        pointer=args.pointer,
        ephemeris=args.ephemeris,
        data_dir=args.data_dir,
        output_path=args.output,
        print_caption=args.caption,
        show_cardinals=not args.no_cardinals,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

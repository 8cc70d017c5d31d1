from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.scene import Scene
    from ..renderer.engine import RenderResult


def format_location(latitude: float, longitude: float) -> str:
    return (
        f"{abs(latitude):.4f}°{'N' if latitude >= 0 else 'S'}, "
        f"{abs(longitude):.4f}°{'E' if longitude >= 0 else 'W'}"
    )


def generate_caption(scene: "Scene", result: "RenderResult") -> str:
    """Generate a caption summarizing one rendered sky.

    Args:
        scene: Scene metadata containing location and time.
        result: Placements produced by the render pass.

    Returns:
        Human-readable caption string.
    """
    parts = [f"Sky over {format_location(scene.latitude, scene.longitude)}"]
    parts.append(f"At {scene.utc_time}")

    visible = result.visible
    if not visible:
        parts.append("Nothing above the horizon")
    else:
        entries = [
            f"{p.body.name} (az {p.horizontal.azimuth_deg:.1f}°, "
            f"alt {p.horizontal.altitude_deg:.1f}°)"
            for p in visible
        ]
        parts.append("Above the horizon: " + ", ".join(entries))

    highlighted = result.highlighted
    if highlighted is not None:
        parts.append(f"Pointer on {highlighted.body.name}")

    return ". ".join(parts) + "."

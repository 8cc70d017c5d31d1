"""PNG metadata embedding and extraction for rendered sky frames."""

from typing import Dict, Optional, Sequence

from PIL import Image, PngImagePlugin

from ..models.scene import Scene


def embed_metadata(
    image: Image.Image,
    scene: Scene,
    output_path: str,
    visible_bodies: Sequence[str] = (),
) -> None:
    """Save an RGB image as PNG with scene metadata in text chunks.

    Args:
        image: Rendered RGB image
        scene: Scene metadata object
        output_path: Path where to save the PNG file
        visible_bodies: Names of bodies drawn above the horizon
    """
    if image.mode != "RGB":
        raise ValueError("Image must be in RGB mode for PNG output")

    if image.size != (scene.width, scene.height):
        raise ValueError(
            f"Image size {image.size} does not match scene {scene.width}x{scene.height}"
        )

    png_info = PngImagePlugin.PngInfo()

    metadata_dict = _scene_to_metadata_dict(scene)
    metadata_dict["visible_bodies"] = ",".join(visible_bodies)
    for key, value in metadata_dict.items():
        png_info.add_text(key, str(value))

    image.save(output_path, "PNG", pnginfo=png_info)


def _scene_to_metadata_dict(scene: Scene) -> Dict[str, str]:
    """Convert Scene dataclass to metadata dictionary.

    Args:
        scene: Scene metadata object

    Returns:
        Dictionary with string values for PNG text chunks
    """
    return {
        "utc_time": scene.utc_time,
        "julian_date": repr(scene.julian_date),
        "latitude": str(scene.latitude),
        "longitude": str(scene.longitude),
        "width": str(scene.width),
        "height": str(scene.height),
        "renderer_id": scene.renderer_id,
    }


def extract_metadata(image_path: str) -> Optional[Dict[str, str]]:
    """Extract metadata from a PNG file.

    Args:
        image_path: Path to PNG file

    Returns:
        Dictionary of metadata key-value pairs, or None if no metadata found
    """
    try:
        image = Image.open(image_path)
    except FileNotFoundError:
        return None

    with image:
        metadata = dict(getattr(image, "text", {}))

    return metadata if metadata else None

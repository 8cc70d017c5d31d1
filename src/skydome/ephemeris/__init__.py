from .adapter import DEFAULT_KERNEL, KERNEL_TARGETS, EphemerisAdapter
from .catalog import BODY_COLORS, build_catalog

__all__ = [
    "DEFAULT_KERNEL",
    "KERNEL_TARGETS",
    "EphemerisAdapter",
    "BODY_COLORS",
    "build_catalog",
]

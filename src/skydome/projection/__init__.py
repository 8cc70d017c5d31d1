from .dome import DomeGeometry, project

__all__ = ["DomeGeometry", "project"]

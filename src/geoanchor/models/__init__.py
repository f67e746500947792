"""
Data models and schemas.
"""

from .coordinates import (
    GeodeticCoordinate,
    LocalCoordinate,
    ProjectedCoordinate,
)
from .crs import (
    Hemisphere,
    ReferenceSystem,
)

__all__ = [
    # Coordinates
    "GeodeticCoordinate",
    "LocalCoordinate",
    "ProjectedCoordinate",
    # CRS
    "Hemisphere",
    "ReferenceSystem",
]

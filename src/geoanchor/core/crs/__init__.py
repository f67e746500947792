"""
Coordinate Reference System (CRS) module.

This module provides:
- Point transforms between WGS84 and WGS84/UTM zones
- UTM zone detection and EPSG lookup
"""

from geoanchor.core.crs.provider import (
    GeodeticTransformProvider,
    PointTransform,
)
from geoanchor.core.crs.utm import (
    detect_utm_zone,
    format_utm_zone,
    get_utm_epsg,
)

__all__ = [
    # Provider
    "GeodeticTransformProvider",
    "PointTransform",
    # UTM utilities
    "detect_utm_zone",
    "format_utm_zone",
    "get_utm_epsg",
]

"""
UTM zone detection and utilities.

This module provides functionality to detect the appropriate UTM
(Universal Transverse Mercator) zone for WGS84 coordinates and to derive
EPSG codes and labels for a zone.
"""

from typing import Tuple

from geoanchor.core.errors import ValidationError
from geoanchor.models.crs import validate_zone


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, bool]:
    """
    Detect the appropriate UTM zone for given WGS84 coordinates.

    UTM zones are numbered from 1 to 60, each covering 6 degrees of longitude.
    Zone 1 starts at 180°W. The hemisphere (north/south) is determined by latitude.

    Special cases:
    - Norway: Uses zone 32V instead of 31V for some areas
    - Svalbard: Uses zones 31X, 33X, 35X and 37X instead of 32X, 34X and 36X

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, is_northern_hemisphere)

    Raises:
        ValidationError: If coordinates are out of valid range
    """
    if not -180 <= longitude <= 180:
        raise ValidationError(
            f"Longitude must be between -180 and 180, got {longitude}",
            field="longitude",
        )
    if not -90 <= latitude <= 90:
        raise ValidationError(
            f"Latitude must be between -90 and 90, got {latitude}",
            field="latitude",
        )

    is_northern = bool(latitude >= 0)

    zone_number = int((longitude + 180) / 6) + 1

    # 180° belongs to zone 1
    if zone_number > 60:
        zone_number = 1

    # Norway
    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        zone_number = 32

    # Svalbard
    if 72.0 <= latitude < 84.0:
        if 0.0 <= longitude < 9.0:
            zone_number = 31
        elif 9.0 <= longitude < 21.0:
            zone_number = 33
        elif 21.0 <= longitude < 33.0:
            zone_number = 35
        elif 33.0 <= longitude < 42.0:
            zone_number = 37

    return zone_number, is_northern


def get_utm_epsg(zone_number: int, is_northern: bool) -> int:
    """
    Get EPSG code for a WGS84/UTM zone.

    Args:
        zone_number: UTM zone number (1-60)
        is_northern: True for northern hemisphere, False for southern

    Returns:
        EPSG code

    Raises:
        InvalidZoneError: If zone_number is out of valid range
    """
    zone_number = validate_zone(zone_number)

    if is_northern:
        # EPSG 32601 to 32660
        return 32600 + zone_number
    # EPSG 32701 to 32760
    return 32700 + zone_number


def format_utm_zone(zone_number: int, is_northern: bool) -> str:
    """
    Format UTM zone as a string such as "32N" or "56S".
    """
    hemisphere = "N" if is_northern else "S"
    return f"{zone_number}{hemisphere}"

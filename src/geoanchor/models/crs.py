"""
Data models for the WGS84/UTM coordinate reference system.

This module defines the hemisphere enumeration and the reference system
descriptor (zone + hemisphere) used by the coordinate transformer.
"""

import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import numpy as np

from geoanchor.core.errors import InvalidZoneError

logger = logging.getLogger(__name__)

MIN_UTM_ZONE = 1
MAX_UTM_ZONE = 60


class Hemisphere(str, Enum):
    """Hemisphere of a UTM zone."""

    NORTH = "north"
    SOUTH = "south"

    @classmethod
    def parse(cls, value: Any) -> Optional["Hemisphere"]:
        """
        Parse a hemisphere from common spellings.

        Accepts the enum itself, a boolean ``is_northern`` flag and strings
        such as "N", "north", "Northern", "S", "south" (case-insensitive).

        Args:
            value: Value to parse

        Returns:
            Matching Hemisphere, or None if the value is not recognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.NORTH if value else cls.SOUTH
        if isinstance(value, str):
            return _HEMISPHERE_ALIASES.get(value.strip().lower())
        return None


_HEMISPHERE_ALIASES = {
    "n": Hemisphere.NORTH,
    "north": Hemisphere.NORTH,
    "northern": Hemisphere.NORTH,
    "s": Hemisphere.SOUTH,
    "south": Hemisphere.SOUTH,
    "southern": Hemisphere.SOUTH,
}


def validate_zone(zone: Any) -> int:
    """
    Validate a UTM zone number.

    Args:
        zone: Zone number to validate

    Returns:
        The zone as a plain int

    Raises:
        InvalidZoneError: If zone is not an integer between 1 and 60
    """
    if isinstance(zone, bool) or not isinstance(zone, numbers.Integral):
        raise InvalidZoneError(zone)
    if not MIN_UTM_ZONE <= zone <= MAX_UTM_ZONE:
        raise InvalidZoneError(zone)
    return int(zone)


@dataclass(frozen=True)
class ReferenceSystem:
    """
    WGS84/UTM coordinate reference system.

    Recognized hemisphere spellings are normalized to :class:`Hemisphere`.
    Anything else is kept as given and treated as northern.

    Attributes:
        zone: UTM zone number (1-60)
        hemisphere: Hemisphere of the zone
    """

    zone: int = 32
    hemisphere: Union[Hemisphere, Any] = Hemisphere.NORTH

    def __post_init__(self) -> None:
        """Validate zone and normalize hemisphere."""
        object.__setattr__(self, "zone", validate_zone(self.zone))

        parsed = Hemisphere.parse(self.hemisphere)
        if parsed is None:
            logger.warning(
                f"Unrecognized hemisphere {self.hemisphere!r} for UTM zone "
                f"{self.zone}, treating it as northern"
            )
        else:
            object.__setattr__(self, "hemisphere", parsed)

    def is_northern(self) -> bool:
        """
        Check whether the zone lies on the northern hemisphere.

        Returns:
            False only for Hemisphere.SOUTH, True otherwise
        """
        return self.hemisphere is not Hemisphere.SOUTH

    @property
    def epsg(self) -> int:
        """EPSG code of the WGS84/UTM zone (326zz north, 327zz south)."""
        from geoanchor.core.crs.utm import get_utm_epsg

        return get_utm_epsg(self.zone, self.is_northern())

    @property
    def name(self) -> str:
        """Human-readable CRS name, e.g. 'WGS 84 / UTM zone 32N'."""
        from geoanchor.core.crs.utm import format_utm_zone

        return f"WGS 84 / UTM zone {format_utm_zone(self.zone, self.is_northern())}"

    def to_crs_string(self) -> str:
        """Authority string understood by pyproj, e.g. 'EPSG:32632'."""
        return f"EPSG:{self.epsg}"

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        hemisphere = (
            self.hemisphere.value
            if isinstance(self.hemisphere, Hemisphere)
            else self.hemisphere
        )
        return {"zone": self.zone, "hemisphere": hemisphere, "epsg": self.epsg}

    @classmethod
    def from_epsg(cls, epsg: int) -> "ReferenceSystem":
        """
        Create a reference system from a WGS84/UTM EPSG code.

        Args:
            epsg: EPSG code between 32601-32660 or 32701-32760

        Returns:
            ReferenceSystem instance

        Raises:
            InvalidZoneError: If the code is not a WGS84/UTM zone
        """
        if 32600 < epsg <= 32660:
            return cls(zone=epsg - 32600, hemisphere=Hemisphere.NORTH)
        if 32700 < epsg <= 32760:
            return cls(zone=epsg - 32700, hemisphere=Hemisphere.SOUTH)
        raise InvalidZoneError(
            epsg, details={"epsg": epsg},
            suggestions=["Use an EPSG code in 32601-32660 or 32701-32760"],
        )

    @classmethod
    def from_geodetic(cls, latitude: float, longitude: float) -> "ReferenceSystem":
        """
        Create the reference system whose zone contains a WGS84 position.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            ReferenceSystem for the detected zone and hemisphere
        """
        from geoanchor.core.crs.utm import detect_utm_zone

        zone, is_northern = detect_utm_zone(longitude, latitude)
        hemisphere = Hemisphere.NORTH if is_northern else Hemisphere.SOUTH
        return cls(zone=zone, hemisphere=hemisphere)

    def __str__(self) -> str:
        """String representation."""
        hemisphere = (
            self.hemisphere.name.capitalize()
            if isinstance(self.hemisphere, Hemisphere)
            else self.hemisphere
        )
        return f"ReferenceSystem (with zone: {self.zone}, hemisphere: {hemisphere})"

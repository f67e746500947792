"""
Coordinate value types.

Geodetic and projected coordinates keep double precision. Local scene
coordinates are single precision, matching the 3D scene that consumes them.
Altitudes are in an application chosen height reference system (e.g.
DHHN2016 in Germany) and are never touched by the horizontal projection.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class GeodeticCoordinate:
    """
    WGS84 latitude/longitude pair with a pass-through altitude.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        altitude: Altitude in a user chosen vertical datum
    """

    latitude: float
    longitude: float
    altitude: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"GeodeticCoordinate (with latitude: {self.latitude}, "
            f"longitude: {self.longitude}, altitude: {self.altitude})"
        )


@dataclass(frozen=True)
class ProjectedCoordinate:
    """
    WGS84/UTM easting/northing pair with a pass-through altitude.

    Attributes:
        east: Easting in meters
        north: Northing in meters
        altitude: Altitude in a user chosen vertical datum
    """

    east: float
    north: float
    altitude: float = 0.0

    def offset_from(self, other: "ProjectedCoordinate") -> Tuple[float, float, float]:
        """
        Component-wise difference ``self - other``.

        Args:
            other: Reference point

        Returns:
            Tuple of (east, north, altitude) offsets
        """
        return (
            self.east - other.east,
            self.north - other.north,
            self.altitude - other.altitude,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"east": self.east, "north": self.north, "altitude": self.altitude}

    def __str__(self) -> str:
        """String representation."""
        return (
            f"ProjectedCoordinate (with east: {self.east}, "
            f"north: {self.north}, altitude: {self.altitude})"
        )


@dataclass(frozen=True)
class LocalCoordinate:
    """
    Position in the local scene frame, stored in single precision.

    The local frame is Y-up: ``x`` is east, ``y`` is altitude and ``z`` is
    north relative to the anchor.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(np.float32(getattr(self, name))))

    def to_array(self) -> np.ndarray:
        """Return the components as a float32 vector."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "LocalCoordinate":
        """
        Create a local coordinate from a 3-element sequence.

        Raises:
            ValueError: If the sequence does not have exactly 3 elements
        """
        arr = np.asarray(values, dtype=np.float32).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.size}")
        return cls(x=arr[0], y=arr[1], z=arr[2])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        """String representation."""
        return f"LocalCoordinate (x: {self.x}, y: {self.y}, z: {self.z})"

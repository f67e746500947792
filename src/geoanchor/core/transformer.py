"""
Coordinate transformation service.

This module converts positions between WGS84 geodetic coordinates,
WGS84/UTM projected coordinates and the local frame of a 3D scene whose
origin is anchored at a UTM point.

The local frame is Y-up while UTM is (east, north, altitude), so the second
and third components are swapped on the way in and out. Local coordinates
are single precision and every offset from the anchor must stay strictly
inside ``local_bound`` on each axis.
"""

import logging
import threading
from typing import Optional, Union

import numpy as np

from geoanchor.core.config import Settings, load_settings
from geoanchor.core.crs.provider import GeodeticTransformProvider, PointTransform
from geoanchor.core.errors import OutOfRangeError, ValidationError
from geoanchor.models.coordinates import (
    GeodeticCoordinate,
    LocalCoordinate,
    ProjectedCoordinate,
)
from geoanchor.models.crs import Hemisphere, ReferenceSystem

logger = logging.getLogger(__name__)

DEFAULT_LOCAL_BOUND = 100.0

# Hamburg, Germany
DEFAULT_REFERENCE_SYSTEM = ReferenceSystem(zone=32, hemisphere=Hemisphere.NORTH)
DEFAULT_ANCHOR = ProjectedCoordinate(east=566600.0, north=5933000.0, altitude=0.0)


def _check_bound(local_bound: float) -> float:
    if not local_bound > 0:
        raise ValidationError(
            f"local_bound must be positive, got {local_bound}", field="local_bound"
        )
    return float(local_bound)


def _as_points(points: Union[np.ndarray, list], dtype: type) -> np.ndarray:
    arr = np.asarray(points, dtype=dtype)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValidationError(
            f"Expected an array of shape (N, 3), got {arr.shape}", field="points"
        )
    return arr


class CoordinateTransformer:
    """
    Converts coordinates between WGS84, WGS84/UTM and a local scene frame.

    The reference system and the anchor are fixed at construction time and
    can only be changed through :meth:`reconfigure`, which drops the cached
    transforms when the reference system changes. The two transforms are
    built on first use; building them is guarded by a lock.
    """

    def __init__(
        self,
        reference_system: Optional[ReferenceSystem] = None,
        anchor: Optional[ProjectedCoordinate] = None,
        local_bound: float = DEFAULT_LOCAL_BOUND,
        provider: Optional[GeodeticTransformProvider] = None,
    ):
        """
        Initialize transformer.

        Args:
            reference_system: UTM zone and hemisphere of the anchor
            anchor: UTM point that corresponds to the local origin (0, 0, 0).
                Keep it within ``local_bound`` of the data used in the scene.
            local_bound: Exclusive limit for each local offset, in the
                anchor's linear unit
            provider: Source of the geodetic transforms
        """
        self._reference_system = reference_system or DEFAULT_REFERENCE_SYSTEM
        self._anchor = anchor or DEFAULT_ANCHOR
        self._local_bound = _check_bound(local_bound)
        self._provider = provider or GeodeticTransformProvider()

        self._lock = threading.Lock()
        self._forward: Optional[PointTransform] = None
        self._inverse: Optional[PointTransform] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        provider: Optional[GeodeticTransformProvider] = None,
    ) -> "CoordinateTransformer":
        """
        Create a transformer from application settings.

        Args:
            settings: Settings instance, read from the environment if omitted
            provider: Source of the geodetic transforms

        Returns:
            Configured CoordinateTransformer

        Raises:
            ConfigurationError: If the environment holds invalid settings
        """
        config = settings if settings is not None else load_settings()

        return cls(
            reference_system=config.reference_system(),
            anchor=config.anchor(),
            local_bound=config.local_bound,
            provider=provider,
        )

    @classmethod
    def from_geodetic_anchor(
        cls,
        anchor: GeodeticCoordinate,
        reference_system: Optional[ReferenceSystem] = None,
        local_bound: float = DEFAULT_LOCAL_BOUND,
        provider: Optional[GeodeticTransformProvider] = None,
    ) -> "CoordinateTransformer":
        """
        Create a transformer whose anchor is given in WGS84.

        Args:
            anchor: Geodetic position of the local origin
            reference_system: UTM zone to use, detected from the anchor if omitted
            local_bound: Exclusive limit for each local offset
            provider: Source of the geodetic transforms

        Returns:
            Configured CoordinateTransformer
        """
        if reference_system is None:
            reference_system = ReferenceSystem.from_geodetic(
                anchor.latitude, anchor.longitude
            )

        transformer = cls(
            reference_system=reference_system,
            anchor=ProjectedCoordinate(0.0, 0.0, 0.0),
            local_bound=local_bound,
            provider=provider,
        )
        transformer.reconfigure(anchor=transformer.geodetic_to_projected(anchor))
        return transformer

    # Configuration

    @property
    def reference_system(self) -> ReferenceSystem:
        """UTM zone and hemisphere of the anchor."""
        return self._reference_system

    @property
    def anchor(self) -> ProjectedCoordinate:
        """UTM point that corresponds to the local origin."""
        return self._anchor

    @property
    def local_bound(self) -> float:
        """Exclusive limit for each local offset from the anchor."""
        return self._local_bound

    @property
    def anchor_geodetic(self) -> GeodeticCoordinate:
        """The anchor expressed in WGS84."""
        return self.projected_to_geodetic(self._anchor)

    def reconfigure(
        self,
        reference_system: Optional[ReferenceSystem] = None,
        anchor: Optional[ProjectedCoordinate] = None,
        local_bound: Optional[float] = None,
    ) -> None:
        """
        Change the configuration of the transformer.

        Omitted arguments keep their current value. Cached transforms are
        dropped when the reference system changes.

        Args:
            reference_system: New UTM zone and hemisphere
            anchor: New UTM point for the local origin
            local_bound: New exclusive limit for local offsets
        """
        with self._lock:
            if local_bound is not None:
                self._local_bound = _check_bound(local_bound)
            if anchor is not None:
                self._anchor = anchor
            if (
                reference_system is not None
                and reference_system != self._reference_system
            ):
                self._reference_system = reference_system
                self._forward = None
                self._inverse = None

        logger.info(f"Reconfigured {self}")

    def reset_cache(self) -> None:
        """Drop the cached transforms so they are rebuilt on next use."""
        with self._lock:
            self._forward = None
            self._inverse = None

    def _forward_transform(self) -> PointTransform:
        """Projected -> geodetic transform, built on first use."""
        transform = self._forward
        if transform is None:
            with self._lock:
                if self._forward is None:
                    self._forward = self._provider.forward_transform(
                        self._reference_system
                    )
                    logger.debug(f"Built forward transform for {self._reference_system}")
                transform = self._forward
        return transform

    def _inverse_transform(self) -> PointTransform:
        """Geodetic -> projected transform, built on first use."""
        transform = self._inverse
        if transform is None:
            with self._lock:
                if self._inverse is None:
                    self._inverse = self._provider.inverse_transform(
                        self._reference_system
                    )
                    logger.debug(f"Built inverse transform for {self._reference_system}")
                transform = self._inverse
        return transform

    # Geodetic <-> projected

    def geodetic_to_projected(self, geodetic: GeodeticCoordinate) -> ProjectedCoordinate:
        """
        Convert WGS84 coordinates into UTM coordinates.

        Args:
            geodetic: Coordinates to be transformed

        Returns:
            UTM coordinates with the altitude passed through
        """
        east, north = self._inverse_transform().transform(
            geodetic.longitude, geodetic.latitude
        )
        return ProjectedCoordinate(east=east, north=north, altitude=geodetic.altitude)

    def projected_to_geodetic(self, projected: ProjectedCoordinate) -> GeodeticCoordinate:
        """
        Convert UTM coordinates into WGS84 coordinates.

        Args:
            projected: Coordinates to be transformed

        Returns:
            WGS84 coordinates with the altitude passed through
        """
        longitude, latitude = self._forward_transform().transform(
            projected.east, projected.north
        )
        return GeodeticCoordinate(
            latitude=latitude, longitude=longitude, altitude=projected.altitude
        )

    # Projected <-> local

    def is_within_bounds(self, projected: ProjectedCoordinate) -> bool:
        """
        Check whether a UTM point can be expressed in the local frame.

        Args:
            projected: UTM coordinates to check

        Returns:
            True if every offset from the anchor is strictly inside the bound
        """
        offset = np.asarray(projected.offset_from(self._anchor)).astype(np.float32)
        return bool(np.all(np.abs(offset) < self._local_bound))

    def projected_to_local(self, projected: ProjectedCoordinate) -> LocalCoordinate:
        """
        Convert UTM coordinates into local frame coordinates.

        Args:
            projected: Coordinates to be transformed

        Returns:
            Local coordinates (east, altitude, north) relative to the anchor

        Raises:
            OutOfRangeError: If an offset from the anchor is not strictly
                inside ``local_bound``
        """
        offset = np.asarray(projected.offset_from(self._anchor)).astype(np.float32)

        if not np.all(np.abs(offset) < self._local_bound):
            logger.debug(f"Refusing {projected}: offset {offset.tolist()} exceeds bound")
            raise OutOfRangeError(
                f"Objects with a distance of {self._local_bound} or more from the "
                f"local origin cannot be processed, got offset {offset.tolist()}",
                offset=offset.tolist(),
                bound=self._local_bound,
            )

        east, north, altitude = offset
        return LocalCoordinate(x=east, y=altitude, z=north)

    def local_to_projected(self, local: LocalCoordinate) -> ProjectedCoordinate:
        """
        Convert local frame coordinates into UTM coordinates.

        Args:
            local: Coordinates to be transformed

        Returns:
            UTM coordinates
        """
        anchor = self._anchor
        return ProjectedCoordinate(
            east=local.x + anchor.east,
            north=local.z + anchor.north,
            altitude=local.y + anchor.altitude,
        )

    # Composite conversions

    def geodetic_to_local(self, geodetic: GeodeticCoordinate) -> LocalCoordinate:
        """
        Convert WGS84 coordinates into local frame coordinates.

        Raises:
            OutOfRangeError: If the position is too far from the anchor
        """
        return self.projected_to_local(self.geodetic_to_projected(geodetic))

    def local_to_geodetic(self, local: LocalCoordinate) -> GeodeticCoordinate:
        """Convert local frame coordinates into WGS84 coordinates."""
        return self.projected_to_geodetic(self.local_to_projected(local))

    # Batch conversions

    def geodetic_to_projected_many(self, points: Union[np.ndarray, list]) -> np.ndarray:
        """
        Convert an (N, 3) array of (latitude, longitude, altitude) rows.

        Returns:
            (N, 3) float64 array of (east, north, altitude) rows
        """
        arr = _as_points(points, np.float64)
        east, north = self._inverse_transform().transform_many(arr[:, 1], arr[:, 0])
        return np.column_stack([east, north, arr[:, 2]])

    def projected_to_geodetic_many(self, points: Union[np.ndarray, list]) -> np.ndarray:
        """
        Convert an (N, 3) array of (east, north, altitude) rows.

        Returns:
            (N, 3) float64 array of (latitude, longitude, altitude) rows
        """
        arr = _as_points(points, np.float64)
        longitude, latitude = self._forward_transform().transform_many(
            arr[:, 0], arr[:, 1]
        )
        return np.column_stack([latitude, longitude, arr[:, 2]])

    def projected_to_local_many(self, points: Union[np.ndarray, list]) -> np.ndarray:
        """
        Convert an (N, 3) array of (east, north, altitude) rows.

        Returns:
            (N, 3) float32 array of local (x, y, z) rows

        Raises:
            OutOfRangeError: If any row is too far from the anchor. The error
                details list the offending row indices.
        """
        arr = _as_points(points, np.float64)
        anchor = np.array(
            [self._anchor.east, self._anchor.north, self._anchor.altitude]
        )
        offsets = (arr - anchor).astype(np.float32)

        inside = np.all(np.abs(offsets) < self._local_bound, axis=1)
        if not np.all(inside):
            rows = np.flatnonzero(~inside).tolist()
            raise OutOfRangeError(
                f"{len(rows)} of {len(arr)} points are {self._local_bound} or more "
                f"from the local origin",
                bound=self._local_bound,
                details={"rows": rows},
            )

        return offsets[:, [0, 2, 1]]

    def local_to_projected_many(self, points: Union[np.ndarray, list]) -> np.ndarray:
        """
        Convert an (N, 3) array of local (x, y, z) rows.

        Returns:
            (N, 3) float64 array of (east, north, altitude) rows
        """
        arr = _as_points(points, np.float32).astype(np.float64)
        anchor = np.array(
            [self._anchor.east, self._anchor.north, self._anchor.altitude]
        )
        return arr[:, [0, 2, 1]] + anchor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateTransformer):
            return NotImplemented
        return (
            self._reference_system == other._reference_system
            and self._anchor == other._anchor
            and self._local_bound == other._local_bound
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"CoordinateTransformer (with {self._reference_system}, "
            f"anchor: {self._anchor}, local_bound: {self._local_bound})"
        )

    def __repr__(self) -> str:
        return (
            f"CoordinateTransformer(reference_system={self._reference_system!r}, "
            f"anchor={self._anchor!r}, local_bound={self._local_bound!r})"
        )

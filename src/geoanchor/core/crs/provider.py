"""
Geodetic transform provider.

This module builds planar <-> geodetic point transforms for a WGS84/UTM
reference system using pyproj. The projection math itself is left to PROJ;
no extent or accuracy validation is performed here.
"""

import logging
from typing import List, Tuple, Union

import numpy as np
from pyproj import CRS, Transformer

from geoanchor.core.errors import TransformationError
from geoanchor.models.crs import ReferenceSystem

logger = logging.getLogger(__name__)

WGS84_EPSG = 4326


class PointTransform:
    """
    Two-dimensional point transform between two CRS.

    Maps an (x, y) pair to an (x', y') pair. Geographic axes are always
    (longitude, latitude), projected axes are always (east, north).
    Altitude is not part of the transform.
    """

    def __init__(self, source_crs: CRS, target_crs: CRS):
        """
        Initialize transform.

        Args:
            source_crs: Source coordinate reference system
            target_crs: Target coordinate reference system

        Raises:
            TransformationError: If transformer cannot be created
        """
        self.source_crs = source_crs
        self.target_crs = target_crs

        try:
            self.transformer = Transformer.from_crs(
                source_crs,
                target_crs,
                always_xy=True,
            )
        except Exception as e:
            raise TransformationError(
                f"Failed to create transformer: {e}",
                source_crs=str(source_crs),
                target_crs=str(target_crs),
            ) from e

    def transform(self, x: float, y: float) -> Tuple[float, float]:
        """
        Transform a single point.

        Args:
            x: X coordinate (easting or longitude)
            y: Y coordinate (northing or latitude)

        Returns:
            Transformed (x, y)

        Raises:
            TransformationError: If transformation fails
        """
        try:
            xx, yy = self.transformer.transform(x, y)
        except Exception as e:
            raise TransformationError(f"Transformation failed: {e}") from e
        return float(xx), float(yy)

    def transform_many(
        self,
        x_coords: Union[List[float], np.ndarray],
        y_coords: Union[List[float], np.ndarray],
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Transform a batch of points.

        Args:
            x_coords: Array of X coordinates
            y_coords: Array of Y coordinates

        Returns:
            Tuple of transformed coordinate arrays (xx, yy)

        Raises:
            TransformationError: If arrays differ in length or transformation fails
        """
        x_arr = np.asarray(x_coords, dtype=np.float64)
        y_arr = np.asarray(y_coords, dtype=np.float64)

        if x_arr.shape != y_arr.shape:
            raise TransformationError("x_coords and y_coords must have same length")

        try:
            xx, yy = self.transformer.transform(x_arr, y_arr)
        except Exception as e:
            raise TransformationError(f"Batch transformation failed: {e}") from e
        return np.asarray(xx, dtype=np.float64), np.asarray(yy, dtype=np.float64)

    def __repr__(self) -> str:
        return f"PointTransform({self.source_crs.to_string()} -> {self.target_crs.to_string()})"


class GeodeticTransformProvider:
    """
    Creates point transforms between WGS84 and a WGS84/UTM zone.
    """

    def _crs_pair(self, reference_system: ReferenceSystem) -> Tuple[CRS, CRS]:
        try:
            return CRS.from_epsg(reference_system.epsg), CRS.from_epsg(WGS84_EPSG)
        except Exception as e:
            raise TransformationError(
                f"Failed to create CRS for {reference_system}: {e}",
                source_crs=reference_system.to_crs_string(),
            ) from e

    def forward_transform(self, reference_system: ReferenceSystem) -> PointTransform:
        """
        Build the projected -> geodetic transform.

        Args:
            reference_system: UTM zone and hemisphere

        Returns:
            PointTransform mapping (east, north) to (longitude, latitude)
        """
        projected, geographic = self._crs_pair(reference_system)
        logger.debug(f"Creating {reference_system.name} -> WGS 84 transform")
        return PointTransform(projected, geographic)

    def inverse_transform(self, reference_system: ReferenceSystem) -> PointTransform:
        """
        Build the geodetic -> projected transform.

        Args:
            reference_system: UTM zone and hemisphere

        Returns:
            PointTransform mapping (longitude, latitude) to (east, north)
        """
        projected, geographic = self._crs_pair(reference_system)
        logger.debug(f"Creating WGS 84 -> {reference_system.name} transform")
        return PointTransform(geographic, projected)

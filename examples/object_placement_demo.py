#!/usr/bin/env python3
"""
Demo script showing how to place scene objects by their real-world position.

This example demonstrates:
1. Configuring a transformer for a scene anchored in Hamburg (UTM zone 32N)
2. Placing an object from WGS84 coordinates
3. Placing an object from UTM coordinates
4. Reading back the WGS84 and UTM position of a placed object
5. Handling positions that are too far from the anchor
"""

import logging
from dataclasses import dataclass, field

from geoanchor.core.errors import OutOfRangeError
from geoanchor.core.logging_config import setup_logging
from geoanchor.core.registry import TransformerRegistry
from geoanchor.core.transformer import CoordinateTransformer
from geoanchor.models.coordinates import (
    GeodeticCoordinate,
    LocalCoordinate,
    ProjectedCoordinate,
)
from geoanchor.models.crs import Hemisphere, ReferenceSystem

logger = logging.getLogger(__name__)


@dataclass
class SceneObject:
    """Minimal stand-in for an object in a 3D scene."""

    name: str
    position: LocalCoordinate = field(default_factory=lambda: LocalCoordinate(0, 0, 0))


def place_by_geodetic(
    obj: SceneObject, transformer: CoordinateTransformer, geodetic: GeodeticCoordinate
) -> None:
    logger.info(
        f"Given geographic coordinates -- latitude: {geodetic.latitude}, "
        f"longitude: {geodetic.longitude} and given altitude: {geodetic.altitude}"
    )
    obj.position = transformer.geodetic_to_local(geodetic)
    logger.info(f"Derived local coordinates -- {obj.position}. Object placed accordingly.")


def place_by_projected(
    obj: SceneObject, transformer: CoordinateTransformer, projected: ProjectedCoordinate
) -> None:
    logger.info(
        f"Given UTM coordinates -- E: {projected.east}, N: {projected.north} "
        f"and given altitude: {projected.altitude}"
    )
    obj.position = transformer.projected_to_local(projected)
    logger.info(f"Derived local coordinates -- {obj.position}. Object placed accordingly.")


def report_position(obj: SceneObject, transformer: CoordinateTransformer) -> None:
    logger.info(f"Local coordinates of {obj.name} -- {obj.position}")

    geodetic = transformer.local_to_geodetic(obj.position)
    logger.info(
        f"Derived geographic coordinates -- latitude: {geodetic.latitude}, "
        f"longitude: {geodetic.longitude} and constant altitude: {geodetic.altitude}"
    )

    projected = transformer.local_to_projected(obj.position)
    logger.info(
        f"Derived UTM coordinates -- E: {projected.east}, N: {projected.north} "
        f"and constant altitude: {projected.altitude}"
    )


def main():
    """Run object placement demo."""
    setup_logging(log_level="INFO")

    registry = TransformerRegistry()
    registry.register(
        CoordinateTransformer(
            reference_system=ReferenceSystem(zone=32, hemisphere=Hemisphere.NORTH),
            anchor=ProjectedCoordinate(east=566600, north=5933000, altitude=0),
        ),
        name="hamburg",
    )
    transformer = registry.get("hamburg")

    # 1. From WGS84
    marker = SceneObject("geodetic marker")
    place_by_geodetic(
        marker,
        transformer,
        GeodeticCoordinate(latitude=53.5417104602435, longitude=10.0051097859429, altitude=4.25),
    )
    report_position(marker, transformer)

    # 2. From UTM
    crate = SceneObject("utm crate")
    place_by_projected(
        crate, transformer, ProjectedCoordinate(east=566605, north=5933004, altitude=3)
    )
    report_position(crate, transformer)

    # 3. Too far away
    try:
        place_by_projected(
            SceneObject("far away"),
            transformer,
            ProjectedCoordinate(east=570000, north=5933000, altitude=0),
        )
    except OutOfRangeError as e:
        logger.warning(f"{e} Suggestions: {'; '.join(e.suggestions)}")


if __name__ == "__main__":
    main()

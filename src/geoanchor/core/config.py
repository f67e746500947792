"""
Configuration settings for geoanchor.
"""

from typing import Any, Literal, Optional

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geoanchor.core.errors import ConfigurationError
from geoanchor.models.coordinates import ProjectedCoordinate
from geoanchor.models.crs import MAX_UTM_ZONE, MIN_UTM_ZONE, ReferenceSystem


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The defaults describe a scene anchored in Hamburg, Germany
    (WGS84/UTM zone 32N).

    Attributes:
        utm_zone: UTM zone of the scene (1-60)
        hemisphere: Hemisphere of the zone ("north" or "south")
        anchor_east: Easting that the local frame origin represents
        anchor_north: Northing that the local frame origin represents
        anchor_altitude: Altitude that the local frame origin represents
        local_bound: Exclusive limit for each local offset from the anchor,
            in the anchor's linear unit
        environment: Deployment environment
        log_level: Log level override
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOANCHOR_",
    )

    # Reference system
    utm_zone: int = 32
    hemisphere: str = "north"

    # Local frame anchor
    anchor_east: float = 566600.0
    anchor_north: float = 5933000.0
    anchor_altitude: float = 0.0
    local_bound: float = 100.0

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Optional[str] = None

    @field_validator("utm_zone")
    @classmethod
    def check_zone(cls, value: int) -> int:
        if not MIN_UTM_ZONE <= value <= MAX_UTM_ZONE:
            raise ValueError(f"UTM zone must be between 1 and 60, got {value}")
        return value

    @field_validator("local_bound")
    @classmethod
    def check_bound(cls, value: float) -> float:
        if not value > 0:
            raise ValueError(f"local_bound must be positive, got {value}")
        return value

    def reference_system(self) -> ReferenceSystem:
        """Build the configured reference system."""
        return ReferenceSystem(zone=self.utm_zone, hemisphere=self.hemisphere)

    def anchor(self) -> ProjectedCoordinate:
        """Build the configured anchor point."""
        return ProjectedCoordinate(
            east=self.anchor_east,
            north=self.anchor_north,
            altitude=self.anchor_altitude,
        )


def load_settings(**overrides: Any) -> Settings:
    """
    Read settings from the environment, the .env file and keyword overrides.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(loc) for loc in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid settings: {first.get('msg', 'validation error')}",
            config_key=config_key or None,
            details={"error_count": e.error_count()},
        ) from e

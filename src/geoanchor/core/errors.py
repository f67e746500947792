"""
Custom exception hierarchy for geoanchor.

This module defines the exceptions raised by the coordinate transformation
core so callers can handle every failure through a single base class.
"""

from typing import Any, Dict, List, Optional


class GeoAnchorException(Exception):
    """
    Base exception for all geoanchor-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoAnchorException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class ValidationError(GeoAnchorException):
    """
    Raised when input validation fails.

    Used for latitudes/longitudes outside their valid range and other
    malformed input values.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=error_details,
            suggestions=suggestions or ["Check the input values and try again"],
        )


class InvalidZoneError(GeoAnchorException):
    """
    Raised when a UTM zone outside 1..60 is supplied.

    Fatal to the construction of the reference system; the caller has to
    supply a corrected zone.
    """

    def __init__(
        self,
        zone: Any,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        error_details["zone"] = zone

        super().__init__(
            message=f"Invalid UTM zone of {zone}, must be an integer between 1 and 60",
            error_code="INVALID_ZONE",
            details=error_details,
            suggestions=suggestions
            or ["Use detect_utm_zone() to find the zone for your area"],
        )
        self.zone = zone


class OutOfRangeError(GeoAnchorException):
    """
    Raised when a projected point is too far from the anchor.

    The local frame stores single precision values, so offsets at or beyond
    the configured bound are refused instead of being truncated.
    """

    def __init__(
        self,
        message: str,
        offset: Optional[Any] = None,
        bound: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if offset is not None:
            error_details["offset"] = offset
        if bound is not None:
            error_details["bound"] = bound

        default_suggestions = [
            "Choose an anchor closer to the data used in the scene",
            "Increase the local bound if the precision loss is acceptable",
        ]

        super().__init__(
            message=message,
            error_code="OUT_OF_RANGE",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
        self.offset = offset
        self.bound = bound


class TransformerNotFoundError(GeoAnchorException):
    """
    Raised when no coordinate transformer is registered under a name.
    """

    def __init__(
        self,
        name: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        error_details["name"] = name

        default_suggestions = [
            "Register one CoordinateTransformer per scene before using it",
            "Provide UTM coordinates for the origin of the local frame",
        ]

        super().__init__(
            message=f"CoordinateTransformer '{name}' could not be found",
            error_code="TRANSFORMER_NOT_FOUND",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
        self.name = name


class TransformationError(GeoAnchorException):
    """
    Raised when the projection library fails to build or apply a transform.
    """

    def __init__(
        self,
        message: str,
        source_crs: Optional[str] = None,
        target_crs: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if source_crs:
            error_details["source_crs"] = source_crs
        if target_crs:
            error_details["target_crs"] = target_crs

        default_suggestions = [
            "Verify the PROJ database is installed with pyproj",
            "Ensure coordinates are finite numbers",
        ]

        super().__init__(
            message=message,
            error_code="TRANSFORMATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class ConfigurationError(GeoAnchorException):
    """
    Raised when settings cannot be turned into a working transformer.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GEOANCHOR_* environment variables are set correctly",
            "Verify the .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )

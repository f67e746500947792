"""
Tests for custom exception hierarchy.
"""

import pytest

from geoanchor.core.errors import (
    ConfigurationError,
    GeoAnchorException,
    InvalidZoneError,
    OutOfRangeError,
    TransformationError,
    TransformerNotFoundError,
    ValidationError,
)


class TestGeoAnchorException:
    """Tests for base GeoAnchorException class."""

    def test_basic_exception(self):
        """Test basic exception creation."""
        exc = GeoAnchorException(message="Test error", error_code="TEST_ERROR")

        assert str(exc) == "TEST_ERROR: Test error"
        assert exc.message == "Test error"
        assert exc.error_code == "TEST_ERROR"
        assert exc.details == {}
        assert exc.suggestions == []

    def test_to_dict(self):
        """Test conversion to dictionary."""
        exc = GeoAnchorException(
            message="Test error",
            error_code="TEST_ERROR",
            details={"key": "value"},
            suggestions=["suggestion"],
        )

        assert exc.to_dict() == {
            "error_code": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
            "suggestions": ["suggestion"],
        }

    def test_repr(self):
        """Test debug representation."""
        exc = GeoAnchorException(message="Test", error_code="TEST")
        assert repr(exc) == "GeoAnchorException(error_code='TEST', message='Test')"


class TestSpecificExceptions:
    """Tests for the specific exception classes."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (ValidationError("bad"), "VALIDATION_ERROR"),
            (InvalidZoneError(0), "INVALID_ZONE"),
            (OutOfRangeError("far"), "OUT_OF_RANGE"),
            (TransformerNotFoundError("scene"), "TRANSFORMER_NOT_FOUND"),
            (TransformationError("failed"), "TRANSFORMATION_ERROR"),
            (ConfigurationError("bad config"), "CONFIGURATION_ERROR"),
        ],
    )
    def test_error_codes(self, exc: GeoAnchorException, code: str):
        """Test error codes and common base class."""
        assert isinstance(exc, GeoAnchorException)
        assert exc.error_code == code
        assert exc.suggestions

    def test_validation_error_field(self):
        """Test that the field is recorded in details."""
        exc = ValidationError("Latitude out of range", field="latitude")
        assert exc.details["field"] == "latitude"

    def test_invalid_zone_message(self):
        """Test the invalid zone message."""
        exc = InvalidZoneError(61)
        assert "61" in exc.message
        assert exc.details == {"zone": 61}

    def test_out_of_range_details(self):
        """Test offset and bound in details."""
        exc = OutOfRangeError("too far", offset=[100.0, 0.0, 0.0], bound=100.0)
        assert exc.details == {"offset": [100.0, 0.0, 0.0], "bound": 100.0}
        assert exc.offset == [100.0, 0.0, 0.0]

    def test_transformation_error_crs(self):
        """Test CRS fields in details."""
        exc = TransformationError("failed", source_crs="EPSG:32632", target_crs="EPSG:4326")
        assert exc.details["source_crs"] == "EPSG:32632"
        assert exc.details["target_crs"] == "EPSG:4326"

    def test_custom_suggestions(self):
        """Test that custom suggestions replace the defaults."""
        exc = TransformerNotFoundError("scene", suggestions=["Add one"])
        assert exc.suggestions == ["Add one"]

"""
Tests for the pyproj-backed geodetic transform provider.
"""

import numpy as np
import pytest

from geoanchor.core.crs.provider import GeodeticTransformProvider, PointTransform
from geoanchor.core.errors import TransformationError
from geoanchor.models.crs import Hemisphere, ReferenceSystem


@pytest.fixture
def provider() -> GeodeticTransformProvider:
    return GeodeticTransformProvider()


class TestGeodeticTransformProvider:
    """Tests for GeodeticTransformProvider."""

    def test_inverse_transform_paris(self, provider: GeodeticTransformProvider) -> None:
        """Test geodetic -> projected for Paris in zone 31N."""
        trans = provider.inverse_transform(ReferenceSystem(31, Hemisphere.NORTH))

        easting, northing = trans.transform(2.3522, 48.8566)

        assert 440000 < easting < 460000
        assert 5400000 < northing < 5420000

    def test_forward_transform_paris(self, provider: GeodeticTransformProvider) -> None:
        """Test projected -> geodetic for Paris in zone 31N."""
        trans = provider.forward_transform(ReferenceSystem(31, Hemisphere.NORTH))

        lon, lat = trans.transform(452000, 5411000)

        assert 2.0 < lon < 2.5
        assert 48.5 < lat < 49.0

    def test_southern_hemisphere(self, provider: GeodeticTransformProvider) -> None:
        """Test that southern zones use the false northing."""
        trans = provider.inverse_transform(ReferenceSystem(56, Hemisphere.SOUTH))

        easting, northing = trans.transform(151.2093, -33.8688)

        assert 300000 < easting < 400000
        assert 6200000 < northing < 6300000

    def test_roundtrip(self, provider: GeodeticTransformProvider) -> None:
        """Test round-trip transformation accuracy."""
        rs = ReferenceSystem(32, Hemisphere.NORTH)
        forward = provider.forward_transform(rs)
        inverse = provider.inverse_transform(rs)

        lon, lat = forward.transform(566605.0, 5933004.0)
        easting, northing = inverse.transform(lon, lat)

        assert abs(easting - 566605.0) < 1e-3
        assert abs(northing - 5933004.0) < 1e-3

    def test_returns_plain_floats(self, provider: GeodeticTransformProvider) -> None:
        """Test that single point results are Python floats."""
        trans = provider.forward_transform(ReferenceSystem(32))
        lon, lat = trans.transform(566605.0, 5933004.0)
        assert type(lon) is float
        assert type(lat) is float

    def test_crs_of_transforms(self, provider: GeodeticTransformProvider) -> None:
        """Test source and target CRS of both directions."""
        rs = ReferenceSystem(32, Hemisphere.NORTH)

        forward = provider.forward_transform(rs)
        inverse = provider.inverse_transform(rs)

        assert forward.source_crs.to_epsg() == 32632
        assert forward.target_crs.to_epsg() == 4326
        assert inverse.source_crs.to_epsg() == 4326
        assert inverse.target_crs.to_epsg() == 32632


class TestPointTransformBatch:
    """Tests for batch point transformation."""

    def test_transform_many(self, provider: GeodeticTransformProvider) -> None:
        """Test that batches match single point results."""
        trans = provider.inverse_transform(ReferenceSystem(32))
        lons = [10.0, 10.005, 9.99]
        lats = [53.5, 53.54, 53.55]

        eastings, northings = trans.transform_many(lons, lats)

        assert isinstance(eastings, np.ndarray)
        assert len(eastings) == 3
        for i in range(3):
            e, n = trans.transform(lons[i], lats[i])
            assert eastings[i] == pytest.approx(e)
            assert northings[i] == pytest.approx(n)

    def test_transform_many_mismatched_lengths(
        self, provider: GeodeticTransformProvider
    ) -> None:
        """Test error handling for mismatched coordinate arrays."""
        trans = provider.inverse_transform(ReferenceSystem(32))

        with pytest.raises(TransformationError, match="must have same length"):
            trans.transform_many([0.0, 1.0], [0.0])


class TestPointTransformErrors:
    """Tests for transformer creation errors."""

    def test_creation_error_wrapped(self) -> None:
        """Test that pyproj failures surface as TransformationError."""
        from pyproj import CRS

        with pytest.raises(TransformationError):
            PointTransform(CRS.from_epsg(4326), "not a crs")  # type: ignore[arg-type]

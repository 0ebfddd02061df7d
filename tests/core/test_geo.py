"""Unit tests for geographic calculations.

Pure function tests - no mocks needed, fast execution.
"""

import pytest

from src.core.geo import (
    EARTH_RADIUS_MILES,
    Coordinate,
    distance_miles,
    is_valid_zip_code,
    is_within_radius,
)


class TestDistanceMiles:
    """Tests for distance_miles() Haversine implementation."""

    def test_same_point_returns_zero(self):
        """Distance from point to itself should be zero."""
        point = Coordinate(37.7749, -122.4194)
        assert distance_miles(point, point) == 0.0

    def test_known_distance_sf_to_la(self):
        """SF to LA should be approximately 347 miles."""
        sf = Coordinate(37.7749, -122.4194)
        la = Coordinate(34.0522, -118.2437)

        assert distance_miles(sf, la) == pytest.approx(347, rel=0.02)

    def test_known_distance_nyc_to_london(self):
        """NYC to London should be approximately 3461 miles."""
        nyc = Coordinate(40.7128, -74.0060)
        london = Coordinate(51.5074, -0.1278)

        assert distance_miles(nyc, london) == pytest.approx(3461, rel=0.02)

    def test_symmetric(self):
        """Distance should be the same in both directions."""
        a = Coordinate(37.7749, -122.4194)
        b = Coordinate(34.0522, -118.2437)

        assert distance_miles(a, b) == distance_miles(b, a)

    def test_small_latitude_offset(self):
        """0.08 degrees of latitude is about 5.5 miles."""
        a = Coordinate(40.0, -74.0)
        b = Coordinate(40.08, -74.0)

        assert distance_miles(a, b) == pytest.approx(5.53, abs=0.05)

    def test_antipodal_points(self):
        """Opposite sides of the globe are half the circumference apart."""
        a = Coordinate(0.0, 0.0)
        b = Coordinate(0.0, 180.0)

        assert distance_miles(a, b) == pytest.approx(3.14159265 * EARTH_RADIUS_MILES, rel=1e-6)


class TestIsWithinRadius:
    """Tests for is_within_radius() function."""

    def test_point_inside_radius(self):
        """Point 5.5 miles away is within 10 miles."""
        assert is_within_radius(Coordinate(40.08, -74.0), Coordinate(40.0, -74.0), 10) is True

    def test_point_outside_radius(self):
        """Point 5.5 miles away is not within 5 miles."""
        assert is_within_radius(Coordinate(40.08, -74.0), Coordinate(40.0, -74.0), 5) is False

    def test_missing_point_never_inside(self):
        """A missing coordinate is never within any radius."""
        assert is_within_radius(None, Coordinate(40.0, -74.0), 10000) is False

    def test_boundary_is_inclusive(self):
        """A point exactly at the center is within a zero radius."""
        point = Coordinate(40.0, -74.0)
        assert is_within_radius(point, point, 0) is True


class TestCoordinate:
    """Tests for Coordinate validity."""

    def test_valid_coordinate(self):
        assert Coordinate(40.0, -74.0).is_valid() is True

    def test_latitude_out_of_range(self):
        assert Coordinate(91.0, 0.0).is_valid() is False

    def test_longitude_out_of_range(self):
        assert Coordinate(0.0, -181.0).is_valid() is False


class TestIsValidZipCode:
    """Tests for is_valid_zip_code() function."""

    @pytest.mark.parametrize("zip_code", ["07001", "90210", "00000"])
    def test_accepts_five_digits(self, zip_code):
        assert is_valid_zip_code(zip_code) is True

    @pytest.mark.parametrize("zip_code", ["", "0700", "070011", "07a01", "07001-1234", None])
    def test_rejects_everything_else(self, zip_code):
        assert is_valid_zip_code(zip_code) is False

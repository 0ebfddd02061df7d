"""Unit tests for the zip/radius location filter."""

from src.core.geo import Coordinate
from src.core.location import (
    DistanceFilter,
    ExactOrPermissive,
    ExactZipMatch,
    InactiveLocation,
    apply_location_filter,
    is_location_degraded,
    plan_location_filter,
)


class TestPlanLocationFilter:
    """Tests for plan_location_filter() state machine."""

    def test_no_zip_is_inactive(self, center):
        assert plan_location_filter(None, 25, center) == InactiveLocation()

    def test_incomplete_zip_is_inactive(self, center):
        assert plan_location_filter("0700", 25, center) == InactiveLocation()

    def test_resolved_with_zero_radius_is_exact(self, center):
        assert plan_location_filter("07001", 0, center) == ExactZipMatch("07001")

    def test_resolved_with_radius_is_distance(self, center):
        assert plan_location_filter("07001", 10, center) == DistanceFilter(center, 10)

    def test_unresolved_is_exact_or_permissive(self):
        assert plan_location_filter("07001", 10, None) == ExactOrPermissive("07001")

    def test_unresolved_with_zero_radius_is_exact_or_permissive(self):
        assert plan_location_filter("07001", 0, None) == ExactOrPermissive("07001")


class TestApplyLocationFilter:
    """Tests for apply_location_filter()."""

    def test_inactive_is_identity(self, sample_tournaments):
        result = apply_location_filter(sample_tournaments, InactiveLocation())
        assert result == sample_tournaments

    def test_radius_includes_nearby_venue(self, sample_tournaments, center):
        """Venue 5.5 miles away is inside a 10 mile radius."""
        result = apply_location_filter(sample_tournaments, DistanceFilter(center, 10))
        assert [t.id for t in result] == [1]

    def test_radius_excludes_venue_just_outside(self, sample_tournaments, center):
        """Venue 5.5 miles away is outside a 5 mile radius."""
        result = apply_location_filter(sample_tournaments, DistanceFilter(center, 5))
        assert result == []

    def test_radius_excludes_ungeocoded_venues(self, sample_tournaments, center):
        """Venues without a coordinate never pass a distance filter."""
        result = apply_location_filter(sample_tournaments, DistanceFilter(center, 10000))
        assert [t.id for t in result] == [1, 2]

    def test_exact_zip_ignores_distance(self, make_tournament, make_venue, center):
        """Exact mode keeps the zip even if the venue is far from center."""
        far_same_zip = make_tournament(
            tournament_id=10,
            venue=make_venue(zip_code="07001", coordinate=Coordinate(45.0, -100.0)),
        )
        near_other_zip = make_tournament(
            tournament_id=11,
            venue=make_venue(zip_code="07002", coordinate=center),
        )

        result = apply_location_filter(
            [far_same_zip, near_other_zip],
            ExactZipMatch("07001"),
        )

        assert [t.id for t in result] == [10]

    def test_permissive_uses_exact_matches_when_present(self, sample_tournaments):
        result = apply_location_filter(sample_tournaments, ExactOrPermissive("11201"))
        assert [t.id for t in result] == [3]

    def test_permissive_keeps_everything_without_matches(self, sample_tournaments):
        """An unresolved zip with no exact match leaves the set unchanged."""
        result = apply_location_filter(sample_tournaments, ExactOrPermissive("99999"))
        assert result == sample_tournaments


class TestIsLocationDegraded:
    """Tests for is_location_degraded()."""

    def test_degraded_when_permissive_matches_nothing(self, sample_tournaments):
        assert is_location_degraded(sample_tournaments, ExactOrPermissive("99999")) is True

    def test_not_degraded_with_exact_match(self, sample_tournaments):
        assert is_location_degraded(sample_tournaments, ExactOrPermissive("07001")) is False

    def test_not_degraded_for_other_variants(self, sample_tournaments, center):
        assert is_location_degraded(sample_tournaments, InactiveLocation()) is False
        assert is_location_degraded(sample_tournaments, DistanceFilter(center, 1)) is False

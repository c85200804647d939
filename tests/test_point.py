"""Tests for hex grid coordinates."""

import pytest

from subsector.models import Point, all_points
from subsector.utils import COLUMNS, ROWS, ErrorType, SubsectorParseError


class TestPoint:
    """Test Point formatting and parsing."""

    def test_str_is_zero_padded(self):
        """Test the four-digit hex code form."""
        assert str(Point(1, 2)) == "0102"
        assert str(Point(8, 10)) == "0810"

    def test_round_trip_every_point(self):
        """Test parse(format(p)) == p across the whole grid."""
        for point in all_points():
            assert Point.parse(str(point)) == point

    def test_parse_legacy_prefix(self):
        """Test that old spreadsheet-safe prefixes are accepted."""
        assert Point.parse("'0304") == Point(3, 4)
        assert Point.parse("_0304") == Point(3, 4)
        assert Point.parse(" 0304 ") == Point(3, 4)

    def test_parse_stacked_legacy_prefixes(self):
        """Test that both prefixes are stripped when they appear in order."""
        assert Point.parse("'_0102") == Point(1, 2)
        assert Point.parse(" ' _0102") == Point(1, 2)

    def test_parse_prefixes_out_of_order(self):
        """Test that "_" before "'" is not a legacy form."""
        with pytest.raises(SubsectorParseError):
            Point.parse("_'0102")

    def test_parse_too_short(self):
        """Test that short strings are rejected."""
        with pytest.raises(SubsectorParseError, match="too short") as exc_info:
            Point.parse("012")
        assert exc_info.value.error_type == ErrorType.PARSE_ERROR

    def test_parse_too_long(self):
        """Test that long strings are rejected."""
        with pytest.raises(SubsectorParseError, match="too long"):
            Point.parse("01020")

    def test_parse_non_numeric(self):
        """Test that non-digit characters are rejected."""
        with pytest.raises(SubsectorParseError, match="not numeric"):
            Point.parse("01a2")
        with pytest.raises(SubsectorParseError, match="not numeric"):
            Point.parse("-102")

    def test_parse_does_not_check_bounds(self):
        """Test that parsing accepts off-grid points; callers check bounds."""
        point = Point.parse("0911")
        assert point == Point(9, 11)
        assert not point.in_bounds

    def test_in_bounds(self):
        """Test grid bounds are 1-based and inclusive."""
        assert Point(1, 1).in_bounds
        assert Point(COLUMNS, ROWS).in_bounds
        assert not Point(0, 1).in_bounds
        assert not Point(1, 0).in_bounds
        assert not Point(COLUMNS + 1, 1).in_bounds
        assert not Point(1, ROWS + 1).in_bounds

    def test_ordering_is_column_major(self):
        """Test points sort by x, then y."""
        assert sorted([Point(2, 1), Point(1, 5), Point(1, 2)]) == [
            Point(1, 2),
            Point(1, 5),
            Point(2, 1),
        ]

    def test_all_points(self):
        """Test every grid hex is listed once, in order."""
        points = all_points()
        assert len(points) == COLUMNS * ROWS
        assert points == sorted(points)
        assert points[0] == Point(1, 1)
        assert points[-1] == Point(COLUMNS, ROWS)

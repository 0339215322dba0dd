"""Tests for the metrics module."""

import pytest
from shapely.geometry import GeometryCollection, LineString, MultiPolygon, Polygon

from polybridge.corridor.graph import ConnectionEdge
from polybridge.metrics import count_parts, measure_geometry, spanning_tree_distance


class TestCountParts:
    """Tests for count_parts()."""

    def test_polygon(self):
        assert count_parts(Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])) == 1

    def test_multipolygon(self):
        p1 = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        p2 = Polygon([(2, 0), (3, 0), (3, 1), (2, 1)])
        assert count_parts(MultiPolygon([p1, p2])) == 2

    def test_empty(self):
        assert count_parts(Polygon()) == 0

    def test_collection(self):
        p1 = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        line = LineString([(5, 5), (6, 6)])
        assert count_parts(GeometryCollection([p1, line])) == 1


class TestMeasureGeometry:
    """Tests for measure_geometry()."""

    def test_simple_polygon(self):
        """Test measuring a valid simple polygon."""
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        metrics = measure_geometry(poly)

        assert metrics["is_valid"] is True
        assert metrics["is_empty"] is False
        assert metrics["area"] == 100.0
        assert metrics["part_count"] == 1

    def test_multipolygon(self):
        """Test measuring a MultiPolygon."""
        p1 = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        p2 = Polygon([(2, 0), (3, 0), (3, 1), (2, 1)])
        metrics = measure_geometry(MultiPolygon([p1, p2]))

        assert metrics["is_valid"] is True
        assert metrics["area"] == 2.0
        assert metrics["part_count"] == 2

    def test_empty_polygon(self):
        """Test measuring empty polygon."""
        metrics = measure_geometry(Polygon())

        assert metrics["is_empty"] is True
        assert metrics["area"] == 0.0
        assert metrics["part_count"] == 0


class TestSpanningTreeDistance:
    """Tests for spanning_tree_distance()."""

    def test_sum(self):
        segment = LineString([(0, 0), (1, 0)])
        edges = [ConnectionEdge(0, 1, 1.5, segment), ConnectionEdge(1, 2, 2.25, segment)]

        assert spanning_tree_distance(edges) == pytest.approx(3.75)

    def test_empty(self):
        assert spanning_tree_distance([]) == 0.0

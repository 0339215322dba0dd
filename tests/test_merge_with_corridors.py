"""Tests for merge_with_corridors() orchestration."""

import copy
import warnings
from unittest.mock import patch

import numpy as np
import pytest
from shapely.geometry import LineString, MultiPolygon, Point, Polygon, box

from polybridge import (
    ConfigurationError,
    CorridorConfig,
    DegenerateGeometryWarning,
    DisjointSet,
    DistanceMetric,
    ValidationError,
    merge_with_corridors,
)
from polybridge.corridor.sampling import sample_boundary
from polybridge.metrics import count_parts


def _scenario_a():
    return [
        box(0, 0, 1, 1),
        box(3, 0.2, 4.2, 1.2),
        box(2, 2.5, 2.8, 3.2),
    ]


def _square_mapping(x0, y0, size=1.0):
    return {
        "type": "Polygon",
        "coordinates": [[
            [x0, y0], [x0 + size, y0], [x0 + size, y0 + size], [x0, y0 + size], [x0, y0],
        ]],
    }


class TestSingleShape:
    """A single shape is returned unchanged."""

    def test_shapely_input_returned_unchanged(self):
        square = box(0, 0, 1, 1)
        result = merge_with_corridors([square])

        assert result.output is square
        assert result.debug.pairs == []
        assert result.debug.mst_edges == []
        assert result.debug.corridor_polygons == []

    def test_mapping_input_equal(self):
        result = merge_with_corridors([_square_mapping(0, 0)])

        assert isinstance(result.output, Polygon)
        assert result.output.equals(box(0, 0, 1, 1))
        assert result.debug.mst_distance == 0


class TestScenarioA:
    """Three squares, two corridors."""

    @pytest.mark.parametrize("metric", ["geodesic", "planar"])
    def test_connected_output(self, metric):
        shapes = _scenario_a()
        result = merge_with_corridors(shapes, distance_metric=metric)

        assert isinstance(result.output, Polygon)
        assert result.output.is_valid
        for shape in shapes:
            assert result.output.buffer(1e-9).contains(shape)

    @pytest.mark.parametrize("metric", [DistanceMetric.GEODESIC, DistanceMetric.PLANAR])
    def test_debug_record(self, metric):
        result = merge_with_corridors(_scenario_a(), distance_metric=metric)
        debug = result.debug

        assert len(debug.pairs) == 3
        assert len(debug.mst_edges) == 2
        assert len(debug.corridor_polygons) == 2

        longest = max(debug.pairs, key=lambda e: e.distance)
        assert (longest.a, longest.b) not in {(e.a, e.b) for e in debug.mst_edges}

    def test_output_bounds_contain_input_bounds(self):
        shapes = _scenario_a()
        result = merge_with_corridors(shapes)
        minx, miny, maxx, maxy = result.output.bounds

        for shape in shapes:
            sminx, sminy, smaxx, smaxy = shape.bounds
            assert minx <= sminx and miny <= sminy
            assert maxx >= smaxx and maxy >= smaxy

    def test_deterministic(self):
        first = merge_with_corridors(_scenario_a())
        second = merge_with_corridors(_scenario_a())

        assert first.output.equals(second.output)
        assert [(e.a, e.b) for e in first.debug.mst_edges] == \
            [(e.a, e.b) for e in second.debug.mst_edges]


class TestSpanningTree:
    """Spanning-tree properties of the merge."""

    def test_n_minus_one_edges(self):
        shapes = [box(x, y, x + 1, y + 1) for x, y in [(0, 0), (5, 0), (0, 5), (5, 5), (10, 2)]]
        result = merge_with_corridors(shapes, distance_metric="planar")

        ds = DisjointSet(len(shapes))
        for edge in result.debug.mst_edges:
            ds.union(edge.a, edge.b)

        assert len(result.debug.mst_edges) == len(shapes) - 1
        assert ds.component_count == 1
        assert count_parts(result.output) == 1

    def test_pair_distances_non_negative(self):
        shapes = [box(x, 0, x + 1, 1) for x in range(0, 12, 3)]
        result = merge_with_corridors(shapes)

        assert all(edge.distance >= 0 for edge in result.debug.pairs)
        assert result.debug.mst_distance == pytest.approx(
            sum(e.distance for e in result.debug.mst_edges)
        )


class TestCorridorFactor:
    """Corridor width configuration."""

    def test_doubling_factor_doubles_width(self):
        shapes = [box(0, 0, 1, 1), box(3, 0, 4, 1)]
        thin = merge_with_corridors(shapes, corridor_factor=1.0, distance_metric="planar")
        wide = merge_with_corridors(shapes, corridor_factor=2.0, distance_metric="planar")

        segment = thin.debug.mst_edges[0].segment
        mid = segment.interpolate(0.5, normalized=True)
        thin_width = mid.distance(thin.debug.corridor_polygons[0].exterior)
        wide_width = mid.distance(wide.debug.corridor_polygons[0].exterior)

        assert wide_width == pytest.approx(2 * thin_width)

    def test_zero_factor_does_not_fail(self):
        """Zero-width corridors leave the union of the inputs."""
        shapes = _scenario_a()
        result = merge_with_corridors(shapes, corridor_factor=0.0)

        assert all(c.is_empty for c in result.debug.corridor_polygons)
        assert result.output.area == pytest.approx(sum(s.area for s in shapes))
        assert count_parts(result.output) == 3

    def test_near_zero_factor(self):
        shapes = _scenario_a()
        result = merge_with_corridors(shapes, corridor_factor=1e-6)

        assert len(result.debug.corridor_polygons) == 2
        assert result.output.area == pytest.approx(sum(s.area for s in shapes), rel=1e-3)

    def test_negative_factor_rejected(self):
        with pytest.raises(ConfigurationError, match="corridor_factor"):
            merge_with_corridors(_scenario_a(), corridor_factor=-1.0)

    def test_unknown_metric_rejected(self):
        with pytest.raises(ConfigurationError, match="DistanceMetric"):
            merge_with_corridors(_scenario_a(), distance_metric="spherical")

    def test_explicit_config(self):
        """A config object replaces the keyword arguments."""
        config = CorridorConfig(distance_metric="planar", samples_per_ring=8)
        result = merge_with_corridors(_scenario_a(), distance_metric="geodesic", config=config)
        by_pair = {(e.a, e.b): e.distance for e in result.debug.pairs}

        # Planar distance in coordinate units rather than kilometres
        assert by_pair[(0, 2)] == pytest.approx((1.0 + 1.5 ** 2) ** 0.5)


class TestInputHandling:
    """Validation and normalisation of inputs."""

    def test_mapping_inputs_not_mutated(self):
        shapes = [_square_mapping(0, 0), _square_mapping(3, 0)]
        before = copy.deepcopy(shapes)

        merge_with_corridors(shapes)

        assert shapes == before

    def test_feature_inputs(self):
        features = [
            {"type": "Feature", "properties": {"id": "A"}, "geometry": _square_mapping(0, 0)},
            {"type": "Feature", "properties": {"id": "B"}, "geometry": _square_mapping(3, 0)},
        ]
        result = merge_with_corridors(features)

        assert isinstance(result.output, Polygon)

    def test_multipolygon_counts_as_one_shape(self):
        multi = MultiPolygon([box(0, 0, 1, 1), box(0, 3, 1, 4)])
        result = merge_with_corridors([multi, box(3, 0, 4, 1)], distance_metric="planar")

        assert len(result.debug.pairs) == 1
        assert len(result.debug.mst_edges) == 1

    def test_holes_preserved(self):
        ring = Polygon(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            holes=[[(4, 4), (6, 4), (6, 6), (4, 6)]],
        )
        result = merge_with_corridors([ring, box(12, 0, 13, 1)], distance_metric="planar")

        assert isinstance(result.output, Polygon)
        assert len(result.output.interiors) == 1

    def test_empty_sequence(self):
        with pytest.raises(ValidationError, match="at least one shape"):
            merge_with_corridors([])

    def test_non_polygon(self):
        with pytest.raises(ValidationError, match="Shape 1"):
            merge_with_corridors([box(0, 0, 1, 1), Point(3, 3)])

    def test_line_mapping(self):
        line = {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}
        with pytest.raises(ValidationError, match="LineString"):
            merge_with_corridors([box(0, 0, 1, 1), line])

    def test_shape_without_rings(self):
        with pytest.raises(ValidationError, match="no rings"):
            merge_with_corridors([box(0, 0, 1, 1), Polygon()])


class TestCentroidFallback:
    """Shapes that yield no boundary samples are connected by centroid."""

    def test_merge_completes(self):
        shapes = _scenario_a()
        degenerate = shapes[2]

        def fake_sampler(geometry, samples_per_ring):
            if geometry is degenerate:
                return np.empty((0, 2))
            return sample_boundary(geometry, samples_per_ring)

        with patch('polybridge.corridor.connector.sample_boundary', side_effect=fake_sampler):
            with pytest.warns(DegenerateGeometryWarning):
                result = merge_with_corridors(shapes, distance_metric="planar")

        centroid = degenerate.centroid
        to_degenerate = [e for e in result.debug.pairs if 2 in (e.a, e.b)]

        assert len(result.debug.mst_edges) == 2
        for edge in to_degenerate:
            assert Point(edge.segment.coords[-1]).distance(centroid) < 1e-9
        assert isinstance(result.output, Polygon)

    def test_segments_are_lines(self):
        result = merge_with_corridors(_scenario_a())

        for edge in result.debug.pairs:
            assert isinstance(edge.segment, LineString)


class TestEmptyRings:
    """Mappings with empty rings are merged from the rings that remain."""

    def test_multipolygon_with_empty_ring_group(self):
        multi = {
            "type": "MultiPolygon",
            "coordinates": [[], [[[3, 0], [4, 0], [4, 1], [3, 1], [3, 0]]]],
        }
        with warnings.catch_warnings():
            warnings.simplefilter("error", DegenerateGeometryWarning)
            result = merge_with_corridors([box(0, 0, 1, 1), multi], distance_metric="planar")

        assert len(result.debug.pairs) == 1
        assert len(result.debug.mst_edges) == 1
        assert result.debug.pairs[0].distance == pytest.approx(2.0)
        assert count_parts(result.output) == 1

    def test_empty_ring_group_among_three_shapes(self):
        multi = {
            "type": "MultiPolygon",
            "coordinates": [[[]], [[[2, 2.5], [2.8, 2.5], [2.8, 3.2], [2, 3.2], [2, 2.5]]], []],
        }
        shapes = [box(0, 0, 1, 1), box(3, 0.2, 4.2, 1.2), multi]
        result = merge_with_corridors(shapes)

        assert len(result.debug.pairs) == 3
        assert len(result.debug.mst_edges) == 2
        assert isinstance(result.output, Polygon)

    def test_empty_hole_dropped(self):
        holed = _square_mapping(0, 0, size=4)
        holed["coordinates"].append([])
        result = merge_with_corridors([holed, box(6, 0, 7, 1)], distance_metric="planar")

        assert len(result.debug.mst_edges) == 1
        assert isinstance(result.output, Polygon)
        assert len(result.output.interiors) == 0

    def test_polygon_with_only_an_empty_ring_rejected(self):
        """Nothing is left to sample or to take a centroid of."""
        shapes = [box(0, 0, 1, 1), box(3, 0, 4, 1), {"type": "Polygon", "coordinates": [[]]}]

        with pytest.raises(ValidationError, match="Shape 2 has no rings"):
            merge_with_corridors(shapes)

    def test_multipolygon_of_empty_groups_rejected(self):
        multi = {"type": "MultiPolygon", "coordinates": [[], [[]]]}

        with pytest.raises(ValidationError, match="Shape 1 has no rings"):
            merge_with_corridors([box(0, 0, 1, 1), multi])

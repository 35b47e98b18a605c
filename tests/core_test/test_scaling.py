"""
Tests for range normalization and linear scaling (visual_mapping/services/scaling.py).
"""
import math

import pytest

from mapping_api.models.node import Node
from visual_mapping.services.scaling import (
    EMPTY_RANGE,
    ValueRange,
    get_min_max,
    linear_map,
)

SIZE = (10, 30)


class TestGetMinMax:

    def test_range_of_stub_graph(self, stub_graph):
        assert get_min_max(stub_graph.nodes) == ValueRange(3, 7200)

    def test_empty_sequence_does_not_raise(self):
        result = get_min_max([])
        assert result is EMPTY_RANGE
        assert result.is_empty
        assert result.is_degenerate

    def test_equal_values_give_degenerate_range(self):
        result = get_min_max([Node("a", 4), Node("b", 4)])
        assert result.min == result.max == 4
        assert result.is_degenerate
        assert not result.is_empty

    def test_min_not_greater_than_max(self, stub_graph):
        result = get_min_max(stub_graph.nodes)
        assert result.min <= result.max

    def test_accepts_generator(self):
        assert get_min_max(Node(str(i), i) for i in range(5)) == (0, 4)


class TestLinearMap:

    def test_endpoints_map_exactly(self):
        assert linear_map(5, (5, 5000), SIZE) == 10
        assert linear_map(5000, (5, 5000), SIZE) == 30

    def test_midpoint_of_source_maps_to_midpoint_of_target(self):
        assert linear_map(50, (0, 100), SIZE) == pytest.approx(20)

    @pytest.mark.parametrize("value", [3, 10, 42.5, 100, 640, 999.99, 1000, 7200])
    def test_output_within_target(self, value):
        out = linear_map(value, (3, 7200), SIZE)
        assert SIZE[0] <= out <= SIZE[1]

    def test_monotonic(self, stub_graph):
        ordered = sorted(stub_graph.nodes, key=lambda n: n.value)
        sizes = [linear_map(n.value, (3, 7200), SIZE) for n in ordered]
        assert sizes == sorted(sizes)

    def test_degenerate_range_returns_midpoint(self):
        out = linear_map(7, (7, 7), SIZE)
        assert out == 20
        assert math.isfinite(out)

    def test_empty_range_returns_midpoint(self):
        assert linear_map(1, EMPTY_RANGE, SIZE) == 20

    def test_inverted_target_range(self):
        assert linear_map(0, (0, 10), (30, 10)) == 30
        assert linear_map(10, (0, 10), (30, 10)) == 10

    def test_value_outside_source_is_clamped(self):
        assert linear_map(-50, (0, 100), SIZE) == 10
        assert linear_map(500, (0, 100), SIZE) == 30


class TestLinearMapExtremes:

    def test_span_beyond_float_range(self):
        source = (-1e308, 1e308)
        assert linear_map(-1e308, source, SIZE) == 10
        assert linear_map(1e308, source, SIZE) == 30
        assert linear_map(0.0, source, SIZE) == pytest.approx(20)

    def test_sizes_stay_finite_near_float_max(self):
        source = (-1.7e308, 1.7e308)
        for value in (-1.7e308, -1e300, 0, 1e300, 1.7e308):
            out = linear_map(value, source, SIZE)
            assert math.isfinite(out)
            assert SIZE[0] <= out <= SIZE[1]

    def test_int_beyond_float_range_returns_midpoint(self):
        assert linear_map(10 ** 400, (0.5, 10 ** 400), SIZE) == 20

    def test_large_ints_within_float_range(self):
        assert linear_map(10 ** 300, (0, 10 ** 300), SIZE) == 30

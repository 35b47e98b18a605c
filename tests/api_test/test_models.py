"""
Tests for the input models and enum types (mapping_api).

Covers:
    • Node / Edge construction and numeric coercion
    • GraphData.from_dict parsing and validation
    • Dangling edge detection
    • Theme / GraphType parsing (aliases, unknown values)
"""
import pytest

from mapping_api.models.edge import Edge
from mapping_api.models.graph import GraphData
from mapping_api.models.node import Node
from mapping_api.types import GraphType, Theme, ValueCoercer


# ═════════════════════════════════════════════════════════════════
#  NODE / EDGE
# ═════════════════════════════════════════════════════════════════

class TestNode:

    def test_numeric_string_value_is_coerced(self):
        assert Node("a", "50").value == 50
        assert isinstance(Node("a", "50").value, int)
        assert Node("a", " 2.5 ").value == pytest.approx(2.5)

    def test_name_is_stringified(self):
        assert Node(7, 1).name == "7"

    def test_non_numeric_value_raises(self):
        with pytest.raises(ValueError, match="Cannot convert"):
            Node("a", "lots")

    def test_bool_value_is_rejected(self):
        with pytest.raises(ValueError):
            Node("a", True)

    def test_infinite_value_is_rejected(self):
        with pytest.raises(ValueError, match="not finite"):
            Node("a", float("inf"))

    def test_node_is_immutable(self):
        node = Node("a", 1)
        with pytest.raises(AttributeError):
            node.value = 2

    def test_from_dict_requires_name(self):
        with pytest.raises(ValueError, match="missing 'name'"):
            Node.from_dict({"value": 3})

    def test_from_dict_requires_value(self):
        with pytest.raises(ValueError, match="missing 'value'"):
            Node.from_dict({"name": "a"})

    def test_int_beyond_float_range_is_rejected(self):
        with pytest.raises(ValueError, match="not finite"):
            Node("b", 10 ** 400)
        with pytest.raises(ValueError, match="not finite"):
            Node("b", "1" + "0" * 400)

    def test_large_int_within_float_range_is_kept(self):
        assert Node("b", 10 ** 300).value == 10 ** 300


class TestEdge:

    def test_weight_defaults_to_zero(self):
        assert Edge.from_dict({"source": "a", "target": "b"}).weight == 0

    def test_from_dict_requires_endpoints(self):
        with pytest.raises(ValueError, match="missing 'target'"):
            Edge.from_dict({"source": "a"})

    def test_repr(self):
        assert repr(Edge("a", "b", 3)) == "Edge(a -> b, weight=3)"


# ═════════════════════════════════════════════════════════════════
#  GRAPH DATA
# ═════════════════════════════════════════════════════════════════

class TestGraphData:

    def test_from_dict_keeps_order(self, stub_graph):
        rebuilt = GraphData.from_dict(stub_graph.to_dict())
        assert [n.name for n in rebuilt.nodes] == [n.name for n in stub_graph.nodes]
        assert rebuilt == stub_graph

    def test_missing_lists_give_empty_graph(self):
        graph = GraphData.from_dict({})
        assert graph.is_empty()
        assert graph.edges == ()

    def test_duplicate_node_name_raises(self):
        with pytest.raises(ValueError, match="already exists"):
            GraphData.from_dict({"nodes": [{"name": "a", "value": 1},
                                           {"name": "a", "value": 2}]})

    def test_non_object_document_raises(self):
        with pytest.raises(ValueError, match="must be an object"):
            GraphData.from_dict([1, 2, 3])

    def test_non_list_nodes_raises(self):
        with pytest.raises(ValueError, match="must be lists"):
            GraphData.from_dict({"nodes": {"a": 1}})

    def test_dangling_edges_are_kept_and_reported(self):
        graph = GraphData.from_dict({
            "nodes": [{"name": "a", "value": 1}],
            "edges": [{"source": "a", "target": "ghost", "weight": 2}],
        })
        assert len(graph.edges) == 1
        assert graph.get_dangling_edges() == [Edge("a", "ghost", 2)]

    def test_stub_graph_has_no_dangling_edges(self, stub_graph):
        assert stub_graph.get_dangling_edges() == []

    def test_graph_data_is_hashable(self, stub_graph):
        assert hash(stub_graph) == hash(GraphData.from_dict(stub_graph.to_dict()))


# ═════════════════════════════════════════════════════════════════
#  ENUM TYPES
# ═════════════════════════════════════════════════════════════════

class TestTypes:

    @pytest.mark.parametrize("raw, expected", [
        ("force", GraphType.FORCE),
        ("node-link", GraphType.NODE_LINK),
        ("echarts", GraphType.FORCE),
        ("antv", GraphType.NODE_LINK),
        (" Node_Link ", GraphType.NODE_LINK),
        (GraphType.FORCE, GraphType.FORCE),
    ])
    def test_graph_type_parse(self, raw, expected):
        assert GraphType.parse(raw) is expected

    def test_unknown_graph_type_is_none(self):
        assert GraphType.parse("sankey") is None
        assert GraphType.parse(None) is None

    def test_theme_parse(self):
        assert Theme.parse("DARK") is Theme.DARK
        assert Theme.parse(Theme.LIGHT) is Theme.LIGHT

    def test_unknown_theme_falls_back_to_light(self, caplog):
        assert Theme.parse("sepia") is Theme.LIGHT
        assert "Unknown theme" in caplog.text

    def test_coercer_keeps_ints(self):
        assert ValueCoercer.to_number(3) == 3
        assert isinstance(ValueCoercer.to_number("3"), int)
        assert isinstance(ValueCoercer.to_number("3.0"), float)

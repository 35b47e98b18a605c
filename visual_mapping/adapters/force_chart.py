"""
    Force-directed chart adapter (ECharts ``graph`` series schema).

    Besides the node and edge records, this backend needs a complete
    chart option.  The option is a fixed policy: only the node and edge
    lists vary between calls.
"""
from typing import Any, Dict

from mapping_api.models.edge import Edge
from mapping_api.models.node import Node
from mapping_api.types import GraphType

from ..services.base_adapter import AdaptedGraph, GraphAdapter, NodeClickFunc, NodeStyle

ANIMATION_DURATION_MS = 3000
FORCE_REPULSION = 50
FORCE_EDGE_LENGTH = (1, 100)
EDGE_CURVENESS = 0.3
EDGE_OPACITY = 0.7
LABEL_POSITION = 'right'


class ForceChartAdapter(GraphAdapter):
    """Adapter for the force-directed chart backend."""

    graph_type = GraphType.FORCE
    supports_theme_switch = True

    def _adapt_node(self, node: Node, style: NodeStyle) -> Dict[str, Any]:
        return {
            'id': node.name,
            'name': node.name,
            'value': node.value,
            'symbolSize': style.size,
            'itemStyle': {
                'color': style.color,
            },
        }

    def _adapt_edge(self, edge: Edge) -> Dict[str, Any]:
        return {
            'source': edge.source,
            'target': edge.target,
            'value': edge.weight,
        }

    def build_option(self, adapted: AdaptedGraph) -> Dict[str, Any]:
        """
        Assemble the chart option around the adapted records.

        Layout animation is disabled so the force layout does not
        re-animate on every tick; pan and zoom (``roam``) are enabled and
        hovering a node highlights its adjacency.
        """
        return {
            'tooltip': {},
            'animation': True,
            'animationDuration': ANIMATION_DURATION_MS,
            'series': [
                {
                    'type': 'graph',
                    'layout': 'force',
                    'nodes': adapted.nodes,
                    'edges': adapted.edges,
                    'roam': True,
                    'label': {
                        'position': LABEL_POSITION,
                    },
                    'force': {
                        'repulsion': FORCE_REPULSION,
                        'edgeLength': list(FORCE_EDGE_LENGTH),
                        'layoutAnimation': False,
                    },
                    'lineStyle': {
                        'curveness': EDGE_CURVENESS,
                        'opacity': EDGE_OPACITY,
                    },
                    'emphasis': {
                        'focus': 'adjacency',
                        'label': {
                            'position': LABEL_POSITION,
                            'show': True,
                        },
                    },
                }
            ],
        }

    def render_props(self, adapted: AdaptedGraph,
                     on_node_click: NodeClickFunc) -> Dict[str, Any]:
        return {
            'option': self.build_option(adapted),
            'on_events': {'click': on_node_click},
        }

"""
    Node-link adapter (Graphin ``keyshape`` schema).

    This backend cannot switch theme once rendered, so the theme toggle
    of the host UI is reported as disabled for it.
"""
from typing import Any, Dict

from mapping_api.models.edge import Edge
from mapping_api.models.node import Node
from mapping_api.types import GraphType

from ..services.base_adapter import AdaptedGraph, GraphAdapter, NodeClickFunc, NodeStyle


class NodeLinkAdapter(GraphAdapter):
    """Adapter for the node-link render backend."""

    graph_type = GraphType.NODE_LINK
    supports_theme_switch = False

    def _adapt_node(self, node: Node, style: NodeStyle) -> Dict[str, Any]:
        return {
            'id': node.name,
            'value': node.value,
            'style': {
                'keyshape': {
                    'size': style.size,
                    'stroke': style.color,
                    'fill': style.color,
                    'fillOpacity': 1,
                },
            },
        }

    def _adapt_edge(self, edge: Edge) -> Dict[str, Any]:
        return {
            'source': edge.source,
            'target': edge.target,
            'value': edge.weight,
            'style': {
                'keyshape': {
                    'type': 'poly',
                    'poly': {
                        'distance': self._config.edge_poly_distance,
                    },
                },
            },
        }

    def render_props(self, adapted: AdaptedGraph,
                     on_node_click: NodeClickFunc) -> Dict[str, Any]:
        return {
            'data': adapted.to_dict(),
            'on_node_click': on_node_click,
        }

"""
    Generic base for rendering backend adapters.

    Design Pattern: Template Method
    ─────────────────────────────────
    ``adapt()`` fixes the skeleton of every adaptation
    (normalize value range → style each node → convert each edge),
    letting concrete adapters override only the record shapes and the
    final render properties.

    Every adapter is stateless apart from its (immutable) configuration,
    so one instance can serve any number of calls.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, NamedTuple

from mapping_api.models.edge import Edge
from mapping_api.models.graph import GraphData
from mapping_api.models.node import Node
from mapping_api.types import GraphType

from ..config import MappingConfig
from .coloring import ColorBucketizer
from .scaling import get_min_max, linear_map

NodeClickFunc = Callable[[Dict[str, Any]], Any]


class NodeStyle(NamedTuple):
    """Renderer-agnostic visual attributes of one node."""
    size: float
    color: str


@dataclass(frozen=True)
class AdaptedGraph:
    """Backend-specific node and edge records, in input order."""
    nodes: List[Dict[str, Any]]
    edges: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {'nodes': self.nodes, 'edges': self.edges}


class GraphAdapter(ABC):
    """
    Abstract base for backend adapters.

    Concrete subclasses must set ``graph_type`` and implement:
        - _adapt_node(node, style)      → node record
        - _adapt_edge(edge)             → edge record
        - render_props(adapted, click)  → properties for the rendering surface
    """

    graph_type: ClassVar[GraphType]
    supports_theme_switch: ClassVar[bool] = True

    def __init__(self, config: MappingConfig):
        self._config = config

    @property
    def config(self) -> MappingConfig:
        return self._config

    def adapt(self, graph: GraphData, bucketizer: ColorBucketizer) -> AdaptedGraph:
        """
        Template Method: normalize → style nodes → convert edges.

        Args:
            graph:      Input graph (may be empty).
            bucketizer: Color mapping of the active theme.

        Returns:
            Adapted records in the same order as ``graph``.
        """
        value_range = get_min_max(graph.nodes)
        nodes = [
            self._adapt_node(node, NodeStyle(
                size=linear_map(node.value, value_range, self._config.node_size),
                color=bucketizer.color_for(node.value),
            ))
            for node in graph.nodes
        ]
        edges = [self._adapt_edge(edge) for edge in graph.edges]
        return AdaptedGraph(nodes, edges)

    @abstractmethod
    def _adapt_node(self, node: Node, style: NodeStyle) -> Dict[str, Any]:
        """Build the backend record of one node."""
        ...

    @abstractmethod
    def _adapt_edge(self, edge: Edge) -> Dict[str, Any]:
        """Build the backend record of one edge."""
        ...

    @abstractmethod
    def render_props(self, adapted: AdaptedGraph,
                     on_node_click: NodeClickFunc) -> Dict[str, Any]:
        """
        Properties handed to the rendering surface, including the
        click hook in the shape this backend expects.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(graph_type='{self.graph_type.value}')"

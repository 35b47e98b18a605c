"""
    GraphData model - the input of the visual mapping engine.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple

from .node import Node
from .edge import Edge


@dataclass(frozen=True)
class GraphData:
    """
    Immutable graph: an ordered tuple of nodes and an ordered tuple of edges.

    Node order is preserved by every adapter, so the output lists line
    up with ``nodes`` index by index.
    """
    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'nodes', tuple(self.nodes))
        object.__setattr__(self, 'edges', tuple(self.edges))

    @classmethod
    def build(cls, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()) -> 'GraphData':
        return cls(tuple(nodes), tuple(edges))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GraphData':
        """
        Reconstruct graph data from a plain dictionary (inverse of ``to_dict``).

        Args:
            data: ``{"nodes": [{"name", "value"}], "edges": [{"source", "target", "weight"}]}``.
                  Both lists are optional.

        Raises:
            ValueError: If the document or one of its entries is malformed.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Graph data must be an object, got {type(data).__name__}")

        raw_nodes = data.get('nodes') or []
        raw_edges = data.get('edges') or []
        if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
            raise ValueError("'nodes' and 'edges' must be lists")

        nodes = [Node.from_dict(n) for n in raw_nodes]
        names: Set[str] = set()
        for node in nodes:
            if node.name in names:
                raise ValueError(f"Node with name {node.name} already exists")
            names.add(node.name)

        return cls(tuple(nodes), tuple(Edge.from_dict(e) for e in raw_edges))

    def get_dangling_edges(self) -> List[Edge]:
        """Edges whose source or target is not a node of this graph"""
        names = {n.name for n in self.nodes}
        return [e for e in self.edges if e.source not in names or e.target not in names]

    def is_empty(self) -> bool:
        return not self.nodes

    def __repr__(self) -> str:
        return f"GraphData(nodes={len(self.nodes)}, edges={len(self.edges)})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [node.to_dict() for node in self.nodes],
            'edges': [edge.to_dict() for edge in self.edges],
        }

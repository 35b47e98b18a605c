from .node import Node
from .edge import Edge
from .graph import GraphData

__all__ = ['Node', 'Edge', 'GraphData']

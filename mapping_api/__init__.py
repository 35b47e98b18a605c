"""
Graph Visual Mapping API — input models and enumerated types.
"""
from .types import Theme, GraphType, ValueCoercer
from .models.node import Node
from .models.edge import Edge
from .models.graph import GraphData

__all__ = [
    'Theme',
    'GraphType',
    'ValueCoercer',
    'Node',
    'Edge',
    'GraphData',
]

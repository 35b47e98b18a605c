"""
    Edge model - a weighted connection between two node names.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..types import ValueCoercer
from .node import Number


@dataclass(frozen=True)
class Edge:
    """
    Class for an edge between two nodes, referenced by name.

    Endpoints are not checked against the node set; an edge may point
    at a node that does not exist and is still carried through.
    """
    source: str
    target: str
    weight: Number = 0

    def __post_init__(self):
        object.__setattr__(self, 'source', str(self.source))
        object.__setattr__(self, 'target', str(self.target))
        object.__setattr__(self, 'weight', ValueCoercer.to_number(self.weight))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Edge':
        """
        Build an edge from a mapping with ``source``, ``target`` and
        an optional ``weight`` (defaults to 0).

        Raises:
            ValueError: If an endpoint is missing or ``weight`` is not numeric.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Edge must be an object, got {data!r}")
        for key in ('source', 'target'):
            if key not in data:
                raise ValueError(f"Edge is missing '{key}': {dict(data)!r}")
        return cls(
            source=data['source'],
            target=data['target'],
            weight=data.get('weight', 0),
        )

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target}, weight={self.weight})"

    def to_dict(self) -> Dict[str, Any]:
        return {'source': self.source, 'target': self.target, 'weight': self.weight}

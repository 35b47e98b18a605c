"""
    Node model - a named graph vertex carrying a scalar value.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from ..types import ValueCoercer

Number = Union[int, float]


@dataclass(frozen=True)
class Node:
    """
    A node in the graph.

    The name is both the unique identifier and the display label.
    The value only drives visual scaling (size and color), it has
    no meaning for the graph structure.
    """
    name: str
    value: Number = 0

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'name', str(self.name))
        object.__setattr__(self, 'value', ValueCoercer.to_number(self.value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Node':
        """
        Build a node from a mapping with ``name`` and ``value`` keys.

        Raises:
            ValueError: If ``name`` or ``value`` is missing, or ``value``
                        is not numeric.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Node must be an object, got {data!r}")
        for key in ('name', 'value'):
            if key not in data:
                raise ValueError(f"Node is missing '{key}': {dict(data)!r}")
        return cls(name=data['name'], value=data['value'])

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'value': self.value}

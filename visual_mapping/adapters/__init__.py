"""
Backend adapters and the closed graph-type dispatch table.

Adding a backend means adding a ``GraphType`` member and one entry
here; existing adapters are not touched.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Type

from mapping_api.types import GraphType

from ..services.base_adapter import GraphAdapter
from .force_chart import ForceChartAdapter
from .node_link import NodeLinkAdapter

ADAPTERS: Mapping[GraphType, Type[GraphAdapter]] = MappingProxyType({
    GraphType.FORCE: ForceChartAdapter,
    GraphType.NODE_LINK: NodeLinkAdapter,
})


def get_adapter_class(graph_type: Optional[GraphType]) -> Optional[Type[GraphAdapter]]:
    """Return the adapter class of a graph type, or None if it has none."""
    if graph_type is None:
        return None
    return ADAPTERS.get(graph_type)


__all__ = [
    'ADAPTERS',
    'get_adapter_class',
    'ForceChartAdapter',
    'NodeLinkAdapter',
]

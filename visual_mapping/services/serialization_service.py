"""
    Serialization and deserialization of engine inputs and outputs.

    Inputs are ``GraphData`` documents (JSON objects with ``nodes`` and
    ``edges``); outputs are render results, whose callbacks cannot be
    represented in JSON and are therefore left out.

    Factory Method for deserialization:
        GraphData.from_dict  →  GraphSerializer.deserialize
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from mapping_api.models.graph import GraphData

from .exceptions import GraphDataError

logger = logging.getLogger(__name__)


class GraphSerializer:
    """
    Serialize / deserialize ``GraphData``.

    Usage:
        serializer = GraphSerializer()
        graph = serializer.deserialize(data)     # dict → GraphData
        graph = serializer.from_json(json_str)   # str  → GraphData
        graph = serializer.load('graph.json')    # file → GraphData
        data = serializer.serialize(graph)       # GraphData → dict
        json_str = serializer.to_json(graph)     # GraphData → str
    """

    # ── Serialization ────────────────────────────────────────────

    def serialize(self, graph: GraphData) -> Dict[str, Any]:
        return graph.to_dict()

    def to_json(self, graph: GraphData, *, indent: int = 2) -> str:
        """Serialize graph data directly to a JSON string."""
        return json.dumps(self.serialize(graph), indent=indent)

    # ── Deserialization ──────────────────────────────────────────

    def deserialize(self, data: Any) -> GraphData:
        """
        Build ``GraphData`` from a plain dictionary.

        An already constructed ``GraphData`` is returned unchanged.

        Raises:
            GraphDataError: If the document is malformed.
        """
        if isinstance(data, GraphData):
            return data
        try:
            return GraphData.from_dict(data)
        except (TypeError, ValueError) as e:
            raise GraphDataError(f"Invalid graph data: {e}")

    def from_json(self, json_str: str) -> GraphData:
        """Deserialize graph data from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise GraphDataError(f"Graph data is not valid JSON: {e}")
        return self.deserialize(data)

    def load(self, path: Union[str, Path]) -> GraphData:
        """
        Read graph data from a JSON file.

        Raises:
            GraphDataError: If the file cannot be read or is malformed.
        """
        try:
            with open(path, 'r', encoding='utf-8') as fh:
                text = fh.read()
        except OSError as e:
            raise GraphDataError(f"Cannot read graph data '{path}': {e}")

        graph = self.from_json(text)
        logger.info("Loaded %r from '%s'", graph, path)
        return graph

    # ── Render output ────────────────────────────────────────────

    @staticmethod
    def strip_callables(value: Any) -> Any:
        """
        Return a JSON-safe copy of ``value``: callables are dropped from
        mappings and lists, everything else is copied recursively.
        """
        if isinstance(value, Mapping):
            return {
                str(k): GraphSerializer.strip_callables(v)
                for k, v in value.items()
                if not callable(v)
            }
        if isinstance(value, (list, tuple)):
            return [GraphSerializer.strip_callables(v) for v in value if not callable(v)]
        return value

"""
Shared test fixtures.
Stub graph: contributor network with 8 nodes and 9 edges.
Values span every color bucket of the default threshold table.
"""
import pytest

from mapping_api.models.edge import Edge
from mapping_api.models.graph import GraphData
from mapping_api.models.node import Node
from visual_mapping.engine import VisualMappingEngine


# ── Node definitions (name, value) ───────────────────────────────
_NODES = [
    ("alice",   3),       # bucket 0  (< 10)
    ("bob",     10),      # bucket 1  (boundary)
    ("carol",   42.5),    # bucket 1
    ("dave",    100),     # bucket 2  (boundary)
    ("erin",    640),     # bucket 2
    ("frank",   999.99),  # bucket 2
    ("grace",   1000),    # bucket 3  (boundary)
    ("heidi",   7200),    # bucket 3
]

# ── Edge definitions (source, target, weight) ────────────────────
_EDGES = [
    ("alice", "bob",   1),
    ("alice", "carol", 2.5),
    ("bob",   "dave",  4),
    ("carol", "erin",  8),
    ("dave",  "frank", 16),
    ("erin",  "grace", 32),
    ("frank", "heidi", 64),
    ("grace", "heidi", 128),
    ("heidi", "alice", 0),
]


def _build_graph() -> GraphData:
    return GraphData.build(
        [Node(name, value) for name, value in _NODES],
        [Edge(src, tgt, weight) for src, tgt, weight in _EDGES],
    )


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def stub_graph() -> GraphData:
    """Full stub graph: 8 nodes, 9 weighted edges."""
    return _build_graph()


@pytest.fixture
def scenario_graph() -> GraphData:
    """Three nodes a=5, b=50, c=5000 and one edge a→b of weight 1."""
    return GraphData.from_dict({
        "nodes": [
            {"name": "a", "value": 5},
            {"name": "b", "value": 50},
            {"name": "c", "value": 5000},
        ],
        "edges": [
            {"source": "a", "target": "b", "weight": 1},
        ],
    })


@pytest.fixture
def empty_graph() -> GraphData:
    return GraphData()


@pytest.fixture
def engine() -> VisualMappingEngine:
    return VisualMappingEngine()


@pytest.fixture
def no_browser(monkeypatch):
    """Record URLs instead of opening a browser."""
    opened = []
    monkeypatch.setattr("webbrowser.open", lambda url, *a, **kw: opened.append(url) or True)
    return opened

"""Data models for astmeter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Syntactic categories that affect the metrics."""

    CONDITIONAL = "conditional"
    LOOP = "loop"
    CASE = "case"
    TERNARY = "ternary"
    VARIABLE_DECL = "variable_decl"
    OTHER = "other"


# Each of these adds one independent path through the code.
DECISION_KINDS = frozenset(
    {NodeKind.CONDITIONAL, NodeKind.LOOP, NodeKind.CASE, NodeKind.TERNARY}
)

LOOP_KINDS = frozenset({NodeKind.LOOP})


@dataclass
class Metrics:
    """Counters folded over a syntax tree walk.

    ``cyclomatic`` starts at 1, the single path through straight-line code.
    ``max_loop_depth`` is a high-water mark and never decreases.
    """

    cyclomatic: int = 1
    var_decl_count: int = 0
    current_loop_depth: int = 0
    max_loop_depth: int = 0

    def enter(self, kind: NodeKind) -> bool:
        """Apply the entry effects of a node. Returns True for loops."""
        if kind in DECISION_KINDS:
            self.cyclomatic += 1
        if kind is NodeKind.VARIABLE_DECL:
            self.var_decl_count += 1

        if kind not in LOOP_KINDS:
            return False
        self.current_loop_depth += 1
        if self.current_loop_depth > self.max_loop_depth:
            self.max_loop_depth = self.current_loop_depth
        return True

    def leave_loop(self) -> None:
        """Apply the exit effect of a loop once its children are done."""
        self.current_loop_depth -= 1


@dataclass(frozen=True)
class GraphNode:
    """A node record in the emitted graph."""

    id: int
    label: str


@dataclass(frozen=True)
class GraphEdge:
    """A parent -> child edge in the emitted graph."""

    source: int
    target: int


class AstGraph:
    """Graph records emitted during a walk, in pre-order."""

    __slots__ = ("_nodes", "_edges", "_parent")

    def __init__(self) -> None:
        self._nodes: list[GraphNode] = []
        self._edges: list[GraphEdge] = []
        self._parent: dict[int, int] = {}

    def add_node(self, node_id: int, label: str) -> None:
        """Record a node. O(1)."""
        self._nodes.append(GraphNode(id=node_id, label=label))

    def add_edge(self, parent_id: int, child_id: int) -> None:
        """Record an edge to a node's parent. O(1)."""
        self._edges.append(GraphEdge(source=parent_id, target=child_id))
        self._parent[child_id] = parent_id

    def parent_of(self, node_id: int) -> int | None:
        """Get the parent ID of a node, or None for the root. O(1)."""
        return self._parent.get(node_id)

    def children_of(self, node_id: int) -> list[int]:
        """Get child IDs in emission order. O(E)."""
        return [e.target for e in self._edges if e.source == node_id]

    @property
    def nodes(self) -> list[GraphNode]:
        return self._nodes

    @property
    def edges(self) -> list[GraphEdge]:
        return self._edges

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AstGraph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __repr__(self) -> str:
        return f"AstGraph(nodes={self.num_nodes}, edges={self.num_edges})"


@dataclass
class AnalysisResult:
    """Result of walking one syntax tree."""

    metrics: Metrics
    graph: AstGraph = field(default_factory=AstGraph)

    @property
    def node_count(self) -> int:
        return self.graph.num_nodes

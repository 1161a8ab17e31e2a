"""Pre-order tree walk that records the graph and folds the metrics."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from astmeter.core.exceptions import TraversalError
from astmeter.core.models import AnalysisResult, AstGraph, Metrics

if TYPE_CHECKING:
    from astmeter.languages.base import SyntaxTree

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class IdAllocator:
    """Issues 0, 1, 2, ... one ID per visited node."""

    __slots__ = ("_next",)

    def __init__(self) -> None:
        self._next = 0

    def next(self) -> int:
        node_id = self._next
        self._next += 1
        return node_id

    @property
    def count(self) -> int:
        """Number of IDs issued so far."""
        return self._next


@dataclass
class _Frame:
    """An entered node whose children are still pending."""

    node_id: int
    children: Iterator[Any]
    is_loop: bool


def walk(tree: SyntaxTree) -> AnalysisResult:
    """Walk a syntax tree depth-first and return its graph and metrics.

    Per node, in order: allocate an ID, record the node, record the edge to
    the node on top of the stack, classify, push, visit children left to
    right, then undo the loop depth and pop.

    The frame stack is the parent-tracking stack, so depth is only bounded by
    memory. O(n) in the number of nodes.

    Raises:
        TraversalError: A node could not be queried. Nothing is returned.
    """
    ids = IdAllocator()
    graph = AstGraph()
    metrics = Metrics()
    stack: list[_Frame] = []
    # node whose query is in progress, for error reports
    current = -1

    def enter(node: Any) -> None:
        nonlocal current
        node_id = ids.next()
        current = node_id
        graph.add_node(node_id, tree.label(node))
        if stack:
            graph.add_edge(stack[-1].node_id, node_id)
        is_loop = metrics.enter(tree.kind(node))
        stack.append(_Frame(node_id, iter(tree.children(node)), is_loop))

    try:
        enter(tree.root)
        while stack:
            frame = stack[-1]
            current = frame.node_id
            child = next(frame.children, _EXHAUSTED)
            if child is not _EXHAUSTED:
                enter(child)
                continue
            if frame.is_loop:
                metrics.leave_loop()
            stack.pop()
    except TraversalError:
        raise
    except Exception as e:
        raise TraversalError(f"Tree query failed at node {current}: {e}") from e

    logger.debug(
        "Walked %d nodes (cyclomatic=%d, max loop depth=%d)",
        ids.count,
        metrics.cyclomatic,
        metrics.max_loop_depth,
    )
    return AnalysisResult(metrics=metrics, graph=graph)

"""Graphviz DOT serialization of an emitted AST graph."""

from __future__ import annotations

from typing import TextIO

import graphviz

from astmeter.core.exceptions import GraphOutputError
from astmeter.core.models import AstGraph

GRAPH_NAME = "G"


def node_name(node_id: int) -> str:
    return f"node{node_id}"


def to_digraph(graph: AstGraph, name: str = GRAPH_NAME) -> graphviz.Digraph:
    """Build a Digraph with each node followed by the edge from its parent.

    Labels come from identifiers and literals, so they are passed through
    graphviz.escape to keep quotes, backslashes and <...> literal.
    """
    dot = graphviz.Digraph(name=name)
    for node in graph.nodes:
        dot.node(node_name(node.id), label=graphviz.escape(node.label))
        parent_id = graph.parent_of(node.id)
        if parent_id is not None:
            dot.edge(node_name(parent_id), node_name(node.id))
    return dot


def write_dot(graph: AstGraph, stream: TextIO, name: str = GRAPH_NAME) -> None:
    """Write the DOT source of a graph to an open text stream."""
    try:
        stream.write(to_digraph(graph, name).source)
    except OSError as e:
        raise GraphOutputError(f"Cannot write graph description: {e}") from e

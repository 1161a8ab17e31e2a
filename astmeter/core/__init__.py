"""
Core module: data models, exceptions, the tree walk, and reporting.

Models (models.py):
    - NodeKind: Closed set of node categories that drive the metrics
    - Metrics: Cyclomatic complexity, declarations, loop nesting depth
    - AstGraph: Node and edge records emitted during the walk

Exceptions (exceptions.py):
    - AstMeterError: Base exception for all astmeter errors
    - ParseError: Source file could not be parsed
    - TraversalError: Tree could not be walked
    - GraphOutputError: Graph description could not be written

Walk (traversal.py):
    - walk(): Pre-order traversal returning an AnalysisResult

Output (dot.py, report.py):
    - write_dot(): Graphviz DOT serialization
    - format_report(): Three-line metrics report
"""

from astmeter.core.exceptions import (
    AstMeterError,
    GraphOutputError,
    ParseError,
    TraversalError,
)
from astmeter.core.models import (
    AnalysisResult,
    AstGraph,
    GraphEdge,
    GraphNode,
    Metrics,
    NodeKind,
)
from astmeter.core.traversal import IdAllocator, walk

__all__ = [
    # Models
    "AnalysisResult",
    "AstGraph",
    "GraphEdge",
    "GraphNode",
    "Metrics",
    "NodeKind",
    # Exceptions
    "AstMeterError",
    "GraphOutputError",
    "ParseError",
    "TraversalError",
    # Walk
    "IdAllocator",
    "walk",
]

"""Human-readable and JSON rendering of the final metrics.

The time and space figures are heuristics, not complexity proofs: time is
O(n^k) for the deepest loop nest k, and space is O(n) annotated with the
number of variable declarations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from astmeter.core.models import AnalysisResult, Metrics


def time_complexity(metrics: Metrics) -> str:
    return f"O(n^{metrics.max_loop_depth})"


def space_complexity(metrics: Metrics) -> str:
    return f"O(n) with {metrics.var_decl_count} variable declarations"


def format_report(metrics: Metrics) -> list[str]:
    """Format the three report lines."""
    return [
        f"Cyclomatic Complexity: {metrics.cyclomatic}",
        f"Estimated Time Complexity: {time_complexity(metrics)} "
        "based on max loop nesting depth",
        f"Estimated Space Complexity: {space_complexity(metrics)}",
    ]


def report_to_dict(result: AnalysisResult, file: Path | None = None) -> dict[str, Any]:
    """Convert a result to a JSON-serializable dict."""
    metrics = result.metrics
    return {
        "file": str(file) if file else None,
        "cyclomatic": metrics.cyclomatic,
        "time_complexity": time_complexity(metrics),
        "space_complexity": space_complexity(metrics),
        "max_loop_depth": metrics.max_loop_depth,
        "var_decl_count": metrics.var_decl_count,
        "nodes": result.graph.num_nodes,
        "edges": result.graph.num_edges,
    }

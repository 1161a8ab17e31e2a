"""
MCP server for astmeter.

Exposes single-file AST metrics to LLMs via the Model Context Protocol.

Tools:
    - astmeter_analyze: Cyclomatic complexity and the loop/declaration heuristics
    - astmeter_graph: The syntax tree as Graphviz DOT source

Usage:
    Run: astmeter-mcp
"""

import asyncio

from astmeter.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]

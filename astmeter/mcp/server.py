"""MCP server implementation for astmeter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from astmeter.core.analyzer import analyze_file
from astmeter.core.dot import to_digraph
from astmeter.core.exceptions import AstMeterError
from astmeter.core.models import AnalysisResult
from astmeter.core.report import report_to_dict
from astmeter.languages import default_parsers

server = Server("astmeter")

_PATH_SCHEMA = {
    "type": "string",
    "description": "Path to the source file, relative to the server's working directory",
}

_MAIN_FILE_ONLY_SCHEMA = {
    "type": "boolean",
    "description": "C-family only: skip nodes from included headers (default: false)",
    "default": False,
}


def _analyze(path: str, main_file_only: bool) -> AnalysisResult:
    """Analyze a file with the default parsers."""
    file = Path(path)
    if not file.is_absolute():
        file = Path.cwd() / file
    return analyze_file(file, default_parsers(main_file_only=main_file_only))


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="astmeter_analyze",
            description=(
                "Compute cyclomatic complexity, a loop-nesting time heuristic O(n^k) "
                "and a declaration-count space heuristic for a single source file."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": _PATH_SCHEMA,
                    "main_file_only": _MAIN_FILE_ONLY_SCHEMA,
                },
                "required": ["path"],
            },
        ),
        Tool(
            name="astmeter_graph",
            description="Return the syntax tree of a source file as Graphviz DOT source.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": _PATH_SCHEMA,
                    "main_file_only": _MAIN_FILE_ONLY_SCHEMA,
                },
                "required": ["path"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "astmeter_analyze":
            result = _handle_analyze(arguments["path"], arguments.get("main_file_only", False))
        elif name == "astmeter_graph":
            result = _handle_graph(arguments["path"], arguments.get("main_file_only", False))
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except AstMeterError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except KeyError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Missing argument: {e}"}))]


def _handle_analyze(path: str, main_file_only: bool = False) -> dict[str, Any]:
    """Handle astmeter_analyze tool."""
    result = _analyze(path, main_file_only)
    return report_to_dict(result, Path(path))


def _handle_graph(path: str, main_file_only: bool = False) -> dict[str, Any]:
    """Handle astmeter_graph tool."""
    result = _analyze(path, main_file_only)
    return {
        "file": path,
        "nodes": result.graph.num_nodes,
        "edges": result.graph.num_edges,
        "dot": to_digraph(result.graph).source,
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())

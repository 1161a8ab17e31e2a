"""
Language front-ends: turn a source file into a queryable syntax tree.

Components:
    - SyntaxTree: Protocol for kind/label/children queries over a parsed tree
    - LanguageParser: Protocol defining the parser interface
    - ClangParser: libclang-based parser for C-family files
    - PythonParser: ast-based parser for Python files

Adding a new language:
    1. Create a parser class implementing LanguageParser
    2. Implement parse() to return a SyntaxTree mapping nodes to NodeKind
    3. Implement supports() to check file extensions
    4. Add it to default_parsers()
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from astmeter.core.exceptions import ParseError
from astmeter.languages.base import LanguageParser, SyntaxTree
from astmeter.languages.cfamily import CLANG_SUFFIXES, ClangParser
from astmeter.languages.python import PythonParser


def default_parsers(
    library_file: str | None = None,
    clang_args: Sequence[str] = (),
    main_file_only: bool = False,
) -> list[LanguageParser]:
    """Build the parser list used by the CLI and the MCP server."""
    return [
        ClangParser(library_file=library_file, args=clang_args, main_file_only=main_file_only),
        PythonParser(),
    ]


def get_parser(file: Path, parsers: Sequence[LanguageParser]) -> LanguageParser:
    """Pick the first parser that supports the file."""
    for parser in parsers:
        if parser.supports(file):
            return parser
    raise ParseError(f"Unsupported file type: {file}")


__all__ = [
    "CLANG_SUFFIXES",
    "ClangParser",
    "LanguageParser",
    "PythonParser",
    "SyntaxTree",
    "default_parsers",
    "get_parser",
]

"""Python front-end built on the standard library ast module."""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator
from pathlib import Path

from astmeter.core.exceptions import ParseError
from astmeter.core.models import NodeKind

logger = logging.getLogger(__name__)

_MAX_CONSTANT_DISPLAY = 20

_KINDS: dict[type[ast.AST], NodeKind] = {
    ast.If: NodeKind.CONDITIONAL,
    ast.For: NodeKind.LOOP,
    ast.AsyncFor: NodeKind.LOOP,
    ast.While: NodeKind.LOOP,
    ast.match_case: NodeKind.CASE,
    ast.IfExp: NodeKind.TERNARY,
    ast.Assign: NodeKind.VARIABLE_DECL,
    ast.AnnAssign: NodeKind.VARIABLE_DECL,
}


class PythonParser:
    """Parser for Python source files using the ast module."""

    def supports(self, file: Path) -> bool:
        """Check if this parser supports the given file."""
        return file.suffix == ".py"

    def parse(self, file: Path) -> PythonTree:
        """Parse a Python file into a queryable tree."""
        try:
            source = file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParseError(f"File not found: {file}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Cannot read {file}: {e}") from e

        try:
            module = ast.parse(source, filename=str(file))
        except SyntaxError as e:
            raise ParseError(f"Syntax error in {file}: {e}") from e

        logger.debug("Parsed %s with the Python front-end", file)
        return PythonTree(module)


class PythonTree:
    """SyntaxTree over a Python ast.Module."""

    def __init__(self, module: ast.Module) -> None:
        self._module = module

    @property
    def root(self) -> ast.Module:
        return self._module

    def kind(self, node: ast.AST) -> NodeKind:
        return _KINDS.get(type(node), NodeKind.OTHER)

    def label(self, node: ast.AST) -> str:
        """Class name plus the most telling attribute, e.g. ``FunctionDef: main``."""
        name = type(node).__name__
        detail = _detail(node)
        return f"{name}: {detail}" if detail else name

    def children(self, node: ast.AST) -> Iterator[ast.AST]:
        for child in ast.iter_child_nodes(node):
            # Load/Store/Del markers are not syntax
            if not isinstance(child, ast.expr_context):
                yield child


def _detail(node: ast.AST) -> str | None:
    if isinstance(node, ast.Constant):
        text = repr(node.value)
        if len(text) > _MAX_CONSTANT_DISPLAY:
            text = text[: _MAX_CONSTANT_DISPLAY - 3] + "..."
        return text
    for attr in ("name", "id", "arg", "attr"):
        value = getattr(node, attr, None)
        if isinstance(value, str):
            return value
    return None

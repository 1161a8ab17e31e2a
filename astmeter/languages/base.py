"""Protocols for language parsers and the trees they produce."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from astmeter.core.models import NodeKind


class SyntaxTree(Protocol):
    """Read-only query interface over a parsed tree.

    Nodes are opaque handles owned by the front-end.
    """

    @property
    def root(self) -> Any:
        """The root node of the tree."""
        ...

    def kind(self, node: Any) -> NodeKind:
        """Classify a node into one of the metric categories."""
        ...

    def label(self, node: Any) -> str:
        """Short human-readable description of a node."""
        ...

    def children(self, node: Any) -> Iterable[Any]:
        """Direct children of a node, in source order."""
        ...


class LanguageParser(Protocol):
    """Protocol for language parsers."""

    def parse(self, file: Path) -> SyntaxTree:
        """Parse a file into a queryable syntax tree."""
        ...

    def supports(self, file: Path) -> bool:
        """Check if this parser supports the given file."""
        ...

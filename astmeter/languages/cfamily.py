"""C-family front-end built on libclang (clang.cindex)."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from clang import cindex

from astmeter.core.exceptions import ParseError, TraversalError
from astmeter.core.models import NodeKind

logger = logging.getLogger(__name__)

CLANG_SUFFIXES = frozenset({".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".hh", ".m"})

# Keyed by cursor kind name; CursorKind hashing differs between binding versions.
_KINDS: dict[str, NodeKind] = {
    "IF_STMT": NodeKind.CONDITIONAL,
    "FOR_STMT": NodeKind.LOOP,
    "WHILE_STMT": NodeKind.LOOP,
    "DO_STMT": NodeKind.LOOP,
    "CXX_FOR_RANGE_STMT": NodeKind.LOOP,
    "CASE_STMT": NodeKind.CASE,
    "CONDITIONAL_OPERATOR": NodeKind.TERNARY,
    "VAR_DECL": NodeKind.VARIABLE_DECL,
}


class ClangParser:
    """Parser for C-family source files using libclang."""

    def __init__(
        self,
        library_file: str | None = None,
        args: Sequence[str] = (),
        main_file_only: bool = False,
    ) -> None:
        """Configure the parser.

        Args:
            library_file: Path to the libclang shared library, if not the bundled one
            args: Extra compiler arguments (e.g. "-I include", "-std=c11")
            main_file_only: Skip cursors that come from included headers
        """
        self._library_file = library_file
        self._args = list(args)
        self._main_file_only = main_file_only

    def supports(self, file: Path) -> bool:
        """Check if this parser supports the given file."""
        return file.suffix.lower() in CLANG_SUFFIXES

    def parse(self, file: Path) -> ClangTree:
        """Parse a file into a translation unit and wrap it as a tree."""
        if not file.is_file():
            raise ParseError(f"File not found: {file}")

        index = self._create_index()
        try:
            unit = index.parse(str(file), args=self._args)
        except cindex.TranslationUnitLoadError as e:
            raise ParseError(f"Unable to parse translation unit {file}: {e}") from e

        for diagnostic in unit.diagnostics:
            if diagnostic.severity >= cindex.Diagnostic.Error:
                logger.warning("%s: %s", diagnostic.location, diagnostic.spelling)

        logger.debug("Parsed %s with libclang (args=%s)", file, self._args)
        return ClangTree(index, unit, main_file_only=self._main_file_only)

    def _create_index(self) -> cindex.Index:
        if self._library_file:
            if cindex.Config.loaded:
                logger.warning(
                    "libclang is already loaded; ignoring library file %s", self._library_file
                )
            else:
                cindex.Config.set_library_file(self._library_file)
        try:
            return cindex.Index.create()
        except cindex.LibclangError as e:
            raise ParseError(f"Cannot load libclang: {e}") from e


class ClangTree:
    """SyntaxTree over a libclang translation unit."""

    def __init__(
        self,
        index: cindex.Index,
        unit: cindex.TranslationUnit,
        main_file_only: bool = False,
    ) -> None:
        # The index must outlive every cursor taken from the unit
        self._index = index
        self._unit = unit
        self._main_file_only = main_file_only

    @property
    def root(self) -> cindex.Cursor:
        return self._unit.cursor

    def kind(self, node: cindex.Cursor) -> NodeKind:
        try:
            name = node.kind.name
        except ValueError as e:
            raise TraversalError(f"Unknown cursor kind: {e}") from e
        return _KINDS.get(name, NodeKind.OTHER)

    def label(self, node: cindex.Cursor) -> str:
        """Cursor spelling, or the kind name for unnamed statements."""
        if node.spelling:
            return node.spelling
        try:
            return node.kind.name
        except ValueError as e:
            raise TraversalError(f"Unknown cursor kind: {e}") from e

    def children(self, node: cindex.Cursor) -> Iterator[cindex.Cursor]:
        for child in node.get_children():
            if self._main_file_only and not self._in_main_file(child):
                continue
            yield child

    def _in_main_file(self, cursor: cindex.Cursor) -> bool:
        location_file = cursor.location.file
        return location_file is not None and location_file.name == self._unit.spelling

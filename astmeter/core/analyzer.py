"""Analyzer that coordinates parsing and the tree walk."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from astmeter.core.models import AnalysisResult
from astmeter.core.traversal import walk
from astmeter.languages import LanguageParser, default_parsers, get_parser

logger = logging.getLogger(__name__)


def analyze_file(
    file: Path,
    parsers: Sequence[LanguageParser] | None = None,
) -> AnalysisResult:
    """Parse a single source file and walk its tree.

    Args:
        file: Source file to analyze
        parsers: Candidate parsers, first match wins (default: default_parsers())

    Returns:
        AnalysisResult with the final metrics and the emitted graph

    Raises:
        ParseError: The file is missing, unsupported, or cannot be parsed
        TraversalError: The parsed tree could not be walked
    """
    parser = get_parser(file, parsers if parsers is not None else default_parsers())
    logger.debug("Using %s for %s", type(parser).__name__, file)
    tree = parser.parse(file)
    return walk(tree)

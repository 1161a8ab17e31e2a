"""Graphviz rendering, viewing and cleanup of the emitted graph.

Everything here is auxiliary to the metrics, so failures are logged as
warnings and never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import graphviz

logger = logging.getLogger(__name__)

DEFAULT_DOT_FILE = Path("ast.dot")
DEFAULT_IMAGE_FILE = Path("ast.svg")


def render_image(dot_path: Path, image_path: Path, engine: str = "dot") -> Path | None:
    """Render a DOT file with the Graphviz executable.

    The output format is taken from the image suffix (``ast.svg`` -> svg).

    Returns:
        The rendered image path, or None if rendering failed
    """
    fmt = image_path.suffix.lstrip(".") or "svg"
    try:
        rendered = graphviz.render(engine, fmt, dot_path, outfile=image_path)
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, ValueError) as e:
        logger.warning("Failed to convert DOT to %s: %s", fmt.upper(), e)
        return None
    return Path(rendered)


def open_viewer(image_path: Path) -> bool:
    """Open an image with the platform's default viewer (non-blocking)."""
    try:
        graphviz.view(image_path)
    except (RuntimeError, OSError) as e:
        logger.warning("Failed to launch a viewer for %s: %s", image_path, e)
        return False
    return True


def cleanup(paths: Iterable[Path]) -> None:
    """Delete generated files, warning about any that cannot be removed."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)

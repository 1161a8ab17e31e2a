"""CLI entry point for astmeter."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from astmeter.core.analyzer import analyze_file
from astmeter.core.dot import write_dot
from astmeter.core.exceptions import AstMeterError, GraphOutputError
from astmeter.core.models import AnalysisResult
from astmeter.core.report import format_report, report_to_dict
from astmeter.languages import LanguageParser, default_parsers
from astmeter.render import (
    DEFAULT_DOT_FILE,
    DEFAULT_IMAGE_FILE,
    cleanup,
    open_viewer,
    render_image,
)

app = typer.Typer(
    name="astmeter",
    help="Complexity metrics and a rendered AST graph for a single source file.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

LIBCLANG_ENVVAR = "ASTMETER_LIBCLANG"


def setup_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def analyze_to_dot(
    source: Path, dot_file: Path, parsers: Sequence[LanguageParser]
) -> AnalysisResult:
    """Analyze a file and write its graph to dot_file.

    The DOT file is opened before parsing starts and removed again if the
    analysis fails, so a partial graph is never left behind.
    """
    try:
        stream = dot_file.open("w", encoding="utf-8")
    except OSError as e:
        raise GraphOutputError(f"Cannot open {dot_file}: {e}") from e

    with stream:
        try:
            result = analyze_file(source, parsers)
            write_dot(result.graph, stream)
        except AstMeterError:
            stream.close()
            dot_file.unlink(missing_ok=True)
            raise
    return result


def wait_and_cleanup(paths: list[Path]) -> None:
    """Block until the user presses Enter, then delete the generated files."""
    try:
        err_console.input("Press Enter to delete the rendered graph files ")
    except EOFError:
        logger.warning(
            "No input available; keeping %s", ", ".join(str(p) for p in paths)
        )
        return
    cleanup(paths)


@app.command()
def analyze(
    source: Annotated[Path, typer.Argument(help="Source file to analyze")],
    dot_file: Annotated[
        Path, typer.Option("--dot-file", help="Where to write the DOT graph description")
    ] = DEFAULT_DOT_FILE,
    image: Annotated[
        Path, typer.Option("--image", "-o", help="Rendered image path (format from suffix)")
    ] = DEFAULT_IMAGE_FILE,
    no_render: Annotated[
        bool, typer.Option("--no-render", help="Skip Graphviz rendering")
    ] = False,
    no_view: Annotated[
        bool, typer.Option("--no-view", help="Do not open the image or wait for cleanup")
    ] = False,
    keep: Annotated[
        bool, typer.Option("--keep", "-k", help="Keep the DOT and image files after viewing")
    ] = False,
    main_file_only: Annotated[
        bool,
        typer.Option("--main-file-only", help="Skip nodes from included headers (C-family)"),
    ] = False,
    clang_args: Annotated[
        list[str] | None,
        typer.Option("--clang-arg", "-a", help="Extra compiler argument, e.g. --clang-arg=-Iinc"),
    ] = None,
    libclang: Annotated[
        str | None,
        typer.Option("--libclang", envvar=LIBCLANG_ENVVAR, help="Path to libclang shared library"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Report complexity metrics for SOURCE and render its syntax tree."""
    setup_logging(verbose)
    parsers = default_parsers(
        library_file=libclang,
        clang_args=clang_args or [],
        main_file_only=main_file_only,
    )

    try:
        result = analyze_to_dot(source, dot_file, parsers)
    except AstMeterError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e

    if output_json:
        print(json.dumps(report_to_dict(result, source)))
    else:
        for line in format_report(result.metrics):
            console.print(line, highlight=False)

    if no_render:
        return

    rendered = render_image(dot_file, image)
    if rendered is None or no_view:
        return

    if open_viewer(rendered) and not keep:
        wait_and_cleanup([rendered, dot_file])


if __name__ == "__main__":
    app()

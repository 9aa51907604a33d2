"""CLI for dirdiff."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .compare import compare
from .config import HASH_ALGORITHMS, load_config
from .errors import DirDiffError
from .models import DiffResult

console = Console()
error_console = Console(stderr=True)

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool) -> None:
    """Route dirdiff's loggers to stderr through rich."""
    logger = logging.getLogger("dirdiff")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=error_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


@click.command()
@click.version_option(version=__version__, prog_name="dirdiff")
@click.argument("root_a", type=click.Path(path_type=Path))
@click.argument("root_b", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON config file",
)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Hashing threads per root")
@click.option(
    "--hash",
    "hash_algorithm",
    type=click.Choice(HASH_ALGORITHMS),
    default=None,
    help="Content hash algorithm",
)
@click.option("--exclude", multiple=True, help="Skip entries whose name matches this pattern")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    root_a: Path,
    root_b: Path,
    as_json: bool,
    config_path: Path | None,
    workers: int | None,
    hash_algorithm: str | None,
    exclude: tuple[str, ...],
    verbose: bool,
) -> None:
    """dirdiff - Compare two directory trees.

    Reports files found only under ROOT_A, only under ROOT_B, and files
    present under both whose contents differ. Exits 0 when the trees match,
    1 when they differ, 2 on error.
    """
    setup_logging(verbose)

    try:
        config = load_config(config_path)
        overrides: dict = {}
        if workers is not None:
            overrides["workers"] = workers
        if hash_algorithm is not None:
            overrides["hash_algorithm"] = hash_algorithm
        if exclude:
            overrides["exclude_patterns"] = [*config.exclude_patterns, *exclude]
        config = config.model_copy(update=overrides)

        result = compare(root_a, root_b, config)
    except DirDiffError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(EXIT_ERROR)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result, root_a, root_b)

    sys.exit(EXIT_DIFFERENT if result.has_changes else EXIT_IDENTICAL)


def _print_result(result: DiffResult, root_a: Path, root_b: Path) -> None:
    """Render the three collections as rich tables."""
    if not result.has_changes:
        console.print("[green]Trees are identical.[/green]")
        return

    unreadable = set(result.unreadable)
    sections = [
        (f"Only in {_display(str(root_a))}", result.only_in_a, "yellow"),
        (f"Only in {_display(str(root_b))}", result.only_in_b, "yellow"),
        ("Differ", result.differs, "red"),
    ]
    for title, paths, style in sections:
        if not paths:
            continue
        table = Table(title=title)
        table.add_column("Path", style=style)
        table.add_column("Note", style="dim")
        for path in paths:
            table.add_row(_display(path), "unreadable" if path in unreadable else "")
        console.print(table)

    console.print(
        f"[bold]{result.total_changes}[/bold] difference(s): "
        f"{len(result.only_in_a)} only in A, "
        f"{len(result.only_in_b)} only in B, "
        f"{len(result.differs)} differ"
    )


def _display(path: str) -> str:
    """Make a path safe to print: undecodable bytes become U+FFFD, markup is escaped."""
    text = path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return escape(text)


if __name__ == "__main__":
    main()

"""CLI interface for checkit."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from checkit import __version__
from checkit.config import CONFIG_FILE, CheckitConfig
from checkit.errors import CheckitError
from checkit.logs import configure_logging
from checkit.state import AppState

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="checkit")
@click.option("--path", "-p", "path", required=True, help="Path to the checklist file.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE}).",
)
@click.option("--strict", is_flag=True, help="Reject lines without a '[?]' prefix.")
@click.option("--print", "print_only", is_flag=True, help="Print the checklist and exit.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    path: str,
    config_path: Path | None,
    strict: bool,
    print_only: bool,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """checkit - a terminal checklist.

    \b
    Keys:
      j / down     next item
      k / up       previous item
      space/enter  toggle completion
      S            save to file
      q            quit
    """
    configure_logging(verbose=verbose, log_file=log_file)

    if not path:
        console.print("[red]Valid path is required.[/red]")
        ctx.exit(1)

    try:
        config = CheckitConfig.load(config_path)
        if strict:
            config.parse.strict = True
        state = AppState.from_file(path, strict=config.parse.strict)
    except CheckitError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(1)

    done, total = state.summary()
    logger.info("Opened %s: %d/%d done", state.path, done, total)

    if print_only:
        _print_checklist(state, config.display.title)
        return

    from checkit.tui import start

    start(state, config)

    if state.dirty:
        path_text = escape(str(state.path))
        console.print(f"[yellow]Unsaved changes to {path_text} were discarded.[/yellow]")


def _print_checklist(state: AppState, title: str) -> None:
    """Render the checklist once as a table."""
    done, total = state.summary()
    table = Table(title=escape(f"{title}: {state.path.name}"), show_header=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("", width=3)
    table.add_column("Task", style="white")

    for index, task in enumerate(state.tasks, start=1):
        icon = "[green]✓[/green]" if task.completed else "[dim]○[/dim]"
        content = escape(task.content)
        if task.completed:
            content = f"[dim]{content}[/dim]"
        table.add_row(str(index), icon, content)

    console.print(table)
    console.print(f"\n[cyan]{done}/{total}[/cyan] done")


if __name__ == "__main__":
    main()

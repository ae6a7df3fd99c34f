"""maid CLI - clean up and restructure AI-generated files.

Usage:
    maid clean [--path DIR] [--recursive] [--restructure] [--dry-run] [--verbose]
    maid keep [--path DIR] [--recursive] [--verbose] [--yes] [--no-expiry]
    maid watch [--path DIR] [--interval SECONDS]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TimeRemainingColumn
from rich.table import Table

from .activity_log import ActivityLog
from .clean import CleanRunner
from .config import Settings, get_settings
from .exceptions import InvalidDirectoryError, MaidError
from .holding_area import NullExpiry, TerminalSelfDestruct
from .keep import KeepRunner
from .logging_config import configure_logging
from .version import __version__
from .watch import FileWatcher

logger = logging.getLogger(__name__)

console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_directory(path: Path) -> Path:
    """Raise InvalidDirectoryError unless ``path`` is an existing directory."""
    if not path.exists():
        raise InvalidDirectoryError(f"Directory does not exist: {path}")
    if not path.is_dir():
        raise InvalidDirectoryError(f"Not a directory: {path}")
    return path


def build_activity_log(cfg: Settings, base_dir: Path, dry_run: bool = False) -> ActivityLog:
    if dry_run or not cfg.activity_log_enabled:
        return ActivityLog.disabled()
    return ActivityLog(base_dir / cfg.activity_log_name)


path_option = click.option(
    "-p",
    "--path",
    "path",
    type=click.Path(path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to process",
)


@click.group(name="maid")
@click.version_option(__version__, prog_name="maid")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]):
    """Clean up and restructure AI-generated .md and .sh files."""
    cfg = get_settings()
    try:
        configure_logging(log_level=log_level or cfg.log_level, log_dir=cfg.log_dir)
    except ValueError as e:
        # MAID_LOG_LEVEL is not checked by the option type
        raise click.ClickException(str(e))
    ctx.obj = cfg


@cli.command(name="clean")
@path_option
@click.option("-r", "--recursive", is_flag=True, help="Recursively clean subdirectories")
@click.option("--restructure", is_flag=True, help="Move files into docs/ and scripts/ folders")
@click.option("-n", "--dry-run", is_flag=True, help="Show what would happen without changing anything")
@click.option("-v", "--verbose", is_flag=True, help="Print every decision")
@click.pass_obj
def clean_command(cfg: Settings, path: Path, recursive: bool, restructure: bool, dry_run: bool, verbose: bool):
    """Rename (and optionally relocate) AI-generated files."""
    try:
        base_dir = validate_directory(path)
    except MaidError as e:
        raise click.ClickException(str(e))

    console.print("[bold bright_cyan]Maid[/] is cleaning up your AI-generated files...")

    runner = CleanRunner(
        base_dir,
        recursive=recursive,
        restructure=restructure,
        dry_run=dry_run,
        activity_log=build_activity_log(cfg, base_dir, dry_run),
    )
    paths = runner.scan()
    suffix = " [bold red](DRY RUN)[/]" if dry_run else ""
    console.print(f"[bold cyan]Found[/] [bold yellow]{len(paths)}[/] files in [green]{base_dir}[/]{suffix}")

    if verbose:
        result = runner.run(paths)
        for decision in result.decisions:
            console.print(
                f"[bold cyan]Processing:[/] [yellow]{decision.original_path}[/] -> "
                f"[green]{decision.target_path}[/]"
            )
            console.print(f"  [cyan]Type:[/] [magenta]{decision.document_kind.value}[/]")
    else:
        with Progress(
            SpinnerColumn(),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("clean", total=len(paths))
            result = runner.run(paths, on_progress=lambda _path: progress.advance(task))

    tally = result.tally
    table = Table(title="Summary", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("Total files found", str(tally.found))
    table.add_row("[green]Files processed[/]", str(tally.processed))
    table.add_row("[yellow]Files skipped[/]", str(tally.skipped))
    table.add_row("[magenta]Markdown files[/]", str(tally.markdown))
    table.add_row("[magenta]Shell scripts[/]", str(tally.shell))
    console.print(table)
    console.print("\n[bold green]Cleaning complete![/]")


@cli.command(name="keep")
@path_option
@click.option("-r", "--recursive", is_flag=True, help="Recursively process subdirectories")
@click.option("-v", "--verbose", is_flag=True, help="Print every keep/discard decision")
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation")
@click.option("--no-expiry", is_flag=True, help="Do not open the self-destruct terminal")
@click.pass_obj
def keep_command(cfg: Settings, path: Path, recursive: bool, verbose: bool, yes: bool, no_expiry: bool):
    """Keep important files and move redundant ones to a holding area."""
    try:
        base_dir = validate_directory(path)
    except MaidError as e:
        raise click.ClickException(str(e))

    console.print("[bold bright_cyan]Maid[/] is keeping your important files safe...")

    expiry = TerminalSelfDestruct() if cfg.spawn_expiry_terminal and not no_expiry else NullExpiry()
    runner = KeepRunner(
        base_dir,
        trash_root=cfg.trash_root,
        recursive=recursive,
        expiry=expiry,
        activity_log=build_activity_log(cfg, base_dir),
        rubric_filename=cfg.rubric_filename,
        keyword_limit=cfg.top_keyword_count,
        min_keyword_length=cfg.min_keyword_length,
    )
    paths = runner.scan()
    console.print(f"[bold cyan]Found[/] [bold yellow]{len(paths)}[/] files in [green]{base_dir}[/]")
    if not paths:
        console.print("[bold yellow]Warning:[/] No files to process")
        return

    result = runner.evaluate(paths)

    if verbose:
        for kept in result.keep:
            console.print(f"[bold green]Keeping:[/] [green]{kept}[/] ({result.reasons[kept]})")
        for discarded in result.discard:
            console.print(
                f"[bold yellow]Discarding:[/] [yellow]{discarded}[/] ({result.reasons[discarded]})"
            )

    console.print("\n[bold cyan]Analysis Results[/]")
    console.print(f"  [green]Files to keep:[/] {len(result.keep)}")
    console.print(f"  [yellow]Files to move to trash:[/] {len(result.discard)}")

    if not yes and not click.confirm(
        f"\nThis will move {len(result.discard)} files to the trash bin. Continue?", default=False
    ):
        console.print("[bold blue]Info:[/] Operation cancelled")
        return

    try:
        outcome = runner.apply(result)
    except MaidError as e:
        raise click.ClickException(str(e))

    console.print("\n[bold cyan]Summary[/]")
    console.print(f"  [green]Files kept:[/] {len(result.keep)}")
    console.print(f"  [yellow]Files moved to trash:[/] {len(outcome.moved)}")
    if outcome.holding_area is not None:
        console.print(f"  [bright_black]Trash location: {outcome.holding_area}[/]")
        if isinstance(expiry, TerminalSelfDestruct):
            console.print(
                "  [bold blue]Note:[/] The trash bin will be automatically deleted "
                "when you close its terminal window"
            )
    if outcome.rubric_path is not None:
        console.print(f"  [bold green]Created:[/] [green]{outcome.rubric_path}[/]")
    console.print("\n[bold green]Operation complete![/]")


@cli.command(name="watch")
@path_option
@click.option("-i", "--interval", type=click.IntRange(min=1), default=None, help="Seconds between checks")
@click.option("--iterations", type=click.IntRange(min=1), default=None, hidden=True)
@click.pass_obj
def watch_command(cfg: Settings, path: Path, interval: Optional[int], iterations: Optional[int]):
    """Report changed .md and .sh files and suggest a clean command."""
    try:
        root = validate_directory(path)
    except MaidError as e:
        raise click.ClickException(str(e))

    interval = interval or cfg.watch_interval_seconds
    console.print(f"[bold cyan]Maid Watch[/] - Monitoring for changes in [green]{root}[/]")
    console.print(f"    Checking every {interval} seconds")
    console.print("    Press Ctrl+C to stop\n")

    def report(changed: Path, command: str) -> None:
        console.print(f"[bold]{changed}[/] changed")
        console.print(f"    Suggested action: [cyan]{command}[/]")

    watcher = FileWatcher(root)
    try:
        watcher.run(interval, iterations=iterations, on_change=report)
    except KeyboardInterrupt:
        console.print("\nStopped watching")


def main():
    cli()


if __name__ == "__main__":
    main()

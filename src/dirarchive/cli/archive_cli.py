"""
``archive-dirs``: archive each subdirectory of a directory into its own tar file.

Archives are uncompressed, named ``<directory>.tar`` and written to the output
directory (the source directory unless ``--output`` is given). Existing
archives are left untouched.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from dirarchive.archive import (
    ArchiveOutcome,
    ArchiveStatus,
    DirectoryArchiver,
    RunSummary,
    TarNotFoundError,
    TarRunner,
    ValidationError,
    list_archives,
    list_directories,
    prepare_output,
    validate_source,
)
from dirarchive.core.config import SettingsError, get_settings
from dirarchive.core.paths import expand_path, same_directory
from dirarchive.core.utils import pluralize_directories

logger = logging.getLogger(__name__)
console = Console(soft_wrap=True)

RULE = "=" * 40
THIN_RULE = "-" * 40

app = typer.Typer(
    help="Archive all directories in a specified directory into separate uncompressed tar files",
    add_completion=False,
)


class ConsoleReporter:
    """Prints per-directory progress lines."""

    def __init__(self, console: Console):
        self.console = console

    def entry_started(self, index: int, total: int, entry: Path):
        self.console.print(f"[{index}/{total}] Processing: {entry.name}", markup=False)

    def archive_creating(self, target: Path):
        self.console.print(f"  Creating: {escape(str(target))}")

    def entry_finished(self, outcome: ArchiveOutcome):
        name = escape(outcome.archive_name)
        if outcome.status == ArchiveStatus.SKIPPED:
            self.console.print(f"  [yellow]⚠️  Archive already exists in output directory: {name}[/yellow]")
            self.console.print("  Skipping...")
        elif outcome.status == ArchiveStatus.CREATED:
            if outcome.size_display is not None:
                self.console.print(f"  [green]✓ Created: {name} ({outcome.size_display})[/green]")
            else:
                self.console.print(f"  [green]✓ Created: {name}[/green]")
        else:
            self.console.print(f"  [red]✗ Failed to create archive for: {escape(outcome.name)}[/red]")
        self.console.print("")


def _fail(message: str):
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


def print_summary(summary: RunSummary, list_limit: int):
    """Print run counters and, if anything was created, the archives in the output directory."""
    console.print(RULE)
    console.print("[bold]Archiving Summary:[/bold]")
    console.print(RULE)
    console.print(f"Source directory: {escape(str(summary.source))}")
    console.print(f"Output directory: {escape(str(summary.output))}")
    console.print(f"Total directories found: {summary.total}")
    console.print(f"Successfully archived: {summary.success_count}")
    console.print(f"Failed: {summary.fail_count}")
    console.print(f"Skipped (already exists): {summary.skip_count}")
    console.print(THIN_RULE)

    if summary.success_count > 0:
        console.print("")
        console.print(f"Archives created in: {escape(str(summary.output))}")
        console.print("File format: directory_name.tar (uncompressed)")
        console.print("")
        console.print("Created archives:")
        try:
            tar_files = list_archives(summary.output)
        except OSError as e:
            logger.warning("Unable to list archives in %s: %s", summary.output, e)
            console.print("(Unable to list archives)")
        else:
            for file_name in tar_files[:list_limit]:
                console.print(escape(file_name))
            if len(tar_files) > list_limit:
                console.print(f"... and {len(tar_files) - list_limit} more")


@app.command()
def archive_dirs(
    directory: str = typer.Option(
        ..., "--directory", "-d", help="Source directory containing directories to archive"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output directory for tar files (default: same as source directory)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Create an uncompressed tar archive for every subdirectory of DIRECTORY.

    Hidden directories and plain files are ignored. An archive whose file
    already exists in the output directory is skipped, never overwritten.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = get_settings()
    except SettingsError as e:
        _fail(str(e))

    source_path = expand_path(directory)
    try:
        source = validate_source(source_path)
    except ValidationError as e:
        _fail(e.message)

    try:
        runner = TarRunner.locate(settings)
    except TarNotFoundError as e:
        _fail(str(e))

    if output is not None:
        output_path = expand_path(output)
        console.print(f"Output directory specified: {escape(output_path)}")
    else:
        output_path = source_path
        console.print(f"Output directory not specified. Using source directory: {escape(source_path)}")

    def announce_create(path: str):
        console.print(f"Output directory '{escape(path)}' does not exist. Creating it...")

    try:
        output_dir, created = prepare_output(output_path, on_create=announce_create)
    except ValidationError as e:
        _fail(e.message)
    if created:
        console.print(f"Created output directory: {escape(output_path)}")

    archiver = DirectoryArchiver(source, output_dir, runner, reporter=ConsoleReporter(console))
    if same_directory(str(source), str(output_dir)):
        console.print("Note: Output directory is same as source directory.")

    console.print(RULE)
    console.print("[bold]Archive Configuration:[/bold]")
    console.print(RULE)
    console.print(f"Source directory: {escape(str(source))}")
    console.print(f"Output directory: {escape(str(output_dir))}")
    console.print("")

    try:
        directories = list_directories(source)
    except ValidationError as e:
        _fail(e.message)

    if not directories:
        console.print("No directories found in source directory.")
        return

    total = len(directories)
    console.print(f"Found {total} {pluralize_directories(total)} to archive.")
    console.print("")

    summary = archiver.run(directories)
    print_summary(summary, settings.list_limit)

    console.print("")
    console.print("Done!")

"""
Per-directory archive driver.

Enumerates the immediate subdirectories of a source directory and archives
each one into ``<name>.tar`` in the output directory, one after another.
Existing archives are never overwritten, and a failure on one directory does
not stop the remaining ones.
"""

import stat
import logging
import platform
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from dirarchive.archive.schemas import ArchiveOutcome, ArchiveStatus, RunSummary
from dirarchive.archive.tar_runner import TarRunner
from dirarchive.archive.validation import ValidationError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".tar"


class ArchiveReporter(Protocol):
    """Receives progress notifications while a run is in progress."""

    def entry_started(self, index: int, total: int, entry: Path) -> None: ...

    def archive_creating(self, target: Path) -> None: ...

    def entry_finished(self, outcome: ArchiveOutcome) -> None: ...


def archive_name(entry: Path) -> str:
    return f"{entry.name}{ARCHIVE_SUFFIX}"


def is_hidden(entry: Path) -> bool:
    """
    Hidden entries start with a dot. On Windows the hidden file attribute
    also counts.
    """
    if entry.name.startswith("."):
        return True
    if platform.system() == "Windows":
        attributes = getattr(entry.stat(), "st_file_attributes", 0)
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return False


def list_directories(source: Path) -> List[Path]:
    """
    List the non-hidden immediate subdirectories of ``source``, sorted by name.

    Raises:
        ValidationError: If the directory cannot be listed
    """
    try:
        children = list(source.iterdir())
    except OSError as e:
        raise ValidationError(f"Failed to read source directory: {e.strerror or e}") from e

    directories = []
    for child in children:
        try:
            if not is_hidden(child) and child.is_dir():
                directories.append(child)
        except OSError:
            logger.debug("Skipping unreadable entry %s", child)
    return sorted(directories, key=lambda p: p.name)


def list_archives(output: Path) -> List[str]:
    """Return the sorted names of all ``.tar`` files in ``output``."""
    return sorted(
        child.name for child in output.iterdir()
        if child.suffix == ARCHIVE_SUFFIX and child.is_file()
    )


class DirectoryArchiver:
    """Archives subdirectories of ``source`` into ``output`` with an external tar."""

    def __init__(
        self,
        source: Path,
        output: Path,
        runner: TarRunner,
        reporter: Optional[ArchiveReporter] = None,
    ):
        self.source = source
        self.output = output
        self.runner = runner
        self.reporter = reporter

    def archive_entry(self, entry: Path) -> ArchiveOutcome:
        """Archive a single subdirectory, skipping it when its archive already exists."""
        target = self.output / archive_name(entry)

        if target.exists() or target.is_symlink():
            logger.info("Skipping %s, %s already exists", entry.name, target)
            return ArchiveOutcome(name=entry.name, archive_path=target, status=ArchiveStatus.SKIPPED)

        if self.reporter is not None:
            self.reporter.archive_creating(target)

        result = self.runner.create(target, self.source, entry.name)

        if result.ok:
            try:
                size = target.stat().st_size
            except OSError:
                size = None
            return ArchiveOutcome(
                name=entry.name,
                archive_path=target,
                status=ArchiveStatus.CREATED,
                size_bytes=size,
            )

        logger.warning(
            "tar exited with code %s for %s: %s", result.returncode, entry.name, result.stderr
        )
        self._remove_partial(target)
        return ArchiveOutcome(
            name=entry.name,
            archive_path=target,
            status=ArchiveStatus.FAILED,
            error=result.stderr or f"tar exited with code {result.returncode}",
        )

    def _remove_partial(self, target: Path):
        try:
            target.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove partial archive %s: %s", target, e)

    def run(self, entries: Iterable[Path]) -> RunSummary:
        """Archive ``entries`` sequentially and collect the outcomes."""
        entries = list(entries)
        summary = RunSummary(source=self.source, output=self.output, total=len(entries))

        for index, entry in enumerate(entries, start=1):
            if self.reporter is not None:
                self.reporter.entry_started(index, summary.total, entry)

            outcome = self.archive_entry(entry)
            summary.outcomes.append(outcome)

            if self.reporter is not None:
                self.reporter.entry_finished(outcome)

        logger.info(
            "Run finished: %d created, %d failed, %d skipped",
            summary.success_count, summary.fail_count, summary.skip_count,
        )
        return summary

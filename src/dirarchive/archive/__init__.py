"""
Archiving components: validation, tar invocation and the per-directory driver.
"""

from dirarchive.archive.archiver import DirectoryArchiver, list_directories, list_archives
from dirarchive.archive.schemas import ArchiveOutcome, ArchiveStatus, RunSummary
from dirarchive.archive.tar_runner import TarRunner, TarNotFoundError
from dirarchive.archive.validation import ValidationError, validate_source, prepare_output

__all__ = [
    "DirectoryArchiver",
    "list_directories",
    "list_archives",
    "ArchiveOutcome",
    "ArchiveStatus",
    "RunSummary",
    "TarRunner",
    "TarNotFoundError",
    "ValidationError",
    "validate_source",
    "prepare_output",
]

"""
Schemas describing the result of archiving a directory and of a whole run.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from dirarchive.core import paths
from dirarchive.core.utils import format_file_size


class ArchiveStatus(str, Enum):
    """Outcome of a single directory's archive step."""
    CREATED = "created"
    SKIPPED = "skipped"   # Archive file already present in the output directory
    FAILED = "failed"


class ArchiveOutcome(BaseModel):
    """Result of archiving one subdirectory."""
    name: str
    archive_path: Path
    status: ArchiveStatus
    size_bytes: Optional[int] = None
    error: Optional[str] = None

    @property
    def archive_name(self) -> str:
        return self.archive_path.name

    @property
    def size_display(self) -> Optional[str]:
        if self.size_bytes is None:
            return None
        return format_file_size(self.size_bytes)


class RunSummary(BaseModel):
    """Counters and per-entry outcomes for one run."""
    source: Path
    output: Path
    total: int = 0
    outcomes: List[ArchiveOutcome] = Field(default_factory=list)

    def _count(self, status: ArchiveStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def success_count(self) -> int:
        return self._count(ArchiveStatus.CREATED)

    @property
    def fail_count(self) -> int:
        return self._count(ArchiveStatus.FAILED)

    @property
    def skip_count(self) -> int:
        return self._count(ArchiveStatus.SKIPPED)

    @property
    def same_directory(self) -> bool:
        return paths.same_directory(str(self.source), str(self.output))

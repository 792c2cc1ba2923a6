"""
Locating and invoking the external ``tar`` executable.

Archives are never written by Python itself; each one is produced by a
synchronous ``tar -cf <output> -C <source> -- <name>`` call.
"""

import os
import shutil
import logging
import platform
import subprocess
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from dirarchive.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

TAR_NOT_FOUND_MESSAGE = "tar command not found. Please ensure tar is installed and in your PATH."


class TarNotFoundError(Exception):
    """Raised when no tar-compatible executable can be located."""


class CommandResult(NamedTuple):
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_tar(settings: Optional[Settings] = None) -> Optional[str]:
    """
    Find the tar executable to use.

    An explicit ``tar_path`` setting wins. Otherwise Windows uses the fixed
    system location and every other platform searches PATH.
    """
    settings = settings or get_settings()

    if settings.tar_path:
        if _is_executable(settings.tar_path):
            return settings.tar_path
        resolved = shutil.which(settings.tar_path)
        if resolved is None:
            logger.warning("Configured tar path %s is not executable", settings.tar_path)
        return resolved

    if platform.system() == "Windows":
        if os.path.isfile(settings.windows_tar_path):
            return settings.windows_tar_path
        return None

    return shutil.which("tar")


class TarRunner:
    """Runs the tar executable to create one uncompressed archive at a time."""

    def __init__(self, executable: str):
        self.executable = executable

    @classmethod
    def locate(cls, settings: Optional[Settings] = None) -> "TarRunner":
        """
        Build a runner for the available tar executable.

        Raises:
            TarNotFoundError: If tar cannot be found
        """
        executable = find_tar(settings)
        if executable is None:
            raise TarNotFoundError(TAR_NOT_FOUND_MESSAGE)
        logger.debug("Using tar executable %s", executable)
        return cls(executable)

    def build_command(
        self,
        output_file: Union[str, Path],
        source_dir: Union[str, Path],
        entry_name: str,
    ) -> List[str]:
        # "--" keeps names starting with a dash from being parsed as options
        return [self.executable, "-cf", str(output_file), "-C", str(source_dir), "--", entry_name]

    def create(
        self,
        output_file: Union[str, Path],
        source_dir: Union[str, Path],
        entry_name: str,
    ) -> CommandResult:
        """
        Create ``output_file`` containing ``entry_name`` relative to ``source_dir``.

        Blocks until tar exits. Standard output is discarded and standard error
        is captured for diagnostics. A process that cannot be launched is
        reported as return code -1.
        """
        command = self.build_command(output_file, source_dir, entry_name)
        logger.debug("Running: %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            logger.error("Could not launch %s: %s", self.executable, e)
            return CommandResult(returncode=-1, stderr=str(e))

        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        return CommandResult(returncode=completed.returncode, stderr=stderr)

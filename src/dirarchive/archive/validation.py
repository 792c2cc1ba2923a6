"""
Validation of the source and output directories before any archiving starts.

Every check raises ``ValidationError`` with a message naming the offending
path; callers treat it as fatal for the whole run.
"""

import os
import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a path cannot be used for archiving."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_source(path: str) -> Path:
    """
    Check that the source directory exists, is a directory and is readable.

    Args:
        path: Absolute path of the source directory

    Returns:
        The source as a Path

    Raises:
        ValidationError: On the first failing check
    """
    source = Path(path)

    if not source.exists():
        raise ValidationError(f"Source directory '{path}' does not exist or is not accessible.")

    if not source.is_dir():
        raise ValidationError(f"Source path '{path}' is not a directory.")

    # Listing a directory needs both read and execute permission
    if not os.access(source, os.R_OK | os.X_OK):
        raise ValidationError(f"Cannot read source directory '{path}'. Permission denied.")

    logger.debug("Source directory validated: %s", source)
    return source


def prepare_output(
    path: str,
    on_create: Optional[Callable[[str], None]] = None,
) -> Tuple[Path, bool]:
    """
    Make sure the output directory exists and is writable.

    A missing directory is created together with its parents. ``on_create`` is
    called with the path just before creation so the caller can report it.

    Args:
        path: Absolute path of the output directory
        on_create: Optional callback invoked before the directory is created

    Returns:
        Tuple of the output Path and whether it was created by this call

    Raises:
        ValidationError: If creation fails, the path is not a directory, or it is not writable
    """
    output = Path(path)
    created = False

    if not output.exists():
        if on_create is not None:
            on_create(path)
        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValidationError(f"Failed to create output directory '{path}': {e.strerror or e}") from e
        created = True
        logger.info("Created output directory %s", output)
    elif not output.is_dir():
        raise ValidationError(f"Output path '{path}' is not a directory.")

    if not os.access(output, os.W_OK | os.X_OK):
        raise ValidationError(f"Cannot write to output directory '{path}'. Permission denied.")

    return output, created

"""
Console entry point for ``archive-dirs``.
"""

import sys
import logging
from typing import Optional

from rich.markup import escape

from dirarchive.cli.archive_cli import app, console
from dirarchive.core.config import SettingsError, get_settings


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(levelname)s %(name)s - %(message)s"
    )


def main():
    try:
        configure_logging()
    except SettingsError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    app()


if __name__ == "__main__":
    main()

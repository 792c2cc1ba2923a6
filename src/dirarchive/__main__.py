"""Allow running the CLI with ``python -m dirarchive``."""

from dirarchive.cli.main_cli import main

if __name__ == "__main__":
    main()

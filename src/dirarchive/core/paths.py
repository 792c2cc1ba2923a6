"""
Path expansion helpers.
"""

import os
import platform


def expand_path(path: str) -> str:
    """
    Expand a user-supplied path into a normalized absolute path.

    On Windows a leading ``~`` is replaced with ``%USERPROFILE%``; elsewhere the
    usual ``~`` / ``~user`` expansion applies. No existence check is done.
    """
    if platform.system() == "Windows":
        if path.startswith("~"):
            home = os.environ.get("USERPROFILE", "")
            path = home + path[1:]
    else:
        path = os.path.expanduser(path)
    return os.path.normpath(os.path.abspath(path))


def same_directory(first: str, second: str) -> bool:
    """Return True when both paths point at the same directory."""
    return os.path.normcase(os.path.realpath(first)) == os.path.normcase(os.path.realpath(second))

"""
dirarchive - archive every subdirectory of a directory into its own tar file.
"""

__version__ = "0.1.0"

"""
Command-line interface for dirarchive.
"""

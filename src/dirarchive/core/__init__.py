"""
Core helpers shared across dirarchive: configuration, path handling, formatting.
"""

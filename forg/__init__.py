"""Organize by type or date, bulk-rename, deduplicate and search files in directory trees."""

__version__ = "0.1.0"
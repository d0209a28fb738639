"""A desktop contact list with case-insensitive search, favorites and plain-text storage."""

__version__ = "1.0.0"
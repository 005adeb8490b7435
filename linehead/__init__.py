"""Print the first K lines of a file, optionally only the even or odd ones."""

__version__ = "1.0.0"

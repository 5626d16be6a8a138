"""Last-release lookup from git tag history."""

__version__ = "0.1.0"

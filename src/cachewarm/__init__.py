"""cachewarm - warm the filesystem cache by reading every file under a directory."""

__version__ = "0.1.0"

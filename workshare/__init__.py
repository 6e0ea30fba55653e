"""Teaching programs that split work across threads and processes."""

__version__ = "0.1.0"
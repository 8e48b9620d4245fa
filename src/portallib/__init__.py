"""Portal library viewer: browse shared virtual worlds by category."""

__version__ = "0.1.0"

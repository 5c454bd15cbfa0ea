"""Building blocks of a small shell: string helpers, character classes, line reading, formatted output and wildcard expansion."""

__version__ = "0.1.0"
__all__ = ["charclass", "lines", "output", "textutil", "wildcards"]
"""Classic algorithms and data structures: searching, graphs, lists, hashing, scheduling and puzzles."""

__version__ = "0.1.0"
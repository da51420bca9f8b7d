"""Worked programming exercises: algorithms, parsers, data structures, concurrency and networking."""

__version__ = "0.1.0"
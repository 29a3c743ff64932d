"""Sequence algorithms, containers, config reading and file-backed containers for a search engine."""

__version__ = "1.0.0"
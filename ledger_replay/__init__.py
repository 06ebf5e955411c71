"""Replay transaction streams against client accounts."""

__version__ = "0.1.0"

"""Lossily format durations as phrases like '3 days ago', in many languages."""

__version__ = "0.5.0"
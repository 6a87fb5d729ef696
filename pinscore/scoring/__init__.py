"""Scoring engines."""

from . import bowling
from .bowling import Frame, ScoringEngine

__all__ = [
    "bowling",
    "Frame",
    "ScoringEngine",
]

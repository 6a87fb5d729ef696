"""Ten-pin bowling scoring."""

from .exceptions import GameComplete, InvalidEvent, InvalidPins, ScoringError
from .scoring import Frame, ScoringEngine

__all__ = [
    "Frame",
    "GameComplete",
    "InvalidEvent",
    "InvalidPins",
    "ScoringEngine",
    "ScoringError",
]

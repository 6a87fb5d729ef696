from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 style description of a scoring error."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    code: str


class ScoringError(Exception):
    """Base class for errors raised by the scoring engine."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self) -> ProblemDetail:
        return ProblemDetail(
            type=self.type, title=self.title, detail=self.detail, code=self.code
        )


class InvalidPins(ScoringError, ValueError):
    def __init__(self, pins: object, detail: str | None = None) -> None:
        self.pins = pins
        super().__init__(
            title="Invalid pin count",
            detail=detail or f"pins must be between 0 and 10 (got {pins!r})",
            code="invalid_pins",
        )


class GameComplete(ScoringError, IndexError):
    def __init__(self) -> None:
        super().__init__(
            title="Game complete",
            detail="no rolls left in final frame",
            code="game_complete",
        )


class InvalidEvent(ScoringError, ValueError):
    def __init__(self, event_type: object) -> None:
        self.event_type = event_type
        super().__init__(
            title="Invalid event",
            detail=f"invalid bowling event {event_type!r}",
            code="invalid_event",
        )

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FrameOut(BaseModel):
    index: int = Field(..., ge=0, le=9)
    rolls: List[int] = Field(default_factory=list)
    is_strike: bool = False
    is_spare: bool = False
    score: int = 0
    running_total: int = 0

    model_config = ConfigDict(frozen=True)


class GameSummary(BaseModel):
    frames: List[FrameOut]
    total: int
    complete: bool
    current_frame: int = Field(..., ge=0, le=9)

    model_config = ConfigDict(frozen=True)

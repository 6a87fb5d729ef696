"""Ten-pin bowling scoring engine."""
from dataclasses import dataclass, replace
from itertools import accumulate
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import get_settings
from ..exceptions import GameComplete, InvalidEvent, InvalidPins
from ..schemas import FrameOut, GameSummary
from ..services.validation import MAX_PINS, validate_pins

logger = logging.getLogger(__name__)

FRAME_COUNT = 10
LAST_FRAME = FRAME_COUNT - 1


@dataclass
class Frame:
    roll_one: int = 0
    roll_two: int = 0
    bonus_roll: Optional[int] = None
    rolls_recorded: int = 0

    @property
    def is_strike(self) -> bool:
        return self.rolls_recorded >= 1 and self.roll_one == MAX_PINS

    @property
    def is_spare(self) -> bool:
        return (
            not self.is_strike
            and self.rolls_recorded >= 2
            and self.roll_one + self.roll_two == MAX_PINS
        )

    @property
    def rolls(self) -> List[int]:
        return [self.roll_one, self.roll_two, self.bonus_roll][: self.rolls_recorded]


def _check_frame(index: int, frame: Frame) -> None:
    max_rolls = 3 if index == LAST_FRAME else 2
    if not 0 <= frame.rolls_recorded <= max_rolls:
        raise ValueError(f"frame {index + 1}: rolls_recorded must be 0..{max_rolls}")
    for name in ("roll_one", "roll_two", "bonus_roll"):
        value = getattr(frame, name)
        if value is None and name == "bonus_roll":
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"frame {index + 1}: {name} must be an integer")
        if not 0 <= value <= MAX_PINS:
            raise ValueError(f"frame {index + 1}: {name} must be between 0 and {MAX_PINS}")


class ScoringEngine:
    """Score a single game from a stream of per-roll pin counts.

    Rolls go to the current frame. Frames 0-8 close on a strike, a spare
    or their second roll, moving the cursor on. The last frame never moves
    the cursor; a strike or spare there earns one bonus roll (unless
    ``tenth_frame_bonus`` is off), after which the game is complete.

    The engine does not cap the two rolls of a frame at ten pins in total;
    each roll is only checked against the ``0..10`` range.

    Not thread-safe: one engine belongs to one caller.
    """

    def __init__(self, *, tenth_frame_bonus: Optional[bool] = None) -> None:
        if tenth_frame_bonus is None:
            tenth_frame_bonus = get_settings().tenth_frame_bonus
        self._tenth_frame_bonus = bool(tenth_frame_bonus)
        self._frames: List[Frame] = [Frame() for _ in range(FRAME_COUNT)]
        self._current = 0

    @classmethod
    def from_frames(
        cls,
        frames: Sequence[Frame],
        *,
        current_frame: int = 0,
        tenth_frame_bonus: Optional[bool] = None,
    ) -> "ScoringEngine":
        """Start from a prepared position.

        ``frames`` must hold exactly ten frames; they are copied, so the
        caller's objects are never mutated by later rolls.
        """

        if len(frames) != FRAME_COUNT:
            raise ValueError(f"expected {FRAME_COUNT} frames, got {len(frames)}")
        if not 0 <= current_frame <= LAST_FRAME:
            raise ValueError("current_frame out of range")
        for index, frame in enumerate(frames):
            _check_frame(index, frame)
        engine = cls(tenth_frame_bonus=tenth_frame_bonus)
        engine._frames = [replace(f) for f in frames]
        engine._current = current_frame
        return engine

    @classmethod
    def from_rolls(
        cls, rolls: Iterable[int], *, tenth_frame_bonus: Optional[bool] = None
    ) -> "ScoringEngine":
        engine = cls(tenth_frame_bonus=tenth_frame_bonus)
        for pins in rolls:
            engine.record_roll(pins)
        return engine

    @property
    def tenth_frame_bonus(self) -> bool:
        return self._tenth_frame_bonus

    @property
    def current_frame(self) -> int:
        return self._current

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(replace(f) for f in self._frames)

    @property
    def rolls(self) -> List[int]:
        return [pins for frame in self._frames for pins in frame.rolls]

    @property
    def is_complete(self) -> bool:
        if self._current != LAST_FRAME:
            return False
        last = self._frames[LAST_FRAME]
        return last.rolls_recorded >= self._entitled_rolls(last)

    def _entitled_rolls(self, frame: Frame) -> int:
        if frame.is_strike:
            return 3 if self._tenth_frame_bonus else 1
        if frame.is_spare:
            return 3 if self._tenth_frame_bonus else 2
        return 2

    def record_roll(self, pins: int) -> None:
        try:
            value = validate_pins(pins)
        except InvalidPins:
            logger.warning("Rejected roll %r in frame %d", pins, self._current + 1)
            raise
        if self.is_complete:
            logger.warning("Rejected roll %d: game is complete", value)
            raise GameComplete()

        frame = self._frames[self._current]
        if frame.rolls_recorded == 0:
            frame.roll_one = value
            frame.rolls_recorded = 1
            if frame.is_strike:
                self._close_frame("strike")
        elif frame.rolls_recorded == 1:
            frame.roll_two = value
            frame.rolls_recorded = 2
            if frame.is_strike:
                # last frame only: first of the two rolls after the strike
                logger.debug("Frame %d: bonus roll %d", self._current + 1, value)
            else:
                self._close_frame("spare" if frame.is_spare else "open")
        else:
            frame.bonus_roll = value
            frame.rolls_recorded = 3
            logger.debug("Frame %d: bonus roll %d", self._current + 1, value)

        if self.is_complete:
            logger.debug("Game complete with score %d", self.get_score())

    def _close_frame(self, kind: str) -> None:
        logger.debug("Frame %d closed (%s)", self._current + 1, kind)
        if self._current < LAST_FRAME:
            self._current += 1

    def _strike_bonus(self, index: int) -> int:
        nxt = self._frames[index + 1]
        if not nxt.is_strike:
            return nxt.roll_one + nxt.roll_two
        if index + 1 == LAST_FRAME:
            return MAX_PINS + nxt.roll_two
        return MAX_PINS + self._frames[index + 2].roll_one

    def _frame_score(self, index: int) -> int:
        frame = self._frames[index]
        if index == LAST_FRAME:
            bonus = frame.bonus_roll or 0
            if frame.is_strike:
                return MAX_PINS + frame.roll_two + bonus
            if frame.is_spare:
                return MAX_PINS + bonus
            return frame.roll_one + frame.roll_two
        if frame.is_strike:
            return MAX_PINS + self._strike_bonus(index)
        if frame.is_spare:
            return MAX_PINS + self._frames[index + 1].roll_one
        return frame.roll_one + frame.roll_two

    def frame_scores(self) -> List[int]:
        """Per-frame contributions; rolls not yet made count as zero."""
        return [self._frame_score(i) for i in range(FRAME_COUNT)]

    def running_totals(self) -> List[int]:
        return list(accumulate(self.frame_scores()))

    def get_score(self) -> int:
        return sum(self.frame_scores())

    def snapshot(self) -> GameSummary:
        scores = self.frame_scores()
        totals = list(accumulate(scores))
        frames = [
            FrameOut(
                index=i,
                rolls=frame.rolls,
                is_strike=frame.is_strike,
                is_spare=frame.is_spare,
                score=scores[i],
                running_total=totals[i],
            )
            for i, frame in enumerate(self._frames)
        ]
        return GameSummary(
            frames=frames,
            total=totals[-1],
            complete=self.is_complete,
            current_frame=self._current,
        )


def init_state(config: Dict) -> Dict:
    bonus = config.get("tenthFrameBonus")
    if bonus is None:
        bonus = get_settings().tenth_frame_bonus
    return {
        "config": config,
        "engine": ScoringEngine(tenth_frame_bonus=bool(bonus)),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise InvalidEvent(event.get("type"))
    state["engine"].record_roll(event.get("pins", 0))
    return state


def summary(state: Dict) -> Dict:
    engine: ScoringEngine = state["engine"]
    return {
        "frames": [frame.rolls for frame in engine.frames],
        "scores": engine.frame_scores(),
        "total": engine.get_score(),
        "complete": engine.is_complete,
    }

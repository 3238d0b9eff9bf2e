"""
Core data types for the darts counter.
Defines contracts between the engine and its presentation collaborators.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import uuid


@dataclass(frozen=True)
class DartHit:
    """
    Presentation descriptor for a single thrown dart.

    Reconstructed from a raw point value, so segment/multiplier are a
    plausible guess rather than a measured board position.
    """
    score: int  # Total points (segment * multiplier, or 25/50 for bulls)
    segment: int  # 0 = miss, 1-20, 25 = outer bull, 50 = bullseye
    multiplier: int  # 0 = miss, 1 = single, 2 = double, 3 = triple
    hit_id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)

    @property
    def display(self) -> str:
        """Short label for scoreboards ("T20", "D16", "BULLSEYE!", ...)."""
        if self.segment == 50:
            return "BULLSEYE!"
        if self.segment == 25:
            return "25"
        if self.multiplier == 0:
            return "MISS"
        if self.multiplier == 2:
            return f"D{self.segment}"
        if self.multiplier == 3:
            return f"T{self.segment}"
        return str(self.segment)


class EventType(Enum):
    """Match events published to listeners (announcers, views)."""
    REMAINING_SCORE = "remaining_score"  # Visit starts inside checkout range
    VISIT_TOTAL = "visit_total"  # Visit closed with a score
    BUST = "bust"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MatchEvent:
    """
    Notification emitted by the match engine.
    """
    type: EventType
    participant_name: str
    value: Optional[int] = None  # Remaining score or visit total

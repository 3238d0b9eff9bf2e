"""
Participant data structure and statistics.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import uuid

MIN_COMPUTER_LEVEL = 1
MAX_COMPUTER_LEVEL = 12


class ParticipantKind(Enum):
    """Who supplies the darts for a participant."""
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class ParticipantType:
    """
    Human, or Computer with a difficulty level.

    Build with ParticipantType.human() / ParticipantType.computer(level).
    """
    kind: ParticipantKind = ParticipantKind.HUMAN
    level: Optional[int] = None  # Only set for computers (1-12)

    def __post_init__(self):
        if self.kind is ParticipantKind.COMPUTER:
            if self.level is None or not MIN_COMPUTER_LEVEL <= self.level <= MAX_COMPUTER_LEVEL:
                raise ValueError(
                    f"Computer level must be {MIN_COMPUTER_LEVEL}-{MAX_COMPUTER_LEVEL}, got {self.level!r}"
                )
        elif self.level is not None:
            raise ValueError("Human participants have no level")

    @classmethod
    def human(cls) -> "ParticipantType":
        return cls(ParticipantKind.HUMAN)

    @classmethod
    def computer(cls, level: int) -> "ParticipantType":
        return cls(ParticipantKind.COMPUTER, level)

    @property
    def is_computer(self) -> bool:
        return self.kind is ParticipantKind.COMPUTER


@dataclass
class Participant:
    """Represents a player (human or computer) in a match."""
    name: str
    type: ParticipantType = field(default_factory=ParticipantType.human)
    starting_score: int = 501
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    # Current state
    score: int = field(init=False)
    darts_thrown: int = 0

    # Visit history; an empty visit records a bust
    visits: List[List[int]] = field(default_factory=list)
    has_won: bool = False

    def __post_init__(self):
        """Initialize current score."""
        self.score = self.starting_score

    def reset(self, starting_score: Optional[int] = None) -> None:
        """
        Reset to the start of a leg, keeping identity.

        Args:
            starting_score: New starting score (default: keep current one)
        """
        if starting_score is not None:
            self.starting_score = starting_score
        self.score = self.starting_score
        self.darts_thrown = 0
        self.visits.clear()
        self.has_won = False

    @property
    def is_computer(self) -> bool:
        return self.type.is_computer

    @property
    def total_scored(self) -> int:
        """Points scored across all recorded visits (busts score 0)."""
        return sum(sum(visit) for visit in self.visits)

    @property
    def average(self) -> float:
        """Average score per visit."""
        if not self.visits:
            return 0.0
        return self.total_scored / len(self.visits)

    @property
    def highest_visit(self) -> int:
        """Best single visit total."""
        return max((sum(visit) for visit in self.visits), default=0)

    @property
    def average_per_dart(self) -> float:
        """Calculate average score per dart."""
        if self.darts_thrown == 0:
            return 0.0
        return self.total_scored / self.darts_thrown

    @property
    def bust_count(self) -> int:
        return sum(1 for visit in self.visits if not visit)

    def get_stats(self) -> dict:
        """Get participant statistics."""
        return {
            "name": self.name,
            "score": self.score,
            "darts_thrown": self.darts_thrown,
            "visits": len(self.visits),
            "average": self.average,
            "average_per_dart": self.average_per_dart,
            "highest_visit": self.highest_visit,
            "busts": self.bust_count,
            "has_won": self.has_won,
        }

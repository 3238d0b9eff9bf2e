"""
Game modes (301, 501) and the countdown throw rule.
"""
from enum import Enum
from typing import Union


class GameMode(Enum):
    """Countdown game mode; the value is the display name."""
    THREE_OH_ONE = "301"
    FIVE_OH_ONE = "501"

    @property
    def starting_score(self) -> int:
        """Score each participant starts from."""
        return int(self.value)

    @classmethod
    def from_value(cls, value: Union[str, int, "GameMode"]) -> "GameMode":
        """
        Parse a mode from config ("301", 501, GameMode.FIVE_OH_ONE, ...).

        Raises:
            ValueError: If the mode is not supported
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise ValueError(f"Unsupported game mode: {value!r}") from None


class ThrowOutcome(Enum):
    """Result of subtracting points from a remaining score."""
    CONTINUE = "continue"
    BUST = "bust"
    WIN = "win"


def evaluate_throw(remaining: int, points: int) -> ThrowOutcome:
    """
    Apply the countdown rule to one dart or one visit total.

    Rules:
    - Bust if the score would go below 0, or land on 1 (unfinishable)
    - Win on exactly 0
    - Double-out is not checked: only point values are known here

    Args:
        remaining: Score before the throw
        points: Points thrown

    Returns:
        ThrowOutcome for the resulting score
    """
    new_score = remaining - points

    if new_score < 0 or new_score == 1:
        return ThrowOutcome.BUST

    if new_score == 0:
        return ThrowOutcome.WIN

    return ThrowOutcome.CONTINUE

"""
Computer opponent: generates realistic visits for a difficulty level.

Level 1 averages 10 points per visit, level 12 averages 120. Higher
levels are more consistent and more likely to hit a finishing double.
"""
from typing import List, Optional
import logging

import numpy as np

from .game_modes import ThrowOutcome, evaluate_throw
from .player import MAX_COMPUTER_LEVEL, MIN_COMPUTER_LEVEL

logger = logging.getLogger(__name__)

DARTS_PER_VISIT = 3

# Segments aimed at for scoring triples
HIGH_TRIPLE_SEGMENTS = (20, 19, 18, 17, 16, 15)
MID_TRIPLE_SEGMENTS = (20, 19, 18, 17, 16, 15, 14, 13, 12, 11, 10)


def single_dart_checkout(score: int) -> Optional[int]:
    """
    Get the dart value that finishes score in one throw.

    Returns:
        score itself for a double (2-40, even) or the bullseye (50), else None
    """
    if 2 <= score <= 40 and score % 2 == 0:
        return score
    if score == 50:
        return 50
    return None


class BotDifficulty:
    """
    Score generator for a computer participant.

    Usage:
        bot = BotDifficulty(level=8)
        darts = bot.generate_visit(remaining=141)  # e.g. [57, 20, 60]
    """

    def __init__(self, level: int, rng: Optional[np.random.Generator] = None):
        """
        Initialize generator.

        Args:
            level: Difficulty 1-12
            rng: Random generator (default: fresh default_rng())
        """
        if not MIN_COMPUTER_LEVEL <= level <= MAX_COMPUTER_LEVEL:
            raise ValueError(f"Computer level must be {MIN_COMPUTER_LEVEL}-{MAX_COMPUTER_LEVEL}, got {level}")

        self.level = level
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def average_per_visit(self) -> float:
        return float(self.level * 10)

    @property
    def standard_deviation(self) -> float:
        # Higher levels are more consistent
        return max(5.0, 30.0 - self.level * 2)

    @property
    def checkout_probability(self) -> float:
        """Chance of hitting a one-dart finish when one is on (5%-60%)."""
        return self.level * 0.05

    def generate_visit(self, remaining: int) -> List[int]:
        """
        Generate the darts of one visit.

        Stops early on a finish, or once the remainder can no longer be
        finished (<= 1).

        Args:
            remaining: Score at the start of the visit

        Returns:
            1-3 legal dart values
        """
        darts = []

        for _ in range(DARTS_PER_VISIT):
            dart = self._generate_single_dart(remaining)
            darts.append(dart)
            remaining -= dart

            if remaining <= 1:
                break

        logger.debug(f"Level {self.level} visit: {darts} (left {remaining})")
        return darts

    def _generate_single_dart(self, remaining: int) -> int:
        """Pick one dart value for the current remainder."""
        checkout = single_dart_checkout(remaining)
        if checkout is not None and self.rng.random() < self.checkout_probability:
            return checkout

        target = self.rng.normal(self.average_per_visit / 3.0, self.standard_deviation / 3.0)
        clamped = float(np.clip(target, 0.0, 60.0))

        dart = self._valid_dart_value(clamped)

        if evaluate_throw(remaining, dart) is ThrowOutcome.BUST:
            # Aim lower so at least 2 is left
            safe_target = float(max(0, remaining - 2))
            dart = self._valid_dart_value(min(safe_target, clamped))

            if evaluate_throw(remaining, dart) is ThrowOutcome.BUST:
                dart = min(20, max(0, remaining - 2))

        return dart

    def _valid_dart_value(self, target: float) -> int:
        """
        Map a continuous target to a dart value that can actually be scored.

        High targets aim for treble segments, medium ones mix trebles with
        high singles, low ones are mostly singles with the odd double.
        """
        if target <= 0:
            return 0

        if target <= 5:
            return max(1, int(target))

        target_int = int(target + 0.5)

        if target_int >= 45:
            return int(self.rng.choice(HIGH_TRIPLE_SEGMENTS)) * 3

        if target_int >= 25:
            if self.rng.random() < 0.6:
                return int(self.rng.choice(MID_TRIPLE_SEGMENTS)) * 3
            return int(self.rng.integers(15, 21))

        if self.rng.random() < 0.15 and target_int % 2 == 0:
            return target_int  # Double of target_int // 2

        return min(target_int, 20)

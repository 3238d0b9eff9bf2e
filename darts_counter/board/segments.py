"""
Dart value domain and reconstruction of board segments from point values.
"""
from typing import FrozenSet, List, Optional, Tuple
import logging

import numpy as np

from darts_counter.core import DartHit

logger = logging.getLogger(__name__)

SINGLE_VALUES = frozenset(range(1, 21))
DOUBLE_VALUES = frozenset(2 * s for s in range(1, 21))
TRIPLE_VALUES = frozenset(3 * s for s in range(1, 21))
BULL_VALUES = frozenset({25, 50})

# Every point value a single dart can score (0 = miss)
LEGAL_DART_VALUES: FrozenSet[int] = frozenset({0}) | SINGLE_VALUES | DOUBLE_VALUES | TRIPLE_VALUES | BULL_VALUES

# Weight of a single/double decomposition during general play
SINGLE_WEIGHT = 0.5
DOUBLE_WEIGHT = 0.15


def is_legal_dart_value(value: int) -> bool:
    """Check if a single dart can score exactly this many points."""
    return value in LEGAL_DART_VALUES


def _triple_weight(segment: int) -> float:
    """Triples are aimed at the top segments far more often."""
    if segment == 20:
        return 0.5
    if segment >= 19:
        return 0.3
    if segment >= 15:
        return 0.2
    return 0.1


def candidate_hits(value: int) -> List[Tuple[int, int, float]]:
    """
    List every (segment, multiplier, weight) that scores value.

    Bulls and misses are not included; see classify_dart_value.
    """
    options = []

    if value % 3 == 0 and 1 <= value // 3 <= 20:
        segment = value // 3
        options.append((segment, 3, _triple_weight(segment)))

    if value % 2 == 0 and 1 <= value // 2 <= 20:
        options.append((value // 2, 2, DOUBLE_WEIGHT))

    if 1 <= value <= 20:
        options.append((value, 1, SINGLE_WEIGHT))

    return options


def classify_dart_value(value: int, rng: Optional[np.random.Generator] = None) -> DartHit:
    """
    Convert a raw dart value to a plausible board hit.

    A value alone is ambiguous (6 is S6, D3 or T2), so the decomposition is
    drawn at random, weighted towards what players actually hit.

    Args:
        value: Points scored by the dart
        rng: Random generator (default: fresh default_rng())

    Returns:
        DartHit with segment and multiplier filled in
    """
    if value == 50:
        return DartHit(score=50, segment=50, multiplier=1)
    if value == 25:
        return DartHit(score=25, segment=25, multiplier=1)
    if value == 0:
        return DartHit(score=0, segment=0, multiplier=0)

    options = candidate_hits(value)

    if not options:
        logger.debug(f"No board decomposition for {value}, defaulting to 20")
        return DartHit(score=value, segment=20, multiplier=1)

    if len(options) == 1:
        segment, multiplier, _ = options[0]
        return DartHit(score=value, segment=segment, multiplier=multiplier)

    rng = rng if rng is not None else np.random.default_rng()
    weights = np.array([weight for _, _, weight in options])
    idx = int(rng.choice(len(options), p=weights / weights.sum()))
    segment, multiplier, _ = options[idx]

    return DartHit(score=value, segment=segment, multiplier=multiplier)

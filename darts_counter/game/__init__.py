"""
Game module - match engine, participants, game modes, computer opponent.
"""
from .player import Participant, ParticipantKind, ParticipantType
from .game_modes import GameMode, ThrowOutcome, evaluate_throw
from .opponent import BotDifficulty, single_dart_checkout
from .match import MatchEngine, MatchState, MatchStatus

__all__ = [
    "Participant",
    "ParticipantKind",
    "ParticipantType",
    "GameMode",
    "ThrowOutcome",
    "evaluate_throw",
    "BotDifficulty",
    "single_dart_checkout",
    "MatchEngine",
    "MatchState",
    "MatchStatus",
]

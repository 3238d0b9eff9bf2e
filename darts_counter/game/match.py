"""
Match state management and scoring engine.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union
import logging

import numpy as np

from darts_counter.core import (
    Config,
    DartHit,
    EventType,
    ManualScheduler,
    MatchEvent,
    Scheduler,
)
from darts_counter.board import classify_dart_value, get_checkout_suggestion, is_checkout_range
from .game_modes import GameMode, ThrowOutcome, evaluate_throw
from .opponent import DARTS_PER_VISIT, BotDifficulty
from .player import Participant, ParticipantType

logger = logging.getLogger(__name__)

MatchListener = Callable[[MatchEvent], None]


class MatchStatus(Enum):
    """Lifecycle of a match."""
    IDLE = "idle"  # No participants
    PLAYING = "playing"
    OVER = "over"  # Exactly one winner


@dataclass
class MatchState:
    """Observable state of the current match."""
    mode: GameMode = GameMode.FIVE_OH_ONE
    participants: List[Participant] = field(default_factory=list)
    current_index: int = 0
    status: MatchStatus = MatchStatus.IDLE
    winner: Optional[Participant] = None

    # In-progress visit (not yet in history) and the score to restore on bust
    current_visit: List[int] = field(default_factory=list)
    visit_start_score: int = 0

    # Presentation flags
    show_bust: bool = False
    dart_hits: List[DartHit] = field(default_factory=list)

    # Invalidates scheduled computer darts when the turn or match changes
    turn_generation: int = 0
    computer_animating: bool = False
    computer_visit_closed: bool = False

    @property
    def current_participant(self) -> Optional[Participant]:
        if 0 <= self.current_index < len(self.participants):
            return self.participants[self.current_index]
        return None

    @property
    def other_participant(self) -> Optional[Participant]:
        if len(self.participants) != 2:
            return None
        return self.participants[1 - self.current_index]


class MatchEngine:
    """
    Two-participant 301/501 scoring engine with optional computer opponent.

    All gameplay operations are silent no-ops when they do not apply (no
    match running, winner already decided, nothing to undo).

    Computer turns are played as delayed darts on the scheduler so views can
    show each hit before the next one lands. Callers must not feed human
    input while state.computer_animating is set.

    Usage:
        engine = MatchEngine(scheduler=ThreadingScheduler())
        engine.start_match("Alice", "", vs_computer=True, computer_level=8)
        engine.submit_dart(60)
    """

    def __init__(
            self,
            config: Optional[Config] = None,
            scheduler: Optional[Scheduler] = None,
            rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize engine.

        Args:
            config: Match and timing settings (default: Config())
            scheduler: Runs delayed computer darts (default: ManualScheduler())
            rng: Random generator for the computer opponent
        """
        self.config = config or Config()
        self.scheduler = scheduler or ManualScheduler()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.state = MatchState(mode=GameMode.from_value(self.config.get("match", "mode")))
        self._listeners: List[MatchListener] = []

        timing = self.config.get_section("timing")
        self.dart_interval = float(timing["computer_dart_interval_sec"])
        self.turn_hold = float(timing["computer_turn_hold_sec"])
        self.bust_display_sec = float(timing["bust_display_sec"])

    # ------------------------------------------------------------------
    # Events

    def add_listener(self, listener: MatchListener) -> None:
        """Register a callback for match events."""
        self._listeners.append(listener)

    def remove_listener(self, listener: MatchListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event_type: EventType, participant: Participant, value: Optional[int] = None) -> None:
        event = MatchEvent(event_type, participant.name, value)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                # State is settled before emitting
                logger.error(f"Listener failed on {event_type.name}: {e}", exc_info=True)

    # ------------------------------------------------------------------
    # Queries

    @property
    def current_participant(self) -> Optional[Participant]:
        return self.state.current_participant

    @property
    def other_participant(self) -> Optional[Participant]:
        return self.state.other_participant

    @property
    def is_playing(self) -> bool:
        return self.state.status is MatchStatus.PLAYING

    def checkout_suggestion(self, score: int) -> Optional[str]:
        """Suggested finish for a remaining score (None if there is none)."""
        return get_checkout_suggestion(score)

    def statistics(self) -> List[dict]:
        """Per-participant statistics."""
        return [p.get_stats() for p in self.state.participants]

    # ------------------------------------------------------------------
    # Lifecycle

    def start_match(
            self,
            player1_name: str = "",
            player2_name: str = "",
            vs_computer: bool = False,
            computer_level: Optional[int] = None,
            mode: Optional[Union[GameMode, str]] = None
    ) -> None:
        """
        Start a new match with two participants.

        Args:
            player1_name: Name of the first (always human) participant
            player2_name: Name of the second human (ignored against a computer)
            vs_computer: Second participant is a computer opponent
            computer_level: Opponent level 1-12 (default from config)
            mode: 301 or 501 (default from config)

        Raises:
            ValueError: If computer_level is outside 1-12
        """
        state = self.state
        game_mode = GameMode.from_value(mode) if mode is not None else state.mode
        starting_score = game_mode.starting_score

        player1 = Participant(
            name=player1_name or self.config.get("match", "player1_name"),
            type=ParticipantType.human(),
            starting_score=starting_score,
        )

        if vs_computer:
            level = computer_level if computer_level is not None else self.config.get("match", "computer_level")
            player2 = Participant(
                name=f"Bot (Level {level})",
                type=ParticipantType.computer(level),
                starting_score=starting_score,
            )
        else:
            player2 = Participant(
                name=player2_name or self.config.get("match", "player2_name"),
                type=ParticipantType.human(),
                starting_score=starting_score,
            )

        state.mode = game_mode
        state.participants = [player1, player2]
        self._restart()

        logger.info(f"Match started: {state.mode.value} - {player1.name} vs {player2.name}")

    def play_again(self) -> None:
        """Replay the match with the same participants."""
        if not self.state.participants:
            return

        for participant in self.state.participants:
            participant.reset(self.state.mode.starting_score)

        self._restart()
        logger.info("Match restarted")

    def reset_match(self) -> None:
        """Discard the match entirely."""
        self.state.participants = []
        self._restart()
        self.state.status = MatchStatus.IDLE

        logger.info("Match reset")

    def _restart(self) -> None:
        """Common state for a fresh leg."""
        state = self.state
        state.current_index = 0
        state.current_visit = []
        state.visit_start_score = 0
        state.winner = None
        state.show_bust = False
        state.dart_hits = []
        state.status = MatchStatus.PLAYING
        state.computer_animating = False
        state.computer_visit_closed = False
        state.turn_generation += 1

    def clear_bust_indicator(self) -> None:
        """Hide the bust message (call after bust_display_sec)."""
        self.state.show_bust = False

    # ------------------------------------------------------------------
    # Scoring

    def _active_participant(self) -> Optional[Participant]:
        """Current participant if input is accepted, else None."""
        participant = self.state.current_participant
        if not self.is_playing or participant is None or participant.has_won:
            return None
        return participant

    def _begin_visit(self, participant: Participant) -> None:
        """Snapshot the score for bust recovery."""
        self.state.visit_start_score = participant.score
        if is_checkout_range(participant.score):
            self._emit(EventType.REMAINING_SCORE, participant, participant.score)

    def _signal_bust(self, participant: Participant) -> None:
        self.state.show_bust = True
        logger.info(f"{participant.name} busted (back to {self.state.visit_start_score})")

    def _declare_winner(self, participant: Participant) -> None:
        state = self.state
        participant.score = 0
        participant.has_won = True
        participant.visits.append(list(state.current_visit))
        state.winner = participant
        state.status = MatchStatus.OVER

        logger.info(f"Match finished! Winner: {participant.name}")
        self._emit(EventType.GAME_OVER, participant)

    def submit_dart(self, value: int) -> None:
        """
        Score a single dart for the current participant.

        Each dart is subtracted on its own; a bust restores the score from
        the start of the visit and records an empty visit.

        Args:
            value: Points scored by the dart (0-60)
        """
        participant = self._active_participant()
        if participant is None:
            logger.debug(f"Ignoring dart {value}: no active participant")
            return

        state = self.state
        if not state.current_visit:
            self._begin_visit(participant)

        state.current_visit.append(value)
        participant.darts_thrown += 1

        outcome = evaluate_throw(participant.score, value)

        if outcome is ThrowOutcome.BUST:
            self._signal_bust(participant)
            self.end_visit(busted=True)
            self._emit(EventType.BUST, participant)
            return

        if outcome is ThrowOutcome.WIN:
            self._declare_winner(participant)
            return

        participant.score -= value
        logger.debug(f"{participant.name} hit {value} (left {participant.score})")

        if len(state.current_visit) >= DARTS_PER_VISIT:
            visit_total = sum(state.current_visit)
            self.end_visit(busted=False)
            self._emit(EventType.VISIT_TOTAL, participant, visit_total)

    def submit_visit_total(self, total: int) -> None:
        """
        Score a whole visit at once.

        Any darts already entered for this visit are reverted first. The
        visit always counts as three darts and always ends the turn.

        Args:
            total: Points scored by the visit (0-180)
        """
        participant = self._active_participant()
        if participant is None:
            logger.debug(f"Ignoring visit total {total}: no active participant")
            return

        state = self.state
        if state.current_visit:
            participant.score += sum(state.current_visit)
            participant.darts_thrown -= len(state.current_visit)
            state.current_visit = []

        self._begin_visit(participant)
        participant.darts_thrown += DARTS_PER_VISIT

        outcome = evaluate_throw(participant.score, total)

        if outcome is ThrowOutcome.BUST:
            self._signal_bust(participant)
            participant.visits.append([])
            self.advance_turn()
            self._emit(EventType.BUST, participant)
            return

        state.current_visit = [total]

        if outcome is ThrowOutcome.WIN:
            self._declare_winner(participant)
            return

        participant.score -= total
        participant.visits.append(list(state.current_visit))
        logger.debug(f"{participant.name} scored {total} (left {participant.score})")

        self.advance_turn()
        self._emit(EventType.VISIT_TOTAL, participant, total)

    def end_visit(self, busted: bool = False) -> None:
        """
        Close the current visit, possibly before three darts.

        Args:
            busted: Restore the visit's starting score and record a bust
        """
        state = self.state
        participant = state.current_participant
        if not self.is_playing or participant is None:
            return

        if busted:
            participant.score = state.visit_start_score
            participant.visits.append([])
        else:
            participant.visits.append(list(state.current_visit))

        state.current_visit = []

        if state.computer_animating:
            # Hold step of the computer turn advances once the board was shown
            state.computer_visit_closed = True
            return

        self.advance_turn()

    def undo_last_dart(self) -> None:
        """Take back the last dart of the in-progress visit."""
        state = self.state
        participant = self._active_participant()
        if participant is None or not state.current_visit:
            return

        value = state.current_visit.pop()
        participant.score += value
        participant.darts_thrown -= 1
        logger.info(f"Undone: {value} points")

    def advance_turn(self) -> None:
        """Pass the throw to the next participant."""
        state = self.state
        if not self.is_playing or not state.participants:
            return

        state.dart_hits = []
        state.current_visit = []
        state.computer_visit_closed = False
        state.current_index = (state.current_index + 1) % len(state.participants)
        state.turn_generation += 1

        participant = state.current_participant
        logger.debug(f"Next participant: {participant.name}")

        if participant.type.is_computer:
            self._start_computer_turn(participant)

    # ------------------------------------------------------------------
    # Computer turns

    def _start_computer_turn(self, participant: Participant) -> None:
        """
        Schedule the computer's darts, one per interval, then the hold step.
        """
        state = self.state
        bot = BotDifficulty(participant.type.level, rng=self.rng)
        darts = bot.generate_visit(participant.score)
        hits = [classify_dart_value(dart, rng=self.rng) for dart in darts]

        state.dart_hits = []
        state.computer_animating = True
        generation = state.turn_generation

        logger.debug(f"{participant.name} throws {darts}")

        for index, (dart, hit) in enumerate(zip(darts, hits)):
            self.scheduler.call_later(
                index * self.dart_interval,
                lambda dart=dart, hit=hit: self._apply_computer_dart(participant.id, generation, dart, hit),
            )

        self.scheduler.call_later(
            len(darts) * self.dart_interval + self.turn_hold,
            lambda: self._finish_computer_turn(participant.id, generation),
        )

    def _computer_turn_current(self, participant_id: str, generation: int) -> bool:
        """Check a scheduled event still belongs to the running turn."""
        state = self.state
        participant = state.current_participant
        return (
            state.turn_generation == generation
            and self.is_playing
            and participant is not None
            and participant.id == participant_id
        )

    def _apply_computer_dart(self, participant_id: str, generation: int, dart: int, hit: DartHit) -> None:
        if self.state.computer_visit_closed and self.state.turn_generation == generation:
            logger.debug(f"Visit already closed, dropping computer dart {dart}")
            return

        if not self._computer_turn_current(participant_id, generation):
            logger.debug(f"Dropping stale computer dart {dart}")
            if self.state.turn_generation == generation:
                self.state.computer_animating = False
            return

        self.state.dart_hits.append(hit)
        self.submit_dart(dart)

    def _finish_computer_turn(self, participant_id: str, generation: int) -> None:
        if not self._computer_turn_current(participant_id, generation):
            logger.debug("Dropping stale computer turn end")
            if self.state.turn_generation == generation:
                self.state.computer_animating = False
            return

        state = self.state
        state.computer_animating = False
        state.dart_hits = []
        self.advance_turn()

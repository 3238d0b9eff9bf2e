"""
Unit tests for participants, game modes and the computer opponent.
"""
import numpy as np
import pytest

from darts_counter.board import is_legal_dart_value
from darts_counter.game import (
    BotDifficulty,
    GameMode,
    Participant,
    ParticipantKind,
    ParticipantType,
    ThrowOutcome,
    evaluate_throw,
    single_dart_checkout,
)


def test_game_mode_starting_scores():
    """Test mode starting scores."""
    assert GameMode.THREE_OH_ONE.starting_score == 301
    assert GameMode.FIVE_OH_ONE.starting_score == 501


def test_game_mode_from_value():
    """Test parsing modes from config values."""
    assert GameMode.from_value("301") is GameMode.THREE_OH_ONE
    assert GameMode.from_value(501) is GameMode.FIVE_OH_ONE
    assert GameMode.from_value(GameMode.FIVE_OH_ONE) is GameMode.FIVE_OH_ONE

    with pytest.raises(ValueError):
        GameMode.from_value("cricket")


def test_evaluate_throw():
    """Test bust/win arithmetic."""
    assert evaluate_throw(40, 40) is ThrowOutcome.WIN
    assert evaluate_throw(20, 21) is ThrowOutcome.BUST
    assert evaluate_throw(2, 1) is ThrowOutcome.BUST
    assert evaluate_throw(501, 180) is ThrowOutcome.CONTINUE
    assert evaluate_throw(3, 1) is ThrowOutcome.CONTINUE

    # Double-out is not enforced: a single 3 finishes 3
    assert evaluate_throw(3, 3) is ThrowOutcome.WIN


def test_participant_type():
    """Test human/computer tagging."""
    human = ParticipantType.human()
    bot = ParticipantType.computer(7)

    assert human.kind is ParticipantKind.HUMAN
    assert not human.is_computer
    assert bot.is_computer
    assert bot.level == 7


@pytest.mark.parametrize("level", [0, 13, None])
def test_participant_type_invalid_level(level):
    """Computer levels outside 1-12 are rejected."""
    with pytest.raises(ValueError):
        ParticipantType(ParticipantKind.COMPUTER, level)


def test_participant_init():
    """Test Participant defaults."""
    player = Participant(name="Alice", starting_score=301)

    assert player.score == 301
    assert player.darts_thrown == 0
    assert player.visits == []
    assert not player.has_won
    assert not player.is_computer
    assert player.id != Participant(name="Alice").id


def test_participant_statistics():
    """Average and highest visit treat busts as 0."""
    player = Participant(name="Alice")

    assert player.average == 0.0
    assert player.highest_visit == 0

    player.visits = [[60, 60, 60], [], [20, 1]]
    player.darts_thrown = 8

    assert player.total_scored == 201
    assert player.average == pytest.approx(67.0)
    assert player.highest_visit == 180
    assert player.bust_count == 1
    assert player.average_per_dart == pytest.approx(201 / 8)


def test_participant_highest_visit_only_busts():
    """All-bust history has a highest visit of 0."""
    player = Participant(name="Alice")
    player.visits = [[], []]
    assert player.highest_visit == 0
    assert player.average == 0.0


def test_participant_reset():
    """Reset keeps identity and clears progress."""
    player = Participant(name="Alice", starting_score=501)
    player_id = player.id
    player.score = 0
    player.darts_thrown = 12
    player.visits.append([60])
    player.has_won = True

    player.reset(301)

    assert player.id == player_id
    assert player.score == 301
    assert player.starting_score == 301
    assert player.darts_thrown == 0
    assert player.visits == []
    assert not player.has_won


def test_single_dart_checkout():
    """Only doubles and the bull finish in one dart."""
    assert single_dart_checkout(40) == 40
    assert single_dart_checkout(2) == 2
    assert single_dart_checkout(50) == 50
    assert single_dart_checkout(41) is None
    assert single_dart_checkout(42) is None
    assert single_dart_checkout(1) is None


def test_bot_difficulty_parameters():
    """Test level-derived averages."""
    bot = BotDifficulty(level=1)
    assert bot.average_per_visit == 10.0
    assert bot.standard_deviation == 28.0
    assert bot.checkout_probability == pytest.approx(0.05)

    bot = BotDifficulty(level=12)
    assert bot.average_per_visit == 120.0
    assert bot.standard_deviation == 6.0
    assert bot.checkout_probability == pytest.approx(0.6)


@pytest.mark.parametrize("level", [0, 13])
def test_bot_difficulty_invalid_level(level):
    """Levels outside 1-12 are rejected."""
    with pytest.raises(ValueError):
        BotDifficulty(level=level)


@pytest.mark.parametrize("level", [1, 4, 8, 12])
def test_generate_visit_legal(level):
    """Generated darts are legal, at most three, and rarely bust."""
    rng = np.random.default_rng(level)
    bot = BotDifficulty(level=level, rng=rng)

    for remaining in list(range(2, 171)) + [301, 501]:
        darts = bot.generate_visit(remaining)

        assert 1 <= len(darts) <= 3
        assert all(is_legal_dart_value(d) for d in darts)

        left = remaining - sum(darts)
        assert left >= 0
        assert left != 1


def test_generate_visit_stops_on_finish():
    """A finished visit has no darts after the winning one."""
    rng = np.random.default_rng(7)
    bot = BotDifficulty(level=12, rng=rng)

    finishes = 0
    for _ in range(200):
        darts = bot.generate_visit(40)
        if sum(darts) == 40:
            finishes += 1
            assert darts[-1] != 0 or len(darts) == 3
        running = 40
        for dart in darts[:-1]:
            running -= dart
            assert running > 1

    assert finishes > 0


def test_generate_visit_average_tracks_level():
    """Stronger bots score more from a full 501."""
    rng = np.random.default_rng(99)
    weak = BotDifficulty(level=2, rng=rng)
    strong = BotDifficulty(level=11, rng=rng)

    weak_avg = np.mean([sum(weak.generate_visit(501)) for _ in range(300)])
    strong_avg = np.mean([sum(strong.generate_visit(501)) for _ in range(300)])

    assert strong_avg > weak_avg

"""Tests for immutable game state."""

import pytest
from hitblow.game.state import GameState, ScoreResult


def test_defaults() -> None:
    """New state starts with no attempts and not over."""
    state = GameState(secret=(1, 2, 3, 4))

    assert state.attempts_used == 0
    assert state.max_attempts == 10
    assert state.is_over is False
    assert state.attempts_remaining == 10


def test_game_state_immutability() -> None:
    """Test GameState is immutable."""
    state = GameState(secret=(1, 2, 3, 4))

    with pytest.raises(AttributeError):
        state.attempts_used = 3  # type: ignore


def test_copy_with() -> None:
    """copy_with returns a changed copy and leaves the original alone."""
    state = GameState(secret=(1, 2, 3, 4))
    updated = state.copy_with(attempts_used=2)

    assert updated.attempts_used == 2
    assert updated.secret == (1, 2, 3, 4)
    assert state.attempts_used == 0


def test_score_result_remaining() -> None:
    """ScoreResult reports attempts left after the guess."""
    result = ScoreResult(hits=1, blows=2, is_correct=False, is_over=False, attempts_used=3)

    assert result.attempts_remaining == 7

    with pytest.raises(AttributeError):
        result.hits = 4  # type: ignore

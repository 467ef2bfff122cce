"""Game creation and guess evaluation."""

from __future__ import annotations

import logging
import random
from typing import Optional

from hitblow.game.schema import MAX_ATTEMPTS, GameOverError
from hitblow.game.secret import generate_secret
from hitblow.game.state import GameState, Guess, ScoreResult, Secret

logger = logging.getLogger(__name__)


def new_game(rng: Optional[random.Random] = None) -> GameState:
    """Start a game with a freshly drawn secret."""
    state = GameState(secret=generate_secret(rng), max_attempts=MAX_ATTEMPTS)
    logger.debug(f"New game, {state.max_attempts} attempts")
    return state


def score_guess(secret: Secret, guess: Guess) -> tuple[int, int]:
    """Count hits and blows of a guess against the secret.

    Returns:
        (hits, blows)
    """
    hits = 0
    blows = 0

    for i, digit in enumerate(guess):
        if digit == secret[i]:
            hits += 1

    # Same digit at a different position
    for i, digit in enumerate(guess):
        for j, target in enumerate(secret):
            if i != j and digit == target:
                blows += 1

    return hits, blows


def evaluate(state: GameState, guess: Guess) -> tuple[GameState, ScoreResult]:
    """Apply a validated guess to the game.

    Consumes one attempt, even for a losing final guess.

    Args:
        state: Current game state
        guess: Guess already accepted by parse_guess

    Returns:
        Tuple of (new state, score of this guess)

    Raises:
        GameOverError: If the game has already ended
    """
    if state.is_over:
        raise GameOverError(
            f"Game is over after {state.attempts_used} attempts; start a new game."
        )

    attempts_used = state.attempts_used + 1
    hits, blows = score_guess(state.secret, guess)
    is_correct = hits == len(state.secret)
    remaining = state.max_attempts - attempts_used
    is_over = is_correct or remaining == 0

    new_state = state.copy_with(attempts_used=attempts_used, is_over=is_over)
    result = ScoreResult(
        hits=hits,
        blows=blows,
        is_correct=is_correct,
        is_over=is_over,
        attempts_used=attempts_used,
        max_attempts=state.max_attempts,
    )

    logger.debug(
        f"Attempt {attempts_used}/{state.max_attempts}: "
        f"{hits} hit(s), {blows} blow(s)"
    )
    if is_over:
        logger.debug(
            f"Game over after {attempts_used} attempt(s): "
            f"{'solved' if is_correct else 'out of attempts'}"
        )

    return new_state, result

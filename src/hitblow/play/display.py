"""Terminal display for guesses and results."""

from __future__ import annotations

from typing import Sequence

from hitblow.game.schema import DIGITS, SECRET_LENGTH, InvalidGuessFormat
from hitblow.game.state import GameState, ScoreResult


def format_digits(digits: Sequence[int]) -> str:
    """Format a digit sequence the way the player types it."""
    return "".join(str(d) for d in digits)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class GameRenderer:
    """Renders game progress to terminal text."""

    def render_prompt(self, state: GameState) -> str:
        """Header shown before reading the next guess."""
        return f"\nAttempt {state.attempts_used + 1}/{state.max_attempts}"

    def guess_prompt(self) -> str:
        lo, hi = min(DIGITS), max(DIGITS)
        return f"Enter {SECRET_LENGTH} digits ({lo}-{hi}): "

    def render_result(self, result: ScoreResult) -> str:
        """Hits, blows and attempt counter for one guess."""
        lines = [
            f"Result: {_plural(result.hits, 'hit')}, {_plural(result.blows, 'blow')}",
            f"Attempts: {result.attempts_used}/{result.max_attempts}",
        ]
        return "\n".join(lines)

    def render_correct(self, result: ScoreResult) -> str:
        return f"Correct! You found it in {_plural(result.attempts_used, 'attempt')}."

    def render_game_over(self, state: GameState) -> str:
        """Loss message revealing the secret."""
        return f"Game over!\nThe answer was: {format_digits(state.secret)}"

    def render_give_up(self, state: GameState) -> str:
        return f"You gave up. The answer was: {format_digits(state.secret)}"

    def render_invalid(self, error: InvalidGuessFormat) -> str:
        """Input error, with the generic rule reminder."""
        lo, hi = min(DIGITS), max(DIGITS)
        return (
            f"Invalid input: {error} "
            f"Enter {SECRET_LENGTH} different digits from {lo} to {hi}."
        )

    def render_debug(self, state: GameState) -> str:
        return f"[debug] secret: {format_digits(state.secret)}"

    def render_game_start(self) -> str:
        return "Starting a new game..."

    def render_game_end(self) -> str:
        return "Ending the game."

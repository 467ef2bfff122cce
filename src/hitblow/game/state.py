"""Immutable game state representation."""

from dataclasses import dataclass

from hitblow.game.schema import MAX_ATTEMPTS


Secret = tuple[int, ...]
Guess = tuple[int, ...]


@dataclass(frozen=True)
class GameState:
    """Immutable state of a single game.

    A new instance is produced for every evaluated guess; the secret never
    changes and is_over never goes back to False.
    """

    secret: Secret
    attempts_used: int = 0
    max_attempts: int = MAX_ATTEMPTS
    is_over: bool = False

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - self.attempts_used

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        current = {
            "secret": self.secret,
            "attempts_used": self.attempts_used,
            "max_attempts": self.max_attempts,
            "is_over": self.is_over,
        }
        current.update(changes)
        return GameState(**current)


@dataclass(frozen=True)
class ScoreResult:
    """Score of one evaluated guess."""

    hits: int
    blows: int
    is_correct: bool
    is_over: bool
    # Snapshot of the attempt counter after this guess
    attempts_used: int = 0
    max_attempts: int = MAX_ATTEMPTS

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - self.attempts_used

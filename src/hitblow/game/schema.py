"""Core game constants, error types and enumerations."""

from __future__ import annotations

from enum import Enum


# Alphabet the secret and guesses are drawn from
DIGITS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)
SECRET_LENGTH = 4
MAX_ATTEMPTS = 10


class GuessError(Enum):
    """Reasons a raw guess is rejected."""

    WRONG_LENGTH = "wrong_length"
    NOT_A_DIGIT = "not_a_digit"
    OUT_OF_RANGE = "out_of_range"
    DUPLICATE_DIGIT = "duplicate_digit"


class HitBlowError(Exception):
    """Base class for game engine errors."""


class InvalidGuessFormat(HitBlowError, ValueError):
    """Raw guess text violates length, charset, range or uniqueness rules."""

    def __init__(self, reason: GuessError, text: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.text = text


class GameOverError(HitBlowError, RuntimeError):
    """A guess was evaluated against a game that already ended."""

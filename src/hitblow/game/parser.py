"""Guess parsing and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hitblow.game.schema import (
    DIGITS, SECRET_LENGTH, GuessError, InvalidGuessFormat,
)
from hitblow.game.state import Guess


ASCII_DIGITS = "0123456789"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing raw guess text.

    Exactly one of guess or error is set.
    """

    guess: Optional[Guess] = None
    error: Optional[InvalidGuessFormat] = None

    @property
    def ok(self) -> bool:
        return self.guess is not None

    def unwrap(self) -> Guess:
        """Return the parsed guess, raising the carried error if invalid."""
        if self.error is not None:
            raise self.error
        assert self.guess is not None
        return self.guess


def _reject(reason: GuessError, text: str, message: str) -> ParseResult:
    return ParseResult(error=InvalidGuessFormat(reason, text, message))


def parse_guess(text: str) -> ParseResult:
    """Parse a raw guess like "1234" into a tuple of digits.

    Checks, in order: length, ASCII digits only, range of DIGITS, no
    repeats. The first failing check decides the reported reason.

    Args:
        text: Raw player input (not trimmed here)

    Returns:
        ParseResult with the guess in input order, or the rejection
    """
    lo, hi = min(DIGITS), max(DIGITS)

    if len(text) != SECRET_LENGTH:
        return _reject(
            GuessError.WRONG_LENGTH, text,
            f"Expected {SECRET_LENGTH} digits, got {len(text)} characters.",
        )

    for ch in text:
        if ch not in ASCII_DIGITS:
            return _reject(GuessError.NOT_A_DIGIT, text, f"'{ch}' is not a digit.")

    values = tuple(int(ch) for ch in text)

    for value in values:
        if value not in DIGITS:
            return _reject(
                GuessError.OUT_OF_RANGE, text,
                f"Digit {value} is out of range; use {lo}-{hi}.",
            )

    for i in range(SECRET_LENGTH):
        for j in range(i + 1, SECRET_LENGTH):
            if values[i] == values[j]:
                return _reject(
                    GuessError.DUPLICATE_DIGIT, text,
                    f"Digit {values[i]} is used more than once.",
                )

    return ParseResult(guess=values)

"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from hitblow.game.parser import parse_guess
from hitblow.game.schema import InvalidGuessFormat
from hitblow.game.state import Guess


QUIT_WORDS = ("q", "quit", "exit")


@dataclass
class InputResult:
    """Result of human input."""

    guess: Optional[Guess] = None
    quit: bool = False
    error: Optional[InvalidGuessFormat] = None


class HumanPlayer:
    """Handles human player input."""

    def get_guess(self, prompt: str = "> ") -> InputResult:
        """Read and parse one guess.

        Args:
            prompt: Input prompt string

        Returns:
            InputResult with guess, quit flag, or error
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if raw in QUIT_WORDS:
            return InputResult(quit=True)

        parsed = parse_guess(raw)
        if not parsed.ok:
            return InputResult(error=parsed.error)

        return InputResult(guess=parsed.guess)

    def ask_play_again(
        self,
        prompt: str = "Play again? (y/n): ",
        output_fn: Callable[[str], None] = print,
    ) -> bool:
        """Ask until the player answers y or n.

        EOF or Ctrl-C counts as no.
        """
        while True:
            try:
                raw = input(prompt).strip().lower()
            except (EOFError, KeyboardInterrupt):
                return False

            if raw in ("y", "yes"):
                return True
            if raw in ("n", "no"):
                return False
            output_fn("Please answer 'y' or 'n'.")

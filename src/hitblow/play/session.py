"""Play session management."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from hitblow.game.engine import new_game, evaluate
from hitblow.game.state import GameState, Secret
from hitblow.play.display import GameRenderer
from hitblow.play.rules import RuleExplainer
from hitblow.play.input import HumanPlayer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    seed: Optional[int] = None
    debug: bool = False
    show_rules: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass(frozen=True)
class GameOutcome:
    """How a single game ended."""

    won: bool
    attempts: int
    secret: Secret
    quit_early: bool = False


class PlaySession:
    """Runs games against the terminal until the player stops."""

    def __init__(self, config: SessionConfig):
        """Initialize session."""
        self.config = config
        self.seed = config.seed
        self.rng = random.Random(self.seed)

        # Components
        self.renderer = GameRenderer()
        self.explainer = RuleExplainer()
        self.human_input = HumanPlayer()

        # Session state
        self.outcomes: list[GameOutcome] = []
        self.state: Optional[GameState] = None

    @property
    def games_won(self) -> int:
        return sum(1 for o in self.outcomes if o.won)

    def play_game(self, output_fn: Callable[[str], None] = print) -> GameOutcome:
        """Play one game to completion or until the player quits.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            GameOutcome for this game
        """
        self.state = new_game(self.rng)
        output_fn(self.renderer.render_game_start())
        if self.config.debug:
            output_fn(self.renderer.render_debug(self.state))

        won = False
        while not self.state.is_over:
            output_fn(self.renderer.render_prompt(self.state))
            result = self.human_input.get_guess(self.renderer.guess_prompt())

            if result.quit:
                output_fn(self.renderer.render_give_up(self.state))
                logger.debug(f"Player gave up after {self.state.attempts_used} attempt(s)")
                outcome = GameOutcome(
                    won=False,
                    attempts=self.state.attempts_used,
                    secret=self.state.secret,
                    quit_early=True,
                )
                self.outcomes.append(outcome)
                return outcome

            if result.error is not None:
                output_fn(self.renderer.render_invalid(result.error))
                continue

            assert result.guess is not None
            self.state, score = evaluate(self.state, result.guess)
            output_fn(self.renderer.render_result(score))

            if score.is_correct:
                won = True
                output_fn(self.renderer.render_correct(score))
            elif score.is_over:
                output_fn(self.renderer.render_game_over(self.state))

        outcome = GameOutcome(
            won=won,
            attempts=self.state.attempts_used,
            secret=self.state.secret,
        )
        self.outcomes.append(outcome)
        return outcome

    def run(self, output_fn: Callable[[str], None] = print) -> list[GameOutcome]:
        """Run the session: title, rules, then games until the player stops.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            Outcomes of every game played, in order
        """
        if self.config.show_rules:
            output_fn(self.explainer.title())
            output_fn(self.explainer.explain_rules())
            output_fn("")

        logger.debug(f"Session seed: {self.seed}")

        while True:
            outcome = self.play_game(output_fn)
            if outcome.quit_early:
                break

            output_fn("")
            if not self.human_input.ask_play_again(output_fn=output_fn):
                output_fn(self.renderer.render_game_end())
                break

        return self.outcomes

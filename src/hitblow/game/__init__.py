"""Hit and Blow game engine."""

from hitblow.game.schema import (
    DIGITS,
    SECRET_LENGTH,
    MAX_ATTEMPTS,
    GuessError,
    HitBlowError,
    InvalidGuessFormat,
    GameOverError,
)
from hitblow.game.state import GameState, ScoreResult, Secret, Guess
from hitblow.game.secret import generate_secret
from hitblow.game.parser import ParseResult, parse_guess
from hitblow.game.engine import new_game, evaluate, score_guess

__all__ = [
    "DIGITS",
    "SECRET_LENGTH",
    "MAX_ATTEMPTS",
    "GuessError",
    "HitBlowError",
    "InvalidGuessFormat",
    "GameOverError",
    "GameState",
    "ScoreResult",
    "Secret",
    "Guess",
    "generate_secret",
    "ParseResult",
    "parse_guess",
    "new_game",
    "evaluate",
    "score_guess",
]

"""Terminal play for Hit and Blow."""

from hitblow.play.display import GameRenderer, format_digits
from hitblow.play.rules import RuleExplainer
from hitblow.play.input import HumanPlayer, InputResult
from hitblow.play.session import PlaySession, SessionConfig, GameOutcome

__all__ = [
    "GameRenderer",
    "format_digits",
    "RuleExplainer",
    "HumanPlayer",
    "InputResult",
    "PlaySession",
    "SessionConfig",
    "GameOutcome",
]

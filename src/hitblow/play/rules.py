"""Title and rule text."""

from __future__ import annotations

from hitblow.game.schema import DIGITS, SECRET_LENGTH, MAX_ATTEMPTS


class RuleExplainer:
    """Explains the game rules."""

    def title(self) -> str:
        """Title banner."""
        return "Hit and Blow\n---------------------"

    def explain_rules(self, max_attempts: int = MAX_ATTEMPTS) -> str:
        """Generate condensed rule summary."""
        lo, hi = min(DIGITS), max(DIGITS)
        lines: list[str] = []

        lines.append("Rules")
        lines.append(f"  1. Guess the hidden {SECRET_LENGTH}-digit number.")
        lines.append(f"  2. Each digit is {lo}-{hi} and no digit is used twice.")
        lines.append("  3. After each guess you are told your hits and blows.")
        lines.append("  4. A hit is a right digit in the right place;"
                     " a blow is a right digit in the wrong place.")
        lines.append(f"  5. You have {max_attempts} attempts. Enter 'q' to give up.")

        return "\n".join(lines)

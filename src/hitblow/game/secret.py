"""Secret number generation."""

import random
from typing import Optional

from hitblow.game.schema import DIGITS, SECRET_LENGTH
from hitblow.game.state import Secret


def generate_secret(rng: Optional[random.Random] = None) -> Secret:
    """Draw SECRET_LENGTH distinct digits from DIGITS.

    Shuffles the whole alphabet and keeps the leading digits, so every
    ordered selection is equally likely.
    """
    rng = rng or random.Random()

    digits = list(DIGITS)
    rng.shuffle(digits)

    return tuple(digits[:SECRET_LENGTH])

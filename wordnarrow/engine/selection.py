from __future__ import annotations

import random
from typing import Optional, Sequence


def pick_random_word(words: Sequence[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Pick a word uniformly at random, or None if `words` is empty.

    Pass a seeded random.Random to make the choice reproducible.
    """
    if not words:
        return None
    rng = rng or random.Random()
    return words[rng.randrange(len(words))]

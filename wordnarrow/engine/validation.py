"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - its EFFECTIVE (singular) length is N, so "boxes" is a 3-letter guess
  - it exists in the provided `allowed` list/set
"""

from typing import Iterable, Set

from wordnarrow.words.plural import get_effective_length


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : iterable of allowed words (e.g., the candidate pool)
      N       : required singular word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if not w.isalpha() or get_effective_length(w) != N:
        return False

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set

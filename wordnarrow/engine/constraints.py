"""
Candidate filtering given feedback rounds.

Given:
  - a pool of words (e.g., words extracted from a text)
  - a sequence of feedback rounds (one per guess so far)
  - target word length N (a SINGULAR length)

Return:
  - words that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
Plurals are length-checked and matched through their singular form, so
"cities" survives for N=4 and is compared as "city".
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from wordnarrow.words.plural import get_effective_length
from .feedback import FeedbackRound, matches_feedback


def filter_words_by_feedback(
        words: Iterable[str],
        feedbacks: Sequence[FeedbackRound],
        word_length: int,
) -> List[str]:
    """
    Keep only words with effective length == `word_length` that match every
    round in `feedbacks`.

    Args:
      words       : candidate pool (lowercase, already de-duplicated)
      feedbacks   : feedback rounds, applied in order
      word_length : target singular length

    Returns:
      New list of surviving words, order preserved as in `words`.
    """
    filtered = [w for w in words if get_effective_length(w) == word_length]

    for feedback in feedbacks:
        filtered = [w for w in filtered if matches_feedback(w, feedback)]

    return filtered

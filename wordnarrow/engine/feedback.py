"""
Feedback types and the per-round consistency check.

A feedback round is one LetterFeedback per position of the (singular) guess:
  - green  : letter correct, position correct
  - yellow : letter in the answer, but not at this position
  - gray   : letter absent, or present fewer times than already confirmed
  - none   : no information (ignored)

matches_feedback(word, round) answers: "could `word` be the answer, given
this round?" It is evaluated on the SINGULAR form of `word`.

Checks, in order (the first failure rejects):
  1) greens   : the word has the letter at that position
  2) yellows  : the word contains the letter, but not at that position
  3) grays    : letter absent if it has no green/yellow in the round,
                otherwise only that position is forbidden
  4) min count: at least (#green + #yellow) copies of each such letter
  5) cap      : a letter with a gray AND a green/yellow mark has exactly
                (#green + #yellow) copies

Out-of-range positions read as "no character": they never equal a letter,
so a green there fails and a yellow/gray position check passes.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from wordnarrow.words.plural import get_singular_form


class LetterState(str, Enum):
    gray = "gray"
    yellow = "yellow"
    green = "green"
    none = "none"


@dataclass(frozen=True)
class LetterFeedback:
    """One cell of feedback: `letter` at zero-based `position` was marked `state`."""
    letter: str
    position: int
    state: LetterState


FeedbackRound = Sequence[LetterFeedback]

_CONFIRMED = (LetterState.green, LetterState.yellow)


def _char_at(word: str, position: int) -> Optional[str]:
    if 0 <= position < len(word):
        return word[position]
    return None


def letter_bounds(feedback: FeedbackRound) -> Dict[str, Tuple[int, bool]]:
    """
    Per-letter count constraints implied by one round.

    Returns:
      {letter: (min_count, capped)} sorted by letter, for every letter with at
      least one green/yellow mark. `capped` is True when the same letter also
      has a gray mark, i.e. the word must contain exactly `min_count` copies.
    """
    min_count: Counter[str] = Counter()
    grays = set()
    for fb in feedback:
        if fb.state in _CONFIRMED:
            min_count[fb.letter] += 1
        elif fb.state == LetterState.gray:
            grays.add(fb.letter)
    return {ch: (min_count[ch], ch in grays) for ch in sorted(min_count)}


def explain_mismatch(word: str, feedback: FeedbackRound) -> Optional[str]:
    """
    Return None if `word` is consistent with `feedback`, otherwise a short
    reason naming the first check that failed.

    Examples:
      explain_mismatch("cba", [c green@0, a yellow@1, t gray@2]) -> None
      explain_mismatch("cab", [c green@0, a yellow@1, t gray@2])
          -> "yellow 'a' sits at position 1"
    """
    w = get_singular_form(word)
    bounds = letter_bounds(feedback)
    # per-character counts
    counts = Counter(w)

    # 1) greens
    for fb in feedback:
        if fb.state == LetterState.green and _char_at(w, fb.position) != fb.letter:
            return f"green '{fb.letter}' missing at position {fb.position}"

    # 2) yellows: somewhere, just not here
    for fb in feedback:
        if fb.state != LetterState.yellow:
            continue
        if fb.letter not in counts:
            return f"yellow '{fb.letter}' absent"
        if _char_at(w, fb.position) == fb.letter:
            return f"yellow '{fb.letter}' sits at position {fb.position}"

    # 3) grays
    for fb in feedback:
        if fb.state != LetterState.gray:
            continue
        if fb.letter not in bounds:
            if fb.letter in counts:
                return f"gray '{fb.letter}' present"
        elif _char_at(w, fb.position) == fb.letter:
            return f"gray '{fb.letter}' sits at position {fb.position}"

    # 4) enough copies of every confirmed letter
    for ch, (need, _capped) in bounds.items():
        if counts[ch] < need:
            return f"needs {need}x '{ch}', has {counts[ch]}"

    # 5) no extra copies when a gray caps the letter
    for ch, (need, capped) in bounds.items():
        if capped and counts[ch] != need:
            return f"needs exactly {need}x '{ch}', has {counts[ch]}"

    return None


def matches_feedback(word: str, feedback: FeedbackRound) -> bool:
    """True iff `word` (as its singular form) satisfies every check for this round."""
    return explain_mismatch(word, feedback) is None

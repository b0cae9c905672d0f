"""
Wordle-style scoring and conversions between patterns and feedback rounds.

Pattern conventions (one char per position):
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)
  - '.'  : none   = no information (only accepted by parse_pattern)

score() is the canonical two-pass algorithm:
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.

feedback_round() and parse_pattern() work on SINGULAR forms, because feedback
positions are defined relative to the singular word.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import List, Mapping

from wordnarrow.words.plural import get_singular_form
from .feedback import FeedbackRound, LetterFeedback, LetterState

PATTERN_STATES: Mapping[str, LetterState] = MappingProxyType({
    "G": LetterState.green,
    "Y": LetterState.yellow,
    "-": LetterState.gray,
    ".": LetterState.none,
})
STATE_CHARS: Mapping[LetterState, str] = MappingProxyType(
    {state: ch for ch, state in PATTERN_STATES.items()}
)


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Raises:
      ValueError if the words differ in length.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens; leftover answer letters become the yellow budget.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def parse_pattern(guess: str, pattern: str) -> List[LetterFeedback]:
    """
    Build a feedback round from a guess and a pattern string, e.g.
    parse_pattern("crane", "G-Y--").

    The guess is singularized first, so "boxes" with "G-Y" describes "box".

    Raises:
      ValueError on a length mismatch or an unknown pattern character.
    """
    return _round_from_pattern(get_singular_form(guess.strip()), pattern)


def _round_from_pattern(word: str, pattern: str) -> List[LetterFeedback]:
    patt = pattern.strip().upper()
    if len(word) != len(patt):
        raise ValueError(
            f"pattern {pattern!r} has {len(patt)} marks but {word!r} has {len(word)} letters"
        )

    out: List[LetterFeedback] = []
    for i, (ch, mark) in enumerate(zip(word, patt)):
        state = PATTERN_STATES.get(mark)
        if state is None:
            raise ValueError(f"unknown pattern char {mark!r} (use one of {''.join(PATTERN_STATES)})")
        out.append(LetterFeedback(letter=ch, position=i, state=state))
    return out


def feedback_round(guess: str, answer: str) -> List[LetterFeedback]:
    """
    Feedback the game would show for `guess` against the hidden `answer`.

    Both words are compared by their singular forms.

    Raises:
      ValueError if the effective lengths differ.
    """
    g = get_singular_form(guess.strip())
    a = get_singular_form(answer.strip())
    return _round_from_pattern(g, score(g, a))


def round_to_pattern(feedback: FeedbackRound) -> str:
    """Render a round as a pattern string, ordered by position."""
    return "".join(STATE_CHARS[fb.state] for fb in sorted(feedback, key=lambda fb: fb.position))

"""
Game harness core primitives.

- run_case:  play a single puzzle (one hidden answer) by always guessing a
             random word that is still consistent with the feedback so far.
- run_batch: run many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Words are compared by their singular forms: guessing "boxes" when the answer
is "box" is a win, and feedback is computed on the singulars.
"""

from __future__ import annotations
import random
import time
from typing import Dict, List, Tuple

from wordnarrow.engine import (
    feedback_round,
    filter_words_by_feedback,
    pick_random_word,
    round_to_pattern,
)
from wordnarrow.words.plural import get_effective_length, get_singular_form

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        pool: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the guesser wins or the turn budget is exhausted.

    Args:
        answer:    the hidden word for this case (its singular length must be N)
        pool:      candidate universe (plurals allowed)
        N:         singular word length
        max_turns: must be 6 (Wordle rule; enforced)
        seed:      RNG seed to make guesses reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (list[int]), answer (str)
    """
    _assert_wordle_turns(max_turns)
    if get_effective_length(answer) != N:
        raise ValueError(f"answer {answer!r} does not have effective length {N}")

    rng = random.Random(seed)
    target = get_singular_form(answer)

    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    candidates = filter_words_by_feedback(pool, [], N)

    t0 = time.time()
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        remaining.append(len(candidates))

        # The answer always survives its own feedback, so this only happens
        # when it was never in the pool.
        guess = pick_random_word(candidates, rng) or answer

        fb = feedback_round(guess, answer)
        history.append((guess, round_to_pattern(fb)))

        if get_singular_form(guess) == target:
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "remaining": remaining, "answer": answer
            }

        candidates = filter_words_by_feedback(candidates, [fb], N)

    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": WORDLE_MAX_TURNS, "time_ms": dt,
        "history": history, "remaining": remaining, "answer": answer
    }


def run_batch(
        answers: List[str],
        *,
        pool: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to effective length N) are used.

    Each case's seed is derived from the base seed (seed + index).
    """
    _assert_wordle_turns(max_turns)

    cases = [w for w in answers if get_effective_length(w) == N]
    if sample is not None:
        cases = cases[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(ans, pool=pool, N=N, max_turns=WORDLE_MAX_TURNS, seed=case_seed))
    return out

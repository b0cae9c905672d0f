# apps/cli/filter.py
"""
Narrow a word pool by the feedback rounds of a game in progress.

Usage:
    python -m apps.cli.filter --pool data/pool.txt --N 5 \
        --round crane:-Y--G --round sloth:..G--
    # show why each word was dropped:
    python -m apps.cli.filter --pool data/pool.txt --N 5 --round crane:-Y--G --explain
    # suggest one survivor (seeded):
    python -m apps.cli.filter --pool data/pool.txt --N 5 --round crane:-Y--G --pick --seed 7

Each --round is GUESS:PATTERN, one pattern char per letter of the guess's
singular form: G green, Y yellow, - gray, . unknown.
"""

from __future__ import annotations

import argparse
import random
from typing import List

from wordnarrow.datasets import read_text_pool
from wordnarrow.engine import (
    FeedbackRound,
    explain_mismatch,
    filter_words_by_feedback,
    parse_pattern,
    pick_random_word,
)
from wordnarrow.words import explain_singular, get_effective_length


def _parse_rounds(items: List[str]) -> List[FeedbackRound]:
    rounds: List[FeedbackRound] = []
    for item in items:
        guess, sep, pattern = item.partition(":")
        if not sep:
            raise SystemExit(f"--round must look like GUESS:PATTERN, got {item!r}")
        try:
            rounds.append(parse_pattern(guess, pattern))
        except ValueError as e:
            raise SystemExit(f"bad --round {item!r}: {e}") from e
    return rounds


def _print_explain(pool: List[str], rounds: List[FeedbackRound], N: int) -> None:
    """One line per rejected word, sorted, with the first failing check."""
    for w in sorted(pool):
        singular, rule = explain_singular(w)
        tag = f"{w} ({singular} via {rule})" if rule and singular != w else w
        if get_effective_length(w) != N:
            print(f"  x {tag}: effective length {len(singular)} != {N}")
            continue
        for i, fb in enumerate(rounds, 1):
            reason = explain_mismatch(w, fb)
            if reason:
                print(f"  x {tag}: round {i}: {reason}")
                break


def main():
    ap = argparse.ArgumentParser(description="wordnarrow — filter a pool by feedback")
    ap.add_argument("--pool", required=True, help="text file to take candidate words from")
    ap.add_argument("--N", type=int, default=5, help="target singular word length")
    ap.add_argument("--round", dest="rounds", action="append", default=[],
                    help="GUESS:PATTERN (repeatable, applied in order)")
    ap.add_argument("--min-length", type=int, default=3,
                    help="ignore words shorter than this when reading the pool")
    ap.add_argument("--explain", action="store_true", help="list rejected words and why")
    ap.add_argument("--pick", action="store_true", help="print one random survivor only")
    ap.add_argument("--seed", type=int, help="RNG seed for --pick")
    args = ap.parse_args()

    pool = read_text_pool(args.pool, min_length=args.min_length)
    rounds = _parse_rounds(args.rounds)
    survivors = filter_words_by_feedback(pool, rounds, args.N)

    if args.explain:
        kept = set(survivors)
        print(f"Rejected ({len(pool) - len(survivors)}):")
        _print_explain([w for w in pool if w not in kept], rounds, args.N)

    if args.pick:
        word = pick_random_word(survivors, random.Random(args.seed))
        print(word if word is not None else "(no candidates)")
        return

    print(f"Candidates ({len(survivors)}):")
    for w in survivors:
        print(f"  {w}")


if __name__ == "__main__":
    main()

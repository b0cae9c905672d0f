# apps/cli/run.py
"""
CLI entry point for simulating games over a word pool.

This script:
  1) Validates the pool (prints counts + SHA, playable words for N).
  2) Plays one game per playable word (or a seeded sample) with a random
     consistent guesser, showing a tqdm progress bar.
  3) Writes:
       - CSV:  per-case results + guess/pattern/candidate-count columns
       - JSON: manifest with config, pool report, git commit, win rate
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from tqdm import tqdm

from wordnarrow.datasets import validate_pool, pretty_summary, read_lines
from wordnarrow.harness import run_case, WORDLE_MAX_TURNS
from wordnarrow.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordnarrow.words import get_effective_length


def _load_words(path: str) -> list[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks
    and repeats.
    """
    words = [w.strip().lower() for w in read_lines(path) if w.strip()]
    return list(dict.fromkeys(words))


def main():
    ap = argparse.ArgumentParser(description="wordnarrow — simulate games over a pool")
    ap.add_argument("--pool", required=True, help="word list, one word per line")
    ap.add_argument("--N", type=int, default=5, help="singular word length")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    args = ap.parse_args()

    # 1) Validate and summarize
    rep = validate_pool(args.N, args.pool)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"pool file not found: {args.pool}")

    pool = _load_words(args.pool)
    answers = [w for w in pool if get_effective_length(w) == args.N]
    if not answers:
        raise SystemExit(f"no words of effective length {args.N} in {args.pool}")

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    results = []
    for idx, ans in enumerate(tqdm(cases, ncols=80, desc="Playing", unit="game",
                                   disable=args.no_progress), 1):
        results.append(run_case(ans, pool=pool, N=args.N, seed=args.seed + idx))

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    wins = sum(1 for r in results if r["success"])
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "pool": rep,
        "num_cases": len(results),
        "wins": wins,
        "win_rate": wins / len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Won {wins}/{len(results)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

"""
Candidate-pool validator for wordnarrow.

What this module does:
- Validate a pool file (one word per line) for a target singular length N.
- Enforce formatting rules (lowercase, a–z only, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Count how many words have effective length N, and how many of those are
  plurals (matched through their singular form).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordnarrow.datasets import validate_pool, pretty_summary
    rep = validate_pool(5, "data/pool.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordnarrow.words.plural import get_effective_length, is_plural


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class PoolReport:
    """Top-level validation result for one pool file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    playable: int        # unique words whose singular form has length N
    plurals: int         # playable words that are plural forms
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a pool file.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isalpha() and w.isascii() and w == w.lower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_pool(N: int, pool_path: str) -> Dict:
    """
    Validate a candidate pool for singular length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see PoolReport) with counts, SHA-256,
        invalid/duplicate diagnostics, the playable/plural counts for N, a
        strict `passed` flag (file exists, no invalid lines, no duplicates,
        at least one playable word) and `issues`.
    """
    issues: List[str] = []
    p = Path(pool_path)

    if not p.exists():
        issues.append(f"pool file not found: {pool_path}")
        rep = PoolReport(N, pool_path, False, "", 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = list(dict.fromkeys(words))
    playable = [w for w in unique if get_effective_length(w) == N]
    plurals = sum(1 for w in playable if is_plural(w))

    if invalid:
        issues.append(f"pool has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("pool contains duplicate lines")
    if not playable:
        issues.append(f"pool contains 0 words of effective length {N}")

    rep = PoolReport(
        N=N,
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        playable=len(playable),
        plurals=plurals,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | pool=1200 (uniq=1200, sha=abc123...) | playable=310 (plurals=42) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | pool={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| playable={report['playable']} (plurals={report['plurals']}) | {status}"
    )

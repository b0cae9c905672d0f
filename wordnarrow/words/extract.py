"""
Raw text -> candidate pool.

Rules:
  - lowercase everything
  - keep only runs of a-z (digits, punctuation, apostrophes split words)
  - de-duplicate, keeping first occurrence order
  - drop words shorter than `min_length`
"""

from __future__ import annotations

import re
from typing import List

WORD_RE = re.compile(r"[a-z]+")

DEFAULT_MIN_LENGTH = 3


def extract_words_from_text(text: str, min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """
    Extract unique lowercase words from free text.

    Example:
      extract_words_from_text("The cats; THE dogs!") -> ["the", "cats", "dogs"]
    """
    seen = set()
    out: List[str] = []
    for w in WORD_RE.findall(text.lower()):
        if w in seen:
            continue
        seen.add(w)
        if len(w) >= min_length:
            out.append(w)
    return out

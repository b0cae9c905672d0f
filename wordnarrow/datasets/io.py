from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordnarrow.words.extract import DEFAULT_MIN_LENGTH, extract_words_from_text


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_text_pool(p: Path | str, min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """
    Read any UTF-8 text (prose, a word list, scraped page text) and return its
    unique lowercase words, first-occurrence order.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return extract_words_from_text(p.read_text(encoding="utf-8"), min_length=min_length)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

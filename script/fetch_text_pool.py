"""
Download a web page and turn its visible text into a candidate pool.

What it does:
- Downloads the page.
- Parses visible text (scripts/styles dropped).
- Extracts unique lowercase words (a–z runs, at least --min-length letters),
  keeping first-occurrence order.
- Writes one word per line.

Usage:
    python -m script.fetch_text_pool --url https://en.wikipedia.org/wiki/Wordle \
        --out data/pool.txt
    # or alphabetically sorted:
    python -m script.fetch_text_pool --url ... --sort --out data/pool.txt
"""

import argparse

import requests
from bs4 import BeautifulSoup

from wordnarrow.datasets import write_lines
from wordnarrow.words import extract_words_from_text


def page_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text("\n", strip=True)


def fetch_pool(url: str, min_length: int = 3) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words_from_text(page_text(r.text), min_length=min_length)


def main():
    ap = argparse.ArgumentParser(description="Build a word pool from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/pool.txt")
    ap.add_argument("--min-length", type=int, default=3)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_pool(args.url, min_length=args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()

"""
Build a dictionary file for the game from a web page of words.

What it does:
- Downloads the page.
- Parses visible text and extracts every purely alphabetic token.
- Lowercases, keeps words within --min/--max length, de-duplicates while
  preserving page order, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words --out wordlist.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url https://example.org/words --sort --out wordlist.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import unique_preserve_order, write_lines

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def extract_words(html: str, min_len: int = 2, max_len: int = 10) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    return unique_preserve_order(w for w in words if min_len <= len(w) <= max_len)


def fetch_words(url: str, min_len: int = 2, max_len: int = 10) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, min_len, max_len)


def main():
    ap = argparse.ArgumentParser(description="Extract a word list from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordlist.txt")
    ap.add_argument("--min", dest="min_len", type=int, default=2, help="shortest word kept")
    # Longer words can never be built from a 10-letter base string
    ap.add_argument("--max", dest="max_len", type=int, default=10, help="longest word kept")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_len, args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()

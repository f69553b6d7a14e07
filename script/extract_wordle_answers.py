"""
Scrape past Wordle answers and write them as an answers list.

What it does:
- Downloads the page with historical answers.
- Extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>, taking the 5-letter
  UPPERCASE token as the answer.
- Lowercases and de-duplicates (calendar order kept unless --sort).
- Optionally merges with an existing list so reruns only add new answers.

Usage:
    python -m script.extract_wordle_answers --out searchwordle/datasets/data/allowed_answers.txt
    python -m script.extract_wordle_answers --merge --sort --out allowed_answers.txt
"""

import argparse
import re
from pathlib import Path
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

from searchwordle.datasets.io import read_words, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(words))


def parse_answers(html: str) -> List[str]:
    """Pull answers out of the page's visible text, oldest row first."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL, timeout: float = 30) -> List[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return parse_answers(r.text)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Extract past Wordle answers into a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="searchwordle/datasets/data/allowed_answers.txt")
    ap.add_argument("--merge", action="store_true",
                    help="keep words already in --out and append new ones")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args(argv)

    answers = fetch_answers(args.url)
    if args.merge and Path(args.out).exists():
        answers = unique_preserve_order(read_words(args.out) + answers)
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()

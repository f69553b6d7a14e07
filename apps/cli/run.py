"""
Offline replay of address-bar queries.

This script:
  1) Validates the word lists (prints counts + SHA, answers ⊆ guesses).
  2) Loads the lexicon and starts one game session (secret drawn with --seed).
  3) Plays every line of --queries exactly as the /game endpoint would, with a
     live progress indicator, and writes:
       - CSV:  one row per guess token
       - JSON: manifest with config, word-list report, git commit, counts
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, Iterable, List

from tqdm import tqdm

from searchwordle.datasets import LoadError, default_paths, load_lexicon, pretty_summary, \
    read_words, validate_wordlists
from searchwordle.game import GameSession
from searchwordle.game.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def replay(game: GameSession, queries: Iterable[str]) -> List[Dict]:
    """
    Play each query against `game`; one result row per guess token.

    Stops early once a query solves the game, like a player would.
    """
    rows: List[Dict] = []
    for q in queries:
        outcomes = game.outcomes(q)
        for o in outcomes:
            rows.append({
                "session_id": game.session_id,
                "query": q,
                "guess": o.guess,
                "clue": o.clue,
                "rendered": o.line(),
                "solved": o.solved,
                "error": o.error,
            })
        if any(o.solved for o in outcomes):
            break
    return rows


def main(argv=None) -> int:
    answers_default, guesses_default = default_paths()

    ap = argparse.ArgumentParser(description="searchwordle — replay queries offline")
    ap.add_argument("--queries", required=True, help="text file, one address-bar query per line")
    ap.add_argument("--answers", default=str(answers_default), help="answers list (secret pool)")
    ap.add_argument("--guesses", default=str(guesses_default), help="accepted guesses list")
    ap.add_argument("--strict", action="store_true", help="fail on malformed word-list entries")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for the secret")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Word-list report
    rep = validate_wordlists(args.answers, args.guesses)
    print(pretty_summary(rep))

    # 2) Lexicon + session
    try:
        lexicon = load_lexicon(args.answers, args.guesses, strict=args.strict)
    except LoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    game = GameSession.new(lexicon, random.Random(args.seed))
    queries = read_words(args.queries)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    if mode == "bar":
        rows = replay(game, tqdm(queries, ncols=80, desc="Replaying", unit="query"))
    else:
        rows = replay(game, queries)
    elapsed = time.time() - start

    if mode == "plain":
        sys.stderr.write(f"[{len(queries)} queries] {len(rows)} guesses in {elapsed:.2f}s\n")

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "session_id": game.session_id,
        "num_queries": len(queries),
        "num_guesses": len(rows),
        "solved": any(r["solved"] for r in rows),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

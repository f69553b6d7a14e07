"""
Run the address-bar game server.

Settings come from SEARCHWORDLE_* environment variables; any flag given here
overrides the matching setting. A word list that fails to load is fatal.

Usage:
    python -m apps.cli.serve --port 5000 --answers allowed_answers.txt --guesses allowed_guesses.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from searchwordle.datasets import LoadError
from searchwordle.web import Settings, create_app

log = logging.getLogger("searchwordle.serve")


def build_settings(argv=None) -> Settings:
    base = Settings.from_env()

    ap = argparse.ArgumentParser(description="searchwordle — address-bar word game server")
    ap.add_argument("--host", default=base.host)
    ap.add_argument("--port", type=int, default=base.port)
    ap.add_argument("--answers", type=Path, default=base.answers_path,
                    help="answers list (candidate secrets), one word per line")
    ap.add_argument("--guesses", type=Path, default=base.guesses_path,
                    help="extra accepted guesses, one word per line")
    ap.add_argument("--strict", action=argparse.BooleanOptionalAction, default=base.strict_lexicon,
                    help="reject word lists with malformed entries at startup")
    ap.add_argument("--seed", type=int, default=base.seed,
                    help="seed secret selection (testing only)")
    ap.add_argument("--max-sessions", type=int, default=base.max_sessions)
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    return replace(
        base,
        host=args.host,
        port=args.port,
        answers_path=args.answers,
        guesses_path=args.guesses,
        strict_lexicon=args.strict,
        seed=args.seed,
        max_sessions=args.max_sessions,
    )


def main(argv=None) -> int:
    settings = build_settings(argv)
    try:
        app = create_app(settings)
    except LoadError as e:
        log.error("Cannot start: %s", e)
        return 1

    log.info("Serving on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

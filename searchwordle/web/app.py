"""
Flask transport for the address-bar game.

Routes:
  /               install hint (page carries the OpenSearch <link>)
  /search?q=      plain search page, echoes the query
  /game?q=        search-suggestion feed: [q, [one line per guess]]
  /opensearch.xml OpenSearch description wiring /search and /game together

Each browser gets its own GameSession; only the session id travels in the
(signed) Flask session cookie, the secret stays in the server-side store.
Suggestion fetches that carry no cookie are keyed by client address and
User-Agent instead, so the secret stays put between keystrokes.
"""

from __future__ import annotations

import hashlib
import json
import logging
import random
from typing import Optional

from flask import Blueprint, Flask, Response, abort, current_app, render_template, request, session

from searchwordle.datasets.lexicon import Lexicon, load_lexicon
from searchwordle.game.session import GameSession, SessionStore
from .config import Settings

log = logging.getLogger(__name__)

SUGGESTIONS_MIMETYPE = "application/x-suggestions+json"
OPENSEARCH_MIMETYPE = "application/opensearchdescription+xml"
SESSION_KEY = "game_id"
EXTENSION_KEY = "searchwordle"


def create_app(settings: Optional[Settings] = None, *, lexicon: Optional[Lexicon] = None,
               rng: Optional[random.Random] = None) -> Flask:
    """
    Build the Flask app.

    The lexicon is loaded here, once; a LoadError propagates so a broken word
    list stops startup. Pass `lexicon` and/or `rng` to skip file loading or to
    make secret selection reproducible.
    """
    settings = settings or Settings.from_env()

    app = Flask(__name__, static_folder=None)
    app.config["SECRET_KEY"] = settings.secret_key

    if lexicon is None:
        lexicon = load_lexicon(settings.answers_path, settings.guesses_path,
                               strict=settings.strict_lexicon)
    if rng is None and settings.seed is not None:
        rng = random.Random(settings.seed)

    app.extensions[EXTENSION_KEY] = SessionStore(lexicon, rng, settings.max_sessions)
    app.register_blueprint(_routes())
    return app


def get_store() -> SessionStore:
    return current_app.extensions[EXTENSION_KEY]


def client_key() -> str:
    """Stable session id for requests without a cookie."""
    raw = f"{request.remote_addr}|{request.headers.get('User-Agent', '')}"
    return "client-" + hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


def current_game() -> GameSession:
    """The caller's GameSession, created (and remembered in the cookie) on first use."""
    game = get_store().get_or_create(session.get(SESSION_KEY) or client_key())
    session[SESSION_KEY] = game.session_id
    return game


def _routes() -> Blueprint:
    bp = Blueprint("game", __name__)

    @bp.get("/")
    def home():
        log.info("Home")
        return render_template("page.html",
                               content="Right click on the address bar to install the search engine.")

    @bp.get("/search")
    def search():
        q = request.args.get("q", "")
        log.info("Searching: %s", q)
        return render_template("page.html", content=f"Content: {q}")

    @bp.get("/game")
    def game():
        q = request.args.get("q")
        if q is None:
            abort(400, description="missing query parameter 'q'")
        log.info("Gaming: %s", q)

        lines = current_game().play(q)
        log.info("Game response: %s", lines)

        body = json.dumps([q, lines], ensure_ascii=False)
        return Response(body, mimetype=SUGGESTIONS_MIMETYPE)

    @bp.get("/opensearch.xml")
    def opensearch():
        xml = render_template("opensearch.xml")
        return Response(xml, mimetype=OPENSEARCH_MIMETYPE)

    return bp

from __future__ import annotations
import argparse
import json
import logging
import os
from typing import List, Optional

from flask import Blueprint, Flask, Response, current_app, jsonify, request
from shakesearch import Engine, LoadError, Mode
from shakesearch import config as CFG
from shakesearch.models import SearchResult

log = logging.getLogger(__name__)

MISSING_QUERY = "missing search query in URL params"
ENCODING_FAILURE = "encoding failure"

api = Blueprint("search", __name__)


def create_app(engine: Engine) -> Flask:
    """Build the Flask app around an already loaded engine."""
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.extensions["shakesearch"] = engine
    app.register_blueprint(api)

    @app.get("/")
    def home():
        return app.send_static_file("index.html")

    return app


def _engine() -> Engine:
    return current_app.extensions["shakesearch"]


def _query() -> Optional[str]:
    q = request.args.get("q", "", type=str)
    return q or None


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _results_response(results: List[SearchResult]) -> Response:
    try:
        body = json.dumps([r.to_dict() for r in results], ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        log.exception("result encoding failed: %s", exc)
        return _text(ENCODING_FAILURE, 500)
    return Response(body + "\n", mimetype="application/json")


def _run(mode: Mode) -> Response:
    q = _query()
    if q is None:
        return _text(MISSING_QUERY, 400)
    return _results_response(_engine().search(q, mode))


# ---------- API ----------
@api.get("/search")
def search_quotes():
    return _run(Mode.QUOTES)

@api.get("/search-context")
def search_context():
    return _run(Mode.CONTEXT)

@api.get("/api/search")
def search_any():
    raw = request.args.get("mode", Mode.QUOTES.value, type=str)
    try:
        mode = Mode(raw)
    except ValueError:
        return _text(f"unknown search mode: {raw}", 400)
    return _run(mode)

@api.get("/health")
def health():
    eng = _engine()
    return jsonify({"ok": eng.ready, **eng.stats()})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Shakespeare search server")
    ap.add_argument("--corpus", default=CFG.DEFAULT_CORPUS_PATH, help="Complete works .txt")
    ap.add_argument("--quotes", default=CFG.DEFAULT_QUOTES_PATH, help="Quote table .csv")
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=os.environ.get("PORT") or str(CFG.DEFAULT_PORT),
                    help=f"Port to listen on (default: $PORT, else {CFG.DEFAULT_PORT})")
    ap.add_argument("--verbose", action="store_true", help="Log load progress")
    ap.add_argument("--debug", action="store_true", help="Enable the Flask debugger")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose or CFG.VERBOSE else logging.WARNING)

    engine = Engine()
    try:
        engine.load(args.corpus, args.quotes, verbose=args.verbose)
    except LoadError as exc:
        log.error("startup aborted: %s", exc)
        return 1

    app = create_app(engine)
    print(f"Listening on port {args.port}...")
    try:
        app.run(host=args.host, port=args.port, debug=args.debug, threaded=True, use_reloader=False)
    finally:
        engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

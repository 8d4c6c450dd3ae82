# ==============================================================
# Flask gateway for the Wi-Fi login DFA
# - /input?sym=u|p|s  -> Continue / Login Successful / Invalid
# - /reset            -> Reset
# - /state, /health   -> JSON
# ==============================================================

import logging
import uuid
from flask import Flask, Response, jsonify, request, session

from login_dfa.gateway.protocol import Gateway
from login_dfa.gateway.sessions import SessionStore
from login_dfa.utils.config import Settings
from login_dfa.utils.logger import get_logger

SESSION_HEADER = "X-Session-Id"
TRUTHY = ("1", "true", "yes", "on")


def _text(body):
    return Response(body, status=200, mimetype="text/plain")


def current_session_id():
    """
    Explicit sid parameter or X-Session-Id header first; otherwise a random
    id kept in the signed session cookie.
    """
    sid = request.values.get("sid") or request.headers.get(SESSION_HEADER)
    if sid:
        return sid
    if "sid" not in session:
        session["sid"] = uuid.uuid4().hex
    return session["sid"]


def create_app(settings=None):
    settings = settings or Settings.from_env()

    # ==============================================================
    # Flask Setup
    # ==============================================================
    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    get_logger(log_dir=settings.log_dir, level=app.logger.level)

    gateway = Gateway(SessionStore(max_sessions=settings.max_sessions))
    app.extensions["login_dfa"] = gateway

    # ==============================================================
    # Protocol endpoints
    # ==============================================================
    @app.route('/input', methods=['GET', 'POST'])
    def submit_symbol():
        sid = current_session_id()
        sym = request.values.get('sym')
        once = (request.values.get('once') or '').lower() in TRUTHY
        result = gateway.handle_input(sid, sym, once=once)
        app.logger.info("[GATEWAY] %s sym=%r -> %s", sid, sym, result)
        return _text(result)

    @app.route('/reset', methods=['GET', 'POST'])
    def reset_session():
        sid = current_session_id()
        ack = gateway.handle_reset(sid)
        app.logger.info("[GATEWAY] %s reset", sid)
        return _text(ack)

    # ==============================================================
    # Introspection
    # ==============================================================
    @app.route('/state')
    def session_state():
        return jsonify(gateway.describe(current_session_id()))

    @app.route('/health')
    def health():
        return jsonify({"ok": True, "sessions": len(gateway.store)})

    return app

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .services.assignments import AssignmentError, AssignmentFailure, generate
from .services.schedule import parse_draw_date
from .views.draw import draw_bp
from .views.public import public_bp
from .views.roster import roster_bp


__all__ = ["create_app", "generate"]


def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    app.config["ASSIGNMENT_ENC_KEY"] = os.environ.get("ASSIGNMENT_ENC_KEY", "").strip()
    app.config["SANTA_MAX_ATTEMPTS"] = int(os.environ.get("SANTA_MAX_ATTEMPTS", "100"))
    app.config["SANTA_MAX_PARTICIPANTS"] = int(os.environ.get("SANTA_MAX_PARTICIPANTS", "5000"))
    # ISO date; the draw is "due" from this day on
    app.config["SANTA_DRAW_DATE"] = os.environ.get("SANTA_DRAW_DATE", "").strip() or None
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO").upper()

    if config:
        app.config.update(config)

    if app.config["SANTA_DRAW_DATE"]:
        parse_draw_date(app.config["SANTA_DRAW_DATE"])

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    # Blueprints
    app.register_blueprint(public_bp)
    app.register_blueprint(draw_bp)
    app.register_blueprint(roster_bp)

    @app.errorhandler(AssignmentError)
    def handle_assignment_error(e: AssignmentError):
        if isinstance(e, AssignmentFailure):
            app.logger.error("Assignment invariant violated: %s", e)
            status = 500
        else:
            status = 400
        return jsonify(error=str(e), type=type(e).__name__), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify(error=e.description, type=type(e).__name__), e.code

    return app

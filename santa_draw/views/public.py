from __future__ import annotations

from datetime import date

from flask import Blueprint, current_app, jsonify, request
from flask.views import MethodView
from werkzeug.exceptions import BadRequest

from ..services.schedule import is_draw_due, parse_draw_date


public_bp = Blueprint("public", __name__)


def _configured_draw_date():
    value = current_app.config.get("SANTA_DRAW_DATE")
    return parse_draw_date(value) if value else None


class LandingView(MethodView):
    def get(self):
        draw_date = _configured_draw_date()
        return jsonify(
            service="santa-draw",
            draw_date=draw_date.isoformat() if draw_date else None,
            draw_due=is_draw_due(draw_date),
        )


class ScheduleView(MethodView):
    def get(self):
        try:
            raw = request.args.get("date")
            draw_date = parse_draw_date(raw) if raw else _configured_draw_date()
            raw_today = request.args.get("today")
            today = parse_draw_date(raw_today) if raw_today else date.today()
        except ValueError as e:
            raise BadRequest(str(e)) from e

        if draw_date is None:
            raise BadRequest("No draw date given or configured.")

        return jsonify(
            date=draw_date.isoformat(),
            today=today.isoformat(),
            due=is_draw_due(draw_date, today),
        )


public_bp.add_url_rule("/", view_func=LandingView.as_view("landing"))
public_bp.add_url_rule("/api/schedule", view_func=ScheduleView.as_view("schedule"))

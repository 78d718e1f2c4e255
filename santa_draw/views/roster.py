from __future__ import annotations

from flask import Blueprint, jsonify
from flask.views import MethodView
from werkzeug.exceptions import BadRequest

from ..services.roster import Roster
from .payload import json_body


roster_bp = Blueprint("roster", __name__, url_prefix="/api/roster")


class RosterView(MethodView):
    """
    Turns pasted names (one per line or comma separated) into participants.
    A fresh roster per request; ids start at person-1 every time.
    """
    def post(self):
        names = json_body().get("names")
        if not isinstance(names, str):
            raise BadRequest('"names" must be a string.')

        roster = Roster()
        update = roster.add_many(names)
        return jsonify(
            participants=[p.to_dict() for p in roster.participants()],
            added=len(update.added),
            skipped=update.skipped,
            errors=update.errors,
        )


roster_bp.add_url_rule("", view_func=RosterView.as_view("parse"))

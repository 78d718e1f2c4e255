from __future__ import annotations

import random

from flask import Blueprint, current_app, jsonify
from flask.views import MethodView
from werkzeug.exceptions import BadRequest

from ..models import Participant
from ..security import open_receiver, seal_receiver
from ..services.assignments import generate
from ..services.schedule import draw_year
from .payload import json_body


draw_bp = Blueprint("draw", __name__, url_prefix="/api/draw")


def _participants_from(payload: dict) -> list[Participant]:
    raw = payload.get("participants")
    if not isinstance(raw, list):
        raise BadRequest('"participants" must be a list.')

    limit = current_app.config["SANTA_MAX_PARTICIPANTS"]
    if len(raw) > limit:
        raise BadRequest(f"At most {limit} participants per draw.")

    people = []
    for item in raw:
        if not isinstance(item, dict) or "id" not in item:
            raise BadRequest('Each participant needs an "id" and a "name".')
        pid, name = item["id"], item.get("name")
        if not isinstance(pid, (str, int)) or isinstance(pid, bool):
            raise BadRequest("Participant ids must be strings or integers.")
        if not isinstance(name, str) or not name.strip():
            raise BadRequest(f"Participant {pid!r} has no name.")
        people.append(Participant(id=pid, name=name.strip()))
    return people


class DrawView(MethodView):
    def post(self):
        payload = json_body()
        people = _participants_from(payload)

        seed = payload.get("seed")
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            raise BadRequest('"seed" must be an integer.')
        rng = random.Random(seed)

        assignments = generate(
            people,
            rng=rng,
            max_attempts=current_app.config["SANTA_MAX_ATTEMPTS"],
        )
        current_app.logger.info("Drew assignments for %s participants", len(assignments))

        if payload.get("sealed"):
            rows = [
                {
                    "giver_id": a.giver_id,
                    "giver_name": a.giver_name,
                    "receiver_token": seal_receiver(a.receiver_id),
                }
                for a in assignments
            ]
        else:
            rows = [a.to_dict() for a in assignments]

        return jsonify(year=draw_year(), count=len(rows), assignments=rows)


class OpenSealedView(MethodView):
    def post(self):
        token = json_body().get("token")
        if not isinstance(token, str) or not token:
            raise BadRequest('"token" is required.')
        try:
            receiver_id = open_receiver(token)
        except ValueError as e:
            raise BadRequest(str(e)) from e
        return jsonify(receiver_id=receiver_id)


draw_bp.add_url_rule("", view_func=DrawView.as_view("draw"))
draw_bp.add_url_rule("/open", view_func=OpenSealedView.as_view("open"))

from __future__ import annotations

from flask import request
from werkzeug.exceptions import BadRequest


def json_body() -> dict:
    """The request's JSON object; anything else (missing, malformed, a list) is a 400."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequest("Expected a JSON object body.")
    return payload

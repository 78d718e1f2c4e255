from __future__ import annotations

import base64
import hashlib
import json

from cryptography.fernet import Fernet, InvalidToken
from flask import current_app


# ---------------------------------------------------------------------------
# Sealed assignments
#
# A draw can hand back each receiver as an encrypted token instead of a
# plain id, so the person running the draw never sees who got whom. Each
# giver opens only their own token.
#
# NOTE: anyone holding ASSIGNMENT_ENC_KEY / SECRET_KEY can still open every
# token.
# ---------------------------------------------------------------------------


def _assignment_fernet() -> Fernet:
    """Returns a Fernet instance keyed by ASSIGNMENT_ENC_KEY or derived from SECRET_KEY."""
    explicit = (current_app.config.get("ASSIGNMENT_ENC_KEY") or "").strip()
    if explicit:
        # Expect a urlsafe base64-encoded 32-byte key.
        return Fernet(explicit.encode("utf-8"))

    # Fernet requires a urlsafe base64-encoded 32-byte key.
    secret = (current_app.config.get("SECRET_KEY") or "").encode("utf-8")
    digest = hashlib.sha256(b"santa-draw-assignments|" + secret).digest()
    return Fernet(base64.urlsafe_b64encode(digest))


def seal_receiver(receiver_id: str | int) -> str:
    """Encrypt receiver_id -> ciphertext token (string). Ids must be JSON-serializable."""
    f = _assignment_fernet()
    token = f.encrypt(json.dumps(receiver_id).encode("utf-8"))
    return token.decode("utf-8")


def open_receiver(token: str) -> str | int:
    """Decrypt ciphertext token -> receiver_id. Raises ValueError on failure."""
    try:
        f = _assignment_fernet()
        raw = f.decrypt(token.encode("utf-8"))
        return json.loads(raw.decode("utf-8"))
    except (InvalidToken, ValueError, TypeError, AttributeError) as e:
        raise ValueError("Invalid assignment token") from e

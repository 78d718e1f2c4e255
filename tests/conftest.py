from __future__ import annotations

import pytest

from santa_draw import create_app


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "ASSIGNMENT_ENC_KEY": "",
            "SANTA_DRAW_DATE": None,
            "SANTA_MAX_PARTICIPANTS": 50,
        }
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


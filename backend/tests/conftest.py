from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(testing=True))
    with app.test_client() as test_client:
        yield test_client

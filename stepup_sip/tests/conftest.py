from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from stepup_sip.app import create_app
from stepup_sip.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, app_name="Step-Up SIP Calculator")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    flask_app = create_app(settings)
    with flask_app.test_client() as test_client:
        yield test_client

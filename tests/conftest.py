"""Shared pytest setup.

The environment is prepared at import time, before any test module imports
`app` or `core.logger`, so no real credentials are read and logs go to a
throwaway directory.
"""

import os
import tempfile

import pytest
from flask import Blueprint, Flask

os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="lead_forms_logs_")
os.environ.pop("GOOGLE_APPLICATION_CREDENTIALS", None)


@pytest.fixture(autouse=True)
def _clear_sheet_overrides(monkeypatch):
    for name in ("BUY_SPREADSHEET_ID", "SELL_SPREADSHEET_ID", "RENT_SPREADSHEET_ID"):
        monkeypatch.delenv(name, raising=False)


class FakeSheetsClient:
    """Records appended rows instead of calling Google."""

    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response if response is not None else {"updates": {"updatedRows": 1}}
        self.error = error

    def append_row(self, spreadsheet_id, row):
        self.calls.append((spreadsheet_id, row))
        if self.error is not None:
            raise self.error
        return dict(self.response, spreadsheetId=spreadsheet_id)


@pytest.fixture
def fake_sheets():
    return FakeSheetsClient()


@pytest.fixture
def make_client():
    """Build a Flask test client with the form routes bound to `sheets_client`."""
    from api.routes_forms import register_form_routes

    def _make(sheets_client):
        app = Flask(__name__)
        api = Blueprint("api", __name__)
        register_form_routes(api, sheets_client)
        app.register_blueprint(api, url_prefix="/api")
        return app.test_client()

    return _make

"""Shared fixtures for json2dart tests."""
import pytest
from fastapi.testclient import TestClient

from json2dart.api.routes_generate import get_settings_store
from json2dart.main import app
from json2dart.services.settings_store import SettingsStore


@pytest.fixture
def settings_store(tmp_path):
    """Settings store backed by a file in a temporary directory."""
    return SettingsStore(tmp_path / "settings" / "settings.json")


@pytest.fixture
def client(settings_store):
    """API client whose settings persistence points at the temporary store."""
    app.dependency_overrides[get_settings_store] = lambda: settings_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

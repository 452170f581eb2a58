# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from streamprobe.services.api.app import create_app
from streamprobe.services.api.deps import get_media_probe


@pytest.fixture()
def media_root(tmp_path, monkeypatch):
    monkeypatch.setenv("MEDIA_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture()
def fake_prober(make_prober):
    """Set `.document` / `.error` per test."""
    return make_prober()


@pytest.fixture()
def api_client(media_root, fake_prober):
    """
    A TestClient whose `get_media_probe` dependency is overridden to
    return `fake_prober`, so no ffprobe binary is needed.
    """
    app = create_app()
    app.dependency_overrides[get_media_probe] = lambda: fake_prober

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

# tests/conftest.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from streamprobe.common import settings as settings_mod
from streamprobe.domain.entities.probe import ProbeDocument


class FakeProber:
    """MediaProbePort test double: returns a canned document or raises a canned error."""

    def __init__(self, document: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.document = document or {}
        self.error = error
        self.calls: List[Path] = []

    def probe(self, path: Path) -> ProbeDocument:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return ProbeDocument(raw=self.document)


@pytest.fixture(autouse=True)
def _fresh_settings():
    # settings are cached per process; tests that touch env need a clean slate
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def sample_document() -> Dict[str, Any]:
    return {
        "streams": [
            {"index": 0, "codec_type": "video", "codec_name": "h264", "width": 1920, "height": 1080},
            {"index": 1, "codec_type": "audio", "codec_name": "aac", "tags": {"language": "jpn"}},
            {"index": 2, "codec_type": "data", "codec_name": "bin_data"},
        ],
        "format": {"format_name": "matroska,webm", "duration": "1420.5"},
    }


@pytest.fixture()
def make_prober():
    """Factory fixture: make_prober(document=..., error=...) -> FakeProber."""
    return FakeProber

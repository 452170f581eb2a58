# streamprobe/services/api/routers/health.py
from __future__ import annotations
from pathlib import Path

from fastapi import APIRouter
from streamprobe.common.settings import get_settings
from streamprobe.services.probe.ffprobe_adapter import resolve_ffprobe_bin

router = APIRouter()

@router.get("/healthz")
def healthz():
    """
    Liveness plus a probing readiness hint: `ok` is False when the
    configured ffprobe binary can't be found, since every probe would fail.
    """
    s = get_settings()
    resolved = resolve_ffprobe_bin(s.ffprobe.bin)
    if resolved and not Path(resolved).is_file():
        resolved = None
    return {
        "ok": resolved is not None,
        "app": s.app_name,
        "env": s.app_env,
        "ffprobe": {
            "bin": s.ffprobe.bin,
            "resolved": resolved,
            "timeout_sec": s.ffprobe.timeout_sec,
        },
    }

# streamprobe/services/probe/ffprobe_adapter.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from streamprobe.common.settings import get_settings
from streamprobe.common.logging import get_logger
from streamprobe.common.probe.ffprobe_helpers import build_ffprobe_cmd, run_ffprobe
from streamprobe.domain.entities.probe import ProbeDocument
from streamprobe.domain.errors import ProbeError
from streamprobe.domain.ports.probe import MediaProbePort

logger = get_logger()


def resolve_ffprobe_bin(candidate: str) -> Optional[str]:
    """Absolute path for a bare binary name looked up on PATH; explicit paths are returned as-is."""
    if not candidate:
        return None
    if "/" in candidate:
        return candidate
    return shutil.which(candidate)


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    One blocking subprocess per call, bounded by `timeout_sec`.
    The binary is resolved on first use, so building the adapter never fails.
    """

    def __init__(
        self,
        ffprobe_bin: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        extra_args: Optional[Iterable[str]] = None,
    ):
        cfg = get_settings()
        self.ffprobe_bin = ffprobe_bin or cfg.ffprobe.bin
        self.timeout_sec = timeout_sec or cfg.ffprobe.timeout_sec
        self.log_level = cfg.ffprobe.log_level
        self.extra_args: List[str] = list(cfg.ffprobe.extra_args if extra_args is None else extra_args)

    def _binary(self) -> str:
        resolved = resolve_ffprobe_bin(self.ffprobe_bin)
        if not resolved:
            raise ProbeError(f"{self.ffprobe_bin} not found on PATH; set FFPROBE__BIN or install ffmpeg.")
        return resolved

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> ProbeDocument:
        if not path:
            raise ProbeError("No path provided to probe().")
        if not Path(path).is_file():
            raise ProbeError(f"File not found: {path}")

        cmd = build_ffprobe_cmd(
            path,
            ffprobe_bin=self._binary(),
            log_level=self.log_level,
            extra_args=self.extra_args,
        )
        data = run_ffprobe(cmd, timeout_sec=self.timeout_sec)
        logger.debug("Probed %s: %d stream(s)", path, len(data.get("streams") or []))
        return ProbeDocument(raw=data)

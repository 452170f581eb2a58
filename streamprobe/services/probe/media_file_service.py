# streamprobe/services/probe/media_file_service.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from streamprobe.common.logging import get_logger
from streamprobe.domain.entities.media_file import MediaFile
from streamprobe.domain.ports.probe import MediaProbePort
from streamprobe.services.probe.ffprobe_adapter import FFprobeAdapter

logger = get_logger()


def load_media_file(
    path: Path | str,
    prober: Optional[MediaProbePort] = None,
    timeout_sec: Optional[float] = None,
) -> MediaFile:
    """
    Probe `path` and return its MediaFile. Uses ffprobe unless a prober is given.

    Raises ProbeError / ProbeTimeoutError from the prober and
    UnsupportedCodecError when a supported stream has an unknown codec.
    No retries; the caller owns that policy.
    """
    prober = prober or FFprobeAdapter(timeout_sec=timeout_sec)
    media = MediaFile.of(path, prober)
    logger.info("Loaded %s with %d stream(s)", media.path, len(media))
    return media

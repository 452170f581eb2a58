# streamprobe/services/api/deps.py
from __future__ import annotations

from streamprobe.domain.ports.probe import MediaProbePort
from streamprobe.services.probe.ffprobe_adapter import FFprobeAdapter

def get_media_probe() -> MediaProbePort:
    """
    Provide a MediaProbePort implementation (ffprobe) via DI.
    A missing binary surfaces as a ProbeError from probe(), which the router maps to 502.
    Tests override this with a fake prober.
    """
    return FFprobeAdapter()

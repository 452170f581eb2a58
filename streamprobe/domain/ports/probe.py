from __future__ import annotations
from pathlib import Path
from typing import Protocol
from streamprobe.domain.entities.probe import ProbeDocument

class MediaProbePort(Protocol):
    def probe(self, path: Path) -> ProbeDocument: ...

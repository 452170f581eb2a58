# streamprobe/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from streamprobe.domain.errors import InvalidProbeDataError


@dataclass(frozen=True)
class ProbeDocument:
    """
    Decoded ffprobe JSON (`-show_streams -show_format`), as produced by a MediaProbePort.
    The schema belongs to ffprobe; we only read the parts we need.
    """
    raw: Mapping[str, Any] = field(default_factory=dict)

    def stream_entries(self) -> List[Dict[str, Any]]:
        streams = self.raw.get("streams")
        if streams is None:
            return []
        if not isinstance(streams, list):
            raise InvalidProbeDataError(f"'streams' must be an array, got {type(streams).__name__}")
        for i, s in enumerate(streams):
            if not isinstance(s, dict):
                raise InvalidProbeDataError(f"streams[{i}] must be an object, got {type(s).__name__}")
        return list(streams)

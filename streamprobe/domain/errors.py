# streamprobe/domain/errors.py
from __future__ import annotations

from typing import Optional


class ProbeError(RuntimeError):
    """The prober could not produce a usable document (spawn failure, rc != 0, bad JSON, ...)."""

    def __init__(self, message: str, stderr: Optional[str] = None, rc: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.stderr = stderr
        self.rc = rc

    def __str__(self) -> str:
        return self.message


class ProbeTimeoutError(ProbeError):
    """The prober did not finish within its time bound."""


class InvalidProbeDataError(ProbeError):
    """The probe document was decoded but its shape is unusable."""


class UnsupportedCodecError(ValueError):
    """
    A video/audio/subtitle stream uses a codec outside the known table.
    Fatal for the whole file: we don't return partial stream lists.
    """

    def __init__(self, codec_name: Optional[str], stream_index: Optional[int] = None):
        super().__init__(codec_name, stream_index)
        self.codec_name = codec_name
        self.stream_index = stream_index

    def __str__(self) -> str:
        where = f" (stream #{self.stream_index})" if self.stream_index is not None else ""
        return f"Unsupported codec: {self.codec_name}{where}"

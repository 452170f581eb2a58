from __future__ import annotations

from typing import Any, Optional

from streamprobe.domain.enums import Codec, StreamKind

_KINDS = {k.value: k for k in StreamKind}
_CODECS = {c.value: c for c in Codec}


def _normalize(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    s = raw.strip().lower()
    return s or None


def classify_stream_kind(raw: Any) -> Optional[StreamKind]:
    """
    Map ffprobe's `codec_type` to a StreamKind.
    None means "not a kind we handle" (data, attachment, ...): skip the stream, don't fail.
    """
    key = _normalize(raw)
    return _KINDS.get(key) if key else None


def classify_codec(raw: Any) -> Optional[Codec]:
    """
    Map ffprobe's `codec_name` to a known Codec, or None when it isn't in the table.
    Callers decide whether an unknown codec is fatal.
    """
    key = _normalize(raw)
    return _CODECS.get(key) if key else None

# streamprobe/services/mappers/media_file.py
from __future__ import annotations

from typing import Optional

from streamprobe.domain.entities.media_file import MediaFile
from streamprobe.domain.entities.media_stream import MediaStream
from streamprobe.domain.enums import StreamKind
from streamprobe.services.schemas.media_file import MediaFileRead, MediaStreamRead


def to_stream_read(s: MediaStream) -> MediaStreamRead:
    return MediaStreamRead(
        index=s.index,
        kind=s.kind,
        codec=s.codec,
        language=s.language,
        title=s.title,
        is_default=s.is_default,
        is_forced=s.is_forced,
        metadata=dict(s.metadata),
    )

def to_media_file_read(m: MediaFile, kind: Optional[StreamKind] = None) -> MediaFileRead:
    return MediaFileRead(
        path=str(m.path),
        streams=[to_stream_read(s) for s in m.streams(kind)],
    )

# streamprobe/domain/entities/media_file.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, TYPE_CHECKING

from streamprobe.common.path.safe import normalize_path
from streamprobe.domain.entities.media_stream import MediaStream
from streamprobe.domain.entities.probe import ProbeDocument
from streamprobe.domain.enums import StreamKind
from streamprobe.domain.errors import InvalidProbeDataError, UnsupportedCodecError
from streamprobe.domain.policies.stream_classifier import classify_codec, classify_stream_kind

if TYPE_CHECKING:
    from streamprobe.domain.ports.probe import MediaProbePort

log = logging.getLogger(__name__)


class MediaFile:
    """
    A media file and the streams ffprobe found in it, ordered by stream index.

    Built once from a completed probe and never mutated afterwards:
    `streams()` always returns a tuple, so callers can't reorder or extend it.
    A file with no supported streams is valid.
    """

    __slots__ = ("_path", "_streams")

    def __init__(self, path: Path | str, streams: Iterable[MediaStream] = ()):
        self._path = normalize_path(path)
        # first occurrence of an index wins
        unique: Dict[int, MediaStream] = {}
        for s in streams:
            unique.setdefault(s.index, s)
        self._streams: Tuple[MediaStream, ...] = tuple(sorted(unique.values(), key=lambda s: s.index))

    # ---- construction --------------------------------------------------------
    @classmethod
    def of(cls, path: Path | str, prober: "MediaProbePort") -> "MediaFile":
        """
        Probe `path` and build the MediaFile. Probe/timeout errors from the
        prober propagate unchanged; see `from_probe` for parsing errors.
        """
        document = prober.probe(Path(path))
        return cls.from_probe(path, document)

    @classmethod
    def from_probe(cls, path: Path | str, document: ProbeDocument) -> "MediaFile":
        """
        Build from an already obtained probe document.

        Streams of unsupported kinds are skipped. A supported stream whose codec
        isn't known raises UnsupportedCodecError and nothing is returned.
        """
        streams = []
        for entry in document.stream_entries():
            kind = classify_stream_kind(entry.get("codec_type"))
            if kind is None:
                log.debug("Skipping stream %s of unsupported type %r", entry.get("index"), entry.get("codec_type"))
                continue

            index = _stream_index(entry)
            codec = classify_codec(entry.get("codec_name"))
            if codec is None:
                raise UnsupportedCodecError(entry.get("codec_name"), stream_index=index)

            streams.append(MediaStream(index=index, codec=codec, metadata=entry))
        return cls(path, streams)

    # ---- queries -------------------------------------------------------------
    @property
    def path(self) -> Path:
        return self._path

    def streams(self, kind: Optional[StreamKind] = None) -> Tuple[MediaStream, ...]:
        if kind is None:
            return self._streams
        return tuple(s for s in self._streams if s.kind == kind)

    def __iter__(self) -> Iterator[MediaStream]:
        return iter(self._streams)

    def __len__(self) -> int:
        return len(self._streams)

    def __repr__(self) -> str:
        return f"MediaFile(path={str(self._path)!r}, streams={len(self._streams)})"


def _stream_index(entry: Dict[str, Any]) -> int:
    raw = entry.get("index")
    if isinstance(raw, bool):
        raw = None
    if isinstance(raw, int):
        idx = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        idx = int(raw.strip())
    else:
        raise InvalidProbeDataError(f"stream index must be an integer, got {raw!r}")
    if idx < 0:
        raise InvalidProbeDataError(f"stream index must be >= 0, got {idx}")
    return idx

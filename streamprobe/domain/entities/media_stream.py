# streamprobe/domain/entities/media_stream.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from streamprobe.domain.enums import Codec, StreamKind


@dataclass(frozen=True, eq=False)
class MediaStream:
    """
    One track of a media file whose kind we support.
    Identity is the ffprobe stream index: two streams with the same index are equal.
    `metadata` is a read-only copy of the raw ffprobe stream object.
    """
    index: int
    codec: Codec
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.index < 0:
            raise ValueError("index must be >= 0")
        object.__setattr__(self, "metadata", MappingProxyType(copy.deepcopy(dict(self.metadata))))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaStream):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)

    @property
    def kind(self) -> StreamKind:
        return self.codec.kind

    @property
    def language(self) -> Optional[str]:
        return self._tag("language")

    @property
    def title(self) -> Optional[str]:
        return self._tag("title")

    @property
    def is_default(self) -> bool:
        return self._disposition("default")

    @property
    def is_forced(self) -> bool:
        return self._disposition("forced")

    def _tag(self, key: str) -> Optional[str]:
        tags = self.metadata.get("tags") or {}
        if not isinstance(tags, Mapping):
            return None
        val = tags.get(key)
        return str(val) if val is not None else None

    def _disposition(self, key: str) -> bool:
        disp = self.metadata.get("disposition") or {}
        if not isinstance(disp, Mapping):
            return False
        return disp.get(key) == 1

# streamprobe/services/schemas/media_file.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from streamprobe.domain.enums import Codec, StreamKind


class MediaStreamRead(BaseModel):
    index: int = Field(..., ge=0)
    kind: StreamKind
    codec: Codec
    language: Optional[str] = None
    title: Optional[str] = None
    is_default: bool = False
    is_forced: bool = False

    # raw ffprobe stream object
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(use_enum_values=False)


class MediaFileRead(BaseModel):
    path: str
    streams: List[MediaStreamRead] = Field(default_factory=list)

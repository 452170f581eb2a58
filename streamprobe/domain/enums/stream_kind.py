from __future__ import annotations
from enum import StrEnum

class StreamKind(StrEnum):
    video = "video"
    audio = "audio"
    subtitle = "subtitle"

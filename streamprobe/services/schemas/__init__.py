from streamprobe.services.schemas.media_file import (
    MediaStreamRead,
    MediaFileRead,
)
__all__ = [
    "MediaStreamRead",
    "MediaFileRead",
]

from streamprobe.domain.enums.stream_kind import StreamKind
from streamprobe.domain.enums.codec import Codec
__all__ = [
    "StreamKind",
    "Codec",
]

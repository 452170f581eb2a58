# streamprobe/domain/enums/codec.py
from __future__ import annotations

from enum import StrEnum
from typing import Optional

from streamprobe.domain.enums.stream_kind import StreamKind


class Codec(StrEnum):
    """
    Codecs we know how to reason about, keyed by ffprobe's `codec_name`.
    Every member belongs to exactly one StreamKind.
    """
    # video
    H264 = "h264"
    HEVC = "hevc"
    AV1 = "av1"
    VP8 = "vp8"
    VP9 = "vp9"
    MPEG2 = "mpeg2video"
    MPEG4 = "mpeg4"
    PRORES = "prores"
    MJPEG = "mjpeg"

    # audio
    AAC = "aac"
    AC3 = "ac3"
    EAC3 = "eac3"
    DTS = "dts"
    TRUEHD = "truehd"
    FLAC = "flac"
    MP3 = "mp3"
    OPUS = "opus"
    VORBIS = "vorbis"
    PCM_S16LE = "pcm_s16le"
    PCM_S24LE = "pcm_s24le"
    ALAC = "alac"

    # subtitle
    ASS = "ass"
    SSA = "ssa"
    SUBRIP = "subrip"
    WEBVTT = "webvtt"
    MOV_TEXT = "mov_text"
    PGS = "hdmv_pgs_subtitle"
    DVD_SUB = "dvd_subtitle"
    DVB_SUB = "dvb_subtitle"

    @property
    def kind(self) -> StreamKind:
        return _CODEC_TABLE[self][0]

    @property
    def encoder(self) -> Optional[str]:
        """ffmpeg encoder name used to produce this codec (e.g. libx264), None if ffmpeg has none."""
        return _CODEC_TABLE[self][1]


# codec -> (kind, ffmpeg encoder or None)
_CODEC_TABLE: dict[Codec, tuple[StreamKind, Optional[str]]] = {
    Codec.H264: (StreamKind.video, "libx264"),
    Codec.HEVC: (StreamKind.video, "libx265"),
    Codec.AV1: (StreamKind.video, "libsvtav1"),
    Codec.VP8: (StreamKind.video, "libvpx"),
    Codec.VP9: (StreamKind.video, "libvpx-vp9"),
    Codec.MPEG2: (StreamKind.video, "mpeg2video"),
    Codec.MPEG4: (StreamKind.video, "mpeg4"),
    Codec.PRORES: (StreamKind.video, "prores_ks"),
    Codec.MJPEG: (StreamKind.video, "mjpeg"),

    Codec.AAC: (StreamKind.audio, "aac"),
    Codec.AC3: (StreamKind.audio, "ac3"),
    Codec.EAC3: (StreamKind.audio, "eac3"),
    Codec.DTS: (StreamKind.audio, "dca"),
    Codec.TRUEHD: (StreamKind.audio, "truehd"),
    Codec.FLAC: (StreamKind.audio, "flac"),
    Codec.MP3: (StreamKind.audio, "libmp3lame"),
    Codec.OPUS: (StreamKind.audio, "libopus"),
    Codec.VORBIS: (StreamKind.audio, "libvorbis"),
    Codec.PCM_S16LE: (StreamKind.audio, "pcm_s16le"),
    Codec.PCM_S24LE: (StreamKind.audio, "pcm_s24le"),
    Codec.ALAC: (StreamKind.audio, "alac"),

    Codec.ASS: (StreamKind.subtitle, "ass"),
    Codec.SSA: (StreamKind.subtitle, "ssa"),
    Codec.SUBRIP: (StreamKind.subtitle, "srt"),
    Codec.WEBVTT: (StreamKind.subtitle, "webvtt"),
    Codec.MOV_TEXT: (StreamKind.subtitle, "mov_text"),
    Codec.PGS: (StreamKind.subtitle, None),  # decode-only in ffmpeg
    Codec.DVD_SUB: (StreamKind.subtitle, "dvdsub"),
    Codec.DVB_SUB: (StreamKind.subtitle, "dvbsub"),
}

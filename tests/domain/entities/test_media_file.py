import os
from pathlib import Path

import pytest

from streamprobe.domain.entities.media_file import MediaFile
from streamprobe.domain.entities.media_stream import MediaStream
from streamprobe.domain.entities.probe import ProbeDocument
from streamprobe.domain.enums import Codec, StreamKind
from streamprobe.domain.errors import (
    InvalidProbeDataError,
    ProbeError,
    ProbeTimeoutError,
    UnsupportedCodecError,
)


def _doc(*streams) -> ProbeDocument:
    return ProbeDocument(raw={"streams": list(streams)})


def test_from_probe_skips_unsupported_kinds(sample_document):
    m = MediaFile.from_probe("movie.mkv", ProbeDocument(raw=sample_document))
    assert [s.index for s in m.streams()] == [0, 1]
    assert [s.codec for s in m.streams()] == [Codec.H264, Codec.AAC]
    assert [s.index for s in m.streams(StreamKind.video)] == [0]
    assert m.streams(StreamKind.subtitle) == ()


def test_unknown_codec_on_supported_kind_fails_whole_file(sample_document):
    sample_document["streams"][1]["codec_name"] = "unknown_xyz"
    with pytest.raises(UnsupportedCodecError) as ei:
        MediaFile.from_probe("movie.mkv", ProbeDocument(raw=sample_document))
    assert ei.value.codec_name == "unknown_xyz"
    assert ei.value.stream_index == 1
    assert "unknown_xyz" in str(ei.value)


def test_missing_codec_name_is_unsupported():
    with pytest.raises(UnsupportedCodecError):
        MediaFile.from_probe("a.mkv", _doc({"index": 0, "codec_type": "audio"}))


def test_unknown_codec_on_unsupported_kind_is_ignored():
    m = MediaFile.from_probe("a.mkv", _doc(
        {"index": 0, "codec_type": "attachment", "codec_name": "ttf"},
        {"index": 1, "codec_type": "video", "codec_name": "hevc"},
    ))
    assert [s.codec for s in m.streams()] == [Codec.HEVC]


def test_streams_sorted_by_index_regardless_of_input_order():
    m = MediaFile.from_probe("a.mkv", _doc(
        {"index": 4, "codec_type": "subtitle", "codec_name": "ass"},
        {"index": 0, "codec_type": "video", "codec_name": "h264"},
        {"index": 2, "codec_type": "audio", "codec_name": "opus"},
        {"index": 1, "codec_type": "audio", "codec_name": "flac"},
    ))
    assert [s.index for s in m.streams()] == [0, 1, 2, 4]
    assert [s.index for s in m.streams(StreamKind.audio)] == [1, 2]
    assert [s.index for s in m.streams(StreamKind.subtitle)] == [4]


def test_duplicate_indexes_first_seen_wins():
    m = MediaFile.from_probe("a.mkv", _doc(
        {"index": 1, "codec_type": "audio", "codec_name": "aac"},
        {"index": 0, "codec_type": "video", "codec_name": "h264"},
        {"index": 1, "codec_type": "audio", "codec_name": "opus"},
    ))
    assert len(m) == 2
    assert m.streams()[1].codec is Codec.AAC


def test_string_index_accepted_and_bad_index_rejected():
    m = MediaFile.from_probe("a.mkv", _doc({"index": "3", "codec_type": "video", "codec_name": "av1"}))
    assert m.streams()[0].index == 3

    for bad in (None, "x", 1.5, True, -1):
        with pytest.raises(InvalidProbeDataError):
            MediaFile.from_probe("a.mkv", _doc({"index": bad, "codec_type": "video", "codec_name": "av1"}))


def test_streams_array_shape_errors():
    with pytest.raises(InvalidProbeDataError):
        MediaFile.from_probe("a.mkv", ProbeDocument(raw={"streams": {"0": {}}}))
    with pytest.raises(InvalidProbeDataError):
        MediaFile.from_probe("a.mkv", ProbeDocument(raw={"streams": ["video"]}))
    assert isinstance(InvalidProbeDataError("x"), ProbeError)


def test_no_streams_is_valid():
    assert len(MediaFile.from_probe("a.mkv", ProbeDocument(raw={}))) == 0
    assert MediaFile.from_probe("a.mkv", _doc()).streams() == ()


def test_path_is_absolute_and_normalized(tmp_path):
    m = MediaFile(tmp_path / "x" / ".." / "movie.mkv")
    assert m.path == Path(os.path.abspath(tmp_path / "movie.mkv"))
    assert m.path.is_absolute()

    rel = MediaFile("clips/./a.mp4")
    assert rel.path == Path(os.getcwd()) / "clips" / "a.mp4"


def test_streams_are_immutable():
    m = MediaFile("a.mkv", [MediaStream(index=0, codec=Codec.H264)])
    streams = m.streams()
    assert isinstance(streams, tuple)
    with pytest.raises(AttributeError):
        streams.append(MediaStream(index=1, codec=Codec.AAC))  # type: ignore[attr-defined]
    assert list(m) == [MediaStream(index=0, codec=Codec.H264)]


def test_of_uses_prober_and_propagates_errors(make_prober, sample_document, tmp_path):
    p = tmp_path / "movie.mkv"
    prober = make_prober(document=sample_document)
    m = MediaFile.of(p, prober)
    assert prober.calls == [p]
    assert len(m) == 2
    assert m.path == p

    with pytest.raises(ProbeTimeoutError):
        MediaFile.of(p, make_prober(error=ProbeTimeoutError("ffprobe timed out after 60s")))
    with pytest.raises(ProbeError):
        MediaFile.of(p, make_prober(error=ProbeError("ffprobe returned non-zero exit code", rc=1)))

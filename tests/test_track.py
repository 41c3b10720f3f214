import pytest

from rtsptrack.track import (
    Attribute,
    MediaDescription,
    MediaName,
    Track,
    clone_and_clear_tracks,
)

AAC_FMTP = (
    "96 profile-level-id=1; mode=AAC-hbr; sizelength=13; "
    "indexlength=3; indexdeltalength=3; config=1190"
)


def make_track(media, formats, attributes, protos=("RTP", "AVP")):
    return Track(
        MediaDescription(
            media_name=MediaName(media=media, protos=list(protos), formats=list(formats)),
            attributes=[Attribute(k, v) for k, v in attributes],
        )
    )


@pytest.mark.parametrize(
    "rtpmap", ["96 mpeg4-generic/48000/2", "96 MPEG4-GENERIC/48000/2"]
)
def test_is_aac(rtpmap):
    track = make_track("audio", ["96"], [("rtpmap", rtpmap), ("fmtp", AAC_FMTP)])
    assert track.is_aac() is True


def test_is_aac_rejects_video():
    track = make_track("video", ["96"], [("rtpmap", "96 mpeg4-generic/48000/2")])
    assert track.is_aac() is False


def test_is_aac_rejects_missing_rtpmap():
    track = make_track("audio", ["96"], [("fmtp", AAC_FMTP)])
    assert track.is_aac() is False


def test_is_aac_rejects_other_codec():
    track = make_track("audio", ["96"], [("rtpmap", "96 opus/48000/2")])
    assert track.is_aac() is False


def test_attribute_returns_first_match():
    md = MediaDescription(
        MediaName("audio"),
        [Attribute("rtpmap", "first"), Attribute("rtpmap", "second")],
    )
    assert md.attribute("rtpmap") == "first"
    assert md.attribute("fmtp") is None


def test_control():
    track = make_track("video", ["96"], [("control", "trackID=3")])
    assert track.control() == "trackID=3"
    assert make_track("video", ["96"], []).control() is None


@pytest.mark.parametrize(
    ("fmt", "rate"),
    [
        ("0", 8000),
        ("8", 8000),
        ("18", 8000),
        ("6", 16000),
        ("10", 44100),
        ("11", 44100),
        ("14", 90000),
        ("26", 90000),
        ("34", 90000),
        ("16", 11025),
        ("17", 22050),
    ],
)
def test_clock_rate_static(fmt, rate):
    assert make_track("audio", [fmt], []).clock_rate() == rate


@pytest.mark.parametrize(
    ("rtpmap", "rate"),
    [("96 H264/90000", 90000), ("96 opus/48000/2", 48000)],
)
def test_clock_rate_from_rtpmap(rtpmap, rate):
    track = make_track("audio", ["96"], [("rtpmap", rtpmap)])
    assert track.clock_rate() == rate


@pytest.mark.parametrize(
    ("formats", "attributes", "message"),
    [
        ([], [], "no formats provided"),
        (["96"], [], "attribute 'rtpmap' not found"),
        (["96"], [("rtpmap", "96")], "invalid rtpmap (96)"),
        (["96"], [("rtpmap", "96 H264")], "invalid rtpmap (96 H264)"),
        (["96"], [("rtpmap", "96 a/1/2/3")], "invalid rtpmap (96 a/1/2/3)"),
    ],
)
def test_clock_rate_errors(formats, attributes, message):
    track = make_track("video", formats, attributes)
    with pytest.raises(ValueError) as info:
        track.clock_rate()
    assert str(info.value) == message


def test_clock_rate_bad_number():
    track = make_track("video", ["96"], [("rtpmap", "96 H264/abc")])
    with pytest.raises(ValueError, match="abc"):
        track.clock_rate()


def test_clone_and_clear_tracks():
    t1 = make_track(
        "video",
        ["96"],
        [("rtpmap", "96 H264/90000"), ("fmtp", "96 x=1"), ("control", "old"), ("other", "v")],
        protos=("RTP", "SAVP"),
    )
    t2 = make_track("audio", ["0"], [("recvonly", "")])
    cloned = clone_and_clear_tracks([t1, t2])

    assert cloned[0] == make_track(
        "video",
        ["96"],
        [("rtpmap", "96 H264/90000"), ("fmtp", "96 x=1"), ("control", "trackID=0")],
    )
    assert cloned[1] == make_track("audio", ["0"], [("control", "trackID=1")])
    # originals untouched
    assert t1.control() == "old"
    assert t1.media.media_name.protos == ["RTP", "SAVP"]
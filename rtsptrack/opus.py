"""Opus tracks."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rtsptrack.track import Attribute, MediaDescription, MediaName, Track

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class TrackConfigOpus:
    """The configuration of an Opus track."""

    sample_rate: int
    channel_count: int


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'invalid integer "{text}"')
    return int(text)


def new_track_opus(payload_type: int, conf: TrackConfigOpus) -> Track:
    """Build an Opus track."""
    if not 0 <= payload_type <= 255:
        raise ValueError(f"invalid payload type ({payload_type})")
    typ = str(payload_type)
    stereo = "1" if conf.channel_count == 2 else "0"

    return Track(
        MediaDescription(
            media_name=MediaName(media="audio", protos=["RTP", "AVP"], formats=[typ]),
            attributes=[
                Attribute("rtpmap", f"{typ} opus/{conf.sample_rate}/{conf.channel_count}"),
                Attribute("fmtp", f"{typ} sprop-stereo={stereo}"),
            ],
        )
    )


def extract_config_opus(track: Track) -> TrackConfigOpus:
    """Extract sample rate and channel count from the rtpmap of an Opus track."""
    rtpmap = track.media.attribute("rtpmap")
    if rtpmap is None:
        raise ValueError("rtpmap attribute is missing")

    parts = rtpmap.split("/", 2)
    if len(parts) != 3:
        raise ValueError(f"invalid rtpmap ({rtpmap})")

    return TrackConfigOpus(
        sample_rate=_parse_int(parts[1]),
        channel_count=_parse_int(parts[2]),
    )
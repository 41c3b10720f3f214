"""H264 tracks."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from rtsptrack.track import Attribute, MediaDescription, MediaName, Track


@dataclass
class TrackConfigH264:
    """The configuration of an H264 track."""

    sps: bytes
    pps: bytes


def _format_payload_type(payload_type: int) -> str:
    if not 0 <= payload_type <= 255:
        raise ValueError(f"invalid payload type ({payload_type})")
    return str(payload_type)


def new_track_h264(payload_type: int, conf: TrackConfigH264) -> Track:
    """Build an H264 track from its parameter sets."""
    if len(conf.sps) < 4:
        raise ValueError("invalid SPS")

    typ = _format_payload_type(payload_type)
    sprop = (
        base64.b64encode(conf.sps).decode("ascii")
        + ","
        + base64.b64encode(conf.pps).decode("ascii")
    )
    profile_level_id = conf.sps[1:4].hex().upper()

    return Track(
        MediaDescription(
            media_name=MediaName(media="video", protos=["RTP", "AVP"], formats=[typ]),
            attributes=[
                Attribute("rtpmap", f"{typ} H264/90000"),
                Attribute(
                    "fmtp",
                    f"{typ} packetization-mode=1; "
                    f"sprop-parameter-sets={sprop}; "
                    f"profile-level-id={profile_level_id}",
                ),
            ],
        )
    )


def _decode(text: str, fmtp: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError(f"invalid sprop-parameter-sets ({fmtp})") from None


def extract_config_h264(track: Track) -> TrackConfigH264:
    """Extract SPS and PPS from the fmtp attribute of an H264 track."""
    fmtp = track.media.attribute("fmtp")
    if fmtp is None:
        raise ValueError("fmtp attribute is missing")

    parts = fmtp.split(" ", 1)
    if len(parts) != 2:
        raise ValueError(f"invalid fmtp attribute ({fmtp})")

    for kv in parts[1].split(";"):
        kv = kv.strip(" ")
        if not kv:
            continue

        key, sep, value = kv.partition("=")
        if not sep:
            raise ValueError(f"invalid fmtp attribute ({fmtp})")

        if key == "sprop-parameter-sets":
            sps_text, comma, pps_text = value.partition(",")
            if not comma:
                raise ValueError(f"invalid sprop-parameter-sets ({fmtp})")
            return TrackConfigH264(sps=_decode(sps_text, fmtp), pps=_decode(pps_text, fmtp))

    raise ValueError(f"sprop-parameter-sets is missing ({fmtp})")
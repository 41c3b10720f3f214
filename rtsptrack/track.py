"""RTSP tracks described by SDP media sections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_STATIC_CLOCK_RATES = {
    **dict.fromkeys(
        ("0", "1", "2", "3", "4", "5", "7", "8", "9", "12", "13", "15", "18"), 8000
    ),
    "6": 16000,
    "10": 44100,
    "11": 44100,
    **dict.fromkeys(("14", "25", "26", "28", "31", "32", "33", "34"), 90000),
    "16": 11025,
    "17": 22050,
}

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'invalid integer "{text}"')
    return int(text)


@dataclass
class Attribute:
    """An SDP attribute line (``a=key:value``)."""

    key: str
    value: str = ""


@dataclass
class MediaName:
    """The SDP media line (``m=``)."""

    media: str
    protos: list[str] = field(default_factory=list)
    formats: list[str] = field(default_factory=list)


@dataclass
class MediaDescription:
    """An SDP media section."""

    media_name: MediaName
    attributes: list[Attribute] = field(default_factory=list)
    bandwidth: list = field(default_factory=list)

    def attribute(self, key: str) -> str | None:
        """Return the value of the first attribute with this key, or None."""
        return next((a.value for a in self.attributes if a.key == key), None)


@dataclass
class Track:
    """An RTSP track."""

    media: MediaDescription

    def control(self) -> str | None:
        """Return the control attribute, or None when it is absent."""
        return self.media.attribute("control")

    def clock_rate(self) -> int:
        """Return the clock rate of the track.

        Raises ValueError when it cannot be determined.
        """
        formats = self.media.media_name.formats
        if not formats:
            raise ValueError("no formats provided")

        static = _STATIC_CLOCK_RATES.get(formats[0])
        if static is not None:
            return static

        # a=rtpmap:<payload type> <encoding name>/<clock rate> [/<encoding parameters>]
        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            raise ValueError("attribute 'rtpmap' not found")

        parts = rtpmap.split(" ")
        if len(parts) < 2:
            raise ValueError(f"invalid rtpmap ({rtpmap})")

        encoding = parts[1].split("/")
        if len(encoding) not in (2, 3):
            raise ValueError(f"invalid rtpmap ({rtpmap})")

        return _parse_int(encoding[1])

    def _rtpmap_encoding(self, media: str) -> str | None:
        if self.media.media_name.media != media:
            return None
        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            return None
        parts = rtpmap.split(" ")
        if len(parts) != 2:
            return None
        return parts[1]

    def is_aac(self) -> bool:
        """Tell whether the track is an AAC track."""
        encoding = self._rtpmap_encoding("audio")
        return encoding is not None and encoding.lower().startswith("mpeg4-generic/")

    def is_h264(self) -> bool:
        """Tell whether the track is an H264 track."""
        if self.media.media_name.media != "video":
            return False
        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            return False
        parts = rtpmap.strip().split(" ")
        return len(parts) == 2 and parts[1] == "H264/90000"

    def is_opus(self) -> bool:
        """Tell whether the track is an Opus track."""
        encoding = self._rtpmap_encoding("audio")
        return encoding is not None and encoding.startswith("opus/")


def clone_and_clear_tracks(tracks: list[Track]) -> list[Track]:
    """Copy tracks, keeping only rtpmap and fmtp and assigning fresh controls."""
    cloned = []
    for index, track in enumerate(tracks):
        attributes = [
            Attribute(a.key, a.value)
            for a in track.media.attributes
            if a.key in ("rtpmap", "fmtp")
        ]
        attributes.append(Attribute("control", f"trackID={index}"))
        cloned.append(
            Track(
                MediaDescription(
                    media_name=MediaName(
                        media=track.media.media_name.media,
                        protos=["RTP", "AVP"],
                        formats=list(track.media.media_name.formats),
                    ),
                    attributes=attributes,
                    bandwidth=list(track.media.bandwidth),
                )
            )
        )
    return cloned
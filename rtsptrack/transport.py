"""Transport protocols used to carry RTSP streams."""

from __future__ import annotations

from enum import Enum


class Transport(Enum):
    """An RTSP transport protocol.

    Values outside the standard set are accepted and render as ``"unknown"``.
    """

    UDP = 0
    UDP_MULTICAST = 1
    TCP = 2

    @classmethod
    def _missing_(cls, value: object) -> Transport | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        member = object.__new__(cls)
        member._name_ = None
        member._value_ = value
        return member

    def __str__(self) -> str:
        return _LABELS.get(self._value_, "unknown")


_LABELS = {
    0: "UDP",
    1: "UDP-multicast",
    2: "TCP",
}
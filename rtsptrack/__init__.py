"""RTSP track descriptions: SDP media sections, clock rates, codec detection and H264/Opus configuration."""

__version__ = "0.1.0"
__all__ = ["h264", "opus", "track", "transport"]
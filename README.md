# rtsptrack

Describe, inspect and build the media tracks of an RTSP session.

A track is one SDP media section (the `m=` line plus its attributes), held
as plain dataclasses: `Track` wraps a `MediaDescription`, which has a
`MediaName` and a list of `Attribute`s. `rtsptrack` lets you create tracks
for H264 and Opus, recognise which codec a track carries, pull the
configuration of H264 and Opus tracks back out, and work out a track's RTP
clock rate. It has no dependencies outside the standard library.

## Installation

```
pip install rtsptrack
```

## Building tracks

```python
from rtsptrack.h264 import TrackConfigH264, new_track_h264
from rtsptrack.opus import TrackConfigOpus, new_track_opus

video = new_track_h264(96, TrackConfigH264(
    sps=bytes([0x67, 0x64, 0x00, 0x0C, 0xAC, 0x3B]),
    pps=bytes([0x68, 0xEE, 0x3C, 0x80]),
))
audio = new_track_opus(97, TrackConfigOpus(sample_rate=48000, channel_count=2))

print(video.media.attribute("rtpmap"))   # "96 H264/90000"
print(audio.media.attribute("fmtp"))     # "97 sprop-stereo=1"
```

The payload type must lie between 0 and 255. An H264 track needs an SPS of at
least four bytes. Either mistake raises `ValueError`.

## Inspecting tracks

```python
video.is_h264()        # True
audio.is_opus()        # True
audio.is_aac()         # False
video.clock_rate()     # 90000
```

`Track.is_aac()` recognises an audio track whose `rtpmap` encoding starts
with `mpeg4-generic/`, in any letter case.

`Track.clock_rate()` uses the static RTP payload type table where the first
format is a static type, and otherwise the clock rate in the `rtpmap`
attribute. No formats, a missing `rtpmap` or a malformed one raises
`ValueError`.

`MediaDescription.attribute(key)` returns the value of the first attribute
with that key, or `None`. `Track.control()` returns the value of the track's
`control` attribute, or `None` when it has none.

## Extracting configuration

```python
from rtsptrack.h264 import extract_config_h264
from rtsptrack.opus import extract_config_opus

conf = extract_config_h264(video)
conf.sps, conf.pps

extract_config_opus(audio)   # TrackConfigOpus(sample_rate=48000, channel_count=2)
```

`extract_config_h264` reads `sprop-parameter-sets` from the `fmtp`
attribute; `extract_config_opus` reads sample rate and channel count from
`rtpmap`. Missing or malformed attributes raise `ValueError` with a message
naming the offending value.

## Re-announcing tracks

```python
from rtsptrack.track import clone_and_clear_tracks

tracks = clone_and_clear_tracks([video, audio])
tracks[1].control()   # "trackID=1"
```

The copies have their protocol forced to `RTP/AVP`, keep only their `rtpmap`
and `fmtp` attributes, and get a fresh `control` attribute of
`trackID=<index>`.

## Transports

```python
from rtsptrack.transport import Transport

str(Transport.UDP_MULTICAST)   # "UDP-multicast"
str(Transport(15))             # "unknown"
```

## What it does not do

- It does not read or write SDP text: tracks are built from and inspected as
  Python objects only.
- It does not resolve a track's URL against a session's base URL.
- It recognises AAC tracks but does not build them or decode their
  configuration.
- It is not an RTSP client or server and sends no packets.
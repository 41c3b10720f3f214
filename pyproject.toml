[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtsptrack"
version = "0.1.0"
description = "RTSP track descriptions: SDP media sections, clock rates, codec detection and H264/Opus track configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtsp", "sdp", "rtp", "h264", "aac", "opus", "streaming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtsptrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

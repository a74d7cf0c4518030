# File: tests/conftest.py

import json
import os
import sys
import pytest
from dataclasses import dataclass
from pathlib import Path
from typing import List

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Import Settings
from audiomirror.core.config.settings import settings


# --- FAKE EXTERNAL TOOLS ---
# POSIX shell stand-ins for mediainfo/ffmpeg/sox. Every invocation is
# appended to $FAKE_TOOL_LOG so tests can see which commands ran.

FAKE_MEDIAINFO = """#!/bin/sh
echo "mediainfo $*" >> "$FAKE_TOOL_LOG"
report="$FAKE_MEDIAINFO_DIR/$(basename "$2").json"
if [ ! -f "$report" ]; then
  echo "no report for $2" >&2
  exit 1
fi
cat "$report"
"""

FAKE_FFMPEG = """#!/bin/sh
echo "ffmpeg $*" >> "$FAKE_TOOL_LOG"
for last in "$@"; do :; done
case " $* " in
  *" -i - "*) cat > /dev/null ;;
esac
if [ "$last" = "-" ]; then
  printf 'RIFF-fake-wav'
else
  printf 'OggS-fake-vorbis' > "$last"
fi
"""

FAKE_SOX = """#!/bin/sh
echo "sox $*" >> "$FAKE_TOOL_LOG"
cat
"""


@dataclass
class FakeTools:
    bin_dir: Path
    report_dir: Path
    log_file: Path

    @property
    def mediainfo(self) -> str:
        return str(self.bin_dir / "mediainfo")

    @property
    def ffmpeg(self) -> str:
        return str(self.bin_dir / "ffmpeg")

    @property
    def sox(self) -> str:
        return str(self.bin_dir / "sox")

    def describe(self, file_name: str, sample_rate: int, channels: int) -> None:
        """Registers the mediainfo report returned for any track with this base name."""
        report = {
            "media": {
                "track": [
                    {"@type": "General", "Format": "FLAC"},
                    {"@type": "Audio", "SamplingRate": str(sample_rate), "Channels": str(channels)},
                ]
            }
        }
        (self.report_dir / f"{file_name}.json").write_text(json.dumps(report))

    def calls(self, tool: str = "") -> List[str]:
        if not self.log_file.exists():
            return []
        lines = self.log_file.read_text().splitlines()
        return [line for line in lines if line.startswith(tool)]

    def reset(self) -> None:
        self.log_file.unlink(missing_ok=True)


def _write_script(path: Path, body: str) -> None:
    path.write_text(body)
    path.chmod(0o755)


@pytest.fixture
def fake_tools(tmp_path, monkeypatch):
    """
    Installs the fake tools and points settings at them.
    """
    if sys.platform == "win32":
        pytest.skip("Fake tools are POSIX shell scripts")

    bin_dir = tmp_path / "bin"
    report_dir = tmp_path / "reports"
    bin_dir.mkdir()
    report_dir.mkdir()

    _write_script(bin_dir / "mediainfo", FAKE_MEDIAINFO)
    _write_script(bin_dir / "ffmpeg", FAKE_FFMPEG)
    _write_script(bin_dir / "sox", FAKE_SOX)

    tools = FakeTools(bin_dir, report_dir, tmp_path / "tools.log")

    monkeypatch.setenv("FAKE_TOOL_LOG", str(tools.log_file))
    monkeypatch.setenv("FAKE_MEDIAINFO_DIR", str(report_dir))
    monkeypatch.setattr(settings, "MEDIAINFO_BINARY", tools.mediainfo)
    monkeypatch.setattr(settings, "FFMPEG_BINARY", tools.ffmpeg)
    monkeypatch.setattr(settings, "SOX_BINARY", tools.sox)
    return tools


# --- LIBRARY TREES ---

@pytest.fixture
def library(tmp_path):
    """
    Creates a source library and an empty mirror root:
        music/Artist/Album/front.jpg
        music/Artist/Album/01 Track.flac
        music/Artist/Album/notes.txt
    """
    source_root = tmp_path / "music"
    album = source_root / "Artist" / "Album"
    album.mkdir(parents=True)

    (album / "front.jpg").write_bytes(b"\xff\xd8\xff\xe0" + b"cover" * 1000)
    (album / "01 Track.flac").write_bytes(b"fLaC-fake-audio")
    (album / "notes.txt").write_text("ripped with care")

    destination_root = tmp_path / "mirror"
    destination_root.mkdir()

    return source_root, destination_root


def touch_later(path: Path, seconds: float = 10.0) -> None:
    """Moves a file's mtime forward so it looks freshly edited."""
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + seconds))

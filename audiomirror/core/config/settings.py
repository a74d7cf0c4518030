# File: audiomirror/core/config/settings.py

import os
import shutil


class Settings:
    # --- External Tools ---
    # Auto-detect binaries or use env vars
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")
    SOX_BINARY: str = os.getenv("SOX_BINARY_PATH", shutil.which("sox") or "sox")
    MEDIAINFO_BINARY: str = os.getenv("MEDIAINFO_BINARY_PATH", shutil.which("mediainfo") or "mediainfo")

    # --- Concurrency ---
    MAX_WORKERS: int = int(os.getenv("MIRROR_MAX_WORKERS", str(os.cpu_count() or 4)))
    # How often blocked workers wake up to check for cancellation
    PROCESS_POLL_SECONDS: float = 0.2

    # --- Output Format ---
    AUDIO_CODEC: str = "libvorbis"
    VORBIS_QUALITY: int = int(os.getenv("MIRROR_VORBIS_QUALITY", "7"))
    TRACK_EXTENSION: str = ".ogg"
    ART_FILENAME: str = "front.jpg"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("MIRROR_LOG_LEVEL", "INFO").upper()


settings = Settings()

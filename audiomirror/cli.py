# File: audiomirror/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from audiomirror import __version__
from audiomirror.core.config.settings import settings
from audiomirror.features.mirror.domain.models import MirrorRequest
from audiomirror.features.mirror.service.scheduler import MirrorScheduler

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_STARTUP_ERROR = 2
EXIT_CANCELLED = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="audiomirror",
        description="Mirror a music library, transcoding tracks to Ogg Vorbis and copying cover art.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("source", type=Path, help="root of the library to read from")
    parser.add_argument("destination", type=Path, help="root of the mirror to write into")
    return parser.parse_args(argv)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stdout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        request = MirrorRequest(args.source, args.destination)
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        logger.critical(str(e))
        return EXIT_STARTUP_ERROR

    summary = MirrorScheduler().run(request)

    if summary.cancelled:
        return EXIT_CANCELLED
    if not summary.succeeded:
        return EXIT_FILE_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

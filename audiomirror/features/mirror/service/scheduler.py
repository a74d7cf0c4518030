# File: audiomirror/features/mirror/service/scheduler.py

import logging
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from threading import Event
from typing import Callable, Optional, Set

from audiomirror.core.config.settings import settings
from audiomirror.core.common.enums import FileStatus
from audiomirror.core.errors import SyncCancelled
from audiomirror.features.classifier.domain.rules import classify
from ..data.file_walker import LocalFileWalker
from ..domain.interfaces import IFileWalker
from ..domain.models import FileOutcome, MirrorRequest, MirrorSummary
from .handlers import FileProcessor

logger = logging.getLogger(__name__)

class MirrorScheduler:
    """
    Walks the source tree and feeds every file through a bounded worker pool.

    Each file is an independent unit of work: a failure is logged and
    counted, never propagated to its siblings. Paths are pulled from the
    walker only as fast as workers free up.
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        walker: Optional[IFileWalker] = None,
        processor_factory: Optional[Callable[[MirrorRequest, Event], FileProcessor]] = None,
        cancel_event: Optional[Event] = None,
    ):
        self.max_workers = max(1, max_workers or settings.MAX_WORKERS)
        self.walker = walker or LocalFileWalker()
        self.processor_factory = processor_factory or FileProcessor
        self.cancel_event = cancel_event or Event()

    def run(self, request: MirrorRequest) -> MirrorSummary:
        summary = MirrorSummary()
        processor = self.processor_factory(request, self.cancel_event)

        logger.info(f"Mirroring {request.source_root} -> {request.destination_root} ({self.max_workers} workers)")

        in_flight: Set[Future] = set()
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            try:
                for path in self.walker.walk(request.source_root):
                    if self.cancel_event.is_set():
                        break
                    if len(in_flight) >= self.max_workers:
                        done, in_flight = wait(in_flight, return_when=FIRST_COMPLETED)
                        self._collect(done, summary)
                    in_flight.add(executor.submit(self._process_one, processor, path))

                done, in_flight = wait(in_flight)
                self._collect(done, summary)
            except KeyboardInterrupt:
                logger.warning("Interrupted, stopping in-flight work...")
                self.cancel_event.set()
                for future in in_flight:
                    future.cancel()
                done, _ = wait(in_flight)
                self._collect([f for f in done if not f.cancelled()], summary)

        for message in getattr(self.walker, "errors", []):
            summary.errors.append(message)

        summary.cancelled = self.cancel_event.is_set()
        self._log_summary(summary)
        return summary

    def cancel(self) -> None:
        self.cancel_event.set()

    @staticmethod
    def _process_one(processor: FileProcessor, path: Path) -> FileOutcome:
        kind = classify(path.name)
        try:
            return processor.process(path, kind)
        except SyncCancelled:
            logger.warning(f'Cancelled: "{path}"')
            return FileOutcome(path, kind, FileStatus.CANCELLED)
        except Exception as e:
            logger.error(f'Error processing "{path}": {e}')
            return FileOutcome(path, kind, FileStatus.FAILED, error=str(e))

    @staticmethod
    def _collect(done, summary: MirrorSummary) -> None:
        for future in done:
            summary.record(future.result())

    @staticmethod
    def _log_summary(summary: MirrorSummary) -> None:
        counts = ", ".join(f"{status.value}: {count}" for status, count in summary.counts.items())
        if summary.cancelled:
            logger.warning(f"Mirror cancelled after {summary.files_found} files ({counts})")
        elif summary.errors:
            logger.error(f"Mirror finished with {len(summary.errors)} error(s) ({counts})")
        else:
            logger.info(f"Mirror complete. {summary.files_found} files ({counts})")

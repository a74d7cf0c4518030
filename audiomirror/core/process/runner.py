# File: audiomirror/core/process/runner.py

import logging
import subprocess
import tempfile
from threading import Event
from typing import IO, List, Optional, Sequence, Tuple

from audiomirror.core.config.settings import settings
from audiomirror.core.errors import PipelineError, SyncCancelled
from .types import PipelineSpec, PipelineStage, StageOutput

logger = logging.getLogger(__name__)

STDERR_TAIL_CHARS = 500


class ProcessRunner:
    """
    Executes external commands and chained pipelines.
    Blocking waits are polled so a set cancel_event kills every
    process this runner started.
    """

    def __init__(self, cancel_event: Optional[Event] = None, poll_seconds: Optional[float] = None):
        self.cancel_event = cancel_event
        self.poll_seconds = poll_seconds if poll_seconds is not None else settings.PROCESS_POLL_SECONDS

    def capture(self, command: Sequence[str]) -> str:
        """
        Runs a single command and returns its stdout as text.

        Raises:
            OSError: the program could not be launched.
            subprocess.CalledProcessError: non-zero exit.
            SyncCancelled: the run was cancelled while waiting.
        """
        logger.debug(f"Executing: {' '.join(command)}")

        with tempfile.TemporaryFile() as out, tempfile.TemporaryFile() as err:
            proc = subprocess.Popen(list(command), stdin=subprocess.DEVNULL, stdout=out, stderr=err)
            try:
                self._wait(proc)
            finally:
                self._kill([proc])

            stdout = self._read(out)
            if proc.returncode != 0:
                raise subprocess.CalledProcessError(proc.returncode, list(command), output=stdout, stderr=self._read(err))
            return stdout

    def run_pipeline(self, spec: PipelineSpec) -> None:
        """
        Launches every stage, connects them with OS pipes and waits for all of them.

        Raises:
            PipelineError: a stage failed to launch or exited non-zero.
            SyncCancelled: the run was cancelled while waiting.
        """
        logger.debug(f"Executing pipeline: {self.describe(spec)}")

        processes: List[subprocess.Popen] = []
        logs: List[IO[bytes]] = []
        try:
            upstream = None
            for stage in spec.stages:
                log = tempfile.TemporaryFile()
                logs.append(log)
                try:
                    proc = subprocess.Popen(
                        stage.command,
                        stdin=upstream if upstream is not None else subprocess.DEVNULL,
                        stdout=subprocess.PIPE if stage.output is StageOutput.PIPE else subprocess.DEVNULL,
                        stderr=log,
                    )
                except OSError as e:
                    raise PipelineError(f"Failed to launch {stage.name}: {e}") from e
                finally:
                    # The child holds its own copy; ours must close so EOF/SIGPIPE propagate
                    if upstream is not None:
                        upstream.close()
                processes.append(proc)
                upstream = proc.stdout

            for proc in processes:
                self._wait(proc)

            failures = [
                (stage, proc.returncode, self._read(log))
                for stage, proc, log in zip(spec.stages, processes, logs)
                if proc.returncode != 0
            ]
            if failures:
                raise PipelineError(self._format_failures(failures))
        finally:
            self._kill(processes)
            for log in logs:
                log.close()

    @staticmethod
    def describe(spec: PipelineSpec) -> str:
        return " | ".join(" ".join(stage.command) for stage in spec.stages)

    def _wait(self, proc: subprocess.Popen) -> None:
        while True:
            if self.cancel_event is not None and self.cancel_event.is_set():
                raise SyncCancelled("Cancelled while waiting for external process")
            try:
                proc.wait(timeout=self.poll_seconds)
                return
            except subprocess.TimeoutExpired:
                continue

    @staticmethod
    def _kill(processes: Sequence[subprocess.Popen]) -> None:
        for proc in processes:
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            if proc.stdout is not None:
                proc.stdout.close()

    @staticmethod
    def _read(stream: IO[bytes]) -> str:
        stream.seek(0)
        return stream.read().decode(errors="replace")

    @staticmethod
    def _format_failures(failures: List[Tuple[PipelineStage, int, str]]) -> str:
        parts = []
        for stage, code, stderr in failures:
            tail = stderr.strip()[-STDERR_TAIL_CHARS:]
            part = f"{stage.name} exited with code {code}"
            if tail:
                part += f": {tail}"
            parts.append(part)
        return "; ".join(parts)

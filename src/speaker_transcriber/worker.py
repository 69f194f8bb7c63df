"""Worker that runs transcriptions off the caller's thread."""

import asyncio
import threading
from collections.abc import Callable
from concurrent.futures import Future
from pathlib import Path

from speaker_transcriber.domain import TranscriptBuilder
from speaker_transcriber.handlers import ProgressCallback, TranscriptionHandler
from speaker_transcriber.logging import setup_logging

logger = setup_logging()

Notifier = Callable[[Callable[[], None]], None]


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class Worker:
    """
    Owns a background event loop and schedules transcriptions on it.

    Synchronous callers such as UI threads get a Future back immediately.
    Progress messages go through ``notify``, which receives a zero-argument
    callable and is expected to run it wherever the caller's framework
    requires (for example on its UI thread). By default the callable runs on
    the worker's loop thread.
    """

    def __init__(self, handler: TranscriptionHandler, notify: Notifier | None = None):
        self._handler = handler
        self._notify = notify or _call_now
        self._transcript_builder = TranscriptBuilder()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Starts the background event loop thread."""
        if self.is_running:
            return
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._run_loop, name="transcription-worker", daemon=True
        )
        self._thread.start()
        logger.info("Worker initialized, event loop running")

    def stop(self, timeout: float | None = None) -> None:
        """Stops the event loop and waits for the thread to exit."""
        if not self.is_running:
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        self._thread = None
        logger.info("Worker stopped")

    def submit(
        self,
        file_path: str | Path,
        speaker1_name: str,
        speaker2_name: str,
        on_progress: ProgressCallback,
    ) -> "Future[str]":
        """
        Schedules a transcription and returns without waiting for it.

        Blank speaker names fall back to "Speaker 1" and "Speaker 2". The
        returned future resolves to the formatted transcript, raises
        TranscriptionFailedError, or is cancelled if the worker stops first.
        """
        if not self.is_running:
            raise RuntimeError("Worker is not running; call start() first")

        def report(message: str) -> None:
            self._notify(lambda: on_progress(message))

        speaker1_name, speaker2_name = self._transcript_builder.resolve_speaker_names(
            speaker1_name, speaker2_name
        )
        coroutine = self._handler.transcribe(
            file_path, speaker1_name, speaker2_name, report
        )
        logger.info("Transcription scheduled", extra={"file_path": str(file_path)})
        return asyncio.run_coroutine_threadsafe(coroutine, self._loop)

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            pending = asyncio.all_tasks(self._loop)
            for task in pending:
                task.cancel()
            if pending:
                self._loop.run_until_complete(
                    asyncio.gather(*pending, return_exceptions=True)
                )
            self._loop.run_until_complete(self._loop.shutdown_asyncgens())
            self._loop.close()

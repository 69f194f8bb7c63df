"""Polls a transcription job until the provider reports a terminal status."""

import asyncio
from collections.abc import Callable

from speaker_transcriber.domain import TranscriptJob, TranscriptStatus
from speaker_transcriber.exceptions import JobFailedError
from speaker_transcriber.infrastructure.interfaces import TranscriptionProvider
from speaker_transcriber.logging import setup_logging

logger = setup_logging()

ProgressCallback = Callable[[str], None]


class TranscriptPoller:
    """Repeatedly checks job status, reporting every observed status."""

    def __init__(self, provider: TranscriptionProvider, poll_interval: float = 3.0):
        self._provider = provider
        self._poll_interval = poll_interval

    async def poll_until_terminal(
        self, transcript_id: str, on_progress: ProgressCallback
    ) -> TranscriptJob:
        """
        Polls until the job completes or fails.

        There is no attempt cap or overall deadline; the loop only ends on a
        terminal status or a failed status request. Callers that need a
        deadline can wrap the coroutine in asyncio.wait_for.

        Args:
            transcript_id: The job identifier to poll.
            on_progress: Called with "Status: <status>" after every check,
                before the status is evaluated.

        Returns:
            The completed job snapshot.

        Raises:
            PollError: If any status request fails.
            JobFailedError: If the provider reports the job as failed.
        """
        attempt = 0
        while True:
            attempt += 1
            job = await self._provider.get_transcript(transcript_id)
            on_progress(f"Status: {job.status_name}")

            logger.info(
                "Transcription status checked",
                extra={
                    "transcript_id": transcript_id,
                    "status": job.status_name,
                    "attempt": attempt,
                },
            )

            if job.is_terminal:
                if job.status is TranscriptStatus.ERROR:
                    raise JobFailedError(transcript_id, job.error)
                return job

            await asyncio.sleep(self._poll_interval)

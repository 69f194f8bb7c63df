"""Handler for transcribing a single audio file."""

from collections.abc import Callable
from pathlib import Path

from speaker_transcriber.config import AssemblyAIConfig
from speaker_transcriber.domain import TranscriptBuilder
from speaker_transcriber.exceptions import TranscriptionFailedError
from speaker_transcriber.infrastructure.interfaces import TranscriptionProvider
from speaker_transcriber.logging import setup_logging

from .transcript_poller import ProgressCallback, TranscriptPoller

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates upload, job submission, polling and formatting."""

    def __init__(
        self,
        provider_factory: Callable[[], TranscriptionProvider],
        transcript_builder: TranscriptBuilder,
        config: AssemblyAIConfig,
    ):
        self._provider_factory = provider_factory
        self._transcript_builder = transcript_builder
        self._config = config

    async def transcribe(
        self,
        file_path: str | Path,
        speaker1_name: str,
        speaker2_name: str,
        on_progress: ProgressCallback,
    ) -> str:
        """
        Transcribes an audio file and formats it with speaker display names.

        Args:
            file_path: Path to the audio file. The caller keeps ownership.
            speaker1_name: Display name for the first detected speaker.
            speaker2_name: Display name for every other speaker.
            on_progress: Receives a message at each stage boundary, every
                polled status, and "Error: <message>" on failure.

        Returns:
            The formatted transcript.

        Raises:
            TranscriptionFailedError: If any stage fails. The stage error
                (AudioFileError, UploadError, SubmissionError, PollError,
                MalformedResponseError or JobFailedError) is its cause.
        """
        audio_path = Path(file_path)
        logger.info("Processing audio", extra={"file_path": str(audio_path)})

        try:
            async with self._provider_factory() as provider:
                on_progress("Uploading file...")
                upload_url = await provider.upload(audio_path)

                on_progress("Starting transcription...")
                transcript_id = await provider.submit(
                    upload_url,
                    speaker_labels=self._config.speaker_labels,
                    speakers_expected=self._config.speakers_expected,
                )

                on_progress("Processing transcription...")
                poller = TranscriptPoller(provider, self._config.poll_interval)
                job = await poller.poll_until_terminal(transcript_id, on_progress)

            on_progress("Formatting transcript...")
            transcript = self._transcript_builder.build(
                job, speaker1_name, speaker2_name
            )

            on_progress("Transcription complete!")
        except Exception as e:
            logger.exception(
                "Transcription failed",
                extra={"file_path": str(audio_path), "error_type": type(e).__name__},
            )
            try:
                on_progress(f"Error: {e}")
            except Exception:
                logger.exception("Progress callback failed while reporting error")
            raise TranscriptionFailedError(e) from e

        logger.info(
            "Audio transcribed",
            extra={
                "file_path": str(audio_path),
                "transcript_id": job.id,
                "utterance_count": len(job.utterances or []),
            },
        )
        return transcript

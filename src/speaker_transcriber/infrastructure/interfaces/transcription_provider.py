"""Abstract interface for transcription provider operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from speaker_transcriber.domain.models import TranscriptJob


class TranscriptionProvider(ABC):
    """Abstract base class for remote transcription backends."""

    @abstractmethod
    async def upload(self, file_path: Path) -> str:
        """
        Uploads a local audio file to the provider's storage.

        Args:
            file_path: Path to a readable audio file.

        Returns:
            Opaque handle (URL) referencing the uploaded content.

        Raises:
            AudioFileError: If the file is missing or unreadable.
            UploadError: If the provider rejects the upload.
            MalformedResponseError: If the response lacks the upload handle.
        """

    @abstractmethod
    async def submit(
        self, upload_url: str, speaker_labels: bool, speakers_expected: int
    ) -> str:
        """
        Creates a transcription job for previously uploaded audio.

        Args:
            upload_url: Handle returned by upload().
            speaker_labels: Whether to request speaker diarization.
            speakers_expected: Number of speakers the provider should assume.

        Returns:
            The provider-assigned job identifier.

        Raises:
            SubmissionError: If the provider rejects the request.
            MalformedResponseError: If the response lacks the job id.
        """

    @abstractmethod
    async def get_transcript(self, transcript_id: str) -> TranscriptJob:
        """
        Fetches a fresh snapshot of a transcription job.

        Args:
            transcript_id: The job identifier returned by submit().

        Returns:
            The current job snapshot.

        Raises:
            PollError: If the status request fails.
            MalformedResponseError: If the snapshot cannot be parsed.
        """

    @abstractmethod
    async def aclose(self) -> None:
        """Releases the provider's network resources."""

    async def __aenter__(self) -> "TranscriptionProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

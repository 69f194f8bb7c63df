"""Core business logic for transcript building."""

from .models import TranscriptJob

FIRST_SPEAKER_LABEL = "A"
DEFAULT_SPEAKER_1 = "Speaker 1"
DEFAULT_SPEAKER_2 = "Speaker 2"
EMPTY_TRANSCRIPT = "No transcript available"


class TranscriptBuilder:
    """Builds formatted transcripts from completed transcription jobs."""

    def build(self, job: TranscriptJob, speaker1_name: str, speaker2_name: str) -> str:
        """
        Builds a readable transcript with speaker display names.

        Utterances labelled "A" are attributed to the first speaker and every
        other label to the second one, so recordings with three or more
        speakers are merged onto the second name.

        Args:
            job: Completed transcription job snapshot.
            speaker1_name: Display name for speaker "A".
            speaker2_name: Display name for all other speakers.

        Returns:
            The formatted transcript, or the plain text fallback when the
            job carries no utterances.
        """
        if job.utterances:
            return self._format(job, speaker1_name, speaker2_name)
        return job.text or EMPTY_TRANSCRIPT

    def resolve_speaker_names(
        self, speaker1_name: str, speaker2_name: str
    ) -> tuple[str, str]:
        """Strips user input and falls back to default names when blank."""
        return (
            speaker1_name.strip() or DEFAULT_SPEAKER_1,
            speaker2_name.strip() or DEFAULT_SPEAKER_2,
        )

    def derive_file_name(self, speaker2_name: str) -> str:
        """Derives the download file name a UI offers for a finished transcript."""
        name = speaker2_name.strip() or "Speaker2"
        return f"{name}_transcript.txt"

    def _format(
        self, job: TranscriptJob, speaker1_name: str, speaker2_name: str
    ) -> str:
        """Formats utterances into one block per speaker turn."""
        lines = []
        for u in job.utterances:
            name = speaker1_name if u.speaker == FIRST_SPEAKER_LABEL else speaker2_name
            lines.append(f"[{name}]: {u.text}\n\n")
        return "".join(lines)

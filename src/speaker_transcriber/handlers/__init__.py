"""Handler layer exports."""

from .transcript_poller import ProgressCallback, TranscriptPoller
from .transcription_handler import TranscriptionHandler

__all__ = ["ProgressCallback", "TranscriptPoller", "TranscriptionHandler"]

"""Infrastructure interface exports."""

from .transcription_provider import TranscriptionProvider

__all__ = ["TranscriptionProvider"]

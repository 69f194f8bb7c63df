"""Domain layer exports."""

from .models import TERMINAL_STATUSES, TranscriptJob, TranscriptStatus, Utterance
from .transcript_builder import TranscriptBuilder

__all__ = [
    "TERMINAL_STATUSES",
    "TranscriptJob",
    "TranscriptStatus",
    "Utterance",
    "TranscriptBuilder",
]

"""Domain models for the transcription workflow."""

from enum import Enum

from pydantic import BaseModel, Field


class TranscriptStatus(str, Enum):
    """Lifecycle states reported by the provider for a transcription job."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


TERMINAL_STATUSES = frozenset({TranscriptStatus.COMPLETED, TranscriptStatus.ERROR})


class Utterance(BaseModel, frozen=True):
    """
    A single speaker utterance from transcription.

    Offsets and confidence are informational and kept as the provider sent them.
    """

    speaker: str
    text: str
    start: int | None = None
    end: int | None = None
    confidence: float | None = None


class TranscriptJob(BaseModel, frozen=True):
    """
    Snapshot of a transcription job as returned by the provider.

    Every status check yields a new snapshot; fields the client does not model
    are dropped on parse. Status values outside TranscriptStatus are kept as
    plain strings and treated as still in flight.
    """

    id: str
    status: TranscriptStatus | str | None = Field(
        default=None, union_mode="left_to_right"
    )
    text: str | None = None
    utterances: list[Utterance] | None = None
    error: str | None = None

    @property
    def status_name(self) -> str | None:
        if isinstance(self.status, TranscriptStatus):
            return self.status.value
        return self.status

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

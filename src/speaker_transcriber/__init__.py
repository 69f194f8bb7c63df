from speaker_transcriber.config import AppConfig, AssemblyAIConfig, load_config
from speaker_transcriber.dependencies import get_handler, get_worker
from speaker_transcriber.domain import (
    TranscriptBuilder,
    TranscriptJob,
    TranscriptStatus,
    Utterance,
)
from speaker_transcriber.exceptions import (
    AudioFileError,
    JobFailedError,
    MalformedResponseError,
    PollError,
    ProviderRequestError,
    SubmissionError,
    TranscriptionFailedError,
    UploadError,
)
from speaker_transcriber.handlers import TranscriptionHandler, TranscriptPoller
from speaker_transcriber.logging import setup_logging
from speaker_transcriber.worker import Worker

__all__ = [
    "setup_logging",
    "AppConfig",
    "AssemblyAIConfig",
    "load_config",
    "get_handler",
    "get_worker",
    "TranscriptBuilder",
    "TranscriptJob",
    "TranscriptStatus",
    "Utterance",
    "TranscriptionHandler",
    "TranscriptPoller",
    "Worker",
    "AudioFileError",
    "ProviderRequestError",
    "UploadError",
    "SubmissionError",
    "PollError",
    "MalformedResponseError",
    "JobFailedError",
    "TranscriptionFailedError",
]

"""Dependency injection configuration for the transcriber."""

from collections.abc import Callable

import httpx

from speaker_transcriber.config import AppConfig, load_config
from speaker_transcriber.domain import TranscriptBuilder
from speaker_transcriber.handlers import TranscriptionHandler
from speaker_transcriber.infrastructure import AssemblyAIClient
from speaker_transcriber.infrastructure.interfaces import TranscriptionProvider
from speaker_transcriber.worker import Notifier, Worker


def get_provider_factory(
    config: AppConfig, transport: httpx.AsyncBaseTransport | None = None
) -> Callable[[], TranscriptionProvider]:
    """Returns a factory producing one AssemblyAI client per transcription."""

    def factory() -> TranscriptionProvider:
        return AssemblyAIClient(config.assemblyai, transport=transport)

    return factory


def get_handler(
    config: AppConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    config = config or load_config()
    return TranscriptionHandler(
        get_provider_factory(config, transport),
        TranscriptBuilder(),
        config.assemblyai,
    )


def get_worker(
    config: AppConfig | None = None,
    notify: Notifier | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Worker:
    """Returns a started worker wired to the configured handler."""
    worker = Worker(get_handler(config, transport), notify)
    worker.start()
    return worker

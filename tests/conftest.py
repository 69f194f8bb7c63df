from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Any

import httpx
import pytest

from speaker_transcriber.config import AppConfig, AssemblyAIConfig

BASE_URL = "https://api.test.local/v2"
UPLOAD_URL = "https://cdn.test.local/upload/abc123"
TRANSCRIPT_ID = "test-transcript-id"


class FakeAssemblyAI:
    """Serves queued responses in order and records every request it receives."""

    def __init__(self) -> None:
        self.responses: deque[httpx.Response] = deque()
        self.requests: list[httpx.Request] = []

    def enqueue(
        self,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> "FakeAssemblyAI":
        if json is not None:
            self.responses.append(httpx.Response(status_code, json=json))
        else:
            self.responses.append(httpx.Response(status_code, text=text or ""))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.popleft()

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]


def completed_job(**overrides: Any) -> dict[str, Any]:
    job = {
        "id": TRANSCRIPT_ID,
        "status": "completed",
        "text": "Hello from Alice. Hello from Bob.",
        "utterances": [
            {"speaker": "A", "text": "Hello from Alice", "start": 0, "end": 1000, "confidence": 0.95},
            {"speaker": "B", "text": "Hello from Bob", "start": 1000, "end": 2000, "confidence": 0.98},
        ],
    }
    job.update(overrides)
    return job


@pytest.fixture
def fake_api() -> FakeAssemblyAI:
    return FakeAssemblyAI()


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key="test-api-key",
            base_url=BASE_URL,
            poll_interval=0.0,
        )
    )


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    path = tmp_path / "session.mp3"
    path.write_bytes(b"test audio content")
    return path

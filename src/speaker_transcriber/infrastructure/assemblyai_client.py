"""AssemblyAI implementation of the TranscriptionProvider interface."""

import asyncio
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from speaker_transcriber.config import AssemblyAIConfig
from speaker_transcriber.domain.models import TranscriptJob
from speaker_transcriber.exceptions import (
    AudioFileError,
    MalformedResponseError,
    PollError,
    SubmissionError,
    UploadError,
)
from speaker_transcriber.logging import setup_logging

from .interfaces import TranscriptionProvider

logger = setup_logging()

AUDIO_CONTENT_TYPE = "audio/mpeg"


class AssemblyAIClient(TranscriptionProvider):
    """Handles audio upload, job creation and status checks against AssemblyAI."""

    def __init__(
        self,
        config: AssemblyAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/"),
            headers={"Authorization": config.api_key},
            timeout=httpx.Timeout(
                config.read_timeout,
                connect=config.connect_timeout,
                read=config.read_timeout,
                write=config.write_timeout,
            ),
            transport=transport,
        )

    async def upload(self, file_path: Path) -> str:
        """
        Uploads the whole audio file in a single request.

        The file is read off the event loop thread; the content type is always
        sent as audio/mpeg regardless of the actual container.
        """
        audio_data = await self._read_audio(file_path)

        try:
            response = await self._client.post(
                "/upload",
                content=audio_data,
                headers={"Content-Type": AUDIO_CONTENT_TYPE},
            )
        except httpx.RequestError as e:
            logger.exception(
                "Audio upload request failed", extra={"file_path": str(file_path)}
            )
            raise UploadError(None, str(e), e) from e

        if not response.is_success:
            raise UploadError(response.status_code, _error_message(response))

        upload_url = _json_body(response, "upload_url").get("upload_url")
        if not isinstance(upload_url, str) or not upload_url:
            raise MalformedResponseError("upload_url")

        logger.info(
            "Audio file uploaded",
            extra={"file_path": str(file_path), "size": len(audio_data)},
        )
        return upload_url

    async def submit(
        self, upload_url: str, speaker_labels: bool, speakers_expected: int
    ) -> str:
        payload = {
            "audio_url": upload_url,
            "speaker_labels": speaker_labels,
            "speakers_expected": speakers_expected,
        }
        try:
            response = await self._client.post("/transcript", json=payload)
        except httpx.RequestError as e:
            logger.exception("Transcription submission request failed")
            raise SubmissionError(None, str(e), e) from e

        if not response.is_success:
            raise SubmissionError(response.status_code, _error_message(response))

        job = _parse_job(response)
        logger.info(
            "Transcription job submitted",
            extra={"transcript_id": job.id, "speakers_expected": speakers_expected},
        )
        return job.id

    async def get_transcript(self, transcript_id: str) -> TranscriptJob:
        try:
            response = await self._client.get(f"/transcript/{transcript_id}")
        except httpx.RequestError as e:
            logger.exception(
                "Transcription status request failed",
                extra={"transcript_id": transcript_id},
            )
            raise PollError(None, str(e), e) from e

        if not response.is_success:
            raise PollError(response.status_code, _error_message(response))

        job = _parse_job(response)
        if job.status is None:
            raise MalformedResponseError("status")
        return job

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _read_audio(self, file_path: Path) -> bytes:
        if not file_path.is_file():
            raise AudioFileError(str(file_path))
        try:
            return await asyncio.to_thread(file_path.read_bytes)
        except OSError as e:
            raise AudioFileError(str(file_path), e) from e


def _json_body(response: httpx.Response, field: str) -> dict[str, Any]:
    """Decodes a JSON object body, blaming the field the caller needs from it."""
    try:
        data = response.json()
    except ValueError as e:
        raise MalformedResponseError(field, e) from e
    if not isinstance(data, dict):
        raise MalformedResponseError(field)
    return data


def _parse_job(response: httpx.Response) -> TranscriptJob:
    data = _json_body(response, "id")
    try:
        return TranscriptJob.model_validate(data)
    except ValidationError as e:
        loc = e.errors()[0]["loc"] if e.errors() else ()
        field = ".".join(str(part) for part in loc) or "transcript"
        raise MalformedResponseError(field, e) from e


def _error_message(response: httpx.Response) -> str:
    """Prefers the provider's JSON error detail over the bare reason phrase."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return response.reason_phrase or response.text

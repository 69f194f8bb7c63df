from __future__ import annotations

import pytest

from speaker_transcriber.domain import TranscriptBuilder, TranscriptJob


def _job(**fields) -> TranscriptJob:
    return TranscriptJob.model_validate({"id": "job-1", "status": "completed", **fields})


def test_build_maps_speakers_to_display_names() -> None:
    job = _job(
        utterances=[
            {"speaker": "A", "text": "Hello"},
            {"speaker": "B", "text": "world"},
        ]
    )

    assert TranscriptBuilder().build(job, "Alice", "Bob") == "[Alice]: Hello\n\n[Bob]: world\n\n"


def test_build_keeps_utterance_order() -> None:
    job = _job(
        utterances=[
            {"speaker": "B", "text": "first"},
            {"speaker": "A", "text": "second"},
            {"speaker": "B", "text": "third"},
        ]
    )

    result = TranscriptBuilder().build(job, "Alice", "Bob")

    assert result == "[Bob]: first\n\n[Alice]: second\n\n[Bob]: third\n\n"


def test_build_collapses_extra_speakers_onto_second_name() -> None:
    job = _job(
        utterances=[
            {"speaker": "A", "text": "one"},
            {"speaker": "C", "text": "two"},
            {"speaker": "D", "text": "three"},
        ]
    )

    result = TranscriptBuilder().build(job, "Alice", "Bob")

    assert result == "[Alice]: one\n\n[Bob]: two\n\n[Bob]: three\n\n"


@pytest.mark.parametrize("utterances", [None, []])
def test_build_falls_back_to_plain_text(utterances) -> None:
    job = _job(text="plain text", utterances=utterances)

    assert TranscriptBuilder().build(job, "Alice", "Bob") == "plain text"


@pytest.mark.parametrize("text", [None, ""])
def test_build_without_text_or_utterances(text) -> None:
    job = _job(text=text)

    assert TranscriptBuilder().build(job, "Alice", "Bob") == "No transcript available"


def test_build_is_deterministic() -> None:
    job = _job(utterances=[{"speaker": "A", "text": "Hi"}])
    builder = TranscriptBuilder()

    assert builder.build(job, "Alice", "Bob") == builder.build(job, "Alice", "Bob")


def test_resolve_speaker_names_defaults_blank_input() -> None:
    builder = TranscriptBuilder()

    assert builder.resolve_speaker_names("  ", "") == ("Speaker 1", "Speaker 2")
    assert builder.resolve_speaker_names(" Tes ", "Sam") == ("Tes", "Sam")


def test_derive_file_name_uses_second_speaker() -> None:
    builder = TranscriptBuilder()

    assert builder.derive_file_name(" Sam ") == "Sam_transcript.txt"
    assert builder.derive_file_name("") == "Speaker2_transcript.txt"

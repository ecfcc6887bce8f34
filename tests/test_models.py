"""TDD: response/option model tests written FIRST"""
import dataclasses

import pytest

from woolball_stt.transcription.errors import DeserializationError, WoolballError
from woolball_stt.transcription.models import (
    TranscriptionChunk,
    TranscriptionOptions,
    TranscriptionResult,
    parse_model_names,
)


# ── TranscriptionOptions ──────────────────────────────────────────────────────


def test_options_defaults():
    options = TranscriptionOptions()
    assert options.model == "onnx-community/whisper-large-v3-turbo_timestamped"
    assert options.language == "pt"
    assert options.return_timestamps is False
    assert options.webvtt is False


def test_options_immutable():
    options = TranscriptionOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.language = "en"


def test_options_replace_keeps_other_defaults():
    options = dataclasses.replace(TranscriptionOptions(), language="en")
    assert options.language == "en"
    assert options.model == TranscriptionOptions().model


# ── TranscriptionResult.from_payload ──────────────────────────────────────────


def test_result_text_only():
    result = TranscriptionResult.from_payload({"text": "hello"})
    assert result == TranscriptionResult(text="hello", chunks=None, webvtt=None)


def test_result_with_chunks_and_webvtt():
    result = TranscriptionResult.from_payload(
        {
            "text": "a b",
            "chunks": [
                {"text": "a", "start": 0, "end": 0.5},
                {"text": "b", "start": 0.5, "end": 1.25},
            ],
            "webvtt": "WEBVTT\n\n00:00.000 --> 00:00.500\na\n",
        }
    )
    assert result.chunks == [
        TranscriptionChunk(text="a", start=0.0, end=0.5),
        TranscriptionChunk(text="b", start=0.5, end=1.25),
    ]
    assert isinstance(result.chunks[0].start, float)
    assert result.webvtt.startswith("WEBVTT")


def test_result_explicit_nulls_are_none():
    result = TranscriptionResult.from_payload({"text": "x", "chunks": None, "webvtt": None})
    assert result.chunks is None
    assert result.webvtt is None


def test_result_ignores_unknown_fields():
    result = TranscriptionResult.from_payload({"text": "x", "duration": 3.1})
    assert result.text == "x"


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"chunks": []},
        {"text": 42},
        {"text": "x", "chunks": "nope"},
        {"text": "x", "chunks": [{"text": "a", "start": "0", "end": 1}]},
        {"text": "x", "chunks": [{"text": "a", "start": True, "end": 1}]},
        {"text": "x", "chunks": [{"start": 0, "end": 1}]},
        {"text": "x", "webvtt": 7},
    ],
)
def test_result_rejects_bad_shapes(payload):
    with pytest.raises(DeserializationError):
        TranscriptionResult.from_payload(payload)


def test_deserialization_error_is_woolball_error():
    assert issubclass(DeserializationError, WoolballError)


# ── parse_model_names ─────────────────────────────────────────────────────────


def test_parse_model_names_preserves_order():
    assert parse_model_names(["b", "a", "c"]) == ["b", "a", "c"]


def test_parse_model_names_empty():
    assert parse_model_names([]) == []


def test_parse_model_names_rejects_non_string_entry():
    with pytest.raises(DeserializationError, match="int"):
        parse_model_names(["ok", 3])

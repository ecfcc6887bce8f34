"""Request options and response values for speech-to-text calls."""
from dataclasses import dataclass
from typing import Any, Optional

from woolball_stt.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL,
    ERR_FIELD_TYPE,
    ERR_MODEL_NAME,
    ERR_NOT_LIST,
    ERR_NOT_OBJECT,
)
from woolball_stt.transcription.errors import DeserializationError


@dataclass(frozen=True)
class TranscriptionOptions:
    """Per-call settings sent as query parameters.

    model:             server-side model id (default ``DEFAULT_MODEL``).
    language:          spoken language hint, ISO code (default ``"pt"``).
    return_timestamps: ask the server for timestamped ``chunks`` (default off).
    webvtt:            ask the server for a WebVTT subtitle document (default off).
    """

    model: str = DEFAULT_MODEL
    language: str = DEFAULT_LANGUAGE
    return_timestamps: bool = False
    webvtt: bool = False


@dataclass(frozen=True)
class TranscriptionChunk:
    text: str
    start: float
    end: float

    @classmethod
    def from_payload(cls, payload: Any) -> "TranscriptionChunk":
        data = _require_object(payload)
        return cls(
            text=_require_str(data, "text"),
            start=_require_number(data, "start"),
            end=_require_number(data, "end"),
        )


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    chunks: Optional[list[TranscriptionChunk]] = None
    webvtt: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "TranscriptionResult":
        data = _require_object(payload)
        match data.get("chunks"):
            case None:
                chunks = None
            case list() as raw:
                chunks = list(map(TranscriptionChunk.from_payload, raw))
            case other:
                raise DeserializationError(
                    ERR_FIELD_TYPE % ("chunks", "an array", _kind(other))
                )
        match data.get("webvtt"):
            case None | str() as webvtt:
                pass
            case other:
                raise DeserializationError(
                    ERR_FIELD_TYPE % ("webvtt", "a string", _kind(other))
                )
        return cls(text=_require_str(data, "text"), chunks=chunks, webvtt=webvtt)


def parse_model_names(payload: Any) -> list[str]:
    """Validate the ``/speech-to-text-models`` payload, preserving order."""
    match payload:
        case list():
            pass
        case other:
            raise DeserializationError(ERR_NOT_LIST % _kind(other))
    for name in payload:
        match name:
            case str():
                pass
            case other:
                raise DeserializationError(ERR_MODEL_NAME % _kind(other))
    return list(payload)


# ── shape helpers ─────────────────────────────────────────────────────────────


def _kind(value: Any) -> str:
    return type(value).__name__


def _require_object(payload: Any) -> dict[str, Any]:
    match payload:
        case dict():
            return payload
        case other:
            raise DeserializationError(ERR_NOT_OBJECT % _kind(other))


def _require_str(data: dict[str, Any], name: str) -> str:
    match data.get(name):
        case str() as value:
            return value
        case other:
            raise DeserializationError(ERR_FIELD_TYPE % (name, "a string", _kind(other)))


def _require_number(data: dict[str, Any], name: str) -> float:
    match data.get(name):
        case bool() as other:
            raise DeserializationError(ERR_FIELD_TYPE % (name, "a number", _kind(other)))
        case int() | float() as value:
            return float(value)
        case other:
            raise DeserializationError(ERR_FIELD_TYPE % (name, "a number", _kind(other)))

"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from typing import Optional

from woolball_stt.constants import DEFAULT_LANGUAGE
from woolball_stt.transcription.models import TranscriptionOptions, TranscriptionResult


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe_from_url(
        self, audio_url: str, options: Optional[TranscriptionOptions] = None
    ) -> TranscriptionResult:
        """Transcribe audio the server fetches from ``audio_url``. Raises on failure."""
        ...

    @abstractmethod
    async def transcribe_from_file(
        self, audio_data: bytes, options: Optional[TranscriptionOptions] = None
    ) -> TranscriptionResult:
        """Transcribe raw audio/video bytes. Raises on failure."""
        ...

    @abstractmethod
    async def get_available_models(self) -> list[str]:
        """Return the model ids the server accepts, in server order."""
        ...

    # ── convenience variants ─────────────────────────────────────────────────

    async def transcribe_from_url_with_timestamps(
        self, audio_url: str, language: str = DEFAULT_LANGUAGE
    ) -> TranscriptionResult:
        options = TranscriptionOptions(language=language, return_timestamps=True)
        return await self.transcribe_from_url(audio_url, options)

    async def transcribe_from_url_with_webvtt(
        self, audio_url: str, language: str = DEFAULT_LANGUAGE
    ) -> TranscriptionResult:
        options = TranscriptionOptions(language=language, return_timestamps=True, webvtt=True)
        return await self.transcribe_from_url(audio_url, options)

    async def transcribe_from_file_with_timestamps(
        self, audio_data: bytes, language: str = DEFAULT_LANGUAGE
    ) -> TranscriptionResult:
        options = TranscriptionOptions(language=language, return_timestamps=True)
        return await self.transcribe_from_file(audio_data, options)

    async def transcribe_from_file_with_webvtt(
        self, audio_data: bytes, language: str = DEFAULT_LANGUAGE
    ) -> TranscriptionResult:
        options = TranscriptionOptions(language=language, return_timestamps=True, webvtt=True)
        return await self.transcribe_from_file(audio_data, options)

"""WoolballTranscriptionClient — Woolball speech-to-text HTTP backend."""
import logging
import time
from typing import Any, Optional
from urllib.parse import quote

import httpx

from woolball_stt.constants import (
    AUTH_HEADER,
    AUTH_SCHEME,
    CONTENT_TYPE_AUDIO,
    CONTENT_TYPE_HEADER,
    ERR_NOT_JSON,
    HTTP_TIMEOUT,
    MSG_BAD_PAYLOAD,
    MSG_HTTP_STATUS_FAIL,
    MSG_HTTP_TRANSPORT_FAIL,
    MSG_LIST_MODELS,
    MSG_REQUEST_OK,
    MSG_TRANSCRIBE_FILE,
    MSG_TRANSCRIBE_URL,
    SPEECH_TO_TEXT_MODELS_PATH,
    SPEECH_TO_TEXT_PATH,
    WOOLBALL_BASE_URL,
)
from woolball_stt.transcription.client import TranscriptionClient
from woolball_stt.transcription.errors import DeserializationError, HttpError
from woolball_stt.transcription.models import (
    TranscriptionOptions,
    TranscriptionResult,
    parse_model_names,
)

logger = logging.getLogger(__name__)


def build_query(options: TranscriptionOptions) -> str:
    """Render options as the ``/speech-to-text`` query string.

    Booleans are sent as ``True``/``False``, which is what the API expects.
    """
    return (
        f"model={quote(options.model, safe='')}"
        f"&language={quote(options.language, safe='')}"
        f"&returnTimestamps={options.return_timestamps}"
        f"&webvtt={options.webvtt}"
    )


class WoolballTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key: str,
        base_url: str = WOOLBALL_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def transcription_url(self, options: TranscriptionOptions) -> str:
        return f"{self._base_url}{SPEECH_TO_TEXT_PATH}?{build_query(options)}"

    async def transcribe_from_url(
        self, audio_url: str, options: Optional[TranscriptionOptions] = None
    ) -> TranscriptionResult:
        options = options or TranscriptionOptions()
        logger.info(MSG_TRANSCRIBE_URL, audio_url, options.model, options.language)
        payload = await self._request(
            "POST", self.transcription_url(options), json={"url": audio_url}
        )
        return self._to_result(payload)

    async def transcribe_from_file(
        self, audio_data: bytes, options: Optional[TranscriptionOptions] = None
    ) -> TranscriptionResult:
        options = options or TranscriptionOptions()
        logger.info(MSG_TRANSCRIBE_FILE, len(audio_data), options.model, options.language)
        payload = await self._request(
            "POST",
            self.transcription_url(options),
            content=audio_data,
            headers={CONTENT_TYPE_HEADER: CONTENT_TYPE_AUDIO},
        )
        return self._to_result(payload)

    async def get_available_models(self) -> list[str]:
        logger.info(MSG_LIST_MODELS)
        payload = await self._request("GET", f"{self._base_url}{SPEECH_TO_TEXT_MODELS_PATH}")
        try:
            return parse_model_names(payload)
        except DeserializationError as exc:
            logger.warning(MSG_BAD_PAYLOAD, exc)
            raise

    # ── internals ─────────────────────────────────────────────────────────────

    @staticmethod
    def _to_result(payload: Any) -> TranscriptionResult:
        try:
            return TranscriptionResult.from_payload(payload)
        except DeserializationError as exc:
            logger.warning(MSG_BAD_PAYLOAD, exc)
            raise

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send one request and return its decoded JSON body."""
        start = time.time()
        async with httpx.AsyncClient(
            headers={AUTH_HEADER: f"{AUTH_SCHEME} {self._api_key}"},
            timeout=HTTP_TIMEOUT,
            transport=self._transport,
        ) as client:
            try:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                logger.warning(MSG_HTTP_STATUS_FAIL, method, url, status)
                raise HttpError(str(exc), status_code=status, body=exc.response.text) from exc
            except httpx.RequestError as exc:
                logger.warning(MSG_HTTP_TRANSPORT_FAIL, method, url, exc)
                raise HttpError(str(exc)) from exc

        logger.debug(MSG_REQUEST_OK, method, url, response.status_code, time.time() - start)
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(MSG_BAD_PAYLOAD, ERR_NOT_JSON)
            raise DeserializationError(ERR_NOT_JSON) from exc

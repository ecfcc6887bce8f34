from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from woolball_stt.constants import DEFAULT_LANGUAGE, DEFAULT_MODEL, WOOLBALL_BASE_URL
from woolball_stt.transcription.models import TranscriptionOptions


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str
    model: str
    language: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("WOOLBALL_API_KEY")
        base_url = os.getenv("WOOLBALL_BASE_URL") or WOOLBALL_BASE_URL
        model = os.getenv("WOOLBALL_MODEL") or DEFAULT_MODEL
        language = os.getenv("WOOLBALL_LANGUAGE") or DEFAULT_LANGUAGE
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            model=model,
            language=language,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        base_url: str,
        model: str,
        language: str,
        log_level: str,
    ) -> "Config":
        match api_key.strip() if api_key else "":
            case "":
                raise ValueError("WOOLBALL_API_KEY must be set in .env")
            case _:
                pass

        match base_url:
            case str() as url if url.startswith(("http://", "https://")):
                pass
            case _:
                raise ValueError("WOOLBALL_BASE_URL must include http/https scheme")

        return Config(
            api_key=api_key.strip(),
            base_url=base_url,
            model=model,
            language=language,
            log_level=log_level,
        )

    def default_options(self) -> TranscriptionOptions:
        """Options seeded with the configured model and language."""
        return TranscriptionOptions(model=self.model, language=self.language)

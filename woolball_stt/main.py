"""Entry point — wires Config → WoolballTranscriptionClient → stdout."""
import argparse
import asyncio
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from woolball_stt.config import Config
from woolball_stt.constants import (
    CLI_PROG,
    MSG_CHUNK_LINE,
    MSG_CLI_DESCRIPTION,
    MSG_CLI_FAILED,
    MSG_CLI_FILE_MISSING,
)
from woolball_stt.transcription.client import TranscriptionClient
from woolball_stt.transcription.errors import WoolballError
from woolball_stt.transcription.models import TranscriptionOptions, TranscriptionResult
from woolball_stt.transcription.woolball import WoolballTranscriptionClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=MSG_CLI_DESCRIPTION)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("models", help="List available speech-to-text models")

    for name, help_text, source_help in (
        ("url", "Transcribe audio the server downloads from a URL", "Audio URL"),
        ("file", "Transcribe a local audio/video file", "Path to the audio file"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("source", help=source_help)
        sub.add_argument("--language", help="Spoken language code (default from config)")
        sub.add_argument("--model", help="Model id (default from config)")
        sub.add_argument("--timestamps", action="store_true", help="Return timestamped chunks")
        sub.add_argument(
            "--webvtt", action="store_true", help="Return WebVTT subtitles (implies --timestamps)"
        )
    return parser


def options_from_args(args: argparse.Namespace, config: Config) -> TranscriptionOptions:
    """Overlay CLI flags on the configured defaults."""
    overrides = {
        "model": args.model,
        "language": args.language,
        "return_timestamps": True if args.timestamps or args.webvtt else None,
        "webvtt": True if args.webvtt else None,
    }
    return dataclasses.replace(
        config.default_options(),
        **{k: v for k, v in overrides.items() if v is not None},
    )


def format_result(result: TranscriptionResult, options: TranscriptionOptions) -> str:
    match (options.webvtt, result.webvtt, result.chunks):
        case (True, str() as vtt, _) if vtt:
            return vtt
        case (_, _, [*chunks]) if chunks:
            return "\n".join(
                MSG_CHUNK_LINE % (c.start, c.end, c.text.strip()) for c in chunks
            )
        case _:
            return result.text.strip()


async def run(args: argparse.Namespace, config: Config, client: TranscriptionClient) -> str:
    match args.command:
        case "models":
            return "\n".join(await client.get_available_models())
        case "url":
            options = options_from_args(args, config)
            result = await client.transcribe_from_url(args.source, options)
            return format_result(result, options)
        case "file":
            options = options_from_args(args, config)
            audio = Path(args.source).read_bytes()
            result = await client.transcribe_from_file(audio, options)
            return format_result(result, options)
        case other:
            raise ValueError(f"Unknown command: {other}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    if args.command == "file" and not Path(args.source).is_file():
        logger.error(MSG_CLI_FILE_MISSING, args.source)
        return 1

    client = WoolballTranscriptionClient(config.api_key, base_url=config.base_url)
    try:
        output = asyncio.run(run(args, config, client))
    except WoolballError as exc:
        logger.error(MSG_CLI_FAILED, exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

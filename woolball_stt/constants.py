"""All magic values live here — no inline literals anywhere else."""

# Woolball API
WOOLBALL_BASE_URL = "https://api.woolball.xyz/v1"
SPEECH_TO_TEXT_PATH = "/speech-to-text"
SPEECH_TO_TEXT_MODELS_PATH = "/speech-to-text-models"

# Request defaults
DEFAULT_MODEL = "onnx-community/whisper-large-v3-turbo_timestamped"
DEFAULT_LANGUAGE = "pt"

# Whole-request timeout (seconds).
HTTP_TIMEOUT: float = 100.0

# Headers
AUTH_HEADER = "Authorization"
AUTH_SCHEME = "Bearer"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_AUDIO = "audio/mpeg"

# Log messages
MSG_TRANSCRIBE_URL = "→ Transcribing URL %s (model=%s, language=%s)"
MSG_TRANSCRIBE_FILE = "→ Transcribing %d bytes (model=%s, language=%s)"
MSG_LIST_MODELS = "→ Listing speech-to-text models"
MSG_REQUEST_OK = "✓ %s %s (%d, %.1fs)"
MSG_HTTP_STATUS_FAIL = "✗ %s %s failed with status %d"
MSG_HTTP_TRANSPORT_FAIL = "✗ %s %s failed: %s"
MSG_BAD_PAYLOAD = "✗ Unexpected response payload: %s"

# Error texts
ERR_NOT_JSON = "Response body is not valid JSON"
ERR_NOT_OBJECT = "Expected a JSON object, got %s"
ERR_NOT_LIST = "Expected a JSON array, got %s"
ERR_FIELD_TYPE = "Field %r must be %s, got %s"
ERR_MODEL_NAME = "Model names must be strings, got %s"

# CLI
CLI_PROG = "woolball-stt"
MSG_CLI_DESCRIPTION = "Transcribe audio with the Woolball speech-to-text API."
MSG_CHUNK_LINE = "[%7.2f → %7.2f] %s"
MSG_CLI_FAILED = "Request failed: %s"
MSG_CLI_FILE_MISSING = "Audio file not found: %s"

"""Provider/runtime configuration for the gateway.

Architectural role:
    Centralizes Gemini model selection, endpoint construction, credential lookup,
    and the fixed response constants shared by `studygate.llm` and
    `studygate.api`.

Credential handling:
    The API key is never embedded. `load_key` resolves it at call time from the
    `GEMINI_API_KEY` environment variable (a `.env` file is honored through
    `load_dotenv`) or from a key file.

Determinism:
    Deterministic for a fixed process environment and key files. Model and timeout
    values are resolved at import time; the key is read per request.
"""

import os
from dotenv import load_dotenv

load_dotenv()

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_KEY_FILE = os.getenv("GEMINI_KEY_FILE", "config/gemini.key")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

# Unset means the HTTP client waits indefinitely.
_timeout = os.getenv("GEMINI_TIMEOUT")
GEMINI_TIMEOUT = float(_timeout) if _timeout else None

IMAGE_MIME_TYPE = "image/jpeg"

FALLBACK_RESPONSE_TEXT = "No response generated"
UPSTREAM_FAILURE_MESSAGE = "Failed to get response from Gemini AI"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def build_url(model=None):
    """Return the `generateContent` endpoint for `model` (default `GEMINI_MODEL`)."""
    return GEMINI_URL_TEMPLATE.format(model=model or GEMINI_MODEL)


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/gemini.key` -> `GEMINI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing or empty file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None

"""Provider/runtime configuration for the relay.

Architectural role:
    Centralizes the credential, model selection, and fixed response strings for
    `gemini_relay.llm.client`, `gemini_relay.llm.service`, and the API layer.

Determinism:
    Values are resolved once at import time from the process environment (after
    an optional `.env` file is loaded) and are never mutated afterwards.

Failure behavior:
    A missing credential is represented as `None`. It is not an import error;
    the HTTP layer reports it per request as a server-configuration error.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Vendor credential. Read once at startup; must never reach client responses or logs.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or None

# Build-time model constant.
MODEL_NAME = "gemini-2.5-flash-preview-09-2025"

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

# Inline image data is always declared as PNG, whatever the client actually sent.
INLINE_IMAGE_MIME_TYPE = "image/png"

# Substituted when a successful vendor response carries no text.
FALLBACK_ANALYSIS = "No se pudo obtener el análisis de la IA."

# Used when a vendor error body has no `error` object.
UNKNOWN_API_ERROR = "Unknown API error"

# Standalone server settings consumed by `gemini_relay.api.main`.
RELAY_HOST = os.getenv("RELAY_HOST", "0.0.0.0")
RELAY_PORT = int(os.getenv("RELAY_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Request-shape debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def build_generate_url(model: str = MODEL_NAME) -> str:
    """Return the `generateContent` endpoint URL for `model` (without the key)."""
    return GEMINI_URL_TEMPLATE.format(model=model)

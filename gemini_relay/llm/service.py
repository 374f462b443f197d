"""Payload construction and response interpretation for the relay.

Architectural role:
    Bridges the inbound client body to Gemini's request schema and maps the
    vendor's reply back to the strings the relay returns. No I/O happens here.

Payload shape:
    One `user` turn holding the query text and the image as inline data, plus a
    `systemInstruction` with the caller-supplied system prompt.

Determinism:
    Payload construction and text extraction are pure functions of their inputs.
"""

from typing import Any

from gemini_relay.llm.provider_config import (
    FALLBACK_ANALYSIS,
    INLINE_IMAGE_MIME_TYPE,
    UNKNOWN_API_ERROR,
)


def build_payload(base64_image: str, system_prompt: Any, user_query: Any) -> dict:
    """Build a `generateContent` body from the relay's inbound fields.

    Args:
        base64_image: Base64 image bytes, forwarded verbatim.
        system_prompt: Instruction text; any value, `None` included, is forwarded as-is.
        user_query: User prompt text; forwarded as-is.

    Returns:
        Gemini request payload. The image MIME type is always `image/png`.
    """
    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": user_query},
                    {
                        "inlineData": {
                            "mimeType": INLINE_IMAGE_MIME_TYPE,
                            "data": base64_image,
                        }
                    },
                ],
            }
        ],
        "systemInstruction": {
            "parts": [{"text": system_prompt}]
        },
    }


def extract_analysis(data: Any) -> str:
    """Return `candidates[0].content.parts[0].text` or the fallback string.

    Any missing level, empty list, non-dict node, or empty text yields
    `FALLBACK_ANALYSIS`.
    """
    node = data
    for key in ("candidates", 0, "content", "parts", 0, "text"):
        if isinstance(key, int):
            if not isinstance(node, list) or len(node) <= key:
                return FALLBACK_ANALYSIS
        elif not isinstance(node, dict):
            return FALLBACK_ANALYSIS
        node = node[key] if isinstance(key, int) else node.get(key)
        if node is None:
            return FALLBACK_ANALYSIS

    return node or FALLBACK_ANALYSIS


def extract_error_details(data: Any) -> str:
    """Return the vendor's `error.message`, or a generic marker when absent."""
    error = data.get("error") if isinstance(data, dict) else None
    if not error:
        return UNKNOWN_API_ERROR
    if isinstance(error, dict):
        return error.get("message") or UNKNOWN_API_ERROR
    return str(error)

"""HTTP transport for Gemini `generateContent` requests.

Architectural role:
    Executes the single outbound request of a relay and hands the decoded
    response back to the caller together with its status.

Model invocation flow:
    `http_api.gemini_proxy` -> `service.build_payload` ->
    `send_generate_content(payload, api_key)` -> `VendorResponse`.

Retry behavior:
    No retry loop is implemented. Each request is attempted once and no timeout
    is set, so a slow vendor holds the calling worker until it answers or the
    connection fails.

Failure handling model:
    Connection errors and undecodable response bodies are raised to the caller.
    Non-success HTTP statuses are not raised; they are returned so the caller
    can relay the vendor status.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from gemini_relay.llm.provider_config import MODEL_NAME, build_generate_url


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VendorResponse:
    """Decoded vendor reply: HTTP status, success flag, and JSON body."""

    status_code: int
    ok: bool
    data: Any


def send_generate_content(payload: dict, api_key: str, model: str = MODEL_NAME) -> VendorResponse:
    """POST one `generateContent` request and decode its JSON body.

    Args:
        payload: Gemini request body built by `service.build_payload`.
        api_key: Server-held credential, sent as the `key` query parameter.
        model: Model identifier interpolated into the endpoint path.

    Returns:
        `VendorResponse` for both success and non-success statuses.

    Raises:
        requests.exceptions.RequestException: connection-level failures.
        ValueError: the vendor body is not valid JSON.
    """
    url = build_generate_url(model)
    logger.debug("Sending generateContent request for model %s", model)

    response = requests.post(
        url,
        params={"key": api_key},
        headers={"Content-Type": "application/json"},
        json=payload,
    )

    data = response.json()

    return VendorResponse(status_code=response.status_code, ok=response.ok, data=data)

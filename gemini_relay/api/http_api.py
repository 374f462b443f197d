"""
HTTP API adapter for the Gemini relay.

Architectural role:
- Expose the single relay endpoint that keeps the Gemini key server-side.
- Enforce request validation in a fixed order.
- Delegate payload shaping to `gemini_relay.llm.service` and the vendor call
  to `gemini_relay.llm.client`.
- Normalize every outcome into the relay's JSON response contract.

Endpoint responsibilities:
- `POST /api/gemini_proxy`: validate, relay to `generateContent`, return
  `{"analysis": ...}`.
- Any other method on the same path: HTTP 405.

API request lifecycle:
1. Reject non-POST methods.
2. Reject when the credential is not configured.
3. Parse JSON body (`base64Image`, `systemPrompt`, `userQuery`).
4. Reject a missing or empty `base64Image`.
5. Build the Gemini payload and issue one outbound request.
6. Relay vendor rejections with the vendor status, or return the analysis text.

Error handling strategy:
- Validation and vendor failures raise `RelayError` subclasses, rendered by
  `relay_error_handler`.
- Anything else raised while relaying is logged as one redacted line and
  collapsed to a generic 500 body. Exception text never reaches the client,
  and the credential never reaches the log.

Side effects:
- One outbound HTTPS request per accepted POST.
- Log lines on vendor rejection and internal failures; request-shape debug
  logging only when `DEBUG == "true"`.
"""

import asyncio
import logging
import re
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gemini_relay.api.errors import (
    CredentialNotConfiguredError,
    InternalRelayError,
    MethodNotAllowedError,
    MissingImageError,
    RelayError,
    VendorAPIError,
)
from gemini_relay.llm import client, provider_config
from gemini_relay.llm.service import build_payload, extract_analysis, extract_error_details


logger = logging.getLogger(__name__)

RELAY_PATH = "/api/gemini_proxy"

# Request URLs carry the credential as `?key=...`; connection errors echo them.
KEY_PARAM_PATTERN = re.compile(r"([?&]key=)[^&\s'\")]+")

# Every method is routed to the handler so that the 405 body is the relay's own.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = FastAPI(title="Gemini Relay")


# ============================================================
# Request Schema
# ============================================================

class RelayRequest(BaseModel):
    """
    Inbound relay body.

    All fields are optional at the schema level so that a missing image is
    reported as the relay's own 400 rather than a schema error. The prompt
    fields accept any JSON value and are forwarded unchanged. Bodies that do
    not fit this shape at all fall through to the generic 500.
    """
    base64Image: Optional[str] = None
    systemPrompt: Any = None
    userQuery: Any = None


def _sanitize_error(err: Exception, api_key: str) -> str:
    """Build exception-labeled log text with the credential redacted.

    Tracebacks are not logged: `requests` connection errors embed the full
    request URL, query string included, in their message and chained causes.
    """
    text = KEY_PARAM_PATTERN.sub(r"\1***", str(err))
    if api_key:
        text = text.replace(api_key, "***")
    return f"{type(err).__name__}: {text}"


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    """Render a `RelayError` as its JSON body and status."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


# ============================================================
# Relay endpoint
# ============================================================

@app.api_route(RELAY_PATH, methods=ROUTED_METHODS)
async def gemini_proxy(request: Request):
    """
    Relay one image-analysis request to Gemini.

    Input validation behavior:
    - Non-POST -> 405.
    - Credential missing -> 500 configuration error, before the body is read.
    - Missing/empty `base64Image` -> 400.

    `systemPrompt` and `userQuery` are forwarded without validation.
    """
    if request.method != "POST":
        raise MethodNotAllowedError()

    api_key = provider_config.GEMINI_API_KEY
    if not api_key:
        raise CredentialNotConfiguredError()

    try:
        analysis = await _relay(request, api_key)
    except RelayError:
        raise
    except Exception as err:
        logger.error("Proxy processing error: %s", _sanitize_error(err, api_key))
        raise InternalRelayError()

    return {"analysis": analysis}


async def _relay(request: Request, api_key: str) -> str:
    """Parse the body, call Gemini, and return the analysis text."""
    body = RelayRequest.model_validate(await request.json())

    base64_image = body.base64Image
    system_prompt = body.systemPrompt
    user_query = body.userQuery

    if provider_config.DEBUG:
        logger.debug(
            "Relay request: image_chars=%s system_prompt=%s user_query=%s",
            len(base64_image or ""),
            system_prompt is not None,
            user_query is not None,
        )

    if not base64_image:
        raise MissingImageError()

    payload = build_payload(base64_image, system_prompt, user_query)

    # The transport is blocking; keep it off the event loop.
    response = await asyncio.to_thread(client.send_generate_content, payload, api_key)

    if not response.ok:
        details = extract_error_details(response.data)
        logger.warning("Gemini API rejected request with status %s", response.status_code)
        raise VendorAPIError(response.status_code, details)

    return extract_analysis(response.data)

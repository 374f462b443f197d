"""Relay failure variants and their client-facing JSON bodies.

Each class fixes the HTTP status and body for one failure class. Internal
details never appear in these bodies; they are logged by the raiser instead.
"""

from typing import Any, Dict, Optional


class RelayError(Exception):
    """Base class for failures that terminate one relay request."""

    status_code = 500
    message = "Internal server error processing the image."

    def __init__(self, status_code: Optional[int] = None, message: Optional[str] = None):
        if status_code is not None:
            self.status_code = status_code
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.message}


class MethodNotAllowedError(RelayError):
    status_code = 405
    message = "Method Not Allowed"


class CredentialNotConfiguredError(RelayError):
    status_code = 500
    message = "Server Error: Gemini API Key not configured on the server."


class MissingImageError(RelayError):
    status_code = 400
    message = "Missing image data."


class VendorAPIError(RelayError):
    """Vendor rejected the request; its status is relayed unchanged."""

    message = "Gemini API Error"

    def __init__(self, status_code: int, details: str):
        super().__init__(status_code=status_code)
        self.details = details

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class InternalRelayError(RelayError):
    status_code = 500
    message = "Internal server error processing the image."

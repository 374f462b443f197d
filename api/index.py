"""
Serverless entry point.

Serverless Python runtimes that route `/api/*` to files under `api/` import
this module and look for an ASGI object named `app`.
"""

from gemini_relay.api.http_api import app  # noqa: F401

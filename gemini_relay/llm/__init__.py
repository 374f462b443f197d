"""Gemini access package.

Architectural role:
    Provides process-wide configuration, payload construction, and the HTTP
    transport used by the relay endpoint to invoke Gemini.

Module split:
    - `provider_config`: environment-driven credential and model configuration.
    - `service`: inbound-body-to-payload adapter and response interpretation.
    - `client`: single-attempt HTTP transport to `generateContent`.
"""

"""Gemini relay API adapter package.

Architectural role:
- Defines the HTTP boundary of the relay and its process entry point.
- Performs request validation, error normalization, and response shaping.
- Delegates payload construction and the vendor call to `gemini_relay.llm`.
"""

"""Gemini image-analysis relay.

Keeps the Gemini API key on the server: clients send an image and prompt text
to the relay endpoint, the relay calls `generateContent` with the server-held
key and returns the generated analysis text.
"""

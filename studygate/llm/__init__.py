"""Gemini access package.

Architectural role:
    Provides provider configuration, request-payload construction, and the HTTP
    transport used by `studygate.core.engine`.

Module split:
    - `provider_config`: environment-driven model, endpoint, and key resolution.
    - `service`: parts/payload construction and response-text extraction.
    - `client`: single-shot `generateContent` transport.
"""

"""Core gateway package.

Architectural role:
    Sits between the HTTP/CLI adapters and the provider transport in
    `studygate.llm`.

Composition:
    - `engine`: single-shot request processing.
    - `gateway_types`: inbound schema and success envelope.
    - `errors`: `RequestError` / `UpstreamError` taxonomy.
"""

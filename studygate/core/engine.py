"""Single-shot gateway processing.

Architectural role:
    Provides the execution pipeline used by API/CLI layers to turn one
    `GatewayRequest` into one `GatewayResponse`.

Control-flow model:
    1. Build the ordered parts list (text, then image).
    2. Submit one `generateContent` call through `studygate.llm.client`.
    3. Extract the first candidate text as an optional value.
    4. Apply the fallback placeholder on the `None` branch.
    5. Attach `usageMetadata` when present.

Error handling strategy:
    `UpstreamError` from the transport propagates unchanged. A malformed success
    body is not an error; it degrades to the placeholder text.

Side effects:
    One outbound network call per invocation. No state is retained.
"""

import logging

from studygate.core.gateway_types import GatewayRequest, GatewayResponse
from studygate.llm.client import send_request
from studygate.llm.service import (
    build_payload,
    extract_text,
    extract_usage,
    resolve_response_text,
)


logger = logging.getLogger(__name__)


def process_request(request: GatewayRequest, model: str = None) -> GatewayResponse:
    """Forward one request to the provider and normalize the result.

    Args:
        request: Validated inbound payload.
        model: Optional model override for the outbound call.

    Returns:
        `GatewayResponse` with candidate text (or placeholder) and usage.

    Raises:
        UpstreamError: Provider unreachable, misconfigured, or non-2xx.

    Edge cases:
        - Empty request is forwarded with an empty parts list.
    """
    payload = build_payload(request.prompt, request.image)
    parts = payload["contents"][0]["parts"]

    if not parts:
        logger.warning("Forwarding request with no prompt and no image")
    else:
        logger.debug(
            "Forwarding %d part(s): text=%s image=%s",
            len(parts),
            bool(request.prompt),
            bool(request.image),
        )

    data = send_request(payload, model=model)

    text = extract_text(data)
    if text is None:
        logger.warning("Provider response had no candidate text; using fallback")

    return GatewayResponse(
        response=resolve_response_text(text),
        usage=extract_usage(data),
    )

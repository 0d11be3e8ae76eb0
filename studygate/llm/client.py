"""Gemini transport client.

Architectural role:
    Executes the single outbound `generateContent` call for one gateway
    invocation and returns the decoded provider body.

Model invocation flow:
    `engine.process_request` -> `service.build_payload` -> `send_request(payload)`
    -> decoded JSON dict.

Retry behavior:
    No retry loop is implemented. Each invocation performs exactly one HTTP call.
    The timeout is `GEMINI_TIMEOUT` when configured, otherwise none.

Failure handling model:
    Every failure raises `UpstreamError`:
        - missing API key,
        - network/transport exceptions,
        - non-2xx status (provider `error.message` when present),
        - undecodable response body.
    The request URL carries the key as a query parameter, so it is never logged
    and never included in error messages.
"""

import logging

import requests

from studygate.core.errors import UpstreamError
from studygate.llm.provider_config import (
    GEMINI_KEY_FILE,
    GEMINI_MODEL,
    GEMINI_TIMEOUT,
    UPSTREAM_FAILURE_MESSAGE,
    build_url,
    load_key,
)


logger = logging.getLogger(__name__)


def _provider_error_message(data) -> str:
    """Return provider `error.message` or the generic failure text."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
    return UPSTREAM_FAILURE_MESSAGE


def send_request(payload: dict, model: str = None) -> dict:
    """Send one `generateContent` request and return the decoded body.

    Args:
        payload: Provider payload produced by `service.build_payload`.
        model: Optional model override; defaults to `GEMINI_MODEL`.

    Returns:
        Decoded provider JSON for a 2xx response.

    Raises:
        UpstreamError: On any failure listed in the module docstring.
    """
    api_key = load_key(GEMINI_KEY_FILE)
    if not api_key:
        logger.error("Gemini API key is not configured")
        raise UpstreamError("Gemini API key is not configured")

    try:
        response = requests.post(
            build_url(model),
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
            timeout=GEMINI_TIMEOUT,
        )
    except requests.exceptions.RequestException as err:
        # Exception text may include the keyed URL.
        logger.error("Gemini request failed: %s", type(err).__name__)
        raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from None

    try:
        data = response.json()
    except ValueError:
        data = None

    if not 200 <= response.status_code < 300:
        message = _provider_error_message(data)
        logger.warning(
            "Gemini returned HTTP %s for model=%s: %s",
            response.status_code,
            model or GEMINI_MODEL,
            message,
        )
        raise UpstreamError(message, upstream_status=response.status_code)

    if data is None:
        logger.error("Gemini returned an undecodable body (HTTP %s)", response.status_code)
        raise UpstreamError(UPSTREAM_FAILURE_MESSAGE, upstream_status=response.status_code)

    return data

"""
HTTP API adapter for the StudyGate AI proxy.

Architectural role:
- Expose the `gemini-ai` function invoked by the study tools.
- Parse and validate the inbound JSON body.
- Delegate the provider call to `studygate.core.engine.process_request`.
- Normalize every outcome to a JSON envelope with cross-origin headers.

Endpoint responsibilities:
- `OPTIONS /gemini-ai`: pre-flight; answers immediately without a provider call.
- `POST /gemini-ai` (and any other non-OPTIONS method): run the gateway once.
- `/` is an alias of `/gemini-ai` for hosts that mount the function at root.

API request lifecycle:
1. Short-circuit `OPTIONS` with `ok` and CORS headers.
2. Decode the JSON body and validate it into `GatewayRequest`.
3. Run `process_request` in a worker thread (blocking outbound call).
4. Return 200 `{response, usage?}` or 500 `{error}`.

Error handling strategy:
- `GatewayError` subclasses map to their `to_dict()` envelope with status 500.
- Unexpected exceptions are logged and reported as 500 with their message.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Request debug logging is opt-in via `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import json
import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from studygate.core.engine import process_request
from studygate.core.errors import GatewayError, RequestError
from studygate.core.gateway_types import parse_request
from studygate.llm.provider_config import CORS_HEADERS


logger = logging.getLogger(__name__)

app = FastAPI(title="StudyGate AI proxy")
# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"

GATEWAY_METHODS = ["OPTIONS", "POST", "GET", "PUT", "PATCH", "DELETE"]


# ============================================================
# Helpers
# ============================================================

def _json_response(content: dict, status_code: int = 200) -> JSONResponse:
    """Return a JSON response that always carries the CORS headers."""
    return JSONResponse(status_code=status_code, content=content, headers=dict(CORS_HEADERS))


async def _read_body(request: Request):
    """Decode the request body as JSON, mapping decode failures to `RequestError`."""
    raw = await request.body()
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as err:
        raise RequestError(f"Invalid JSON body: {err}") from err


# ============================================================
# Gateway endpoint
# ============================================================

@app.api_route("/gemini-ai", methods=GATEWAY_METHODS)
@app.api_route("/", methods=GATEWAY_METHODS)
async def gemini_ai(request: Request):
    """
    Forward one prompt/image request to the provider.

    Response formatting:
    - Pre-flight: plain `ok`, status 200.
    - Success: `{"response": str, "usage"?: object}`, status 200.
    - Failure: `{"error": str}`, status 500.
    """
    if request.method == "OPTIONS":
        return PlainTextResponse("ok", headers=dict(CORS_HEADERS))

    try:
        body = await _read_body(request)
        gateway_request = parse_request(body)

        if DEBUG:
            logger.info(
                "Gateway request: prompt_chars=%d image_chars=%d",
                len(gateway_request.prompt or ""),
                len(gateway_request.image or ""),
            )

        result = await asyncio.to_thread(process_request, gateway_request)

    except GatewayError as err:
        logger.error("Gateway request failed: %s", err.message)
        return _json_response(err.to_dict(), status_code=err.status_code)

    except Exception as err:
        logger.exception("Unexpected gateway failure")
        return _json_response({"error": str(err)}, status_code=500)

    return _json_response(result.to_dict())

"""Data contracts for `studygate.core.engine`.

Architectural role:
    Defines the inbound request schema accepted by the gateway and the normalized
    success envelope returned to HTTP/CLI adapters.

Validation model:
    - `GatewayRequest` is a pydantic model; unknown fields are ignored and both
      fields are optional. Non-string values fail validation and are mapped to
      `RequestError` by `parse_request`.
    - Emptiness is not enforced here. An empty request is a valid (if useless)
      provider call.

Determinism:
    Pure data structures without side effects.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from studygate.core.errors import RequestError


class GatewayRequest(BaseModel):
    """Inbound gateway payload.

    Attributes:
        prompt: Free-form instruction text.
        image: Raw base64 image payload without a `data:` URL prefix.
    """

    model_config = ConfigDict(extra="ignore")

    prompt: Optional[str] = None
    image: Optional[str] = None


def parse_request(body: Any) -> GatewayRequest:
    """Validate a decoded JSON body into a `GatewayRequest`.

    Raises:
        RequestError: When the body is not a JSON object or has non-string fields.
    """
    if not isinstance(body, dict):
        raise RequestError("Request body must be a JSON object")

    try:
        return GatewayRequest.model_validate(body)
    except ValidationError as err:
        fields = ", ".join(str(e["loc"][0]) for e in err.errors() if e.get("loc"))
        raise RequestError(f"Invalid request field(s): {fields}") from err


@dataclass
class GatewayResponse:
    """Normalized success envelope.

    Attributes:
        response: First candidate text, or the fallback placeholder.
        usage: Provider `usageMetadata`, passed through unchanged when present.
    """

    response: str
    usage: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"response": self.response}
        if self.usage is not None:
            data["usage"] = self.usage
        return data

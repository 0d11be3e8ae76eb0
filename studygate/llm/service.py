"""Request-to-payload adapter and response normalization for Gemini.

Architectural role:
    Translates the gateway's `{prompt, image}` input into the provider's
    `contents/parts` schema and reduces the provider's response to the single
    text value the gateway returns. Transport lives in `studygate.llm.client`.

Part ordering:
    Text part first, inline-image part second. Absent or empty inputs contribute
    no part, so an empty request yields an empty parts list.

Degraded success:
    `extract_text` returns `None` whenever `candidates[0].content.parts[0].text`
    is missing or empty. `resolve_response_text` maps that `None` branch to
    `FALLBACK_RESPONSE_TEXT`; callers never see an exception for a malformed
    success body.

Determinism:
    All functions are pure and deterministic.
"""

from typing import Any, Dict, List, Optional

from studygate.llm.provider_config import FALLBACK_RESPONSE_TEXT, IMAGE_MIME_TYPE


def build_parts(prompt: Optional[str], image: Optional[str]) -> List[Dict[str, Any]]:
    """Build the ordered parts list for one content entry.

    Args:
        prompt: Instruction text; skipped when empty.
        image: Raw base64 image payload; skipped when empty. Not validated.

    Returns:
        List holding at most one text part followed by at most one image part.
    """
    parts: List[Dict[str, Any]] = []

    if prompt:
        parts.append({"text": prompt})

    if image:
        parts.append({
            "inline_data": {
                "mime_type": IMAGE_MIME_TYPE,
                "data": image,
            }
        })

    return parts


def build_payload(prompt: Optional[str], image: Optional[str]) -> Dict[str, Any]:
    """Wrap `build_parts` output in the provider's single-content envelope."""
    return {
        "contents": [
            {"parts": build_parts(prompt, image)}
        ]
    }


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def extract_text(data: Any) -> Optional[str]:
    """Return the first candidate's first text part, or `None`.

    Every hop of `candidates[0].content.parts[0].text` is checked; a missing
    list, empty list, non-dict node, or empty/non-string text yields `None`.
    """
    if not isinstance(data, dict):
        return None

    candidate = _first(data.get("candidates"))
    if not isinstance(candidate, dict):
        return None

    content = candidate.get("content")
    if not isinstance(content, dict):
        return None

    part = _first(content.get("parts"))
    if not isinstance(part, dict):
        return None

    text = part.get("text")
    if isinstance(text, str) and text:
        return text

    return None


def resolve_response_text(text: Optional[str]) -> str:
    """Apply the fallback placeholder to the `None` branch of `extract_text`."""
    if text is None:
        return FALLBACK_RESPONSE_TEXT
    return text


def extract_usage(data: Any) -> Optional[Dict[str, Any]]:
    """Return `usageMetadata` unchanged when present."""
    if not isinstance(data, dict):
        return None
    return data.get("usageMetadata")

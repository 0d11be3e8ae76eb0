"""
Image-input preprocessing for the CLI adapter.

Architectural role:
- Convert an image reference into the raw base64 string the gateway expects
  (no `data:` URL prefix), mirroring what the browser client sends.
- Enforce extension and size constraints before reading local files.

Processing lifecycle:
1. Resolve the reference (`data:` URL, `file://` URL, or local path).
2. For data URLs, strip the header and size-check the encoded payload.
3. For paths, validate existence, size, and extension, then base64-encode.

Error handling strategy:
- Every violation raises `RequestError`; nothing is swallowed.

Side effects:
- Reads local files. No temporary files are written.
"""

import base64
import os
from typing import Optional
from urllib.parse import urlparse, unquote

from studygate.core.errors import RequestError


# ============================================================
# CONFIG
# ============================================================

MAX_FILE_SIZE_MB = 10
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp"}


# ============================================================
# PUBLIC ENTRYPOINT
# ============================================================

def encode_image(image_ref: str) -> str:
    """
    Return raw base64 for an image reference.

    Supported formats:
    - data URL: header is stripped, payload returned as-is.
    - file URL (local host only) and plain local paths: file bytes encoded.
    """
    if not image_ref:
        raise RequestError("Empty image reference")

    if image_ref.startswith("data:"):
        return _strip_data_url(image_ref)

    path = _resolve_path(image_ref)
    if not path:
        raise RequestError(f"Image not found: {image_ref}")

    _validate_file(path)

    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")


# ============================================================
# INPUT RESOLUTION
# ============================================================

def _strip_data_url(data_url: str) -> str:
    """Drop the `data:<mime>;base64,` header, enforcing the size limit."""
    if "," not in data_url:
        raise RequestError("Malformed data URL")

    _, encoded = data_url.split(",", 1)
    padding = 0
    if encoded.endswith("=="):
        padding = 2
    elif encoded.endswith("="):
        padding = 1
    approx_decoded_size = (len(encoded) * 3) // 4 - padding
    if approx_decoded_size > MAX_FILE_SIZE_BYTES:
        raise RequestError("Image exceeds max size limit")

    return encoded


def _resolve_path(image_ref: str) -> Optional[str]:
    if image_ref.startswith("file://"):
        parsed = urlparse(image_ref)

        # Reject remote hosts in file URLs.
        if parsed.netloc not in ("", "localhost"):
            return None
        image_ref = unquote(parsed.path or "")

    normalized = _normalize_path(image_ref)
    if normalized and os.path.isfile(normalized):
        return normalized
    return None


# ============================================================
# VALIDATION
# ============================================================

def _normalize_path(path: str) -> Optional[str]:
    """Expand and canonicalize a path; return `None` for empty input."""
    if not path:
        return None
    return os.path.realpath(os.path.expanduser(path))


def _validate_file(path: str):
    """Reject oversized files and unsupported extensions."""
    if os.path.getsize(path) > MAX_FILE_SIZE_BYTES:
        raise RequestError("Image exceeds max size limit")

    ext = os.path.splitext(path)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise RequestError(f"Unsupported image type: {ext or 'none'}")

from studygate.llm.service import (
    build_parts,
    build_payload,
    extract_text,
    extract_usage,
    resolve_response_text,
)


JPEG_B64 = "/9j/4AAQSkZJRgABAQAAAQABAAD"


def test_prompt_only_builds_single_text_part():
    assert build_parts("Explain 2+2", None) == [{"text": "Explain 2+2"}]


def test_image_only_builds_single_jpeg_part():
    parts = build_parts(None, JPEG_B64)
    assert parts == [{"inline_data": {"mime_type": "image/jpeg", "data": JPEG_B64}}]


def test_text_precedes_image():
    parts = build_parts("What is this?", JPEG_B64)
    assert len(parts) == 2
    assert parts[0] == {"text": "What is this?"}
    assert "inline_data" in parts[1]


def test_empty_values_are_skipped():
    assert build_parts("", "") == []
    assert build_payload(None, None) == {"contents": [{"parts": []}]}


def test_image_is_not_validated():
    parts = build_parts(None, "not base64 at all!")
    assert parts[0]["inline_data"]["data"] == "not base64 at all!"


def test_extract_text_happy_path():
    data = {"candidates": [{"content": {"parts": [{"text": "4"}, {"text": "ignored"}]}}]}
    assert extract_text(data) == "4"


def test_extract_text_missing_shapes_return_none():
    for data in (
        None,
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inline_data": {}}]}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": "oops"},
    ):
        assert extract_text(data) is None, data


def test_resolve_response_text_fallback():
    assert resolve_response_text(None) == "No response generated"
    assert resolve_response_text("4") == "4"


def test_extract_usage_passthrough():
    usage = {"promptTokenCount": 3, "totalTokenCount": 5}
    assert extract_usage({"usageMetadata": usage}) is usage
    assert extract_usage({}) is None

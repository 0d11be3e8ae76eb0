import json

import pytest
import requests
from fastapi.testclient import TestClient

import studygate.llm.client as gemini_client
from studygate.api.http_api import app


def provider_response(status_code=200, body=None, raw=None):
    """Build a real `requests.Response` carrying a JSON body or raw text."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeProvider:
    """Records outbound calls and replays a canned response or exception."""

    def __init__(self):
        self.calls = []
        self.response = provider_response(body=candidate_body("ok"))
        self.error = None

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_parts(self):
        return self.calls[-1]["json"]["contents"][0]["parts"]


def candidate_body(text, usage=None):
    body = {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
    if usage is not None:
        body["usageMetadata"] = usage
    return body


@pytest.fixture
def provider(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    fake = FakeProvider()
    monkeypatch.setattr(gemini_client.requests, "post", fake)
    return fake


@pytest.fixture
def client(provider):
    with TestClient(app) as c:
        yield c

import json

import pytest
from unittest import mock
from fastapi.testclient import TestClient
from coding_coach.api import app, limiter, get_gateway
from coding_coach.models import AnalysisResult

# Disable rate limiting for all tests
limiter.enabled = False

@pytest.fixture(scope="module")
def client():
    return TestClient(app)

@pytest.fixture
def base_payload():
    return {
        "filename": "foo.py",
        "content": "x=1",
    }

@pytest.fixture
def result_payload():
    return {
        "score": 82,
        "summary": "ok",
        "improvements": [],
    }

@pytest.fixture
def fake_gateway(result_payload):
    gateway = mock.Mock()
    gateway.analyze = mock.AsyncMock(return_value=AnalysisResult.model_validate(result_payload))

    app.dependency_overrides[get_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_gateway, None)


class MockPart:
    def __init__(self, text):
        self.text = text

class MockContent:
    def __init__(self, parts):
        self.parts = parts

class MockCandidate:
    def __init__(self, content):
        self.content = content

class MockResponse:
    def __init__(self, candidates):
        self.candidates = candidates


def make_response(payload):
    """Build a generate_content response whose first candidate carries payload as text."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return MockResponse([MockCandidate(MockContent([MockPart(text)]))])

@pytest.fixture
def gemini_response():
    return make_response

import pytest

from coding_coach.validation import check_request

MAX_LENGTH = 100

def test_accepts_valid_request():
    decision = check_request({"filename": "foo.py", "content": "x=1"}, MAX_LENGTH)

    assert decision.accepted
    assert decision.reason is None
    assert decision.request.filename == "foo.py"
    assert decision.request.content == "x=1"

@pytest.mark.parametrize("body", [
    {"filename": "foo.py", "content": ""},
    {"filename": "", "content": "x=1"},
    {"filename": "foo.py"},
    {"content": "x=1"},
    {},
])
def test_rejects_missing_fields(body):
    decision = check_request(body, MAX_LENGTH)

    assert not decision.accepted
    assert decision.reason == "Missing filename or content"
    assert decision.request is None

@pytest.mark.parametrize("body", [None, [], "foo.py", 42])
def test_rejects_non_object_body(body):
    decision = check_request(body, MAX_LENGTH)

    assert not decision.accepted
    assert "JSON object" in decision.reason

def test_rejects_non_text_content():
    decision = check_request({"filename": "foo.py", "content": {"lines": [1, 2]}}, MAX_LENGTH)

    assert not decision.accepted
    assert decision.reason == "File content must be text"

def test_rejects_non_string_filename():
    decision = check_request({"filename": ["foo.py"], "content": "x=1"}, MAX_LENGTH)

    assert not decision.accepted
    assert decision.reason == "Filename must be a string"

def test_length_limit_is_inclusive():
    at_limit = check_request({"filename": "a.py", "content": "x" * MAX_LENGTH}, MAX_LENGTH)
    over_limit = check_request({"filename": "a.py", "content": "x" * (MAX_LENGTH + 1)}, MAX_LENGTH)

    assert at_limit.accepted
    assert not over_limit.accepted
    assert "too large" in over_limit.reason

def test_rejection_does_not_log(caplog):
    with caplog.at_level("DEBUG"):
        decision = check_request({"filename": "foo.py"}, MAX_LENGTH)

    assert not decision.accepted
    assert caplog.records == []

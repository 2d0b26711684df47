"""
Tests for the GET /{id} handler.

Run with: pytest tests/unit/test_get_entry.py -v
"""

import json

import pytest

from handlers import get_entry
from models.entry import Entry
from utils.error_handling import ConfigurationError
from fakes import FakeGetter, RecordingLogger


def _event(entry_id=None):
    event = {"httpMethod": "GET"}
    if entry_id is not None:
        event["pathParameters"] = {"id": entry_id}
    return event


class TestGetEntryHandler:
    """Get flow: validate, load, respond."""

    @pytest.mark.parametrize("event", [
        {"httpMethod": "GET"},
        {"httpMethod": "GET", "pathParameters": None},
        {"httpMethod": "GET", "pathParameters": {}},
    ])
    def test_missing_id_returns_400(self, event):
        store = FakeGetter()

        result = get_entry.handle(store, event, log=RecordingLogger())

        assert result["statusCode"] == 400
        assert result["body"] == "Bad request"
        assert store.calls == []

    def test_existing_entry_returns_200(self):
        """Found entries are serialized as compact JSON."""
        store = FakeGetter(items={"123": Entry(id="123")})

        result = get_entry.handle(store, _event("123"), log=RecordingLogger())

        assert result["statusCode"] == 200
        assert result["body"] == '{"id":"123"}'
        assert json.loads(result["body"]) == {"id": "123"}
        assert store.calls == ["123"]

    def test_missing_entry_returns_404(self):
        store = FakeGetter()

        result = get_entry.handle(store, _event("123"), log=RecordingLogger())

        assert result["statusCode"] == 404
        assert result["body"] == "Not found"

    def test_backend_error_also_returns_404(self):
        """Backend failures are not told apart from a missing entry."""
        store = FakeGetter(error="throttled")

        result = get_entry.handle(store, _event("123"), log=RecordingLogger())

        assert result["statusCode"] == 404
        assert result["body"] == "Not found"
        assert "throttled" not in result["body"]

    def test_failure_kind_is_logged(self):
        log = RecordingLogger()

        get_entry.handle(FakeGetter(error="throttled"), _event("123"), log=log)
        get_entry.handle(FakeGetter(), _event("456"), log=log)

        kinds = [extra["kind"] for level, _, extra in log.records if level == "warning"]
        assert kinds == ["backend", "not_found"]


class TestGetEntryLambdaHandler:
    """lambda_handler wires the lazily built repository into handle()."""

    def test_lambda_handler_uses_repository(self, monkeypatch):
        store = FakeGetter(items={"abc": Entry(id="abc")})
        monkeypatch.setattr(get_entry, "_get_repository", lambda: store)

        result = get_entry.lambda_handler(_event("abc"), None)

        assert result["statusCode"] == 200
        assert json.loads(result["body"])["id"] == "abc"

    def test_missing_table_name_is_fatal(self, monkeypatch):
        """Bootstrap without TABLE_NAME raises instead of responding."""
        monkeypatch.setattr(get_entry, "_repository", None)
        monkeypatch.delenv("TABLE_NAME", raising=False)

        with pytest.raises(ConfigurationError):
            get_entry.lambda_handler(_event("abc"), None)

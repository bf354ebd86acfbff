"""Tests for the Flask entry point."""

from unittest.mock import MagicMock

from app import create_flask_app


def test_health():
    client = create_flask_app(MagicMock()).test_client()
    res = client.get("/health")
    assert res.status_code == 200
    assert res.data == b"ok"


def test_slack_events_route_registered():
    flask_app = create_flask_app(MagicMock())
    rules = {r.rule: r.methods for r in flask_app.url_map.iter_rules()}
    assert "POST" in rules["/slack/events"]


def test_create_bolt_app_uses_config(monkeypatch):
    import boltApp

    fake_app = MagicMock()
    monkeypatch.setattr(boltApp, "App", fake_app)
    monkeypatch.setattr(boltApp.config, "SLACK_BOT_TOKEN", "xoxb-config")
    monkeypatch.setattr(boltApp.config, "SLACK_SIGNING_SECRET", "")

    boltApp.create_bolt_app()
    fake_app.assert_called_once_with(token="xoxb-config", signing_secret=None)

    boltApp.create_bolt_app(token="xoxb-explicit", signing_secret="s3cret")
    assert fake_app.call_args.kwargs == {"token": "xoxb-explicit", "signing_secret": "s3cret"}

"""Tests for config selection in the app factory."""
from videolink import create_app


def test_defaults_to_development_without_flask_env(monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RAILWAY_ENVIRONMENT", "production")

    app = create_app()
    assert app.config["DEBUG"] is True
    assert not app.config.get("TESTING")


def test_flask_env_selects_config(monkeypatch):
    monkeypatch.setenv("FLASK_ENV", "testing")
    app = create_app()
    assert app.config["TESTING"] is True

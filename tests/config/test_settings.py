import logging

from relation_materializer.config.settings import Settings, configure_logging, get_settings


def test_defaults(monkeypatch):
    for var in ("APP_ENV", "LOG_LEVEL", "APP_TITLE"):
        monkeypatch.delenv(var, raising=False)
    assert get_settings() == Settings(
        app_env="local",
        log_level="INFO",
        app_title="Relation-Materializer API",
    )


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "ci")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.app_env == "ci"
    assert s.log_level == "DEBUG"


def test_configure_logging_unknown_level_falls_back(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging(Settings(app_env="local", log_level="LOUD", app_title="x"))
    assert calls["level"] == logging.INFO

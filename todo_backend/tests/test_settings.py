from tracker.container import build_container
from tracker.events import TodoEvent
from tracker.settings import get_settings
from tracker.values import TodoId


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CORS_ALLOW_ORIGINS", "LOG_LEVEL", "LOG_FORMAT", "LOG_DOMAIN_EVENTS"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.cors_allow_origins == ["*"]
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_domain_events is True

    def test_parses_environment(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.setenv("LOG_DOMAIN_EVENTS", "off")
        settings = get_settings()
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.log_domain_events is False

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        monkeypatch.setenv("LOG_FORMAT", "xml")
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"


class TestContainer:
    def test_event_logging_subscription_follows_settings(self, monkeypatch, caplog):
        monkeypatch.setenv("LOG_DOMAIN_EVENTS", "false")
        container = build_container(get_settings())
        container.bus.publish(TodoEvent.created(TodoId.generate()))
        assert "[Event]" not in caplog.text

    def test_each_unit_of_work_is_fresh(self, container):
        assert container.create_uow() is not container.create_uow()

import pytest

from homedash.config import NEWS_KEY_PLACEHOLDER, Settings, is_configured
from homedash.dashboard import INIT_FAILURE_MESSAGE
from homedash.surface import NOTIFICATION_TTL, Board


def test_defaults_without_environment(monkeypatch):
    for name in ("OPENWEATHER_API_KEY", "NEWS_API_KEY", "REQUEST_TIMEOUT", "DASHBOARD_ONCE", "GEOLOCATION_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.request_timeout == 8.0
    assert settings.refresh_interval == 600.0
    assert settings.geolocation_timeout == 5.0
    assert settings.geolocation_enabled is True
    assert settings.run_once is False
    assert not settings.has_weather_key
    assert not settings.has_news_key


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc123")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("DASHBOARD_ONCE", "yes")
    monkeypatch.setenv("GEOLOCATION_ENABLED", "0")

    settings = Settings.from_env()

    assert settings.has_weather_key
    assert settings.request_timeout == 2.5
    assert settings.run_once is True
    assert settings.geolocation_enabled is False


def test_placeholder_and_blank_keys_are_not_configured():
    assert not is_configured(NEWS_KEY_PLACEHOLDER, NEWS_KEY_PLACEHOLDER)
    assert not is_configured("  ", NEWS_KEY_PLACEHOLDER)
    assert not is_configured(None, NEWS_KEY_PLACEHOLDER)
    assert is_configured("real-key", NEWS_KEY_PLACEHOLDER)


def test_notifications_expire():
    now = [100.0]
    board = Board(clock=lambda: now[0])

    board.notify("Back online! Refreshing data...", "success")
    assert len(board.notifications()) == 1

    now[0] += NOTIFICATION_TTL + 0.1
    assert board.notifications() == []


def test_page_contains_panels_modal_and_selector():
    board = Board()
    board.show("quote", "<p>hello</p>")
    board.news_category = "science"
    board.show_modal(INIT_FAILURE_MESSAGE)

    page = board.render_page()

    assert '<div id="quote-content"><p>hello</p></div>' in page
    assert '<option value="science" selected>Science</option>' in page
    assert INIT_FAILURE_MESSAGE in page
    for name in ("weather", "news", "quote", "activity"):
        assert f'id="{name}-panel"' in page


def test_unknown_panel_is_rejected():
    with pytest.raises(KeyError):
        Board().show("stocks", "<p></p>")

"""Environment-driven settings for both services."""

import pytest

from services.dashboard import app as dashboard_app
from services.dashboard.settings import DashboardSettings, load_settings
from services.directions_proxy.settings import load_settings as load_proxy_settings


def test_dashboard_bind_address_and_fallback_from_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DASHBOARD_HOST", "127.0.0.1")
    monkeypatch.setenv("DASHBOARD_PORT", "9090")
    monkeypatch.setenv("CUE_FALLBACK_SEC", "1.5")

    settings = load_settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 9090
    assert settings.cue_fallback_sec == 1.5


def test_dashboard_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DASHBOARD_HOST", "DASHBOARD_PORT", "CUE_FALLBACK_SEC"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.cue_fallback_sec == 3.0


def test_dashboard_main_binds_configured_address(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[dict] = []
    monkeypatch.setenv("DASHBOARD_HOST", "127.0.0.1")
    monkeypatch.setenv("DASHBOARD_PORT", "9191")
    configured: DashboardSettings = load_settings()
    monkeypatch.setattr(dashboard_app, "settings", configured)
    monkeypatch.setattr(
        dashboard_app.uvicorn,
        "run",
        lambda app, host, port: calls.append({"host": host, "port": port}),
    )

    dashboard_app.main()

    assert calls == [{"host": "127.0.0.1", "port": 9191}]


def test_proxy_credentials_fall_back_to_vite_names(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("NAVER_CLIENT_ID", raising=False)
    monkeypatch.delenv("NAVER_CLIENT_SECRET", raising=False)
    monkeypatch.setenv("VITE_NAVER_CLIENT_ID", "vite-id")
    monkeypatch.setenv("VITE_NAVER_CLIENT_SECRET", "vite-secret")
    monkeypatch.setenv("PROXY_PORT", "5050")

    settings = load_proxy_settings()

    assert settings.client_id == "vite-id"
    assert settings.client_secret == "vite-secret"
    assert settings.port == 5050

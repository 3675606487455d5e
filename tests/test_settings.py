"""Configuration settings behaviour tests."""

from __future__ import annotations

import pytest

from app.config import Settings


def test_proxy_mac_is_normalised() -> None:
    settings = Settings(_env_file=None, STALKER_PROXY_MAC="00-1A-79-00-00-09")

    assert settings.stalker_proxy_mac == "00:1a:79:00:00:09"


def test_invalid_proxy_mac_raises() -> None:
    with pytest.raises(ValueError, match="STALKER_PROXY_MAC"):
        Settings(_env_file=None, STALKER_PROXY_MAC="nope")


def test_log_level_is_case_insensitive() -> None:
    settings = Settings(_env_file=None, LOG_LEVEL="debug")

    assert settings.log_level == "DEBUG"


def test_unknown_log_level_raises() -> None:
    with pytest.raises(ValueError, match="Unknown LOG_LEVEL"):
        Settings(_env_file=None, LOG_LEVEL="chatty")


def test_server_url_prefers_public_base_url() -> None:
    settings = Settings(_env_file=None, PUBLIC_BASE_URL="https://mock.example/")

    assert settings.server_url == "https://mock.example"


def test_server_url_defaults_to_localhost() -> None:
    settings = Settings(_env_file=None, HOST="0.0.0.0", PORT=4000, PUBLIC_BASE_URL=None)

    assert settings.server_url == "http://localhost:4000"


def test_page_size_bounds() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, STALKER_PAGE_SIZE=0)


def test_package_exposes_lazy_exports() -> None:
    import app
    import portalmock

    assert app.get_settings() is app.get_settings()
    assert portalmock.__version__ == app.__version__
    assert portalmock.create_app is app.create_app

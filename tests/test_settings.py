import asyncio
import logging

import httpx
import pytest

from user_manager.application.container import open_use_cases
from user_manager.domain.value_objects.operation_result import Success
from user_manager.infrastructure.api.base import ApiConfig
from user_manager.shared.config.settings import LoggingSettings, Settings
from user_manager.shared.logging.setup import setup_logging


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://users.example.com/v2")
    monkeypatch.setenv("API_APP_ID", "secret-id")
    monkeypatch.setenv("API_PAGE_LIMIT", "5")

    settings = Settings(_env_file=None)
    config = settings.get_api_config()

    assert config.base_url == "https://users.example.com/v2/"
    assert config.app_id == "secret-id"
    assert config.page_limit == 5
    assert config.headers == {"app-id": "secret-id"}
    assert settings.describe()["api.app_id"] == "********"


def test_defaults_match_user_service():
    config = Settings(_env_file=None).get_api_config()
    assert config.base_url == "https://dummyapi.io/data/v1/"
    assert config.connect_timeout == config.read_timeout == config.write_timeout == 30.0
    assert config.page_limit == 20


@pytest.mark.parametrize(
    "overrides",
    [{"base_url": ""}, {"read_timeout": 0}, {"page_limit": 0}],
)
def test_api_config_validation(overrides):
    with pytest.raises(ValueError):
        ApiConfig(**overrides)


def test_open_use_cases_wires_http_stack(monkeypatch):
    monkeypatch.setenv("API_APP_ID", "wired")
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": [], "total": 0, "page": 0, "limit": 20})

    async def scenario():
        async with open_use_cases(Settings(_env_file=None), transport=httpx.MockTransport(handler)) as use_cases:
            return await use_cases.get_all_users(0)

    result = asyncio.run(scenario())

    assert isinstance(result, Success)
    assert result.value.total == 0
    assert seen[0].headers["app-id"] == "wired"
    assert seen[0].url.params["limit"] == "20"


def test_setup_logging_replaces_handlers(tmp_path):
    settings = LoggingSettings(
        console_colored=False,
        file_enabled=True,
        file_path=str(tmp_path / "logs" / "app.log"),
    )
    logger = setup_logging(settings)
    setup_logging(settings)

    assert len(logger.handlers) == 2
    assert any(isinstance(handler, logging.FileHandler) for handler in logger.handlers)

    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")

    setup_logging(LoggingSettings(console_enabled=False))
    assert isinstance(logger.handlers[0], logging.NullHandler)

from contextlib import asynccontextmanager

import pytest
from fakes import FakeUserRepository, make_detail
from typer.testing import CliRunner

from user_manager import __version__
from user_manager.application.container import build_use_cases
from user_manager.presentation.cli import main as cli

runner = CliRunner()


@pytest.fixture
def repo(monkeypatch):
    repository = FakeUserRepository(total=5, page_size=2)

    @asynccontextmanager
    async def fake_open_use_cases(_settings):
        yield build_use_cases(repository)

    monkeypatch.setattr(cli, "open_use_cases", fake_open_use_cases)
    return repository


def test_version():
    result = runner.invoke(cli.app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_config_lists_settings():
    result = runner.invoke(cli.app, ["config"])
    assert result.exit_code == 0
    assert "api.base_url" in result.stdout


def test_list_loads_requested_pages(repo):
    result = runner.invoke(cli.app, ["list", "--pages", "2"])
    assert result.exit_code == 0
    assert repo.list_calls == [0, 1]
    assert "4 users, page 2 of 3" in result.stdout


def test_list_failure_exits_non_zero(repo):
    repo.list_errors[0] = '{"error": "APP_ID_MISSING"}'
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 1
    assert "Authentication error" in result.stdout


def test_show_user(repo):
    repo.details["1"] = make_detail("1")
    result = runner.invoke(cli.app, ["show", "1"])
    assert result.exit_code == 0
    assert "john.doe@example.com" in result.stdout


def test_show_missing_user(repo):
    result = runner.invoke(cli.app, ["show", "nope"])
    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_create_validates_before_sending(repo):
    result = runner.invoke(cli.app, [
        "create", "--title", "dr", "--first-name", "Ann", "--last-name", "Lee",
        "--gender", "female", "--email", "ann@example.com", "--dob", "1990-05-05",
        "--phone", "0123456789",
    ])
    assert result.exit_code == 1
    assert "Please select a valid title" in result.stdout
    assert repo.created == []


def test_create_user(repo):
    result = runner.invoke(cli.app, [
        "create", "--title", "ms", "--first-name", "Ann", "--last-name", "Lee",
        "--gender", "female", "--email", "ann@example.com", "--dob", "1990-05-05",
        "--phone", "0123456789",
    ])
    assert result.exit_code == 0
    assert "new-id" in result.stdout
    assert repo.created[0].email == "ann@example.com"


def test_update_user(repo):
    repo.details["1"] = make_detail("1")
    result = runner.invoke(cli.app, ["update", "1", "--first-name", "Johnny"])
    assert result.exit_code == 0
    assert repo.updated[0].first_name == "Johnny"
    assert repo.updated[0].last_name == "Doe"


def test_delete_with_confirmation_declined(repo):
    result = runner.invoke(cli.app, ["delete", "1"], input="n\n")
    assert result.exit_code == 0
    assert repo.delete_calls == []


def test_delete_user(repo):
    result = runner.invoke(cli.app, ["delete", "1", "--yes"])
    assert result.exit_code == 0
    assert repo.delete_calls == ["1"]


def test_delete_failure(repo):
    repo.delete_errors["1"] = "User not found"
    result = runner.invoke(cli.app, ["delete", "1", "--yes"])
    assert result.exit_code == 1
    assert "was not found" in result.stdout

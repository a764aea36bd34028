"""CLI tests using typer's CliRunner."""

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from factories import make_page
from newsreel.exceptions import ApiAuthenticationError
from newsreel.main import app

runner = CliRunner()


def _patched_service(**fetch_kwargs):
    service = MagicMock()
    service.__enter__.return_value = service
    service.fetch_articles = MagicMock(**fetch_kwargs)
    return patch("newsreel.main.NewsService", return_value=service), service


class TestCLIBasics:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "browse" in result.stdout
        assert "fetch" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "newsreel version" in result.stdout


class TestFetchCommand:
    def test_table_output(self, monkeypatch):
        monkeypatch.setenv("NEWSREEL_API_KEY", "k")
        patcher, service = _patched_service(return_value=make_page(0, 3, total_results=3))
        with patcher:
            result = runner.invoke(app, ["fetch", "python", "--page", "2"])

        assert result.exit_code == 0
        service.fetch_articles.assert_called_once_with("python", 2)
        assert "Headline 0" in result.stdout

    def test_json_output(self, monkeypatch):
        monkeypatch.setenv("NEWSREEL_API_KEY", "k")
        patcher, _ = _patched_service(return_value=make_page(0, 2, total_results=9))
        with patcher:
            result = runner.invoke(app, ["fetch", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["totalResults"] == 9
        assert data["articles"][1]["title"] == "Headline 1"

    def test_api_error_exits_nonzero(self, monkeypatch):
        monkeypatch.setenv("NEWSREEL_API_KEY", "k")
        patcher, _ = _patched_service(side_effect=ApiAuthenticationError("bad key"))
        with patcher:
            result = runner.invoke(app, ["fetch", "python"])

        assert result.exit_code == 1
        assert "bad key" in result.stdout

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("NEWSREEL_API_KEY", raising=False)
        result = runner.invoke(app, ["fetch", "python"])
        assert result.exit_code == 1
        assert "NEWSREEL_API_KEY" in result.stdout


class TestConfigCommand:
    def test_invalid_log_level_fails(self, monkeypatch):
        monkeypatch.setenv("NEWSREEL_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1

    def test_lists_variables(self, monkeypatch):
        monkeypatch.delenv("NEWSREEL_LOG_LEVEL", raising=False)
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "NEWSREEL_API_KEY" in result.stdout

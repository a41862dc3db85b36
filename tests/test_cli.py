"""CLI tests for guideview."""

from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from guideview import __version__
from guideview.main import app
from guideview.services.guide_fetcher import GuideFetcher

from conftest import make_transport

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_files():
    with patch("guideview.main.setup_logging") as mock_setup:
        yield mock_setup


def _fake_fetcher_class(guides, status_overrides=None):
    def factory(origin):
        client = httpx.AsyncClient(transport=make_transport(guides, status_overrides))
        return GuideFetcher(origin, client=client)

    return factory


class TestCLIBasics:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "view" in result.output
        assert "render" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_sets_debug_logging(self, no_log_files):
        runner.invoke(app, ["--verbose", "version"])
        no_log_files.assert_called_once_with("DEBUG")

    def test_invalid_log_level_exits(self, monkeypatch):
        monkeypatch.setenv("GUIDEVIEW_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 1


class TestRenderCommand:
    def test_prints_guide(self):
        with patch(
            "guideview.main.GuideFetcher",
            _fake_fetcher_class({"textguide": "# Hello\nWorld"}),
        ):
            result = runner.invoke(app, ["render", "textguide", "--origin", "http://guides.test"])

        assert result.exit_code == 0
        assert "Hello" in result.output
        assert "World" in result.output

    def test_missing_guide_exits_with_error(self):
        with patch("guideview.main.GuideFetcher", _fake_fetcher_class({})):
            result = runner.invoke(app, ["render", "missing", "--origin", "http://guides.test"])

        assert result.exit_code == 1
        assert "Failed to load guide" in result.output

    def test_invalid_origin_env_exits(self, monkeypatch):
        monkeypatch.setenv("GUIDEVIEW_ORIGIN", "not-a-url")
        result = runner.invoke(app, ["render", "textguide"])
        assert result.exit_code == 1

    def test_invalid_origin_option_exits(self):
        result = runner.invoke(app, ["render", "textguide", "--origin", "ftp://guides.test"])
        assert result.exit_code == 1
        assert "--origin" in result.output


class TestConfigCommand:
    def test_lists_variables(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "GUIDEVIEW_ORIGIN" in result.output

    def test_invalid_values_exit_nonzero(self, monkeypatch):
        monkeypatch.setenv("GUIDEVIEW_FETCH_TIMEOUT", "soon")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1


class TestViewCommand:
    def test_runs_app_with_origin(self):
        with patch("guideview.ui.guide_app.GuideApp.run") as mock_run:
            result = runner.invoke(app, ["view", "textguide", "--origin", "http://guides.test/"])

        assert result.exit_code == 0
        mock_run.assert_called_once()

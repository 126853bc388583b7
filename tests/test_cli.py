"""Tests for the command-line entry point."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from gemchat.cli.app import app
from gemchat.errors import ConfigError

runner = CliRunner()


@pytest.fixture
def run_tui():
    with patch("gemchat.cli.app._run_tui") as run_tui:
        yield run_tui


class TestChatCommand:
    def test_help_lists_flags(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for flag in ("--api-key", "--reset-config", "--demo", "--model", "--log-level"):
            assert flag in result.output

    def test_demo_needs_no_key(self, run_tui):
        with patch("gemchat.cli.app.get_api_key") as get_key:
            result = runner.invoke(app, ["--demo"])

        assert result.exit_code == 0
        get_key.assert_not_called()
        run_tui.assert_called_once_with(demo=True, log_level=None)

    def test_chat_with_api_key(self, run_tui):
        transport = MagicMock()
        with patch("gemchat.cli.app.get_api_key", return_value="k") as get_key, \
                patch("gemchat.cli.app.get_transport", return_value=transport) as get_transport:
            result = runner.invoke(app, ["--api-key", "k", "-m", "gemini-1.5-pro", "-l", "debug"])

        assert result.exit_code == 0
        assert get_key.call_args.kwargs["api_key"] == "k"
        assert get_key.call_args.kwargs["reset_config"] is False
        get_transport.assert_called_once_with("k", "gemini-1.5-pro")
        run_tui.assert_called_once_with(transport=transport, log_level="debug")
        assert "Goodbye!" in result.output

    def test_reset_config_is_forwarded(self, run_tui):
        with patch("gemchat.cli.app.get_api_key", return_value="k") as get_key, \
                patch("gemchat.cli.app.get_transport"):
            runner.invoke(app, ["--reset-config"])

        assert get_key.call_args.kwargs["reset_config"] is True

    def test_config_error_exits_with_one(self, run_tui):
        with patch("gemchat.cli.app.get_api_key", side_effect=ConfigError("API key cannot be empty")):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "API key cannot be empty" in result.output
        run_tui.assert_not_called()

    def test_tui_failure_exits_with_one(self):
        failing = AsyncMock(side_effect=RuntimeError("not a terminal"))
        with patch("gemchat.cli.app.get_api_key", return_value="k"), \
                patch("gemchat.cli.app.get_transport"), \
                patch("gemchat.ui.run_textual_tui", failing):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "not a terminal" in result.output

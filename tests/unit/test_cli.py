# tests/unit/test_cli.py
"""
CLI unit tests.

Tests each command via typer's CliRunner with zero-duration timing so batches
finish immediately.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from quoteflow.cli import app
from quoteflow.config.schema import StudioConfig, TimingConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def fast_config():
    config = StudioConfig(
        timing=TimingConfig(quote_generation=0, narration=0, music=0, file_organization=0)
    )
    with patch("quoteflow.cli._load_config", return_value=config), patch(
        "quoteflow.cli._cli_logging"
    ):
        yield config


class TestHelp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Motivational quote studio" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("generate", "batch", "categories", "serve"):
            assert command in result.output


class TestCategories:
    def test_lists_categories_with_counts(self):
        result = runner.invoke(app, ["categories"])
        assert result.exit_code == 0
        lines = {line.split()[0]: line.split()[1] for line in result.output.splitlines()[2:]}
        assert lines["all"] == "10"
        assert lines["success"] == "2"
        assert lines["motivation"] == "1"


class TestGenerate:
    def test_generates_quotes(self):
        result = runner.invoke(app, ["generate", "-n", "3", "-c", "success"])
        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("quote-")]
        assert len(lines) == 3
        assert all("[success]" in line for line in lines)

    def test_invalid_count(self):
        result = runner.invoke(app, ["generate", "-n", "0"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_category(self):
        result = runner.invoke(app, ["generate", "-c", "gratitude"])
        assert result.exit_code == 1
        assert "Unknown category" in result.output


class TestBatch:
    def test_monday_batch(self):
        result = runner.invoke(
            app, ["batch", "Monday", "--type", "complete", "-n", "10", "-c", "motivation"]
        )
        assert result.exit_code == 0, result.output
        assert "Done" in result.output
        lines = [line for line in result.output.splitlines() if line.startswith("quote-")]
        assert len(lines) == 10
        assert all("The only impossible journey" in line for line in lines)
        assert "Monday/videos/quote_10.mp4" in result.output

    def test_empty_name_rejected(self):
        result = runner.invoke(app, ["batch", "  "])
        assert result.exit_code == 1
        assert "batch name" in result.output

    def test_unknown_type_rejected(self):
        result = runner.invoke(app, ["batch", "Monday", "--type", "slideshow"])
        assert result.exit_code == 1
        assert "Unknown batch type" in result.output

    def test_failed_batch_exits_nonzero(self):
        with patch(
            "quoteflow.models.quote_store.QuoteStore.generate_quotes",
            side_effect=RuntimeError("disk full"),
        ):
            result = runner.invoke(app, ["batch", "Monday", "-n", "2"])
        assert result.exit_code == 1
        assert "RuntimeError: disk full" in result.output

"""Tests for the click command-line interface."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from nanoprompt import PREMIUM_URL, __version__
from nanoprompt.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("nanoprompt")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestAnalyzeCommand:
    def test_json(self, runner):
        result = runner.invoke(cli, ["analyze", "fix it", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["clarity_score"] == 65
        assert len(data["suggestions"]) == 3

    def test_markdown(self, runner):
        result = runner.invoke(cli, ["analyze", "fix it", "--markdown"])
        assert result.exit_code == 0
        assert "# Prompt Analysis Report" in result.output

    def test_text(self, runner):
        result = runner.invoke(cli, ["analyze", "fix it"])
        assert result.exit_code == 0
        assert "Clarity Score" in result.output

    def test_from_file(self, runner, tmp_path):
        path = tmp_path / "prompt.txt"
        path.write_text("Please generate a detailed landscape painting", encoding="utf-8")
        result = runner.invoke(cli, ["analyze", "--file", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["clarity_score"] == 100

    def test_from_stdin(self, runner):
        result = runner.invoke(cli, ["analyze", "--json"], input="fix it")
        assert result.exit_code == 0
        assert json.loads(result.output)["clarity_score"] == 65

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["analyze", "--file", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_blank_prompt(self, runner):
        result = runner.invoke(cli, ["analyze", "   "])
        assert result.exit_code == 1
        assert "Prompt is empty" in result.output


class TestEnhanceCommand:
    def test_json(self, runner):
        result = runner.invoke(
            cli,
            ["enhance", "Draw a cat", "-e", "in vivid color", "-w", "1",
             "-e", "with fine detail", "-w", "3", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["enhanced_prompt"] == "Draw a cat with fine detail"
        assert [r["text"] for r in data["ranking"]] == ["with fine detail", "in vivid color"]

    def test_text(self, runner):
        result = runner.invoke(cli, ["enhance", "Draw a cat", "-e", "with fine detail", "-w", "2"])
        assert result.exit_code == 0
        assert "Draw a cat with fine detail" in result.output

    def test_count_mismatch(self, runner):
        result = runner.invoke(cli, ["enhance", "x", "-e", "a", "-e", "b", "-w", "1"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_no_enhancements(self, runner):
        result = runner.invoke(cli, ["enhance", "x"])
        assert result.exit_code == 1
        assert "At least one enhancement" in result.output

    def test_zero_weights(self, runner):
        result = runner.invoke(cli, ["enhance", "x", "-e", "a", "-w", "0"])
        assert result.exit_code == 1


class TestVaryCommand:
    def test_json(self, runner):
        result = runner.invoke(
            cli, ["vary", "a cat", "-s", "cat=dog", "-s", "cat=bird", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["variations"] == ["a dog"]

    def test_text(self, runner):
        result = runner.invoke(cli, ["vary", "a cat", "-s", "cat=dog"])
        assert result.exit_code == 0
        assert "1. a dog" in result.output

    def test_no_substitutions(self, runner):
        result = runner.invoke(cli, ["vary", "a cat", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["variations"] == []

    def test_malformed_substitution(self, runner):
        result = runner.invoke(cli, ["vary", "a cat", "-s", "cat"])
        assert result.exit_code == 2


class TestMisc:
    def test_premium_url(self, runner):
        result = runner.invoke(cli, ["premium-url"])
        assert result.exit_code == 0
        assert result.output.strip() == PREMIUM_URL

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_from_env(self, runner, clean_logger):
        result = runner.invoke(
            cli,
            ["premium-url"],
            auto_envvar_prefix="NANOPROMPT",
            env={"NANOPROMPT_VERBOSE": "1"},
        )
        assert result.exit_code == 0
        assert clean_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in clean_logger.handlers)

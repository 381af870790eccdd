import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from pytest import MonkeyPatch
from typer.testing import CliRunner

from slopscore import main
from slopscore.main import app
from slopscore.service import SlopScoreService
from tests.utils import HIGH_SLOP_TEXT

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_service(monkeypatch: MonkeyPatch, service: SlopScoreService):
    """Score with injected assets, restoring the log sink afterwards."""
    monkeypatch.setattr(main, "build_service", lambda: service)
    yield service
    logger.remove()
    logger.add(sys.stderr)


def test_cli_score_file(tmp_path: Path):
    """score prints the text report of a file."""
    source = tmp_path / "article.md"
    source.write_text(f"# Article\n\n{HIGH_SLOP_TEXT}", encoding="utf-8")
    result = runner.invoke(app, ["score", str(source)])
    assert result.exit_code == 0
    assert "Final Score: 100.0/100" in result.stdout
    assert "Interpretation: Strong AI signature" in result.stdout


def test_cli_score_stdin_as_json():
    """`-` reads the standard input and --json prints the result as JSON."""
    result = runner.invoke(app, ["score", "-", "--json"], input=HIGH_SLOP_TEXT)
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["result"]["slop_score"] == 100.0
    assert payload["result"]["details"]["contrast_status"] == "surface_only"
    assert "compute_ms" in payload


def test_cli_empty_input(tmp_path: Path):
    """Empty input exits with an error."""
    source = tmp_path / "empty.txt"
    source.write_text("   \n", encoding="utf-8")
    result = runner.invoke(app, ["score", str(source)])
    assert result.exit_code == 1
    assert "Input is empty" in result.output


def test_cli_missing_file(tmp_path: Path):
    """An unreadable file exits with an error."""
    result = runner.invoke(app, ["score", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Unable to read" in result.output


def test_cli_unsupported_language():
    """Library errors are reported with exit code 1."""
    result = runner.invoke(
        app, ["score", "-", "--language", "german"], input="Guten Tag."
    )
    assert result.exit_code == 1
    assert "Unsupported language" in result.output

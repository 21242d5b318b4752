"""
Integration tests for the score_resume command line script.
"""

import importlib.util
import json
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "score_resume.py"

module_spec = importlib.util.spec_from_file_location("score_resume", SCRIPT_PATH)
score_resume = importlib.util.module_from_spec(module_spec)
module_spec.loader.exec_module(score_resume)

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.mark.integration
def test_text_report(fixtures_path, tmp_path):
    result = runner.invoke(
        score_resume.app,
        [str(fixtures_path / "jane_doe.yaml"), "--log-dir", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert "ATS COMPATIBILITY REPORT: jane_doe" in result.output
    assert (tmp_path / "score.log").exists()


@pytest.mark.integration
def test_json_feedback(fixtures_path, tmp_path):
    result = runner.invoke(
        score_resume.app,
        [
            str(fixtures_path / "jane_doe.yaml"),
            "--job",
            str(fixtures_path / "job_description.md"),
            "--json",
            "--log-dir",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert list(payload["sections"]) == ["keywords", "format", "content", "length"]


@pytest.mark.integration
def test_attempt_limit(fixtures_path, tmp_path):
    result = runner.invoke(
        score_resume.app,
        [
            str(fixtures_path / "stored_resume.json"),
            "--record",
            "stored-1",
            "--attempts-used",
            "5",
            "--log-dir",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 1


@pytest.mark.integration
def test_missing_resume(tmp_path):
    result = runner.invoke(
        score_resume.app, [str(tmp_path / "nobody.yaml"), "--log-dir", str(tmp_path)]
    )

    assert result.exit_code == 1


@pytest.mark.integration
def test_negative_attempts_rejected(fixtures_path, tmp_path):
    result = runner.invoke(
        score_resume.app,
        [
            str(fixtures_path / "stored_resume.json"),
            "--record",
            "stored-1",
            "--attempts-used",
            "-1",
            "--log-dir",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 2
    assert "attempts left" not in result.output


@pytest.mark.integration
def test_unparseable_resume(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("summary: [unclosed\n")

    result = runner.invoke(score_resume.app, [str(path), "--log-dir", str(tmp_path / "logs")])

    assert result.exit_code == 1
    assert "Could not parse resume document" in result.output

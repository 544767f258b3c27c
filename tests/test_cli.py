from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from cffkit import cli

runner = CliRunner()

VALID = """\
cff-version: 1.2.0
message: Please cite this
title: T
version: 1.0.0
date-released: 2020-01-20
authors:
  - family-names: Haines
    given-names: Robert
"""


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setenv("CFFKIT_LOG_LEVEL", "WARNING")
    yield
    structlog.reset_defaults()


def _write(tmp_path: Path, text: str, name: str = "CITATION.cff") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_config_json_flag(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("CFFKIT_CSL_STYLE", "apa")
    monkeypatch.setenv("CFFKIT_SCHEMA_DIR", str(tmp_path))

    result = runner.invoke(cli.app, ["config", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["csl_style"] == "apa"
    assert Path(payload["schema_dir"]) == tmp_path
    assert payload["log_level"] == "WARNING"


def test_cite_bibtex(tmp_path) -> None:
    path = _write(tmp_path, VALID)

    result = runner.invoke(cli.app, ["cite", str(path), "--format", "bibtex"])

    assert result.exit_code == 0
    assert result.stdout.startswith("@software{Haines_T_2020,")


def test_cite_uses_default_format(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("CFFKIT_DEFAULT_FORMAT", "apalike")
    path = _write(tmp_path, VALID)

    result = runner.invoke(cli.app, ["cite", str(path)])

    assert result.exit_code == 0
    assert "Haines, R. (2020). T (Version 1.0.0) [Computer software]" in result.stdout


def test_cite_unknown_format(tmp_path) -> None:
    path = _write(tmp_path, VALID)

    result = runner.invoke(cli.app, ["cite", str(path), "--format", "chicago"])

    assert result.exit_code == 1
    assert "Unknown format" in result.stdout


def test_cite_missing_file(tmp_path) -> None:
    result = runner.invoke(cli.app, ["cite", str(tmp_path / "CITATION.cff")])

    assert result.exit_code == 1
    assert "No such file" in result.stdout


def test_validate_valid_file(tmp_path) -> None:
    path = _write(tmp_path, VALID)

    result = runner.invoke(cli.app, ["validate", str(path)])

    assert result.exit_code == 0
    assert "is valid" in result.stdout


def test_validate_reports_errors(tmp_path) -> None:
    path = _write(tmp_path, "cff-version: 1.2.0\ntitle: T\n")

    result = runner.invoke(cli.app, ["validate", str(path), "--fail-fast"])

    assert result.exit_code == 1
    assert "required" in result.stdout


def test_validate_filename_check(tmp_path) -> None:
    path = _write(tmp_path, VALID, name="citation.yml")

    assert runner.invoke(cli.app, ["validate", str(path)]).exit_code == 1
    assert runner.invoke(cli.app, ["validate", str(path), "--no-check-filename"]).exit_code == 0


def test_formats_lists_labels() -> None:
    result = runner.invoke(cli.app, ["formats"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["BibTeX", "APALike", "CSL"]

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from fakedata.cli import app


@pytest.fixture(autouse=True)
def _no_seed_env(monkeypatch: Any) -> None:
    monkeypatch.delenv("FAKEDATA_SEED", raising=False)


def _manifest(out_dir: Path) -> Path:
    found = sorted(out_dir.glob("manifest*.csv"))
    assert len(found) == 1
    return found[0]


def test_generate_inline_refs(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "-r", "AJKD1234OMJU,QWER5678TYUI", "-F", "xlsx,docx", "-o", str(tmp_path)],
    )
    assert result.exit_code == 0, result.stderr
    assert "Complete! Generated 4 files for 2 submissions." in result.stdout
    assert result.stdout.count("Created: ") == 4

    manifest = _manifest(tmp_path)
    assert re.fullmatch(r"manifest\d{8}\.csv", manifest.name)
    assert f"Manifest: {manifest.name} (4 entries)" in result.stdout
    for line in manifest.read_text(encoding="utf-8").splitlines():
        primary, secondary, filename = line.split(",")
        assert re.fullmatch(r"[a-z0-9]{16}", primary)
        assert re.fullmatch(r"[a-z0-9]{16}", secondary)
        assert (tmp_path / filename).exists()


def test_generate_from_file_with_themes(tmp_path: Path) -> None:
    refs = tmp_path / "refs.txt"
    refs.write_text("AJKD1234OMJU // legal\nnot-valid\nQWER5678TYUI\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "-f", str(refs), "-F", "pdf", "-o", str(out_dir)])
    assert result.exit_code == 0, result.stderr
    assert "Generated 2 files for 2 submissions" in result.stdout
    assert "Invalid submission reference 'not-valid'" in result.stderr


def test_custom_manifest_name(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "-r", "AJKD1234OMJU", "-F", "jpeg", "-o", str(tmp_path), "-m", "batch.csv"],
    )
    assert result.exit_code == 0, result.stderr
    assert len((tmp_path / "batch.csv").read_text(encoding="utf-8").splitlines()) == 1


def test_shared_ids_flag(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "-r", "AJKD1234OMJU", "-F", "ods", "-o", str(tmp_path), "--shared-ids"],
    )
    assert result.exit_code == 0, result.stderr
    primary, secondary, _ = _manifest(tmp_path).read_text(encoding="utf-8").strip().split(",")
    assert primary == secondary


def test_seed_reproduces_file_names(tmp_path: Path) -> None:
    runner = CliRunner()
    names = []
    for sub in ("a", "b"):
        out_dir = tmp_path / sub
        result = runner.invoke(
            app,
            ["generate", "-r", "AJKD1234OMJU", "-F", "pptx:2,odt", "-o", str(out_dir), "--seed", "42"],
        )
        assert result.exit_code == 0, result.stderr
        names.append(sorted(p.name for p in out_dir.iterdir() if p.suffix != ".csv"))
    assert names[0] == names[1]
    assert len(names[0]) == 3


def test_seed_from_environment(tmp_path: Path, monkeypatch: Any) -> None:
    monkeypatch.setenv("FAKEDATA_SEED", "9")
    runner = CliRunner()
    names = []
    for sub in ("a", "b"):
        out_dir = tmp_path / sub
        result = runner.invoke(app, ["generate", "-r", "AJKD1234OMJU", "-F", "odp", "-o", str(out_dir)])
        assert result.exit_code == 0, result.stderr
        names.append(sorted(p.name for p in out_dir.glob("*.odp")))
    assert names[0] == names[1]


def test_verbose_reports_progress(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "-r", "AJKD1234OMJU", "-F", "xls", "-o", str(tmp_path), "-v"]
    )
    assert result.exit_code == 0, result.stderr
    assert "Processing AJKD1234OMJU" in result.stderr
    assert "Batch finished in" in result.stderr

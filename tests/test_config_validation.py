from pathlib import Path

import pytest
from pydantic import ValidationError

from fakedata.config import load_config


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_nested_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("manifest:\n  quoting: all\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_blank_manifest_template(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text('manifest:\n  filename_template: "  "\n')
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_seed(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("content:\n  seed: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("generation:\n  formats: 'xlsx:2,odt'\n  theme: retail\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.generation.formats == "xlsx:2,odt"
    assert cfg.generation.theme == "retail"
    assert cfg.generation.output_dir == "./output"
    assert cfg.validation.pattern == r"^[A-Za-z0-9]{12}$"

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from fakedata.config import load_config


def test_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("FAKEDATA_SEED", "1234")
    cfg = load_config()
    assert cfg.content.seeded is True
    assert cfg.content.seed == 1234


def test_blank_env_seed_ignored() -> None:
    cfg = load_config(env={"FAKEDATA_SEED": "   "})
    assert cfg.content.seeded is False
    assert cfg.content.seed is None


def test_custom_env_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('content:\n  seed_env: "CUSTOM_SEED"\n')
    cfg = load_config(cfg_file, env={"CUSTOM_SEED": "7", "FAKEDATA_SEED": "99"})
    assert cfg.content.seed_env == "CUSTOM_SEED"
    assert cfg.content.seed == 7


def test_env_beats_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("content:\n  seeded: true\n  seed: 3\n")
    assert load_config(cfg_file, env={}).content.seed == 3
    assert load_config(cfg_file, env={"FAKEDATA_SEED": "5"}).content.seed == 5


@pytest.mark.parametrize("value", ["abc", "-3", "1.5"])
def test_bad_env_seed(value: str) -> None:
    with pytest.raises(ValidationError):
        load_config(env={"FAKEDATA_SEED": value})

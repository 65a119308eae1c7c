"""Typed configuration schema and loader for the fakedata package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ValidationSettings(BaseModel):
    """Submission reference validation."""

    pattern: str

    model_config = ConfigDict(extra="forbid")


class GenerationSettings(BaseModel):
    """What to generate and where."""

    formats: str
    output_dir: str
    theme: str | None = None

    model_config = ConfigDict(extra="forbid")


class ContentSettings(BaseModel):
    """Reproducibility of synthesized content."""

    seeded: bool
    seed: conint(ge=0) | None = None
    seed_env: str

    model_config = ConfigDict(extra="forbid")


class ManifestSettings(BaseModel):
    """Manifest naming and layout."""

    filename_template: str
    shared_ids: bool
    leading_blank_line: bool

    model_config = ConfigDict(extra="forbid")

    @field_validator("filename_template")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("filename_template must not be empty")
        return value


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    locale: str
    validation: ValidationSettings
    generation: GenerationSettings
    content: ContentSettings
    manifest: ManifestSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``content.seed_env``.  A non-empty seed
    variable turns seeding on; a value that is not a non-negative integer
    fails validation.
    """

    with (
        importlib_resources.files("fakedata.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    content = merged.get("content")
    if isinstance(content, dict):
        seed_env = content.get("seed_env")
        raw_seed = environ.get(seed_env, "").strip() if isinstance(seed_env, str) else ""
        if raw_seed:
            merged = deep_merge_dicts(merged, {"content": {"seeded": True, "seed": raw_seed}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "ContentSettings",
    "GenerationSettings",
    "ManifestSettings",
    "ValidationSettings",
    "deep_merge_dicts",
    "load_config",
]

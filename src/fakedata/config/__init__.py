"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable seed referenced by ``content.seed_env``
    4. Command line flags, applied by :mod:`fakedata.cli`
"""

from .schema import ConfigModel, deep_merge_dicts, load_config

__all__ = ["ConfigModel", "deep_merge_dicts", "load_config"]

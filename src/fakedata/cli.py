"""Typer-based command line interface for the document generator.

``fake-data generate`` reads submission references inline and/or from a file,
generates the requested formats for each of them and writes a manifest next to
the generated files.  ``fake-data formats`` lists the format keys and themes.

Exit codes
----------
0 success
3 I/O error (references file, output directory, manifest)
4 configuration error (config file, validation pattern, seed)
5 input error (no submissions, no valid submissions, no valid formats)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from . import __version__
from .config import ConfigModel, load_config
from .content.themes import Theme
from .generators.registry import build_registry
from .inputs.formats import VALID_FORMATS
from .pipeline import BatchRequest, BatchResult, Orchestrator
from .utils.errors import (
    InvalidPatternError,
    ManifestWriteError,
    NoFormatsError,
    NoSubmissionsError,
    OutputDirectoryError,
)
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="fake-data",
    help="Generate realistic business documents for submission references.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    formats: str | None,
    output: Path | None,
    pattern: str | None,
    theme: str | None,
    manifest: str | None,
    seed: int | None,
    shared_ids: bool | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if formats is not None:
        new_cfg.generation.formats = formats
    if output is not None:
        new_cfg.generation.output_dir = str(output)
    if pattern is not None:
        new_cfg.validation.pattern = pattern
    if theme is not None:
        new_cfg.generation.theme = theme
    if manifest is not None:
        new_cfg.manifest.filename_template = manifest
    if seed is not None:
        new_cfg.content.seeded = True
        new_cfg.content.seed = seed
    if shared_ids is not None:
        new_cfg.manifest.shared_ids = shared_ids
    return new_cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _print_summary(result: BatchResult) -> None:
    for artifact in result.artifacts:
        typer.echo(f"Created: {artifact.filename}")
    typer.echo(f"Manifest: {result.manifest_path.name} ({len(result.rows)} entries)")
    typer.echo(
        f"Complete! Generated {result.files_generated} files "
        f"for {len(result.submissions)} submissions."
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fake-data {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Entry point for the fake-data command group."""
    pass


@app.command()
def formats() -> None:
    """List supported format keys and content themes."""

    typer.echo("Formats: " + ", ".join(VALID_FORMATS))
    typer.echo("Themes: " + ", ".join(t.name.lower() for t in Theme))


@app.command()
def generate(  # noqa: PLR0913
    refs: Optional[str] = typer.Option(  # noqa: B008
        None, "--refs", "-r", help="Comma separated submission references"
    ),
    refs_file: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        help="File with one reference per line, optionally followed by '// theme'",
    ),
    format_spec: Optional[str] = typer.Option(  # noqa: B008
        None, "--formats", "-F", help="Formats to generate, e.g. 'pdf:2,xlsx,docx'"
    ),
    output: Optional[Path] = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output directory"
    ),
    pattern: Optional[str] = typer.Option(  # noqa: B008
        None, "--pattern", "-p", help="Regular expression every reference must match"
    ),
    theme: Optional[str] = typer.Option(  # noqa: B008
        None, "--theme", "-t", help="Default content theme"
    ),
    manifest: Optional[str] = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help="Manifest file name (strftime codes allowed)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible content"
    ),
    shared_ids: bool | None = typer.Option(  # noqa: B008
        None,
        "--shared-ids/--distinct-ids",
        help="Reuse the primary manifest id as the secondary id",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Generate documents for every valid submission reference."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if seed is not None and seed < 0:
        _safe_exit(4, "--seed must be a non-negative integer")
    if verbose:
        typer.echo("Loaded config", err=True)

    cfg = _apply_overrides(
        cfg,
        formats=format_spec,
        output=output,
        pattern=pattern,
        theme=theme,
        manifest=manifest,
        seed=seed,
        shared_ids=shared_ids,
    )

    orchestrator = Orchestrator(build_registry(), cfg)
    try:
        with Timing() as t_run:
            result = orchestrator.run(BatchRequest(refs=refs, refs_file=refs_file))
    except InvalidPatternError as exc:
        _safe_exit(4, str(exc))
    except (NoSubmissionsError, NoFormatsError) as exc:
        _safe_exit(5, str(exc))
    except (OutputDirectoryError, ManifestWriteError) as exc:
        _safe_exit(3, str(exc))
    except OSError as exc:
        _safe_exit(3, f"Cannot read references file: {exc}")
    except UnicodeDecodeError as exc:
        _safe_exit(3, f"Cannot read references file {refs_file}: not valid UTF-8 ({exc.reason})")

    if verbose:
        typer.echo(f"Batch finished in {t_run.ms:.1f} ms", err=True)
    _print_summary(result)

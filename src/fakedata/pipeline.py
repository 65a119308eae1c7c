"""Batch orchestration.

:class:`Orchestrator` drives one invocation: it validates the inputs, walks the
submissions in input order, generates every requested format for each of them
and finally writes the manifest.  Inputs that make the whole batch pointless
raise a :class:`~fakedata.utils.errors.BatchError`; a single artifact that
fails to build is logged and skipped.

States::

    IDLE -> VALIDATING_INPUTS -> (RESOLVING_THEME -> GENERATING_ARTIFACTS)*
         -> WRITING_MANIFEST -> DONE

``FAILED`` is entered from input validation or manifest writing.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from .config import ConfigModel, load_config
from .content.seed import submission_seed
from .content.source import ContentSource
from .content.themes import Theme, resolve_theme
from .generators.registry import FormatGenerator, GeneratedArtifact
from .inputs.formats import parse_format_spec
from .inputs.references import (
    SubmissionReference,
    merge_references,
    parse_inline_refs,
    read_reference_file,
)
from .inputs.validation import is_compilable
from .manifest.builder import ManifestBuilder, ManifestRow
from .utils.errors import (
    InvalidPatternError,
    ManifestWriteError,
    NoFormatsError,
    NoSubmissionsError,
    OutputDirectoryError,
)
from .utils.logging import get_logger

logger = get_logger(__name__)

SourceFactory = Callable[..., ContentSource]


class BatchState(Enum):
    IDLE = "idle"
    VALIDATING_INPUTS = "validating_inputs"
    RESOLVING_THEME = "resolving_theme"
    GENERATING_ARTIFACTS = "generating_artifacts"
    WRITING_MANIFEST = "writing_manifest"
    DONE = "done"
    FAILED = "failed"


@dataclass
class BatchRequest:
    """Where the submission references come from.

    Everything else (formats, output directory, pattern, theme, manifest
    options) is taken from the configuration.
    """

    refs: str | None = None
    refs_file: Path | None = None


@dataclass
class BatchResult:
    output_dir: Path
    manifest_path: Path
    submissions: list[SubmissionReference]
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    rows: tuple[ManifestRow, ...] = ()
    failures: int = 0

    @property
    def files_generated(self) -> int:
        return len(self.artifacts)


class Orchestrator:
    """Run a generation batch.

    Parameters
    ----------
    registry:
        Mapping of format keys to generators, usually from
        :func:`~fakedata.generators.registry.build_registry`.
    config:
        Validated configuration; package defaults when omitted.
    source_factory:
        Callable ``(theme, *, seed, locale)`` returning a :class:`ContentSource`.
    manifest_factory:
        Callable returning an empty :class:`ManifestBuilder`.
    clock:
        Returns the timestamp used to name the manifest.
    """

    def __init__(
        self,
        registry: Mapping[str, FormatGenerator],
        config: ConfigModel | None = None,
        *,
        source_factory: SourceFactory = ContentSource,
        manifest_factory: Callable[[], ManifestBuilder] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.registry = registry
        self.config = config if config is not None else load_config(env={})
        self._source_factory = source_factory
        self._manifest_factory = manifest_factory or self._default_manifest
        self._clock = clock
        self.state = BatchState.IDLE

    def _default_manifest(self) -> ManifestBuilder:
        return ManifestBuilder(
            shared_ids=self.config.manifest.shared_ids,
            leading_blank_line=self.config.manifest.leading_blank_line,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _collect_submissions(self, request: BatchRequest) -> list[SubmissionReference]:
        has_inline = bool(request.refs and request.refs.strip())
        if not has_inline and request.refs_file is None:
            raise NoSubmissionsError("No submission references provided")

        pattern = self.config.validation.pattern
        if not is_compilable(pattern):
            raise InvalidPatternError(f"Invalid validation pattern: {pattern!r}")
        compiled = re.compile(pattern)

        groups = [parse_inline_refs(request.refs, compiled)]
        if request.refs_file is not None:
            groups.append(read_reference_file(request.refs_file, compiled))
        submissions = merge_references(*groups)
        if not submissions:
            raise NoSubmissionsError("No valid submission references found")
        return submissions

    def _collect_formats(self) -> dict[str, int]:
        formats = parse_format_spec(self.config.generation.formats)
        missing = [key for key in formats if key not in self.registry]
        for key in missing:
            logger.warning("No generator registered for format '%s', skipping", key)
            del formats[key]
        if not formats:
            raise NoFormatsError(
                f"No valid formats in specification: {self.config.generation.formats!r}"
            )
        return formats

    def _prepare_output_dir(self) -> Path:
        output_dir = Path(self.config.generation.output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"Cannot create output directory {output_dir}: {exc}"
            ) from exc
        return output_dir

    def _base_seed(self) -> int | None:
        content = self.config.content
        if not content.seeded:
            return None
        return content.seed if content.seed is not None else 0

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _generate_submission(
        self,
        submission: SubmissionReference,
        theme: Theme,
        formats: Mapping[str, int],
        output_dir: Path,
        manifest: ManifestBuilder,
        result: BatchResult,
    ) -> None:
        source = self._source_factory(
            theme,
            seed=submission_seed(self._base_seed(), submission.ref),
            locale=self.config.locale,
        )
        self.state = BatchState.GENERATING_ARTIFACTS
        seq = 1
        for key, count in formats.items():
            generator = self.registry[key]
            for _ in range(count):
                descriptive = generator.suggest_filename(source)
                base = manifest.compose(submission.ref, seq, descriptive)
                try:
                    artifact = generator.generate(output_dir, base, source)
                except Exception as exc:
                    logger.warning("Failed to generate %s for %s: %s", key, submission.ref, exc)
                    result.failures += 1
                    continue
                manifest.record(submission.ref, seq, f"{descriptive}.{generator.extension}")
                result.artifacts.append(artifact)
                logger.info("Created: %s", artifact.filename)
                seq += 1

    def run(self, request: BatchRequest) -> BatchResult:
        """Execute the batch described by ``request`` and the configuration.

        Raises
        ------
        BatchError
            A subclass naming the fatal condition.  ``OSError`` from reading
            the references file, or ``UnicodeDecodeError`` when it is not
            UTF-8, propagates unchanged.
        """

        self.state = BatchState.VALIDATING_INPUTS
        try:
            submissions = self._collect_submissions(request)
            formats = self._collect_formats()
            output_dir = self._prepare_output_dir()
        except BaseException:
            self.state = BatchState.FAILED
            raise

        logger.info(
            "Generating %s for %d submission(s) into %s",
            ", ".join(f"{k}:{n}" for k, n in formats.items()),
            len(submissions),
            output_dir,
        )
        manifest = self._manifest_factory()
        manifest_name = self._clock().strftime(self.config.manifest.filename_template)
        result = BatchResult(output_dir, output_dir / manifest_name, submissions)

        default_theme = resolve_theme(self.config.generation.theme)
        for submission in submissions:
            self.state = BatchState.RESOLVING_THEME
            theme = submission.theme if submission.theme is not None else default_theme
            logger.info("Processing %s (theme: %s)", submission.ref, theme.name)
            self._generate_submission(submission, theme, formats, output_dir, manifest, result)

        self.state = BatchState.WRITING_MANIFEST
        try:
            manifest.write(result.manifest_path)
        except OSError as exc:
            self.state = BatchState.FAILED
            raise ManifestWriteError(f"Cannot write manifest {result.manifest_path}: {exc}") from exc

        result.rows = manifest.rows
        self.state = BatchState.DONE
        return result


__all__ = ["BatchRequest", "BatchResult", "BatchState", "Orchestrator"]

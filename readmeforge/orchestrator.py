"""Pipeline orchestration: guard the target, analyze, render and write."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from .analyzers import ProjectAnalyzer, discover_detectors
from .config import ConfigError, ForgeConfig, load_config
from .errors import AnalysisError, DirectoryNotFoundError, OutputExistsError
from .logging import get_logger
from .models import ProjectMetadata
from .render import ReadmeGenerator


@dataclass
class ForgeResult:
    """Outcome of a README generation run."""

    path: Path
    metadata: ProjectMetadata
    content: str
    written: bool


class Orchestrator:
    """Coordinates analysis and rendering for a single project directory."""

    def __init__(
        self,
        analyzer: ProjectAnalyzer | None = None,
        generator: ReadmeGenerator | None = None,
    ) -> None:
        self._analyzer = analyzer
        self._generator = generator
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        *,
        output: str | Path | None = None,
        force: bool = False,
        dry_run: bool = False,
    ) -> ForgeResult:
        """Generate a README for ``path``; write it unless ``dry_run`` is set."""
        repo_path = self._resolve_directory(path)
        config = load_config(repo_path)

        output_path = Path(output).expanduser().resolve() if output else config.output_path
        if not dry_run and output_path.exists() and not force:
            raise OutputExistsError(output_path)

        metadata = self._analyze(repo_path, config)
        generator = self._generator or ReadmeGenerator(show_footer=config.readme.footer)
        try:
            content = generator.render(metadata)
        except Exception as exc:
            raise AnalysisError(f"Failed to render README: {exc}") from exc

        if dry_run:
            self.logger.debug("Dry run: skipping write to %s", output_path)
            return ForgeResult(path=output_path, metadata=metadata, content=content, written=False)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        self.logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), output_path)
        return ForgeResult(path=output_path, metadata=metadata, content=content, written=True)

    def inspect(self, path: str | Path) -> ProjectMetadata:
        """Return the metadata record for ``path`` without rendering."""
        repo_path = self._resolve_directory(path)
        return self._analyze(repo_path, load_config(repo_path))

    def _resolve_directory(self, path: str | Path) -> Path:
        repo_path = Path(path).expanduser().resolve()
        if not repo_path.is_dir():
            raise DirectoryNotFoundError(repo_path)
        return repo_path

    def _analyze(self, repo_path: Path, config: ForgeConfig) -> ProjectMetadata:
        analyzer = self._analyzer or self._build_analyzer(config)
        self.logger.debug("Analyzing %s with %d detectors", repo_path, len(analyzer.detectors))
        try:
            return asyncio.run(analyzer.analyze(repo_path))
        except Exception as exc:
            raise AnalysisError(f"Failed to analyze {repo_path}: {exc}") from exc

    @staticmethod
    def _build_analyzer(config: ForgeConfig) -> ProjectAnalyzer:
        try:
            detectors = discover_detectors(config.analyzers.enabled or None)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return ProjectAnalyzer(detectors, make_targets=config.analyzers.makefile)


__all__ = ["ForgeResult", "Orchestrator"]

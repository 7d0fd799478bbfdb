"""Project analyzer producing the normalized metadata record."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .base import Detector
from .build import detect_make_targets
from .registry import discover_detectors
from .structure import scan_structure
from ..logging import get_logger
from ..models import ProjectMetadata, StructureSummary

_STRUCTURE_FEATURES: tuple[tuple[str, str], ...] = (
    ("has_tests", "Comprehensive test suite"),
    ("has_docs", "Detailed documentation"),
    ("has_examples", "Example code included"),
    ("has_ci", "CI/CD integration"),
    ("has_bin", "CLI support"),
)

_FALLBACK_NAME = "project"


class ProjectAnalyzer:
    """Runs ecosystem detectors in priority order and merges their findings."""

    def __init__(
        self,
        detectors: Optional[Iterable[Detector]] = None,
        *,
        make_targets: bool = True,
    ) -> None:
        self.detectors = list(detectors) if detectors is not None else discover_detectors()
        self.make_targets = make_targets
        self.logger = get_logger("analyzer")

    async def analyze(self, path: Path | str) -> ProjectMetadata:
        """Analyze ``path`` without blocking the running event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.analyze_sync, path)

    def analyze_sync(self, path: Path | str) -> ProjectMetadata:
        root = Path(path).expanduser().resolve()
        record = ProjectMetadata(root=str(root), name=root.name or _FALLBACK_NAME)

        extra_features: List[str] = []
        for detector in self.detectors:
            if not detector.supports(root):
                continue
            fields = detector.detect(root, record)
            if fields is None:
                continue
            self.logger.debug("Detector %s matched %s", detector.name, root)
            extra_features = list(fields.pop("features", []))
            _apply(record, fields)

        record.structure = scan_structure(root)
        record.features = _structure_features(record.structure) + extra_features

        if self.make_targets:
            record.scripts = {**record.scripts, **detect_make_targets(root)}

        if not record.name:
            record.name = root.name or _FALLBACK_NAME
        return record


async def analyze(path: Path | str, *, analyzer: ProjectAnalyzer | None = None) -> ProjectMetadata:
    """Return the metadata record for the project rooted at ``path``."""
    return await (analyzer or ProjectAnalyzer()).analyze(path)


def _apply(record: ProjectMetadata, fields: Dict[str, Any]) -> None:
    for key, value in fields.items():
        if not hasattr(record, key):
            raise AttributeError(f"Detector produced unknown field '{key}'")
        setattr(record, key, value)


def _structure_features(structure: StructureSummary) -> List[str]:
    return [phrase for flag, phrase in _STRUCTURE_FEATURES if getattr(structure, flag)]


__all__ = ["ProjectAnalyzer", "analyze"]

"""Project analysis: manifest parsing, layout scanning and ecosystem detection."""

from __future__ import annotations

from .base import Detector
from .manifest import parse_manifest
from .project import ProjectAnalyzer, analyze
from .registry import discover_detectors
from .structure import scan_structure

__all__ = [
    "Detector",
    "ProjectAnalyzer",
    "analyze",
    "discover_detectors",
    "parse_manifest",
    "scan_structure",
]

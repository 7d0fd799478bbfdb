"""Base classes for ecosystem detectors."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..models import ProjectMetadata


class Detector(ABC):
    """Contract for detectors that recognise one ecosystem's manifest."""

    name: str = ""

    @abstractmethod
    def supports(self, root: Path) -> bool:
        """Return True when the detector's manifest is present under ``root``."""

    @abstractmethod
    def detect(self, root: Path, current: ProjectMetadata) -> Optional[Dict[str, Any]]:
        """Return the fields this ecosystem owns, or None when nothing was detected.

        ``current`` is the record built by earlier detectors and must not be mutated.
        """
